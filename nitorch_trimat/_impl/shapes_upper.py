__all__ = [
    'UpperTri', 'UpperTriMut', 'UpperMatrix',
    'SimpleUpperTri', 'SimpleUpperTriMut', 'SimpleUpperMatrix',
    'SymmetricUpperTri', 'SymmetricUpperTriMut', 'SymmetricUpperMatrix',
]
from typing import Iterator, Sequence
from ..typing import Sub
from ..utils import ChainedSequence
from . import upper
from .triangle import Triangle, TriangleMut, PackedTriangle, TriangleIndexError


class UpperTri(Triangle):
    """Upper triangle, diagonal included.

    Valid coordinates are `0 <= i <= j < n`.
    """

    diagonal = True

    def get_element_index(self, i: int, j: int) -> int:
        i = self._check_axis(i, 'i')
        j = self._check_axis(j, 'j')
        if i > j:
            raise TriangleIndexError(
                f'({i}, {j}) is below the diagonal of an upper triangle')
        return upper.element_index(i, j - i, self.n)

    def get_element_sub(self, k: int) -> Sub:
        return upper.index_to_sub(self._check_offset(k), self.n)

    def get_row_start_index(self, i: int) -> int:
        return upper.row_start_index(self._check_axis(i, 'i'), self.n)

    def get_col_start_index(self, j: int) -> int:
        return upper.col_start_index(self._check_axis(j, 'j'))

    def get_row_indices(self, i: int) -> Sequence[int]:
        return upper.row_indices(self._check_axis(i, 'i'), self.n)

    def get_col_indices(self, j: int) -> Sequence[int]:
        return upper.col_indices(self._check_axis(j, 'j'), self.n)

    def iter_triangle_indices(self) -> Iterator[Sub]:
        return upper.iter_triangle_indices(self.n)


class UpperTriMut(UpperTri, TriangleMut):
    """Writable upper triangle, diagonal included."""
    pass


class SimpleUpperTri(Triangle):
    """Upper triangle, diagonal excluded.

    Valid coordinates are `0 <= i < j < n`. Column `0` and row `n - 1`
    are empty. The storage is that of an upper triangle with diagonal
    and axis length `n - 1`, whose column `j - 1` is our column `j`:

        [ . 0 1 2 ]
        [ . . 3 4 ]   =>  [0 1 2 3 4 5]
        [ . . . 5 ]
        [ . . . . ]
    """

    diagonal = False

    def get_element_index(self, i: int, j: int) -> int:
        i = self._check_axis(i, 'i')
        j = self._check_axis(j, 'j')
        if j == 0:
            raise TriangleIndexError(
                'Column 0 is empty in an upper triangle without diagonal')
        if i >= j:
            raise TriangleIndexError(
                f'({i}, {j}) is not above the diagonal')
        return upper.element_index(i, j - (i + 1), self.n - 1)

    def get_element_sub(self, k: int) -> Sub:
        i, j = upper.index_to_sub(self._check_offset(k), self.n - 1)
        return i, j + 1

    def get_row_start_index(self, i: int) -> int:
        i = self._check_axis(i, 'i')
        if i == self.n - 1:
            raise TriangleIndexError(
                f'Row {i} is empty in an upper triangle without diagonal')
        return upper.row_start_index(i, self.n - 1)

    def get_col_start_index(self, j: int) -> int:
        j = self._check_axis(j, 'j')
        if j == 0:
            raise TriangleIndexError(
                'Column 0 is empty in an upper triangle without diagonal')
        return upper.col_start_index(j - 1)

    def get_row_indices(self, i: int) -> Sequence[int]:
        i = self._check_axis(i, 'i')
        return upper.row_indices(i, self.n - 1)

    def get_col_indices(self, j: int) -> Sequence[int]:
        j = self._check_axis(j, 'j')
        if j == 0:
            raise TriangleIndexError(
                'Column 0 is empty in an upper triangle without diagonal')
        return upper.col_indices(j - 1, self.n - 1)

    def iter_triangle_indices(self) -> Iterator[Sub]:
        return ((i, j + 1) for i, j in upper.iter_triangle_indices(self.n - 1))


class SimpleUpperTriMut(SimpleUpperTri, TriangleMut):
    """Writable upper triangle, diagonal excluded."""
    pass


class SymmetricUpperTri(Triangle):
    """Symmetric matrix without diagonal, stored as its upper triangle.

    The storage is that of `SimpleUpperTri` (it is also the "condensed"
    layout of `scipy.spatial.distance.squareform`), but `(i, j)` and
    `(j, i)` refer to the same element, so that any `i != j` is valid.
    Rows and columns are identical and hold `n - 1` elements:

        [ . 0 1 2 ]
        [ 0 . 3 4 ]   =>  [0 1 2 3 4 5]
        [ 1 3 . 5 ]
        [ 2 4 5 . ]
    """

    diagonal = False

    def get_element_index(self, i: int, j: int) -> int:
        i = self._check_axis(i, 'i')
        j = self._check_axis(j, 'j')
        if i == j:
            raise TriangleIndexError(
                f'({i}, {j}) is on the diagonal, which is not stored')
        i, j = min(i, j), max(i, j)
        return upper.element_index(i, j - (i + 1), self.n - 1)

    def get_element_sub(self, k: int) -> Sub:
        i, j = upper.index_to_sub(self._check_offset(k), self.n - 1)
        return i, j + 1

    def get_row_indices(self, i: int) -> Sequence[int]:
        # elements (0..i-1, i) are stored in column i, and elements
        # (i, i+1..n-1) are stored in row i
        i = self._check_axis(i, 'i')
        if i == 0:
            return upper.row_indices(0, self.n - 1)
        return ChainedSequence(upper.col_indices(i - 1, self.n - 1),
                               upper.row_indices(i, self.n - 1))

    def get_col_indices(self, j: int) -> Sequence[int]:
        return self.get_row_indices(j)

    def get_row_start_index(self, i: int) -> int:
        indices = self.get_row_indices(i)
        if not len(indices):
            raise TriangleIndexError(f'Row {i} is empty')
        return indices[0]

    def get_col_start_index(self, j: int) -> int:
        return self.get_row_start_index(j)

    def iter_triangle_indices(self) -> Iterator[Sub]:
        return ((i, j + 1) for i, j in upper.iter_triangle_indices(self.n - 1))


class SymmetricUpperTriMut(SymmetricUpperTri, TriangleMut):
    """Writable symmetric matrix without diagonal, stored as its upper half."""
    pass


class UpperMatrix(UpperTriMut, PackedTriangle):
    """Packed upper triangle with diagonal (see `PackedTriangle`)."""
    pass


class SimpleUpperMatrix(SimpleUpperTriMut, PackedTriangle):
    """Packed upper triangle without diagonal (see `PackedTriangle`)."""
    pass


class SymmetricUpperMatrix(SymmetricUpperTriMut, PackedTriangle):
    """Packed symmetric matrix without diagonal (see `PackedTriangle`)."""
    pass

__all__ = [
    'LowerTri', 'LowerTriMut', 'LowerMatrix',
    'SimpleLowerTri', 'SimpleLowerTriMut', 'SimpleLowerMatrix',
    'SymmetricLowerTri', 'SymmetricLowerTriMut', 'SymmetricLowerMatrix',
]
from typing import Iterator, Sequence
from ..typing import Sub
from ..utils import ChainedSequence
from . import lower
from .triangle import Triangle, TriangleMut, PackedTriangle, TriangleIndexError


class LowerTri(Triangle):
    """Lower triangle, diagonal included.

    Valid coordinates are `0 <= j <= i < n`.
    """

    diagonal = True

    def get_element_index(self, i: int, j: int) -> int:
        i = self._check_axis(i, 'i')
        j = self._check_axis(j, 'j')
        if j > i:
            raise TriangleIndexError(
                f'({i}, {j}) is above the diagonal of a lower triangle')
        return lower.element_index(i, j)

    def get_element_sub(self, k: int) -> Sub:
        return lower.index_to_sub(self._check_offset(k))

    def get_row_start_index(self, i: int) -> int:
        return lower.row_start_index(self._check_axis(i, 'i'))

    def get_col_start_index(self, j: int) -> int:
        return lower.col_start_index(self._check_axis(j, 'j'))

    def get_row_indices(self, i: int) -> Sequence[int]:
        return lower.row_indices(self._check_axis(i, 'i'))

    def get_col_indices(self, j: int) -> Sequence[int]:
        return lower.col_indices(self._check_axis(j, 'j'), self.n)

    def iter_triangle_indices(self) -> Iterator[Sub]:
        return lower.iter_triangle_indices(self.n)


class LowerTriMut(LowerTri, TriangleMut):
    """Writable lower triangle, diagonal included."""
    pass


class SimpleLowerTri(Triangle):
    """Lower triangle, diagonal excluded.

    Valid coordinates are `0 <= j < i < n`. Row `0` is empty, row `i`
    holds `i` elements. The storage is that of a lower triangle with
    diagonal and axis length `n - 1`, whose row `i - 1` is our row `i`:

        [ . . . . ]
        [ 0 . . . ]
        [ 1 2 . . ]   =>  [0 1 2 3 4 5]
        [ 3 4 5 . ]
    """

    diagonal = False

    def get_element_index(self, i: int, j: int) -> int:
        i = self._check_axis(i, 'i')
        j = self._check_axis(j, 'j')
        if i == 0:
            raise TriangleIndexError(
                'Row 0 is empty in a lower triangle without diagonal')
        if j >= i:
            raise TriangleIndexError(
                f'({i}, {j}) is not below the diagonal')
        return lower.element_index(i - 1, j)

    def get_element_sub(self, k: int) -> Sub:
        i, j = lower.index_to_sub(self._check_offset(k))
        return i + 1, j

    def get_row_start_index(self, i: int) -> int:
        i = self._check_axis(i, 'i')
        if i == 0:
            raise TriangleIndexError(
                'Row 0 is empty in a lower triangle without diagonal')
        return lower.row_start_index(i - 1)

    def get_col_start_index(self, j: int) -> int:
        j = self._check_axis(j, 'j')
        if j == self.n - 1:
            raise TriangleIndexError(
                f'Column {j} is empty in a lower triangle without diagonal')
        return lower.col_start_index(j)

    def get_row_indices(self, i: int) -> Sequence[int]:
        i = self._check_axis(i, 'i')
        if i == 0:
            raise TriangleIndexError(
                'Row 0 is empty in a lower triangle without diagonal')
        return lower.row_indices(i - 1)

    def get_col_indices(self, j: int) -> Sequence[int]:
        j = self._check_axis(j, 'j')
        return lower.col_indices(j, self.n - 1)

    def iter_triangle_indices(self) -> Iterator[Sub]:
        return ((i + 1, j) for i, j in lower.iter_triangle_indices(self.n - 1))


class SimpleLowerTriMut(SimpleLowerTri, TriangleMut):
    """Writable lower triangle, diagonal excluded."""
    pass


class SymmetricLowerTri(Triangle):
    """Symmetric matrix without diagonal, stored as its lower triangle.

    The storage is that of `SimpleLowerTri`, but `(i, j)` and `(j, i)`
    refer to the same element, so that any `i != j` is valid. Rows and
    columns are identical and hold `n - 1` elements:

        [ . 0 1 3 ]
        [ 0 . 2 4 ]   =>  [0 1 2 3 4 5]
        [ 1 2 . 5 ]
        [ 3 4 5 . ]
    """

    diagonal = False

    def get_element_index(self, i: int, j: int) -> int:
        i = self._check_axis(i, 'i')
        j = self._check_axis(j, 'j')
        if i == j:
            raise TriangleIndexError(
                f'({i}, {j}) is on the diagonal, which is not stored')
        if i < j:
            i, j = j, i
        return lower.element_index(i - 1, j)

    def get_element_sub(self, k: int) -> Sub:
        i, j = lower.index_to_sub(self._check_offset(k))
        return i + 1, j

    def get_row_indices(self, i: int) -> Sequence[int]:
        # elements (i, 0..i-1) are stored in row i, and elements
        # (i+1..n-1, i) are stored in column i
        i = self._check_axis(i, 'i')
        if i == 0:
            return lower.col_indices(0, self.n - 1)
        return ChainedSequence(lower.row_indices(i - 1),
                               lower.col_indices(i, self.n - 1))

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
        return ((i + 1, j) for i, j in lower.iter_triangle_indices(self.n - 1))


class SymmetricLowerTriMut(SymmetricLowerTri, TriangleMut):
    """Writable symmetric matrix without diagonal, stored as its lower half."""
    pass


class LowerMatrix(LowerTriMut, PackedTriangle):
    """Packed lower triangle with diagonal (see `PackedTriangle`)."""
    pass


class SimpleLowerMatrix(SimpleLowerTriMut, PackedTriangle):
    """Packed lower triangle without diagonal (see `PackedTriangle`)."""
    pass


class SymmetricLowerMatrix(SymmetricLowerTriMut, PackedTriangle):
    """Packed symmetric matrix without diagonal (see `PackedTriangle`)."""
    pass

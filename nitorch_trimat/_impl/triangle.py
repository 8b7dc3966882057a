__all__ = [
    'Triangle', 'TriangleMut', 'PackedTriangle',
    'TriangleIndexError', 'ReadOnlyTriangleError',
]
import abc
from typing import Any, Iterator
from ..utils import ensure_int
from .ops import packed_size


class TriangleIndexError(IndexError):
    """Coordinates or offset outside of the triangle."""
    pass


class ReadOnlyTriangleError(TypeError):
    """Attempt to write into a read-only triangle."""
    pass


class Triangle(abc.ABC):
    """A packed triangle matrix.

    Concrete types must report the axis length `n` and give access to
    the packed (one dimensional) storage through `inner()`. Any object
    with `__len__` and integer `__getitem__` can be used as storage
    (list, tuple, 1D tensor or array, ...).

    Indexing methods are provided by the shape classes (`SimpleLowerTri`,
    `SymmetricUpperTri`, ...), which this class is a base of.
    """

    # Whether the diagonal is stored
    diagonal: bool = True

    @property
    @abc.abstractmethod
    def n(self) -> int:
        """Length of either axis of the matrix."""
        ...

    @abc.abstractmethod
    def inner(self):
        """Packed storage."""
        ...

    def inner_mut(self):
        """Writable packed storage."""
        raise ReadOnlyTriangleError(
            f'{type(self).__name__} is read-only')

    @classmethod
    def packed_size(cls, n: int) -> int:
        """Number of stored elements for an axis length `n`."""
        return packed_size(n, cls.diagonal)

    # ------------------------------------------------------------------
    # Shape-specific indexing, implemented by the shape classes
    # ------------------------------------------------------------------

    def get_element_index(self, i: int, j: int) -> int:
        """Offset of the element at row `i` and column `j`."""
        raise NotImplementedError

    def get_element_sub(self, k: int):
        """Coordinates `(i, j)` of the element stored at offset `k`."""
        raise NotImplementedError

    def get_row_indices(self, i: int):
        """Offsets of the elements of row `i`."""
        raise NotImplementedError

    def get_col_indices(self, j: int):
        """Offsets of the elements of column `j`."""
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Element access, shared by all shapes
    # ------------------------------------------------------------------

    def get_element(self, i: int, j: int) -> Any:
        """Element at row `i` and column `j`."""
        return self.inner()[self.get_element_index(i, j)]

    def set_element(self, i: int, j: int, value: Any) -> None:
        """Write `value` at row `i` and column `j`.

        Raises
        ------
        ReadOnlyTriangleError
            If the triangle is not writable.
        TriangleIndexError
            If `(i, j)` is not in the triangle.
        """
        index = self.get_element_index(i, j)
        self.inner_mut()[index] = value

    def get_row(self, i: int) -> Iterator[Any]:
        """Elements of row `i`."""
        inner = self.inner()
        return (inner[index] for index in self.get_row_indices(i))

    def get_col(self, j: int) -> Iterator[Any]:
        """Elements of column `j`."""
        inner = self.inner()
        return (inner[index] for index in self.get_col_indices(j))

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _check_axis(self, index, name='i') -> int:
        index = ensure_int(index, name)
        if not 0 <= index < self.n:
            raise TriangleIndexError(
                f'`{name}` ({index}) out of range for an axis of '
                f'length {self.n}')
        return index

    def _check_offset(self, k) -> int:
        k = ensure_int(k, 'k')
        size = self.packed_size(self.n)
        if not 0 <= k < size:
            raise TriangleIndexError(
                f'Offset {k} out of range for a packed size of {size}')
        return k


class TriangleMut(Triangle):
    """A packed triangle matrix that can be written into."""

    @abc.abstractmethod
    def inner_mut(self):
        """Writable packed storage."""
        ...


class PackedTriangle(TriangleMut):
    """Packed storage and axis length.

    Parameters
    ----------
    data : sequence
        Packed elements, in storage order. Its length must be the packed
        size of the shape.
    n : int
        Length of either axis of the matrix.
    readonly : bool, default=False
        Refuse writes.

    Notes
    -----
    On its own, this class does not know any shape. Mix it with a shape
    class (or use one of `LowerMatrix`, `SimpleUpperMatrix`, ...).
    """

    def __init__(self, data, n: int, readonly: bool = False):
        n = ensure_int(n, 'n')
        if n < 0:
            raise ValueError(f'Axis length must be non-negative, got {n}')
        size = self.packed_size(n)
        if len(data) != size:
            raise ValueError(
                f'{type(self).__name__} with n={n} expects {size} '
                f'packed elements but got {len(data)}')
        self._data = data
        self._n = n
        self.readonly = readonly

    @property
    def n(self) -> int:
        return self._n

    def inner(self):
        return self._data

    def inner_mut(self):
        if self.readonly:
            raise ReadOnlyTriangleError(
                f'{type(self).__name__} is read-only')
        return self._data

    def __len__(self):
        return len(self._data)

    def __repr__(self):
        ro = ', readonly=True' if self.readonly else ''
        return f'{type(self).__name__}({self._data!r}, n={self._n}{ro})'

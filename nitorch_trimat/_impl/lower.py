"""Base indexing of a lower triangle stored row by row, diagonal included.

Row `i` holds `i + 1` elements, at offsets `[T(i), T(i+1))`:

    [ 0 . . . ]
    [ 1 2 . . ]   =>  [0 1 2 3 4 5 6 7 8 9]
    [ 3 4 5 . ]
    [ 6 7 8 9 ]

These functions do not check their inputs.
"""
__all__ = [
    'element_index', 'row_start_index', 'col_start_index',
    'row_indices', 'col_indices', 'iter_triangle_indices', 'index_to_sub',
]
from typing import Iterator, Tuple
from ..typing import IntOrTensor, Sub
from ..utils import MappedRange
from .ops import tri_num, tri_root


def element_index(i: IntOrTensor, j: IntOrTensor) -> IntOrTensor:
    """Offset of the element `(i, j)`, with `0 <= j <= i`."""
    return tri_num(i) + j


def row_start_index(i: IntOrTensor) -> IntOrTensor:
    """Offset of the first element of row `i`."""
    return tri_num(i)


def col_start_index(j: IntOrTensor) -> IntOrTensor:
    """Offset of the first element of column `j` (which lies in row `j`)."""
    return tri_num(j) + j


def row_indices(i: int) -> range:
    """Offsets of the elements of row `i`."""
    return range(row_start_index(i), row_start_index(i + 1))


def col_indices(j: int, n: int) -> MappedRange:
    """Offsets of the elements of column `j`, rows `j` to `n-1`."""
    return MappedRange(lambda row: row_start_index(row) + j, j, n)


def iter_triangle_indices(n: int) -> Iterator[Sub]:
    """All `(i, j)` pairs of the triangle, in storage order."""
    for i in range(n):
        for j in range(i + 1):
            yield i, j


def index_to_sub(k: IntOrTensor) -> Tuple[IntOrTensor, IntOrTensor]:
    """Coordinates `(i, j)` of the element stored at offset `k`."""
    i = tri_root(k)
    return i, k - tri_num(i)

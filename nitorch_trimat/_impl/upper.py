"""Base indexing of an upper triangle stored row by row, diagonal included.

Row `i` holds `n - i` elements, at offsets `[T(n) - T(n-i), T(n) - T(n-i-1))`:

    [ 0 1 2 3 ]
    [ . 4 5 6 ]   =>  [0 1 2 3 4 5 6 7 8 9]
    [ . . 7 8 ]
    [ . . . 9 ]

`element_index` takes the column *relative* to the diagonal, i.e. the
element `(i, i + j)` of the matrix. All other functions work with
absolute columns. These functions do not check their inputs.
"""
__all__ = [
    'element_index', 'row_start_index', 'col_start_index',
    'row_indices', 'col_indices', 'iter_triangle_indices', 'index_to_sub',
]
from typing import Iterator, Tuple
from ..typing import IntOrTensor, Sub
from ..utils import MappedRange
from . import lower
from .ops import tri_num


def element_index(i: IntOrTensor, j: IntOrTensor, n: int) -> IntOrTensor:
    """Offset of the element in row `i`, `j` columns right of the diagonal."""
    return tri_num(n) - tri_num(n - i) + j


def row_start_index(i: IntOrTensor, n: int) -> IntOrTensor:
    """Offset of the first (diagonal) element of row `i`."""
    return tri_num(n) - tri_num(n - i)


def col_start_index(j: IntOrTensor) -> IntOrTensor:
    """Offset of the first element of column `j` (which lies in row 0)."""
    return j


def row_indices(i: int, n: int) -> range:
    """Offsets of the elements of row `i`."""
    if i >= n:
        return range(tri_num(n), tri_num(n))
    return range(row_start_index(i, n), row_start_index(i + 1, n))


def col_indices(j: int, n: int) -> MappedRange:
    """Offsets of the elements of column `j`, rows `0` to `j`."""
    return MappedRange(lambda row: row_start_index(row, n) + j - row, j + 1)


def iter_triangle_indices(n: int) -> Iterator[Sub]:
    """All `(i, j)` pairs of the triangle, in storage order."""
    for i in range(n):
        for j in range(i, n):
            yield i, j


def index_to_sub(k: IntOrTensor, n: int) -> Tuple[IntOrTensor, IntOrTensor]:
    """Coordinates `(i, j)` of the element stored at offset `k`.

    Reading the storage backwards visits a lower triangle, whose rows
    are the rows of the upper triangle from the bottom up and whose
    columns run from the last one to the diagonal.
    """
    i, j = lower.index_to_sub(tri_num(n) - 1 - k)
    return n - 1 - i, n - 1 - j

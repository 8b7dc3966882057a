"""
## Overview

Upper triangle matrices, stored row by row.

Base layout (diagonal included, axis length 4):

    [ 0 1 2 3 ]
    [ . 4 5 6 ]   =>  [0 1 2 3 4 5 6 7 8 9]
    [ . . 7 8 ]
    [ . . . 9 ]

Shapes:

- `UpperTri`: diagonal included, `i <= j`.
- `SimpleUpperTri`: diagonal excluded, `i < j`. Column 0 is empty.
- `SymmetricUpperTri`: diagonal excluded, `(i, j)` and `(j, i)` are the
  same element. This is the "condensed" layout used by
  `scipy.spatial.distance`.

Each shape has a writable variant (`*Mut`) and a ready-made container
(`*Matrix`). The module-level functions implement the base layout and
do not check their inputs; they accept integers or integer tensors.
Note that `element_index` takes the column relative to the diagonal.

---
"""
__all__ = [
    'element_index', 'row_start_index', 'col_start_index',
    'row_indices', 'col_indices', 'iter_triangle_indices', 'index_to_sub',
    'UpperTri', 'UpperTriMut', 'UpperMatrix',
    'SimpleUpperTri', 'SimpleUpperTriMut', 'SimpleUpperMatrix',
    'SymmetricUpperTri', 'SymmetricUpperTriMut', 'SymmetricUpperMatrix',
]
from ._impl.upper import (
    element_index, row_start_index, col_start_index,
    row_indices, col_indices, iter_triangle_indices, index_to_sub,
)
from ._impl.shapes_upper import *

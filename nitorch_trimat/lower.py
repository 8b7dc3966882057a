"""
## Overview

Lower triangle matrices, stored row by row.

Base layout (diagonal included, axis length 4):

    [ 0 . . . ]
    [ 1 2 . . ]   =>  [0 1 2 3 4 5 6 7 8 9]
    [ 3 4 5 . ]
    [ 6 7 8 9 ]

Shapes:

- `LowerTri`: diagonal included, `j <= i`.
- `SimpleLowerTri`: diagonal excluded, `j < i`. Row 0 is empty.
- `SymmetricLowerTri`: diagonal excluded, `(i, j)` and `(j, i)` are the
  same element.

Each shape has a writable variant (`*Mut`) and a ready-made container
(`*Matrix`). The module-level functions implement the base layout and
do not check their inputs; they accept integers or integer tensors.

---
"""
__all__ = [
    'element_index', 'row_start_index', 'col_start_index',
    'row_indices', 'col_indices', 'iter_triangle_indices', 'index_to_sub',
    'LowerTri', 'LowerTriMut', 'LowerMatrix',
    'SimpleLowerTri', 'SimpleLowerTriMut', 'SimpleLowerMatrix',
    'SymmetricLowerTri', 'SymmetricLowerTriMut', 'SymmetricLowerMatrix',
]
from ._impl.lower import (
    element_index, row_start_index, col_start_index,
    row_indices, col_indices, iter_triangle_indices, index_to_sub,
)
from ._impl.shapes_lower import *

"""
## Overview

Conversion between packed triangles and full (square) tensors.

Shapes are named `'lower'`, `'upper'`, `'simple_lower'`,
`'simple_upper'`, `'symmetric_lower'` and `'symmetric_upper'`, and use
the same layouts as the classes in `nitorch_trimat.lower` and
`nitorch_trimat.upper`. All functions accept any number of leading
batch dimensions.

---
"""
__all__ = ['tri_to_full', 'full_to_tri', 'tri_axis_length', 'tri_subs']
from ._impl.dense import tri_to_full, full_to_tri, tri_axis_length, tri_subs

r"""
## Overview

Triangular numbers, the building block of all packed offsets.

A triangle of side $n$ holds $T(n) = n(n+1)/2$ elements. A matrix with
axis length $n$ therefore needs $T(n)$ values when its diagonal is
stored, and $T(n-1)$ values when it is not.

All functions accept Python integers or integer tensors. Python
integers never overflow; tensor inputs raise an `OverflowError` when
the result cannot be represented in their dtype.

---
"""
__all__ = ['tri_num', 'tri_root', 'packed_size', 'max_axis_length']
from ._impl.ops import tri_num, tri_root, packed_size, max_axis_length

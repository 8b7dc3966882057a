"""
## Overview

Containers.

Shape classes only compute offsets. They read and write elements
through a container that implements `Triangle` (read-only) or
`TriangleMut` (writable), i.e., that reports its axis length `n` and
gives access to its packed storage:

```python
class TriList(SimpleLowerTriMut):

    def __init__(self, n):
        self._n = n
        self._data = [0] * SimpleLowerTriMut.packed_size(n)

    @property
    def n(self):
        return self._n

    def inner(self):
        return self._data

    def inner_mut(self):
        return self._data
```

`PackedTriangle` is a ready-made container that wraps any sequence
(list, tensor, array...).

Invalid coordinates raise `TriangleIndexError` (a subclass of
`IndexError`). Coordinates coming from untrusted input should be
validated by the caller. Writing into a read-only triangle raises
`ReadOnlyTriangleError` (a subclass of `TypeError`).

---
"""
__all__ = [
    'Triangle', 'TriangleMut', 'PackedTriangle',
    'TriangleIndexError', 'ReadOnlyTriangleError',
]
from ._impl.triangle import (
    Triangle, TriangleMut, PackedTriangle,
    TriangleIndexError, ReadOnlyTriangleError,
)

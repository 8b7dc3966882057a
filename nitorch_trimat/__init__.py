"""Index arithmetic for triangle matrices stored in packed 1D layouts."""
from . import ops, lower, upper, triangle, dense
from .ops import tri_num, packed_size
from .triangle import *
from .lower import (
    LowerTri, LowerTriMut, LowerMatrix,
    SimpleLowerTri, SimpleLowerTriMut, SimpleLowerMatrix,
    SymmetricLowerTri, SymmetricLowerTriMut, SymmetricLowerMatrix,
)
from .upper import (
    UpperTri, UpperTriMut, UpperMatrix,
    SimpleUpperTri, SimpleUpperTriMut, SimpleUpperMatrix,
    SymmetricUpperTri, SymmetricUpperTriMut, SymmetricUpperMatrix,
)
from .dense import tri_to_full, full_to_tri

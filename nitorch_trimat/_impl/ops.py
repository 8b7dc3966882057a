__all__ = ['tri_num', 'tri_root', 'packed_size', 'max_axis_length']
import torch
from torch import Tensor
from ..typing import IntOrTensor
from ..utils import floordiv, isqrt, max_int, ensure_int_tensor


def max_axis_length(dtype=torch.long) -> int:
    """Largest `n` such that `tri_num(n)` can be computed in `dtype`.

    The intermediate product `n * (n + 1)` must fit, hence the bound.
    """
    top = max_int(dtype)
    return (isqrt(4 * top + 1) - 1) // 2


def _check_range(n: Tensor, name='n'):
    if n.numel() and n.max() > max_axis_length(n.dtype):
        raise OverflowError(
            f'range exceeded: `{name}` must not exceed '
            f'{max_axis_length(n.dtype)} for dtype {n.dtype}')


def tri_num(n: IntOrTensor) -> IntOrTensor:
    r"""Triangular number $T(n) = n(n+1)/2$.

    Parameters
    ----------
    n : `int or tensor[int]`
        Non-negative side length. Tensors are processed elementwise.

    Returns
    -------
    t : `int or tensor[int]`
        Number of elements in a triangle of side `n`, diagonal included.

    Raises
    ------
    OverflowError
        If `n` is a tensor and $n(n+1)$ does not fit in its dtype.

    """
    if torch.is_tensor(n):
        ensure_int_tensor(n, 'n')
        _check_range(n)
    return floordiv(n * (n + 1), 2)


def tri_root(k: IntOrTensor) -> IntOrTensor:
    r"""Largest `r` such that $T(r) \leq k$.

    This is the row of a lower triangle (diagonal included) that holds
    the packed offset `k`.

    Parameters
    ----------
    k : `int or tensor[int]`
        Non-negative offset.

    Returns
    -------
    r : `int or tensor[int]`

    """
    if torch.is_tensor(k):
        ensure_int_tensor(k, 'k')
        if k.numel() and k.max() > floordiv(max_int(k.dtype) - 1, 8):
            raise OverflowError(f'range exceeded: offset too large for '
                                f'dtype {k.dtype}')
    return floordiv(isqrt(8 * k + 1) - 1, 2)


def packed_size(n: int, diagonal: bool = True) -> int:
    """Number of stored elements of a triangle with axis length `n`.

    Parameters
    ----------
    n : `int`
        Axis length of the (square) matrix.
    diagonal : `bool`, default=True
        Whether the diagonal is stored.

    Returns
    -------
    size : `int`
        `tri_num(n)` if the diagonal is stored, else `tri_num(n-1)`.

    """
    if n < 0:
        raise ValueError(f'Axis length must be non-negative, got {n}')
    if diagonal:
        return tri_num(n)
    return tri_num(max(n - 1, 0))

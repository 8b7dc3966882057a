__all__ = ['tri_to_full', 'full_to_tri', 'tri_axis_length', 'tri_subs']
import torch
from torch import Tensor
from typing import Optional, Tuple
from warnings import warn
from . import lower, upper
from .ops import tri_num, tri_root


SHAPES = ('lower', 'upper', 'simple_lower', 'simple_upper',
          'symmetric_lower', 'symmetric_upper')


def _check_shape(shape: str) -> str:
    if shape not in SHAPES:
        raise ValueError(f'Unknown triangle shape {shape!r}. '
                         f'Expected one of {SHAPES}.')
    return shape


def _has_diagonal(shape: str) -> bool:
    return shape in ('lower', 'upper')


def tri_axis_length(nb_prm: int, shape: str = 'lower') -> int:
    """Axis length of a matrix from its number of packed elements.

    Parameters
    ----------
    nb_prm : `int`
        Number of packed elements.
    shape : `str`
        Triangle shape.

    Returns
    -------
    n : `int`
        Axis length. An empty diagonal-free triangle is assumed to be
        the `1x1` matrix.

    """
    _check_shape(shape)
    n = tri_root(nb_prm)
    if tri_num(n) != nb_prm:
        raise ValueError(f'{nb_prm} is not a triangular number')
    if not _has_diagonal(shape):
        n = n + 1
    return n


def tri_subs(n: int, shape: str = 'lower',
             device: Optional[torch.device] = None) -> Tuple[Tensor, Tensor]:
    """Coordinates of all packed elements, in storage order.

    Parameters
    ----------
    n : `int`
        Axis length.
    shape : `str`
        Triangle shape.
    device : `torch.device`, optional

    Returns
    -------
    rows : `(K,) tensor[long]`
    cols : `(K,) tensor[long]`

    """
    _check_shape(shape)
    if _has_diagonal(shape):
        offsets = torch.arange(tri_num(n), device=device)
        if shape == 'lower':
            return lower.index_to_sub(offsets)
        return upper.index_to_sub(offsets, n)
    m = max(n - 1, 0)
    offsets = torch.arange(tri_num(m), device=device)
    if shape.endswith('lower'):
        i, j = lower.index_to_sub(offsets)
        return i + 1, j
    i, j = upper.index_to_sub(offsets, m)
    return i, j + 1


def tri_to_full(packed: Tensor, shape: str = 'lower', fill=0) -> Tensor:
    r"""Transform a packed triangle into a full matrix.

    Parameters
    ----------
    packed : `(..., K) tensor`
        A $N \times N$ triangle matrix stored in a compact way, with
        shape `(..., K)`, where `...` is any number of leading batch
        dimensions. `K` is `N*(N+1)//2` for shapes with a diagonal and
        `N*(N-1)//2` for shapes without.
    shape : `{'lower', 'upper', 'simple_lower', 'simple_upper', 'symmetric_lower', 'symmetric_upper'}`
        Triangle shape.
    fill : `number`, default=0
        Value of the elements that are not stored (the other half
        and/or the diagonal).

    Returns
    -------
    full : `(..., N, N) tensor`
        Full matrix. Symmetric shapes fill both halves.

    """
    _check_shape(shape)
    packed = torch.as_tensor(packed)
    n = tri_axis_length(packed.shape[-1], shape)
    rows, cols = tri_subs(n, shape, device=packed.device)
    full = packed.new_full([*packed.shape[:-1], n, n], fill)
    full[..., rows, cols] = packed
    if shape.startswith('symmetric'):
        full[..., cols, rows] = packed
    return full


def full_to_tri(full: Tensor, shape: str = 'lower') -> Tensor:
    r"""Extract the packed triangle of a full matrix.

    Parameters
    ----------
    full : `(..., N, N) tensor`
        Full matrix.
    shape : `{'lower', 'upper', 'simple_lower', 'simple_upper', 'symmetric_lower', 'symmetric_upper'}`
        Triangle shape.

    Returns
    -------
    packed : `(..., K) tensor`
        Packed elements, in storage order.

    """
    _check_shape(shape)
    full = torch.as_tensor(full)
    if full.dim() < 2 or full.shape[-1] != full.shape[-2]:
        raise ValueError(f'Expected a batch of square matrices but got '
                         f'shape {list(full.shape)}')
    n = full.shape[-1]
    rows, cols = tri_subs(n, shape, device=full.device)
    packed = full[..., rows, cols]
    if shape.startswith('symmetric'):
        other = full[..., cols, rows]
        if full.dtype.is_floating_point or full.dtype.is_complex:
            same = torch.allclose(packed, other)
        else:
            same = torch.equal(packed, other)
        if not same:
            warn('`full_to_tri`: input matrix is not symmetric, '
                 'its other half is discarded', RuntimeWarning)
    return packed

import torch
from math import isqrt as _isqrt
from numbers import Integral
from itertools import chain
from collections.abc import Sequence


# floor_divide returns wrong results for negative values, because it truncates
# instead of performing a proper floor. In recent version of pytorch, it is
# advised to use div(..., rounding_mode='trunc'|'floor') instead.
# Here, we only use floor_divide on positive values so we do not care.
try:
    _one = torch.as_tensor(1)
    torch.div(_one, _one, rounding_mode='trunc')
    def _trunc_div(*a, **k):
        return torch.div(*a, **k, rounding_mode='trunc')
except Exception:
    _trunc_div = torch.floor_divide


def floordiv(x, y):
    """Integer division of non-negative integers or integer tensors."""
    if torch.is_tensor(x):
        return _trunc_div(x, y)
    return x // y


def isqrt(x):
    """Integer square root of a non-negative integer or integer tensor.

    Tensors go through a double-precision square root that is then
    corrected by one step on each side, which makes it exact for any
    value representable in an `int64`.
    """
    if not torch.is_tensor(x):
        return _isqrt(x)
    r = x.double().sqrt().floor().to(x.dtype)
    r = torch.where(r * r > x, r - 1, r)
    r = torch.where((r + 1) * (r + 1) <= x, r + 1, r)
    return r


def ensure_int(x, name='index'):
    """Check that `x` is a (non-boolean) integer and return it as an `int`."""
    if torch.is_tensor(x):
        if x.dim() != 0 or x.dtype.is_floating_point or x.dtype == torch.bool:
            raise TypeError(f'`{name}` must be an integer scalar, '
                            f'got a tensor of shape {list(x.shape)} '
                            f'and dtype {x.dtype}')
        return int(x)
    if isinstance(x, bool) or not isinstance(x, Integral):
        raise TypeError(f'`{name}` must be an integer, '
                        f'got {type(x).__name__}')
    return int(x)


def ensure_int_tensor(x, name='index'):
    """Check that a tensor has an integer (non-boolean) dtype."""
    if x.dtype.is_floating_point or x.dtype.is_complex or x.dtype == torch.bool:
        raise TypeError(f'`{name}` must have an integer dtype, got {x.dtype}')
    return x


def max_int(dtype):
    """Largest value representable in an integer dtype."""
    return torch.iinfo(dtype).max


class MappedRange(Sequence):
    """Lazy and restartable sequence `[fn(x) for x in range(*args)]`.

    Unlike a generator, it can be iterated several times, has a length
    and supports random access.
    """

    def __init__(self, fn, *args):
        self.fn = fn
        self.range = args[0] if isinstance(args[0], range) else range(*args)

    def __len__(self):
        return len(self.range)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return MappedRange(self.fn, self.range[index])
        return self.fn(self.range[index])

    def __iter__(self):
        return map(self.fn, self.range)

    def __repr__(self):
        return f'{type(self).__name__}({list(self)})'


class ChainedSequence(Sequence):
    """Lazy and restartable concatenation of sequences."""

    def __init__(self, *sequences):
        self.sequences = sequences

    def __len__(self):
        return sum(map(len, self.sequences))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return list(self)[index]
        if index < 0:
            index += len(self)
        if index >= 0:
            for seq in self.sequences:
                if index < len(seq):
                    return seq[index]
                index -= len(seq)
        raise IndexError('sequence index out of range')

    def __iter__(self):
        return chain(*self.sequences)

    def __repr__(self):
        return f'{type(self).__name__}({list(self)})'

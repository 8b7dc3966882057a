from .utils import get_test_devices, init_device
from nitorch_trimat.dense import tri_to_full, full_to_tri, tri_axis_length, tri_subs
from scipy.spatial.distance import squareform
import numpy as np
import torch
import pytest
import warnings

devices = get_test_devices()
shapes = ['lower', 'upper', 'simple_lower', 'simple_upper',
          'symmetric_lower', 'symmetric_upper']


@pytest.mark.parametrize("device", devices)
def test_tri_to_full_lower(device):
    device = init_device(device)
    packed = torch.arange(1, 11, device=device)
    full = tri_to_full(packed, 'lower')
    expected = torch.as_tensor([
        [1, 0, 0, 0],
        [2, 3, 0, 0],
        [4, 5, 6, 0],
        [7, 8, 9, 10],
    ], device=device)
    assert torch.equal(full, expected)
    full = tri_to_full(packed, 'upper')
    expected = torch.as_tensor([
        [1, 2, 3, 4],
        [0, 5, 6, 7],
        [0, 0, 8, 9],
        [0, 0, 0, 10],
    ], device=device)
    assert torch.equal(full, expected)


@pytest.mark.parametrize("device", devices)
def test_tri_to_full_simple(device):
    device = init_device(device)
    packed = torch.arange(1, 7, device=device)
    full = tri_to_full(packed, 'simple_upper', fill=-1)
    expected = torch.as_tensor([
        [-1,  1,  2,  3],
        [-1, -1,  4,  5],
        [-1, -1, -1,  6],
        [-1, -1, -1, -1],
    ], device=device)
    assert torch.equal(full, expected)
    full = tri_to_full(packed, 'simple_lower')
    expected = torch.as_tensor([
        [0, 0, 0, 0],
        [1, 0, 0, 0],
        [2, 3, 0, 0],
        [4, 5, 6, 0],
    ], device=device)
    assert torch.equal(full, expected)


@pytest.mark.parametrize("device", devices)
def test_tri_to_full_symmetric(device):
    device = init_device(device)
    packed = torch.rand([10], dtype=torch.double, device=device)
    full = tri_to_full(packed, 'symmetric_upper')
    expected = torch.as_tensor(squareform(packed.cpu().numpy()), device=device)
    assert torch.allclose(full, expected)
    full = tri_to_full(packed, 'symmetric_lower')
    assert torch.equal(full, full.T)
    assert torch.equal(full.diagonal(), torch.zeros_like(full.diagonal()))


@pytest.mark.parametrize("device", devices)
@pytest.mark.parametrize("shape", shapes)
def test_full_to_tri(device, shape):
    device = init_device(device)
    nb_prm = 10 if shape in ('lower', 'upper') else 6
    packed = torch.randn([3, 2, nb_prm], dtype=torch.double, device=device)
    full = tri_to_full(packed, shape)
    assert full.shape == (3, 2, 4, 4)
    assert torch.equal(full_to_tri(full, shape), packed)


def test_full_to_tri_numpy_layout():
    full = torch.arange(25).reshape([5, 5])
    assert full_to_tri(full, 'lower').tolist() == \
        full.numpy()[np.tril_indices(5)].tolist()
    assert full_to_tri(full, 'simple_upper').tolist() == \
        full.numpy()[np.triu_indices(5, k=1)].tolist()


def test_full_to_tri_not_symmetric():
    full = torch.randn([4, 4])
    with pytest.warns(RuntimeWarning):
        full_to_tri(full, 'symmetric_upper')
    full = full + full.T
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        full_to_tri(full, 'symmetric_lower')


def test_tri_axis_length():
    assert tri_axis_length(10, 'lower') == 4
    assert tri_axis_length(10, 'symmetric_upper') == 5
    assert tri_axis_length(0, 'lower') == 0
    assert tri_axis_length(0, 'simple_lower') == 1
    with pytest.raises(ValueError):
        tri_axis_length(7, 'lower')


def test_tri_subs():
    rows, cols = tri_subs(4, 'symmetric_lower')
    assert rows.tolist() == [1, 2, 2, 3, 3, 3]
    assert cols.tolist() == [0, 0, 1, 0, 1, 2]


def test_errors():
    with pytest.raises(ValueError):
        tri_to_full(torch.zeros([10]), 'diagonal')
    with pytest.raises(ValueError):
        full_to_tri(torch.zeros([3, 4]), 'lower')
    with pytest.raises(ValueError):
        tri_to_full(torch.zeros([8]), 'upper')

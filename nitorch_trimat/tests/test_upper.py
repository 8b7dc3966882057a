from nitorch_trimat import upper
from nitorch_trimat.upper import UpperMatrix, SimpleUpperMatrix
from nitorch_trimat.triangle import TriangleIndexError
import numpy as np
import torch
import pytest


def test_base_element_index():
    n = 4
    # column is relative to the diagonal
    expected = {
        (0, 0): 0, (0, 1): 1, (0, 2): 2, (0, 3): 3,
        (1, 0): 4, (1, 1): 5, (1, 2): 6,
        (2, 0): 7, (2, 1): 8,
        (3, 0): 9,
    }
    for (i, j), k in expected.items():
        assert upper.element_index(i, j, n) == k, (i, j)
        # index_to_sub returns absolute columns
        assert upper.index_to_sub(k, n) == (i, i + j), k


def test_base_row_col():
    n = 4
    assert [upper.row_start_index(i, n) for i in range(n)] == [0, 4, 7, 9]
    assert [upper.col_start_index(j) for j in range(n)] == [0, 1, 2, 3]
    assert list(upper.row_indices(0, n)) == [0, 1, 2, 3]
    assert list(upper.row_indices(1, n)) == [4, 5, 6]
    assert list(upper.row_indices(2, n)) == [7, 8]
    assert list(upper.row_indices(3, n)) == [9]
    assert list(upper.col_indices(0, n)) == [0]
    assert list(upper.col_indices(1, n)) == [1, 4]
    assert list(upper.col_indices(2, n)) == [2, 5, 7]
    assert list(upper.col_indices(3, n)) == [3, 6, 8, 9]


def test_base_iter_triangle_indices():
    rows, cols = np.triu_indices(5)
    assert list(upper.iter_triangle_indices(5)) == list(zip(rows, cols))


def test_base_tensor():
    n = 4
    k = torch.arange(10)
    i, j = upper.index_to_sub(k, n)
    assert i.tolist() == [0, 0, 0, 0, 1, 1, 1, 2, 2, 3]
    assert j.tolist() == [0, 1, 2, 3, 1, 2, 3, 2, 3, 3]
    assert upper.element_index(i, j - i, n).tolist() == k.tolist()


def test_upper_matrix():
    n = 4
    m = UpperMatrix(list(range(10)), n)
    assert m.get_element(0, 0) == 0
    assert m.get_element(1, 2) == 5
    assert m.get_element(3, 3) == 9
    assert m.get_element_sub(5) == (1, 2)
    assert m.get_row_start_index(2) == 7
    assert m.get_col_start_index(2) == 2
    assert list(m.get_row(1)) == [4, 5, 6]
    assert list(m.get_col(3)) == [3, 6, 8, 9]
    assert list(m.iter_triangle_indices()) == list(zip(*np.triu_indices(n)))
    with pytest.raises(TriangleIndexError):
        m.get_element(2, 1)
    m.set_element(1, 1, 10)
    assert m.inner()[4] == 10


def make_simple(n=5, **kwargs):
    #   [0, 1, 2, 3]
    #      [4, 5, 6]
    #         [7, 8]
    #            [9]
    return SimpleUpperMatrix(list(range(10)), n, **kwargs)


def test_simple_get_element():
    m = make_simple()
    expected = {
        (0, 1): 0, (0, 2): 1, (0, 3): 2, (0, 4): 3,
        (1, 2): 4, (1, 3): 5, (1, 4): 6,
        (2, 3): 7, (2, 4): 8,
        (3, 4): 9,
    }
    for (i, j), value in expected.items():
        assert m.get_element(i, j) == value, (i, j)
        assert m.get_element_sub(value) == (i, j), value


def test_simple_set_element():
    m = make_simple()
    m.set_element(1, 3, 10)
    m.set_element(2, 4, 11)
    assert m.get_element(1, 3) == 10
    assert m.get_element(2, 4) == 11
    assert m.inner() == [0, 1, 2, 3, 4, 10, 6, 7, 11, 9]


def test_simple_invalid():
    m = make_simple()
    for i in range(5):
        with pytest.raises(TriangleIndexError):
            m.get_element(i, i)
    with pytest.raises(TriangleIndexError):
        m.get_element(1, 0)
    with pytest.raises(TriangleIndexError):
        m.get_element(0, 5)
    with pytest.raises(TriangleIndexError):
        m.get_col_indices(0)
    with pytest.raises(TriangleIndexError):
        m.get_col_start_index(0)
    with pytest.raises(TriangleIndexError):
        m.get_row_start_index(4)


def test_simple_rows():
    m = make_simple()
    assert [m.get_row_start_index(i) for i in range(4)] == [0, 4, 7, 9]
    assert list(m.get_row_indices(0)) == [0, 1, 2, 3]
    assert list(m.get_row_indices(1)) == [4, 5, 6]
    assert list(m.get_row_indices(2)) == [7, 8]
    assert list(m.get_row_indices(3)) == [9]
    assert list(m.get_row_indices(4)) == []
    assert list(m.get_row(2)) == [7, 8]


def test_simple_cols():
    m = make_simple()
    assert [m.get_col_start_index(j) for j in range(1, 5)] == [0, 1, 2, 3]
    assert list(m.get_col_indices(1)) == [0]
    assert list(m.get_col_indices(2)) == [1, 4]
    assert list(m.get_col_indices(3)) == [2, 5, 7]
    assert list(m.get_col_indices(4)) == [3, 6, 8, 9]
    assert list(m.get_col(3)) == [2, 5, 7]


def test_simple_iter_triangle_indices():
    m = make_simple()
    rows, cols = np.triu_indices(5, k=1)
    assert list(m.iter_triangle_indices()) == list(zip(rows, cols))

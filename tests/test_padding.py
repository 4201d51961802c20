import numpy as np
import pytest

from acoustic.core.boundary import (
    GhostPadding,
    pad_field,
    pad_log_density,
    pad_pressure,
)
from acoustic.core.errors import InvalidArgumentError


def reference_padding(data, replicate_top):
    """行ごと・列ごとに代入して作る参照用のパディング"""
    rows, cols = data.shape
    buf = np.zeros((rows + 4, cols + 4))
    buf[2 : rows + 2, 2 : cols + 2] = data
    if replicate_top:
        buf[0, :] = buf[2, :]
        buf[1, :] = buf[2, :]
    buf[-2, :] = buf[-3, :]
    buf[-1, :] = buf[-3, :]
    buf[:, 0] = buf[:, 2]
    buf[:, 1] = buf[:, 2]
    buf[:, -2] = buf[:, -3]
    buf[:, -1] = buf[:, -3]
    return buf


def test_single_cell_top_rows():
    v = 3.5
    data = np.full((1, 1), v)

    pres = pad_pressure(data)
    dens = pad_log_density(data)

    assert pres.shape == (5, 5)
    assert dens.shape == (5, 5)
    np.testing.assert_array_equal(pres[:2, :], 0.0)
    np.testing.assert_array_equal(pres[2:, :], v)
    np.testing.assert_array_equal(dens, v)


def test_matches_reference(rng):
    data = rng.standard_normal((6, 7))
    np.testing.assert_array_equal(pad_pressure(data), reference_padding(data, False))
    np.testing.assert_array_equal(
        pad_log_density(data), reference_padding(data, True)
    )


def test_interior_and_input_untouched(rng):
    data = rng.standard_normal((4, 3))
    original = data.copy()
    padded = pad_field(data, top="zero")

    np.testing.assert_array_equal(GhostPadding().interior(padded), data)
    np.testing.assert_array_equal(data, original)
    assert not np.shares_memory(padded, data)


def test_corners_follow_rows():
    data = np.arange(12, dtype=float).reshape(3, 4)
    padded = pad_log_density(data)
    # 角のゴーストセルは最寄りの内部点の値になる
    assert padded[0, 0] == data[0, 0]
    assert padded[0, -1] == data[0, -1]
    assert padded[-1, 0] == data[-1, 0]
    assert padded[-1, -1] == data[-1, -1]


def test_invalid_arguments():
    with pytest.raises(InvalidArgumentError):
        pad_field(np.zeros((2, 2)), top="mirror")
    with pytest.raises(InvalidArgumentError):
        pad_field(np.zeros((2, 2)), width=0)
    with pytest.raises(InvalidArgumentError):
        pad_field(np.zeros(4))

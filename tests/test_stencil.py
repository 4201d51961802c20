import numpy as np
import pytest

from acoustic.core.boundary import pad_log_density
from acoustic.core.errors import InvalidArgumentError
from acoustic.numerics.spatial import DifferenceStencils, StencilCoefficients


def test_fourth_order_coefficients():
    second = DifferenceStencils.get_second_derivative_stencil(4)
    first = DifferenceStencils.get_first_derivative_stencil(4)

    np.testing.assert_array_equal(second.coefficients, [-1, 16, -30, 16, -1])
    np.testing.assert_array_equal(first.coefficients, [1, -8, 0, 8, -1])
    assert second.denominator == 12
    assert first.denominator == 12
    assert second.coefficients.sum() == 0
    np.testing.assert_array_equal(first.coefficients, -first.coefficients[::-1])


def test_unsupported_order():
    with pytest.raises(InvalidArgumentError):
        DifferenceStencils.get_first_derivative_stencil(2)
    with pytest.raises(InvalidArgumentError):
        DifferenceStencils.get_second_derivative_stencil(6)


def test_validate_mismatch():
    stencil = StencilCoefficients(points=np.array([0, 1]), coefficients=np.array([1.0]))
    with pytest.raises(InvalidArgumentError):
        stencil.validate()


def test_apply_stencil_exact_for_cubic():
    # 4次精度の1階微分は3次多項式に対して内部で厳密
    x = np.arange(12, dtype=float)
    data = np.tile(x**3, (3, 1))
    padded = pad_log_density(data)
    stencil = DifferenceStencils.get_first_derivative_stencil(4)

    diff = DifferenceStencils.apply_stencil(padded, stencil, axis=1, width=2)
    derivative = diff / stencil.denominator

    assert diff.shape == data.shape
    np.testing.assert_allclose(derivative[:, 2:-2], np.tile(3 * x[2:-2] ** 2, (3, 1)))


def test_apply_stencil_rejects_bad_arguments():
    stencil = DifferenceStencils.get_second_derivative_stencil(4)
    padded = np.zeros((6, 6))
    with pytest.raises(InvalidArgumentError):
        DifferenceStencils.apply_stencil(padded, stencil, axis=2, width=2)
    with pytest.raises(InvalidArgumentError):
        DifferenceStencils.apply_stencil(padded, stencil, axis=0, width=1)

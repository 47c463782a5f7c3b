import pytest

from dualnum import autodiff
from dualnum import function as dnf


def test_deriv():
    deriv = autodiff.deriv(lambda x: (x + dnf.sin(x**2)) / x)
    assert pytest.approx(deriv(1.4), 1e-5) == -1.23095

    deriv = autodiff.deriv(lambda x: x**2 + dnf.sqrt(x + 3))
    assert pytest.approx(deriv(1.2), 1e-5) == 2.64398


def test_valuederiv():
    valuederiv = autodiff.valuederiv(lambda x, y: dnf.exp(y / x) + 2)
    assert pytest.approx(valuederiv(1.2, 3.5), 1e-5) == (20.4796, -44.9157)


def test_higher_order():
    deriv = autodiff.deriv(autodiff.deriv(dnf.sin))

    with pytest.raises(TypeError):
        deriv(1.0)

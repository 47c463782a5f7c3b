import math

import mpmath
import numpy as np
import pytest

from dualnum import Dual
from dualnum import special as dns
from dualnum.provider import localcontext


def numderiv(fun, nu, x):
    return float(mpmath.diff(lambda t: fun(nu, t), x))


def test_order_zero():
    y = dns.besselj(0, Dual(1.0, 1.0))
    assert pytest.approx(float(mpmath.besselj(0, 1)), abs=1e-9) == y.real
    assert pytest.approx(-float(mpmath.besselj(1, 1)), abs=1e-9) == y.imag

    y = dns.bessely(0, Dual.variable(1.0))
    assert pytest.approx(-float(mpmath.bessely(1, 1)), abs=1e-9) == y.imag

    y = dns.besseli(0, Dual.variable(1.0))
    assert pytest.approx(float(mpmath.besseli(1, 1)), abs=1e-9) == y.imag

    y = dns.besselk(0, Dual.variable(1.0))
    assert pytest.approx(-float(mpmath.besselk(1, 1)), abs=1e-9) == y.imag


@pytest.mark.parametrize(
    "fun, mpfun",
    [
        (dns.besselj, mpmath.besselj),
        (dns.bessely, mpmath.bessely),
        (dns.besseli, mpmath.besseli),
        (dns.besselk, mpmath.besselk),
    ],
)
@pytest.mark.parametrize("nu", [1, 2, 0.5, 2.5])
def test_recurrence(fun, mpfun, nu):
    y = fun(nu, Dual(1.5, 2.0))
    assert pytest.approx(float(mpfun(nu, 1.5)), 1e-9) == y.real
    assert pytest.approx(2 * numderiv(mpfun, nu, 1.5), 1e-9) == y.imag


def test_hankel():
    j = float(mpmath.besselj(1, 2))
    y = float(mpmath.bessely(1, 2))
    dj = numderiv(mpmath.besselj, 1, 2)
    dy = numderiv(mpmath.bessely, 1, 2)

    h = dns.hankel1(1, Dual.variable(2.0))
    assert pytest.approx(complex(j, y), 1e-9) == h.real
    assert pytest.approx(complex(dj, dy), 1e-9) == h.imag

    h = dns.hankel2(1, Dual.variable(2.0))
    assert pytest.approx(complex(j, -y), 1e-9) == h.real
    assert pytest.approx(complex(dj, -dy), 1e-9) == h.imag

    assert pytest.approx(complex(mpmath.hankel1(1, 2)), 1e-9) == dns.hankel1(1, 2.0)


def test_precision():
    y = dns.besselj(1, Dual.variable(np.float32(2)))
    assert isinstance(y.real, np.float32) and isinstance(y.imag, np.float32)

    h = dns.hankel1(0, np.float32(1))
    assert isinstance(h, np.complex64)

    with mpmath.workdps(30):
        y = dns.besselj(0, Dual.variable(mpmath.mpf(1)))
        assert isinstance(y.imag, mpmath.mpf)
        assert abs(y.imag + mpmath.besselj(1, 1)) < mpmath.mpf("1e-28")


def test_order_not_differentiable():
    with pytest.raises(TypeError):
        dns.besselj(Dual.variable(1.0), 2.0)


def test_domain_error():
    with pytest.raises(ValueError):
        dns.bessely(0, Dual(0.0, 1.0))

    with localcontext(domain="NAN"):
        y = dns.bessely(0, Dual(0.0, 1.0))
        assert math.isnan(y.real) and math.isnan(y.imag)

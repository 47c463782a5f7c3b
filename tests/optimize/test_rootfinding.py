import logging

import mpmath
import pytest

from dualnum import function as dnf
from dualnum.optimize.rootfinding import newton


def test_newton():
    r = newton(lambda x: x * x - 10, 10.0)
    assert r.status == "SUCCESS"
    assert r.nit < 20
    assert abs(r.root**2 - 10) < 1e-12

    r = newton(lambda x: dnf.cos(x) - x, 1.0)
    assert r.status == "SUCCESS"
    assert pytest.approx(0.7390851332151607, 1e-14) == r.root


def test_newton_extended():
    with mpmath.workdps(40):
        r = newton(lambda x: x * x - 2, mpmath.mpf(1), tol=mpmath.mpf("1e-35"))
        assert r.status == "SUCCESS"
        assert abs(r.root - mpmath.sqrt(2)) < mpmath.mpf("1e-35")


def test_newton_failure(caplog):
    with caplog.at_level(logging.WARNING, logger="dualnum.optimize.rootfinding"):
        r = newton(lambda x: x * x + 1, 0.5, max_iter=32)

    assert r.status == "FAILURE" and r.nit == 32
    assert "not converged" in caplog.text

    r = newton(lambda x: x * x + 1, 0.0)
    assert r.status == "FAILURE" and r.nit == 0

    with pytest.raises(ValueError):
        newton(lambda x: x, 1.0, max_iter=0)

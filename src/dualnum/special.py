"""
##########################################
Special functions (:mod:`dualnum.special`)
##########################################

.. currentmodule:: dualnum.special

This module provides cylinder functions. The order `nu` is a real scalar and is not
differentiated; the argument `x` may be a :class:`~dualnum.dual.Dual`.

Bessel functions
================

.. autosummary::
    :toctree: generated/

    besselj
    bessely
    hankel1
    hankel2

Modified Bessel functions
=========================

.. autosummary::
    :toctree: generated/

    besseli
    besselk

"""

import mpmath
import numpy as np

from dualnum.autodiff import _defderiv, _primitive
from dualnum.dual import Dual
from dualnum.provider import evaluate, precision


@_primitive
def besselj(nu, x, /):
    """Bessel function of the first kind.

    Examples
    --------
    >>> print(format(besselj(0, 1.0), ".6f"))
    0.765198
    """
    return evaluate("besselj", nu, x)


@_primitive
def bessely(nu, x, /):
    """Bessel function of the second kind.

    Examples
    --------
    >>> print(format(bessely(0, 1.0), ".6f"))
    0.088257
    """
    return evaluate("bessely", nu, x)


@_primitive
def besseli(nu, x, /):
    """Modified Bessel function of the first kind.

    Examples
    --------
    >>> print(format(besseli(0, 1.0), ".6f"))
    1.266066
    """
    return evaluate("besseli", nu, x)


@_primitive
def besselk(nu, x, /):
    """Modified Bessel function of the second kind.

    Examples
    --------
    >>> print(format(besselk(0, 1.0), ".6f"))
    0.421024
    """
    return evaluate("besselk", nu, x)


def _imagunit(x):
    match precision(x.real if isinstance(x, Dual) else x):
        case "EXTENDED":
            return mpmath.mpc(0, 1)

        case "SINGLE":
            return np.complex64(1j)

        case "DOUBLE":
            return 1j


def hankel1(nu, x, /):
    """Hankel function of the first kind, :math:`J_\\nu(x) + iY_\\nu(x)`.

    If `x` is a dual number, so is the result, and its components are complex.

    Examples
    --------
    >>> h = hankel1(0, 1.0)
    >>> print(format(h.real, ".6f"), format(h.imag, ".6f"))
    0.765198 0.088257
    """
    return besselj(nu, x) + bessely(nu, x) * _imagunit(x)


def hankel2(nu, x, /):
    """Hankel function of the second kind, :math:`J_\\nu(x) - iY_\\nu(x)`.

    If `x` is a dual number, so is the result, and its components are complex.
    """
    return besselj(nu, x) - bessely(nu, x) * _imagunit(x)


def _cylinder(fun):
    def result(nu, x):
        if nu == 0:
            return -fun(nu + 1, x)

        return (fun(nu - 1, x) - fun(nu + 1, x)) / 2

    return result


def _modified(fun, sign):
    def result(nu, x):
        if nu == 0:
            return sign * fun(nu + 1, x)

        return sign * (fun(nu - 1, x) + fun(nu + 1, x)) / 2

    return result


_defderiv(besselj, _cylinder(besselj), argnum=1)
_defderiv(bessely, _cylinder(bessely), argnum=1)
_defderiv(besseli, _modified(besseli, 1), argnum=1)
_defderiv(besselk, _modified(besselk, -1), argnum=1)

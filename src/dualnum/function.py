"""
################################################
Mathematical functions (:mod:`dualnum.function`)
################################################

.. currentmodule:: dualnum.function

This module provides elementary functions. Each function accepts scalars of every
supported precision as well as :class:`~dualnum.dual.Dual`, in which case the
derivative component is propagated by the chain rule.

Constant functions
==================

.. autosummary::
    :toctree: generated/

    e
    ln2
    ln10
    pi

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    cbrt
    exp
    exp2
    expm1
    log
    log10
    log1p
    log2
    pow
    sqrt

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    acos
    asin
    atan
    atan2
    cos
    sin
    tan

Hyperbolic functions
====================

.. autosummary::
    :toctree: generated/

    acosh
    asinh
    atanh
    cosh
    sinh
    tanh

"""

from dualnum.autodiff import _defderiv, _primitive
from dualnum.provider import constant, evaluate


@_primitive
def e(x, /):
    """Napier's constant in the precision of `x`.

    Examples
    --------
    >>> print(format(e(1.0), ".6f"))
    2.718282
    """
    return constant("e", x)


@_primitive
def ln2(x, /):
    """Natural logarithm of 2 in the precision of `x`.

    Examples
    --------
    >>> print(format(ln2(1.0), ".6f"))
    0.693147
    """
    return constant("ln2", x)


@_primitive
def ln10(x, /):
    """Natural logarithm of 10 in the precision of `x`.

    Examples
    --------
    >>> print(format(ln10(1.0), ".6f"))
    2.302585
    """
    return constant("ln10", x)


@_primitive
def pi(x, /):
    """Pi in the precision of `x`.

    Examples
    --------
    >>> print(format(pi(1.0), ".6f"))
    3.141593
    """
    return constant("pi", x)


@_primitive
def sqrt(x, /):
    """Square root.

    Examples
    --------
    >>> from dualnum import Dual
    >>> sqrt(Dual.variable(4.0))
    Dual(real=2.0, imag=0.25)
    """
    return evaluate("sqrt", x)


@_primitive
def cbrt(x, /):
    """Cube root.

    Unlike :func:`pow`, negative arguments are accepted.

    Examples
    --------
    >>> print(format(cbrt(-8.0), ".6f"))
    -2.000000
    """
    return evaluate("cbrt", x)


@_primitive
def sin(x, /):
    """Sine."""
    return evaluate("sin", x)


@_primitive
def cos(x, /):
    """Cosine."""
    return evaluate("cos", x)


@_primitive
def tan(x, /):
    """Tangent."""
    return evaluate("tan", x)


@_primitive
def asin(x, /):
    """Inverse sine."""
    return evaluate("asin", x)


@_primitive
def acos(x, /):
    """Inverse cosine."""
    return evaluate("acos", x)


@_primitive
def atan(x, /):
    """Inverse tangent."""
    return evaluate("atan", x)


@_primitive
def atan2(y, x, /):
    """Inverse tangent of ``y / x`` in the quadrant determined by the signs of `y` and
    `x`.

    Examples
    --------
    >>> from dualnum import Dual
    >>> atan2(Dual.variable(0.0), 1.0)
    Dual(real=0.0, imag=1.0)
    """
    return evaluate("atan2", y, x)


@_primitive
def sinh(x, /):
    """Hyperbolic sine."""
    return evaluate("sinh", x)


@_primitive
def cosh(x, /):
    """Hyperbolic cosine."""
    return evaluate("cosh", x)


@_primitive
def tanh(x, /):
    """Hyperbolic tangent."""
    return evaluate("tanh", x)


@_primitive
def asinh(x, /):
    """Inverse hyperbolic sine."""
    return evaluate("asinh", x)


@_primitive
def acosh(x, /):
    """Inverse hyperbolic cosine."""
    return evaluate("acosh", x)


@_primitive
def atanh(x, /):
    """Inverse hyperbolic tangent."""
    return evaluate("atanh", x)


@_primitive
def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    """
    return evaluate("exp", x)


@_primitive
def exp2(x, /):
    """2 raised to the power `x`."""
    return evaluate("exp2", x)


@_primitive
def expm1(x, /):
    """``exp(x) - 1``, accurate for small `x`."""
    return evaluate("expm1", x)


@_primitive
def log(x, /):
    """Natural logarithm.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    """
    return evaluate("log", x)


@_primitive
def log1p(x, /):
    """``log(1 + x)``, accurate for small `x`."""
    return evaluate("log1p", x)


@_primitive
def log10(x, /):
    """Common logarithm."""
    return evaluate("log10", x)


@_primitive
def log2(x, /):
    """Binary logarithm."""
    return evaluate("log2", x)


@_primitive
def pow(x, y, /):
    """`x` raised to the power `y`.

    Either argument may be a dual number.

    Examples
    --------
    >>> print(format(pow(3.25, 1.25), ".6f"))
    4.363693
    >>> from dualnum import Dual
    >>> pow(Dual.variable(2.0), 3)
    Dual(real=8.0, imag=12.0)
    """
    return evaluate("pow", x, y)


_defderiv(e, lambda x: x * 0)
_defderiv(ln2, lambda x: x * 0)
_defderiv(ln10, lambda x: x * 0)
_defderiv(pi, lambda x: x * 0)
_defderiv(sqrt, lambda x: 1 / (2 * sqrt(x)))
_defderiv(cbrt, lambda x: 1 / (3 * cbrt(x) ** 2))
_defderiv(sin, cos)
_defderiv(cos, lambda x: -sin(x))
_defderiv(tan, lambda x: 1 / cos(x) ** 2)
_defderiv(asin, lambda x: 1 / sqrt(1 - x**2))
_defderiv(acos, lambda x: -1 / sqrt(1 - x**2))
_defderiv(atan, lambda x: 1 / (1 + x**2))
_defderiv(atan2, lambda y, x: x / (x**2 + y**2), argnum=0)
_defderiv(atan2, lambda y, x: -y / (x**2 + y**2), argnum=1)
_defderiv(sinh, cosh)
_defderiv(cosh, sinh)
_defderiv(tanh, lambda x: 1 / cosh(x) ** 2)
_defderiv(asinh, lambda x: 1 / sqrt(1 + x**2))
_defderiv(acosh, lambda x: 1 / sqrt(x**2 - 1))
_defderiv(atanh, lambda x: 1 / (1 - x**2))
_defderiv(exp, exp)
_defderiv(exp2, lambda x: exp2(x) * ln2(x))
_defderiv(expm1, exp)
_defderiv(log, lambda x: 1 / x)
_defderiv(log1p, lambda x: 1 / (1 + x))
_defderiv(log10, lambda x: 1 / (x * ln10(x)))
_defderiv(log2, lambda x: 1 / (x * ln2(x)))
_defderiv(pow, lambda x, y: y * pow(x, y - 1), argnum=0)
_defderiv(pow, lambda x, y: pow(x, y) * log(x), argnum=1)

"""
###################################################
Automatic differentiation (:mod:`dualnum.autodiff`)
###################################################

.. currentmodule:: dualnum.autodiff

This module provides forward-mode automatic differentiation of univariate functions.

.. autosummary::
    :toctree: generated/

    deriv
    valuederiv

"""

import functools
from collections.abc import Callable
from typing import Any

from dualnum.dual import Dual
from dualnum.provider import applyrule, getcontext, isfinite, isnan


def deriv[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    Parameters
    ----------
    fun : Callable
        Differentiated function. Its first positional argument is the variable.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Warnings
    --------
    `fun` must not contain conditional branches on its argument, and the result of
    `fun` must depend on the argument. Higher-order derivatives are not supported;
    ``deriv(deriv(fun))`` raises :exc:`TypeError` when called.

    Examples
    --------
    >>> from dualnum import function as dnf
    >>> f = lambda x: x**2 + dnf.sqrt(x + 3)
    >>> df = deriv(f)
    >>> print(format(df(1.2), ".6g"))
    2.64398
    """

    def result(*args, **kwargs):
        tmp: Any = fun(Dual.variable(args[0]), *args[1:], **kwargs)  # type: ignore
        return tmp.imag

    return result


def valuederiv[T, **P](fun: Callable[P, T]) -> Callable[P, tuple[T, T]]:
    """Return a function that evaluates both the univariate scalar-valued function and
    its derivative.

    Examples
    --------
    >>> from dualnum import function as dnf
    >>> f = valuederiv(lambda x: dnf.exp(2 * x))
    >>> f(0.0)
    (1.0, 2.0)
    """

    def result(*args, **kwargs):
        tmp: Any = fun(Dual.variable(args[0]), *args[1:], **kwargs)  # type: ignore
        return (tmp.real, tmp.imag)

    return result


def _defderiv[**P](
    fun: Callable[P, Any], deriv: Callable[P, Any], *, argnum: int = 0
) -> None:
    if "_dualnum_is_primitive" not in fun.__dict__:
        raise ValueError

    fun.__dict__["_dualnum_derivs"][argnum] = deriv


def _primitive[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    derivs: dict[int, Callable] = {}

    @functools.wraps(fun)
    def wrapper(*args, **kwargs):
        if not any(isinstance(x, Dual) for x in args):
            return fun(*args, **kwargs)

        args_real = [x.real if isinstance(x, Dual) else x for x in args]
        real = wrapper(*args_real, **kwargs)

        # a NaN value from the "NAN" policy carries a NaN derivative
        if getcontext().domain == "NAN" and isnan(real):
            return Dual(real, real)

        imag: Any = None

        for argnum, arg in enumerate(args):
            if not isinstance(arg, Dual):
                continue

            if argnum not in derivs:
                name = fun.__name__
                raise TypeError(f"{name} is not differentiable w.r.t. argument {argnum}")

            # constant operand; its rule may be undefined here
            if arg.imag == 0:
                continue

            rule = functools.partial(derivs[argnum], **kwargs)

            if isfinite(real):
                tmp = applyrule(rule, *args_real) * arg.imag
            else:
                tmp = rule(*args_real) * arg.imag

            imag = tmp if imag is None else imag + tmp

        return Dual(real, imag)

    wrapper.__dict__["_dualnum_is_primitive"] = True
    wrapper.__dict__["_dualnum_derivs"] = derivs
    return wrapper  # type: ignore

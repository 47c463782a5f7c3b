"""
#########################################
Scalar provider (:mod:`dualnum.provider`)
#########################################

.. currentmodule:: dualnum.provider

This module evaluates scalar mathematical functions in the precision of their
arguments and applies the domain error policy of the current context.

Precisions
==========

========  =====================================  ==================================
Name      Types                                  Backend
========  =====================================  ==================================
SINGLE    ``numpy.float32``, ``numpy.float16``   :mod:`math` / :mod:`mpmath`, rounded
DOUBLE    ``float``, ``int``                     :mod:`math` / :mod:`mpmath`
EXTENDED  ``mpmath.mpf``, ``mpmath.mpc``         :mod:`mpmath` at working precision
========  =====================================  ==================================

Evaluation
==========

.. autosummary::
    :toctree: generated/

    applyrule
    evaluate
    isfinite
    isnan
    precision

Context
=======

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
import math
from collections.abc import Callable
from typing import Any, Literal, Self

import mpmath
import mpmath.ctx_mp_python
import numpy as np

type Precision = Literal["SINGLE", "DOUBLE", "EXTENDED"]


class Context:
    """Create a new context.

    Parameters
    ----------
    domain : Literal["RAISE", "NAN"], default="RAISE"
        Domain error policy. If `domain` is ``"RAISE"``, evaluating a function outside
        its domain raises :exc:`ValueError`. If `domain` is ``"NAN"``, a NaN of the
        precision of the arguments is returned instead.
    """

    __slots__ = ("_domain",)
    _domain: Literal["RAISE", "NAN"]

    def __init__(self, domain: Literal["RAISE", "NAN"] = "RAISE"):
        if domain not in ("RAISE", "NAN"):
            raise ValueError(f"unknown domain error policy: {domain!r}")

        self._domain = domain

    @property
    def domain(self) -> Literal["RAISE", "NAN"]:
        return self._domain

    def copy(self) -> Self:
        return self.__class__(self._domain)

    def __str__(self):
        return f"{type(self).__name__}({self._domain!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("provider")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None, *, domain: Literal["RAISE", "NAN"] | None = None
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> with localcontext(domain="NAN"):
    ...     evaluate("sqrt", -1.0)
    nan
    """
    if ctx is None:
        ctx = getcontext()

    if domain is None:
        domain = ctx._domain

    ctx = Context(domain)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)


def _mpcbrt(x):
    if isinstance(x, mpmath.mpc):
        return mpmath.cbrt(x)

    return mpmath.sign(x) * mpmath.cbrt(abs(x))


_MPMATH: dict[str, Callable[..., Any]] = {
    "sqrt": mpmath.sqrt,
    "cbrt": _mpcbrt,
    "sin": mpmath.sin,
    "cos": mpmath.cos,
    "tan": mpmath.tan,
    "asin": mpmath.asin,
    "acos": mpmath.acos,
    "atan": mpmath.atan,
    "sinh": mpmath.sinh,
    "cosh": mpmath.cosh,
    "tanh": mpmath.tanh,
    "asinh": mpmath.asinh,
    "acosh": mpmath.acosh,
    "atanh": mpmath.atanh,
    "exp": mpmath.exp,
    "exp2": lambda x: mpmath.power(2, x),
    "expm1": mpmath.expm1,
    "log": mpmath.log,
    "log1p": mpmath.log1p,
    "log10": mpmath.log10,
    "log2": lambda x: mpmath.log(x, 2),
    "atan2": mpmath.atan2,
    "pow": mpmath.power,
    "besselj": mpmath.besselj,
    "bessely": mpmath.bessely,
    "besseli": mpmath.besseli,
    "besselk": mpmath.besselk,
}

_MATH: dict[str, Callable[..., float]] = {
    "sqrt": math.sqrt,
    "cbrt": math.cbrt,
    "sin": math.sin,
    "cos": math.cos,
    "tan": math.tan,
    "asin": math.asin,
    "acos": math.acos,
    "atan": math.atan,
    "sinh": math.sinh,
    "cosh": math.cosh,
    "tanh": math.tanh,
    "asinh": math.asinh,
    "acosh": math.acosh,
    "atanh": math.atanh,
    "exp": math.exp,
    "exp2": math.exp2,
    "expm1": math.expm1,
    "log": math.log,
    "log1p": math.log1p,
    "log10": math.log10,
    "log2": math.log2,
    "atan2": math.atan2,
    "pow": math.pow,
}

_CONSTANTS: dict[str, tuple[float, Callable[[], Any]]] = {
    "e": (math.e, lambda: +mpmath.e),
    "pi": (math.pi, lambda: +mpmath.pi),
    "ln2": (float.fromhex("0x1.62e42fefa39efp-1"), lambda: +mpmath.ln2),
    "ln10": (float.fromhex("0x1.26bb1bbb55516p+1"), lambda: +mpmath.ln10),
}


def precision(*args: Any) -> Precision:
    """Return the widest precision among `args`.

    Raises
    ------
    TypeError
        If any of `args` is not a supported scalar.
    """
    result: Precision = "DOUBLE"

    for x in args:
        match x:
            case mpmath.ctx_mp_python.mpnumeric():
                return "EXTENDED"

            case np.float32() | np.float16() | np.complex64():
                result = "SINGLE"

            case float() | int() | complex() | np.integer():
                pass

            case _:
                raise TypeError(f"unsupported scalar type: {type(x).__name__!r}")

    return result


def isnan(x: Any, /) -> bool:
    """Return ``True`` if `x` is NaN, or has a NaN component if `x` is complex."""
    return x != x


def _isreal(x: Any) -> bool:
    return not isinstance(x, complex | np.complexfloating | mpmath.mpc)


def _isinf(x: Any) -> bool:
    if _isreal(x):
        return abs(x) == math.inf

    return _isinf(x.real) or _isinf(x.imag)


def _nan(prec: Precision, real: bool) -> Any:
    match prec:
        case "EXTENDED":
            nan = mpmath.nan
            return nan if real else mpmath.mpc(nan, nan)

        case "SINGLE":
            nan = np.float32(math.nan)
            return nan if real else np.complex64(complex(math.nan, math.nan))

        case "DOUBLE":
            return math.nan if real else complex(math.nan, math.nan)


def _verify(result: Any, args: tuple[Any, ...]) -> Any:
    if not _isreal(result) and all(_isreal(x) for x in args):
        raise ValueError("math domain error")

    if _isinf(result) and not any(_isinf(x) for x in args):
        raise ValueError("math domain error")

    return result


def _extended(name: str, args: tuple[Any, ...]) -> Any:
    return _verify(_MPMATH[name](*args), args)


def _double(name: str, args: tuple[Any, ...]) -> Any:
    if all(_isreal(x) for x in args) and (fun := _MATH.get(name)):
        return fun(*(float(x) for x in args))

    result = _verify(_MPMATH[name](*args), args)
    return float(result) if _isreal(result) else complex(result)


def _single(name: str, args: tuple[Any, ...]) -> Any:
    args = tuple(float(x) if _isreal(x) else complex(x) for x in args)
    result = _double(name, args)
    return np.float32(result) if _isreal(result) else np.complex64(result)


def evaluate(name: str, *args: Any) -> Any:
    """Evaluate the scalar function `name` at `args`.

    Parameters
    ----------
    name : str
        Name of the function, for example ``"sin"`` or ``"besselj"``.
    *args
        Scalar arguments. The result has the widest precision among them.

    Raises
    ------
    ValueError
        If the arguments are outside the domain of the function and the domain error
        policy of the current context is ``"RAISE"``.
    TypeError
        If any of `args` is not a supported scalar.

    Examples
    --------
    >>> evaluate("sqrt", 4.0)
    2.0
    >>> evaluate("sqrt", -1.0)
    Traceback (most recent call last):
        ...
    ValueError: math domain error
    """
    if name not in _MPMATH:
        raise ValueError(f"unknown function: {name!r}")

    prec = precision(*args)

    try:
        match prec:
            case "EXTENDED":
                return _extended(name, args)

            case "SINGLE":
                return _single(name, args)

            case "DOUBLE":
                return _double(name, args)

    except ValueError:
        if getcontext().domain == "RAISE":
            raise

        return _nan(prec, all(_isreal(x) for x in args))


def isfinite(x: Any, /) -> bool:
    """Return ``True`` if `x` is neither NaN nor infinite."""
    return not isnan(x) and not _isinf(x)


def applyrule(fun: Callable[..., Any], *args: Any) -> Any:
    """Evaluate the derivative rule `fun` at `args` under the domain error policy.

    A rule that divides by zero, or returns a non-finite value from finite `args`, is
    outside its domain. This happens at boundaries where the function itself is
    defined, such as ``sqrt`` at zero or ``asin`` at one.

    Raises
    ------
    ValueError
        If the rule is outside its domain and the domain error policy of the current
        context is ``"RAISE"``.

    Examples
    --------
    >>> applyrule(lambda x: 1 / x, 0.0)
    Traceback (most recent call last):
        ...
    ValueError: math domain error
    >>> with localcontext(domain="NAN"):
    ...     applyrule(lambda x: 1 / x, 0.0)
    nan
    """
    try:
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            result = fun(*args)

        if not isfinite(result) and all(isfinite(x) for x in args):
            raise ValueError("math domain error")

    except (ValueError, ZeroDivisionError) as e:
        if getcontext().domain == "RAISE":
            raise ValueError("math domain error") from e

        return _nan(precision(*args), all(_isreal(x) for x in args))

    return result


def constant(name: str, x: Any, /) -> Any:
    """Return the mathematical constant `name` in the precision of `x`.

    Supported names are ``"e"``, ``"pi"``, ``"ln2"``, and ``"ln10"``.
    """
    value, mpvalue = _CONSTANTS[name]

    match precision(x):
        case "EXTENDED":
            return mpvalue()

        case "SINGLE":
            return np.float32(value)

        case "DOUBLE":
            return value

"""
##################################
Dual numbers (:mod:`dualnum.dual`)
##################################

.. currentmodule:: dualnum.dual

This module provides the dual number type.

.. autosummary::
    :toctree: generated/

    Dual

"""

from collections.abc import Callable
from typing import Any, Final, Self, final

import mpmath.ctx_mp_python
import numpy as np

from dualnum.interop import asduallike
from dualnum.typing import DualLike, Scalar

_SCALAR: Final = (int, float, complex, np.number, mpmath.ctx_mp_python.mpnumeric)


@final
class Dual[T: Scalar](Scalar, DualLike[T]):
    r"""Dual number.

    Parameters
    ----------
    real : T
        Value component.
    imag : T, optional
        Derivative component (the default is zero).

    Attributes
    ----------
    real : T
    imag : T

    Raises
    ------
    TypeError
        If `real` or `imag` is a dual number.

    Notes
    -----
    Instances of this class behave like elements of the ring
    :math:`T[\varepsilon]/(\varepsilon^2)`. Arithmetic returns new instances;
    :meth:`ireciprocal` and :meth:`iconjugate` are the only methods that update an
    instance in place.

    Equality and ordering compare ``(real, imag)`` lexicographically. The ordering
    exists for sorting and testing only. Instances are not hashable because
    :meth:`ireciprocal` and :meth:`iconjugate` mutate them.

    Examples
    --------
    >>> x = Dual.variable(3.0)
    >>> x * x
    Dual(real=9.0, imag=6.0)
    >>> 1 / Dual.variable(2.0)
    Dual(real=0.5, imag=-0.25)
    """

    __slots__ = ("real", "imag")
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]
    real: T
    imag: T

    def __init__(self, real: T, imag: T | None = None):
        if isinstance(real, Dual) or isinstance(imag, Dual):
            raise TypeError("nesting Dual is forbidden")

        self.real = real
        self.imag = real * 0 if imag is None else imag

    @classmethod
    def zero(cls) -> "Dual[float]":
        """Return :math:`0 + 0\\varepsilon`."""
        return cls(0.0, 0.0)  # type: ignore

    @classmethod
    def constant(cls, value: T) -> Self:
        """Return a dual number representing the constant `value`."""
        return cls(value, value * 0)

    @classmethod
    def infinitesimal(cls, imag: T) -> Self:
        """Return a dual number whose value component is zero."""
        return cls(imag * 0, imag)

    @classmethod
    def variable(cls, value: T) -> Self:
        """Return a dual number seeded for differentiation with respect to `value`."""
        ZERO = value * 0
        return cls(value, ZERO + 1)

    @classmethod
    def fromduallike(
        cls, obj: Any, astype: Callable[[Any], T] | None = None
    ) -> "Dual[T]":
        """Construct a dual number from a dual-like object.

        Parameters
        ----------
        obj : DualLike | complex
            Object implementing :class:`~dualnum.typing.DualLike`, or an object for
            which :func:`~dualnum.interop.asduallike` knows an adapter.
        astype : Callable, optional
            Conversion applied to both components, for example ``float`` or
            ``numpy.float32``.

        Warnings
        --------
        The second component of `obj` is copied as is. For a complex number, this
        means the imaginary part becomes the derivative.

        Examples
        --------
        >>> Dual.fromduallike(1 + 2j)
        Dual(real=1.0, imag=2.0)
        """
        src = asduallike(obj)
        result = cls(src.value(), src.derivative())
        return result if astype is None else result.astype(astype)

    def astype[S: Scalar](self, fun: Callable[[T], S]) -> "Dual[S]":
        """Return a copy whose components are converted by `fun`."""
        return Dual(fun(self.real), fun(self.imag))

    def value(self) -> T:
        """Return the value component, discarding the derivative."""
        return self.real

    def derivative(self) -> T:
        """Return the derivative component."""
        return self.imag

    def reciprocal(self) -> Self:
        """Return the multiplicative inverse.

        Raises
        ------
        ZeroDivisionError
            If the value component is zero.
        """
        if self.real == 0:
            raise ZeroDivisionError("reciprocal of a dual number with zero real part")

        return self.__class__(1 / self.real, -self.imag / self.real**2)

    def conjugate(self) -> Self:
        """Return the conjugate, which negates the derivative component."""
        return self.__class__(self.real, -self.imag)

    def ireciprocal(self) -> None:
        """Replace the dual number with its multiplicative inverse in place.

        Raises
        ------
        ZeroDivisionError
            If the value component is zero.
        """
        tmp = self.reciprocal()
        self.real, self.imag = tmp.real, tmp.imag

    def iconjugate(self) -> None:
        """Replace the dual number with its conjugate in place."""
        self.imag = -self.imag

    def increment(self) -> Self:
        """Return the dual number with its value component increased by one.

        The derivative component is unchanged.
        """
        return self.__class__(self.real + 1, self.imag)

    def decrement(self) -> Self:
        """Return the dual number with its value component decreased by one.

        The derivative component is unchanged.
        """
        return self.__class__(self.real - 1, self.imag)

    def _key(self) -> tuple[T, T]:
        return (self.real, self.imag)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(real={self.real!r}, imag={self.imag!r})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(real={self.real}, imag={self.imag})"

    def __format__(self, format_spec: str) -> str:
        real = format(self.real, format_spec)
        imag = format(self.imag, format_spec)
        return f"{type(self).__name__}(real={real}, imag={imag})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        return other._key() == self._key()  # type: ignore

    def __lt__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return self._key() < rhs._key()

    def __le__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return self._key() <= rhs._key()

    def __gt__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return rhs._key() < self._key()

    def __ge__(self, rhs: Self) -> bool:
        if type(rhs) is not type(self):
            return NotImplemented

        return rhs._key() <= self._key()

    def __add__(self, rhs: Self | T | int) -> Self:
        if isinstance(rhs, Dual):
            return self.__class__(self.real + rhs.real, self.imag + rhs.imag)

        if not isinstance(rhs, _SCALAR):
            return NotImplemented

        return self.__class__(self.real + rhs, self.imag)

    def __sub__(self, rhs: Self | T | int) -> Self:
        if isinstance(rhs, Dual):
            return self.__class__(self.real - rhs.real, self.imag - rhs.imag)

        if not isinstance(rhs, _SCALAR):
            return NotImplemented

        return self.__class__(self.real - rhs, self.imag)

    def __mul__(self, rhs: Self | T | int) -> Self:
        if isinstance(rhs, Dual):
            imag = self.real * rhs.imag + self.imag * rhs.real
            return self.__class__(self.real * rhs.real, imag)

        if not isinstance(rhs, _SCALAR):
            return NotImplemented

        return self.__class__(self.real * rhs, self.imag * rhs)

    def __truediv__(self, rhs: Self | T | int) -> Self:
        if isinstance(rhs, Dual):
            if rhs.real == 0:
                raise ZeroDivisionError("division by a dual number with zero real part")

            s = rhs.real**2
            imag = (self.imag * rhs.real - self.real * rhs.imag) / s
            return self.__class__(self.real / rhs.real, imag)

        if not isinstance(rhs, _SCALAR):
            return NotImplemented

        if rhs == 0:
            raise ZeroDivisionError("division by zero")

        return self.__class__(self.real / rhs, self.imag / rhs)

    def __pow__(self, rhs: T | int) -> Self:
        if not isinstance(rhs, _SCALAR):
            return NotImplemented

        if rhs == 0:
            return self.__class__(self.real**0, self.imag * 0)

        imag = rhs * self.real ** (rhs - 1) * self.imag
        return self.__class__(self.real**rhs, imag)

    def __neg__(self) -> Self:
        return self.__class__(-self.real, -self.imag)

    def __pos__(self) -> Self:
        return self.__class__(+self.real, +self.imag)

    def __radd__(self, lhs: T | int) -> Self:
        if not isinstance(lhs, _SCALAR):
            return NotImplemented

        return self.__class__(lhs + self.real, self.imag)

    def __rsub__(self, lhs: T | int) -> Self:
        if not isinstance(lhs, _SCALAR):
            return NotImplemented

        return self.__class__(lhs - self.real, -self.imag)

    def __rmul__(self, lhs: T | int) -> Self:
        if not isinstance(lhs, _SCALAR):
            return NotImplemented

        return self.__class__(lhs * self.real, lhs * self.imag)

    def __rtruediv__(self, lhs: T | int) -> Self:
        if not isinstance(lhs, _SCALAR):
            return NotImplemented

        if self.real == 0:
            raise ZeroDivisionError("division by a dual number with zero real part")

        s = self.real**2
        return self.__class__(lhs / self.real, -lhs * self.imag / s)

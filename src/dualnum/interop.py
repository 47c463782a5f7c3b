"""
#######################################
Interoperation (:mod:`dualnum.interop`)
#######################################

.. currentmodule:: dualnum.interop

This module adapts foreign pair-like objects to :class:`~dualnum.typing.DualLike`.

.. autosummary::
    :toctree: generated/

    ComplexAdapter
    asduallike

"""

from typing import Any

import mpmath
import numpy as np

from dualnum.typing import DualLike


class ComplexAdapter[T](DualLike[T]):
    """Read a complex number as a dual-like pair.

    The real part is taken as the value and the imaginary part as the derivative.

    Parameters
    ----------
    z : complex | numpy.complexfloating | mpmath.mpc

    Examples
    --------
    >>> src = ComplexAdapter(1 + 2j)
    >>> src.value(), src.derivative()
    (1.0, 2.0)
    """

    __slots__ = ("_z",)
    _z: Any

    def __init__(self, z: Any):
        self._z = z

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._z!r})"

    def value(self) -> T:
        return self._z.real

    def derivative(self) -> T:
        return self._z.imag


def asduallike(obj: Any, /) -> DualLike:
    """Return `obj` as a :class:`~dualnum.typing.DualLike`.

    Objects that already implement the protocol are returned unchanged. Complex
    numbers of every supported precision are wrapped in :class:`ComplexAdapter`.

    Raises
    ------
    TypeError
        If no adapter is known for the type of `obj`.
    """
    match obj:
        case DualLike():
            return obj

        case complex() | np.complexfloating() | mpmath.mpc():
            return ComplexAdapter(obj)

        case _:
            raise TypeError(f"{type(obj).__name__!r} is not dual-like")

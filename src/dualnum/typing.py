"""
##############################
Typing (:mod:`dualnum.typing`)
##############################

This module provides type definitions commonly used between modules.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

.. autoclass:: DualLike
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol, Self, runtime_checkable


class Scalar(Protocol):
    """Protocol that ensures scalar-like behavior.

    Objects implementing this protocol must have four arithmetic operations and
    integer power defined, and four arithmetic operations must be compatible with
    integers.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __pow__(self, rhs: int) -> Self: ...

    @abstractmethod
    def __radd__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rtruediv__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __pos__(self) -> Self: ...


@runtime_checkable
class DualLike[T](Protocol):
    """Protocol for objects that can be read as a pair of a value and a derivative.

    The second component is copied as is; no semantic correspondence is checked.
    """

    __slots__ = ()

    @abstractmethod
    def value(self) -> T: ...

    @abstractmethod
    def derivative(self) -> T: ...

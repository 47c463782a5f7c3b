import mpmath
import numpy as np
import pytest

from dualnum import Dual
from dualnum.interop import ComplexAdapter, asduallike


class Pair:
    def __init__(self, a, b):
        self.a = a
        self.b = b

    def value(self):
        return self.a

    def derivative(self):
        return self.b


def test_complex():
    assert Dual.fromduallike(1 + 2j) == Dual(1.0, 2.0)
    assert Dual.fromduallike(np.complex64(1 + 2j)) == Dual(np.float32(1), np.float32(2))

    x = Dual.fromduallike(mpmath.mpc(1, 2))
    assert isinstance(x.real, mpmath.mpf) and x.imag == 2


def test_duallike():
    assert Dual.fromduallike(Pair(3.0, 4.0)) == Dual(3.0, 4.0)

    x = Dual(1.5, 2.5)
    assert asduallike(x) is x
    assert Dual.fromduallike(x) == x


def test_astype():
    x = Dual.fromduallike(mpmath.mpc(1, 2), astype=float)
    assert x == Dual(1.0, 2.0) and type(x.real) is float

    x = Dual.fromduallike(1 + 2j, astype=np.float32)
    assert isinstance(x.imag, np.float32)


def test_unsupported():
    with pytest.raises(TypeError):
        asduallike(1.0)

    with pytest.raises(TypeError):
        Dual.fromduallike((1.0, 2.0))

    assert repr(ComplexAdapter(1j)) == "ComplexAdapter(1j)"

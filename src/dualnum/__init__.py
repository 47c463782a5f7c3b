from .autodiff import deriv, valuederiv
from .dual import Dual
from .function import exp, log, pow, sqrt

__all__ = [
    "deriv",
    "valuederiv",
    "Dual",
    "exp",
    "log",
    "pow",
    "sqrt",
]

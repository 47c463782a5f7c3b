import dataclasses
import logging
from collections.abc import Callable
from typing import Any, Literal

from dualnum.dual import Dual

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class NewtonResult[T]:
    """Output of :func:`newton`.

    Attributes
    ----------
    status : Literal["FAILURE", "SUCCESS"]
    root
        Last iterate. If `status` is ``"FAILURE"``, this is not a root in general.
    nit : int
        Number of iterations performed.
    message : str
        Report from the solver. Typically a reason for a failure.
    """

    status: Literal["FAILURE", "SUCCESS"]
    root: T
    nit: int
    message: str


def newton[T](
    fun: Callable[[Dual[T]], Dual[T]],
    x0: T,
    tol: float = 1e-15,
    max_iter: int = 64,
) -> NewtonResult[T]:
    """Find a root of a univariate scalar-valued function by Newton's method.

    The value and the derivative of `fun` are obtained at once by evaluating `fun`
    at :meth:`Dual.variable(x) <dualnum.dual.Dual.variable>`.

    Parameters
    ----------
    fun : Callable
        Function to find a root of. It receives and returns a dual number.
    x0
        Initial guess.
    tol : float, default=1e-15
        The iteration stops when the absolute value of the Newton step is less than
        `tol`.
    max_iter : int, default=64
        Maximum number of iterations.

    Returns
    -------
    NewtonResult

    Warnings
    --------
    `fun` must not contain conditional branches on its argument.

    Examples
    --------
    >>> r = newton(lambda x: x * x - 10, 10.0)
    >>> r.status
    'SUCCESS'
    >>> print(format(r.root, ".12f"))
    3.162277660168
    """
    if max_iter <= 0:
        raise ValueError("max_iter must be positive")

    x = x0

    for i in range(max_iter):
        y: Any = fun(Dual.variable(x))

        if not isinstance(y, Dual):
            raise TypeError("fun must return a dual number")

        if y.imag == 0:
            message = f"derivative vanished at {x!r}"
            logger.warning("Newton iteration failed: %s", message)
            return NewtonResult("FAILURE", x, i, message)

        step = y.real / y.imag
        x = x - step
        logger.debug("iteration %d: x=%r, step=%r", i + 1, x, step)

        if step != step or abs(step) == float("inf"):
            message = f"step is not finite at iteration {i + 1}"
            logger.warning("Newton iteration failed: %s", message)
            return NewtonResult("FAILURE", x, i + 1, message)

        if abs(step) < tol:
            return NewtonResult("SUCCESS", x, i + 1, "converged")

    message = f"not converged within {max_iter} iterations"
    logger.warning("Newton iteration failed: %s", message)
    return NewtonResult("FAILURE", x, max_iter, message)

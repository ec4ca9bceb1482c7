from __future__ import annotations

import math
from collections.abc import Callable

from pycalc.numeric.calculus import derivative
from pycalc.numeric.solve.exception import SolverError
from pycalc.options import _resolve


# ======================================================================

def newton_root(func: Callable[[float], float], x0: float,
                precision: float = None, *, maxits: int = None,
                steps: int = None, verbose: bool = False) -> float:
    r"""
    Find a zero of a scalar function using the Newton-Raphson method,
    with the derivative estimated numerically (see `derivative`):

    .. math:: x_{n+1} = x_n - \frac{f(x_n)}{f'(x_n)}

    Iteration stops when :math:`|f(x_n)| \leq precision`.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function which we are searching for root.
    x0 : float
        Starting point.  The root found is the one reached by Newton
        iteration from here, which is not necessarily the nearest.
    precision : float, optional
        Stop when :math:`|f(x)| \leq precision`.  If `None`, the current
        `precision` option is used (default = 1e-16).
    maxits : int, optional
        Maximum number of Newton steps.  If `None`, the current
        `newton_maxits` option is used (default = 100).
    steps : int, optional
        Passed to `derivative`.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    float
        Converged root.

    Raises
    ------
    ValueError
        If ``precision <= 0`` or ``maxits < 1``.
    SolverError
        Failure to converge, with `flag`:

        - 1: Reached `maxits` (e.g. oscillation or unreachable
          `precision`).
        - 2: Derivative was zero.
        - 3: The iterate or function value became non-finite.

    Examples
    --------
    >>> f = lambda x: x**2 + x - 6
    >>> round(newton_root(f, 1.0, precision=1e-12), 10)
    2.0
    """
    precision = _resolve('precision', precision)
    maxits = _resolve('newton_maxits', maxits)
    if not precision > 0:
        raise ValueError("Require precision > 0.")
    if maxits < 1:
        raise ValueError("Require maxits >= 1.")

    if verbose:
        print(f"Newton Root:")

    x = x0
    fx = func(x)
    it = 0
    while not abs(fx) <= precision:
        if not (math.isfinite(x) and math.isfinite(fx)):
            raise SolverError("newton_root() failed to converge:", flag=3,
                              details="Non-finite value.", x=x, fx=fx,
                              its=it)
        if it >= maxits:
            raise SolverError("newton_root() failed to converge:", flag=1,
                              details="Reached maxits.", x=x, fx=fx,
                              its=it)

        fder = derivative(func, x, steps)
        if fder == 0:
            raise SolverError("newton_root() failed to converge:", flag=2,
                              details="Derivative was zero.", x=x, fx=fx,
                              its=it)

        x = x - fx / fder
        fx = func(x)
        it += 1

        if verbose:
            print(f"... Iteration {it}: x = {x}, f(x) = {fx}")

    if verbose:
        print(f"... Converged.")
    return x

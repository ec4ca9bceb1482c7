"""
Calculus (:mod:`pycalc.numeric.calculus`)
=========================================

.. currentmodule:: pycalc.numeric.calculus

Numeric differentiation and integration of scalar functions of a single
variable.
"""
from __future__ import annotations

from collections.abc import Callable

import numpy as np

from pycalc.options import _resolve


# ======================================================================

def derivative(func: Callable[[float], float], x: float,
               steps: int = None) -> float:
    r"""
    Estimate :math:`f'(x)` using central differences with a shrinking
    step size.  The step starts at :math:`h = 1` and is halved after
    each estimate:

    .. math:: f'(x) \approx \frac{f(x + h) - f(x - h)}{2h}

    Exactly `steps` estimates are made and the final one (smallest `h`)
    is returned.  Earlier estimates are discarded; there is no
    convergence check.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function to differentiate.  Must be defined on
        :math:`[x - 1, x + 1]`.
    x : float
        Point at which to evaluate the derivative.
    steps : int, optional
        Number of step halvings.  If `None`, the current
        `derivative_steps` option is used (default = 20).

    Returns
    -------
    float
        Derivative estimate.

    Raises
    ------
    ValueError
        If ``steps < 1``.

    Examples
    --------
    >>> derivative(lambda x: x ** 2, 5.0)
    10.0
    """
    steps = _resolve('derivative_steps', steps)
    if steps < 1:
        raise ValueError("Require steps >= 1.")

    h, df_dx = 1.0, None
    for _ in range(steps):
        df_dx = (func(x + h) - func(x - h)) / (2 * h)
        h *= 0.5

    return df_dx


# ----------------------------------------------------------------------

def integral_rectangles(func: Callable[[float], float], xmin: float,
                        xmax: float, n: int = None) -> float:
    """
    Approximate the definite integral of `func` from `xmin` to `xmax`
    using the midpoint rectangle rule with `n` equal-width rectangles.

    Parameters
    ----------
    func : Callable[[float], float]
        Scalar function to integrate.  It is called once per rectangle
        with a scalar argument.
    xmin, xmax : float
        Limits of integration.  If ``xmax < xmin`` the result changes
        sign in the usual way.
    n : int, optional
        Number of rectangles.  If `None`, the current `n_rectangles`
        option is used (default = 100000).

    Returns
    -------
    float
        Integral estimate.

    Raises
    ------
    ValueError
        If ``n < 1``.

    Examples
    --------
    >>> round(integral_rectangles(lambda x: x ** 2 + x - 6, 0.0, 4.0), 6)
    5.333333
    """
    n = _resolve('n_rectangles', n)
    if n < 1:
        raise ValueError("Require n >= 1.")

    delx = (xmax - xmin) / n
    x_mid = xmin + (np.arange(n) + 0.5) * delx
    return float(delx * sum(func(float(x_i)) for x_i in x_mid))

from __future__ import annotations

from collections.abc import Callable

from pycalc.numeric.solve.exception import SolverError
from pycalc.options import _resolve


# ======================================================================

def has_sign_change(func: Callable[[float], float], a: float,
                    b: float) -> bool:
    """
    Returns ``True`` if `func` has strictly opposite, nonzero signs at
    `a` and `b`.

    The test used is :math:`|f(a) + f(b)| < |f(a)| + |f(b)|`, which
    avoids forming the product :math:`f(a) f(b)` (and so can't
    underflow or overflow).  Note the boundary behaviour:

    - ``False`` if either :math:`f(a) = 0` or :math:`f(b) = 0`.
    - ``False`` for a degenerate interval ``a == b``.

    Examples
    --------
    >>> has_sign_change(lambda x: x, -1.0, 2.0)
    True
    >>> has_sign_change(lambda x: x, 0.0, 2.0)
    False
    """
    return _sign_change(func(a), func(b))


def _sign_change(f_a: float, f_b: float) -> bool:
    return abs(f_a + f_b) < abs(f_a) + abs(f_b)


# ----------------------------------------------------------------------

def bisect_root(func: Callable[[float], float], xmin: float, xmax: float,
                precision: float = None, *, maxits: int = None,
                verbose: bool = False) -> float | None:
    r"""
    Approximate solution of :math:`f(x) = 0` on the interval :math:`x
    \in [x_{min}, x_{max}]` by the bisection method.

    If either end of the interval is an exact root it is returned
    straight away.  Otherwise `func` must change sign across the
    interval (see `has_sign_change`), in which case the interval is
    halved until :math:`|f(x_m)| \leq precision` at the midpoint
    :math:`x_m`.  If there is no sign change, ``None`` is returned; this
    is a normal result and not an error.

    Parameters
    ----------
    func : Callable[[float], float]
        Continuous scalar function which we are searching for root.
    xmin, xmax : float
        Ends of the search interval, ``xmin <= xmax``.
    precision : float, optional
        End search when :math:`|f(x_m)| \leq precision`.  If `None`, the
        current `precision` option is used (default = 1e-16).
    maxits : int, optional
        Maximum number of iterations.  If `None`, the current
        `bisect_maxits` option is used (default = 1100).
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    x_m : float or None
        Best estimate of root found i.e. :math:`f(x_m) \approx 0`, or
        ``None`` if no sign change was found.

    Raises
    ------
    ValueError
        If ``precision <= 0`` or ``maxits < 1``.
    SolverError
        If the search stops before reaching `precision`, with `flag`:

        - 1: Reached `maxits`.
        - 2: The interval can't be split any further in floating point,
          i.e. `precision` is unreachable for this root.

    Notes
    -----
    If neither half of the interval shows a sign change (only possible
    for a function that is discontinuous or returns NaN), the lower half
    is retained.

    Examples
    --------
    >>> f = lambda x: x**2 - x - 1
    >>> bisect_root(f, 1.0, 2.0, precision=1e-6)
    1.6180343627929688
    >>> f = lambda x: (2*x - 1)*(x - 3)
    >>> bisect_root(f, 0.0, 1.0)  # Solution was in centre.
    0.5
    >>> bisect_root(lambda x: x, 5.0, 10.0) is None
    True
    """
    precision = _resolve('precision', precision)
    maxits = _resolve('bisect_maxits', maxits)
    if not precision > 0:
        raise ValueError("Require precision > 0.")
    if maxits < 1:
        raise ValueError("Require maxits >= 1.")

    f_a, f_b = func(xmin), func(xmax)
    if f_a == 0:
        return xmin
    if f_b == 0:
        return xmax

    if not _sign_change(f_a, f_b):
        if verbose:
            print(f"Bisecting Root: No sign change on [{xmin}, {xmax}].")
        return None

    if verbose:
        print(f"Bisecting Root:")

    x_m = 0.5 * (xmin + xmax)
    f_m = func(x_m)
    it = 0

    # Written as 'not <=' so that NaN never satisfies the test.
    while not abs(f_m) <= precision:
        if it >= maxits:
            raise SolverError("bisect_root() failed to converge:", flag=1,
                              details="Reached maxits.", x=x_m, fx=f_m,
                              its=it, xmin=xmin, xmax=xmax)
        if x_m == xmin or x_m == xmax:
            raise SolverError("bisect_root() failed to converge:", flag=2,
                              details="Interval can't be split further; "
                                      "precision unreachable.",
                              x=x_m, fx=f_m, its=it, xmin=xmin, xmax=xmax)

        # Check which side root is on, narrow interval.
        if _sign_change(f_a, f_m):
            xmax, f_b = x_m, f_m
        elif _sign_change(f_m, f_b):
            xmin, f_a = x_m, f_m
        else:
            xmax, f_b = x_m, f_m  # Neither side; keep lower half.

        x_m = 0.5 * (xmin + xmax)
        f_m = func(x_m)
        it += 1

        if verbose:
            print(f"... Iteration {it}: x = [{xmin}, {x_m}, {xmax}], "
                  f"f = [{f_a}, {f_m}, {f_b}]")

    return x_m

"""
Options (:mod:`pycalc.options`)
===============================

.. currentmodule:: pycalc.options

Package-wide default values used by the calculus and solver functions
when the corresponding argument is omitted (or passed as `None`).
"""
from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, replace


# ======================================================================


@dataclass(frozen=True, kw_only=True)
class CalcOptions:
    """
    Dataclass that holds default settings for numeric operations.  See
    `get_calc_options` and `set_calc_options` for full details.
    """
    precision: float
    derivative_steps: int
    n_rectangles: int
    bisect_maxits: int
    newton_maxits: int

    def __post_init__(self):
        """Check certain values"""
        if not self.precision > 0:
            raise ValueError("Require 'precision' > 0.")
        if self.derivative_steps < 1:
            raise ValueError("Require 'derivative_steps' >= 1.")
        if self.n_rectangles < 1:
            raise ValueError("Require 'n_rectangles' >= 1.")
        if self.bisect_maxits < 1 or self.newton_maxits < 1:
            raise ValueError("Require 'bisect_maxits' and 'newton_maxits' "
                             ">= 1.")


# Create single instance and set defaults.
_calc_options = CalcOptions(
    precision=1e-16,
    derivative_steps=20,
    n_rectangles=100000,
    bisect_maxits=1100,
    newton_maxits=100
)


# ----------------------------------------------------------------------

def get_calc_options() -> CalcOptions:
    """
    Returns
    -------
    calc_options : CalcOptions
        Returns a copy of the current options.  For a full description
        of each option, see `set_calc_options`.
    """
    return replace(_calc_options)


# noinspection PyIncorrectDocstring
def set_calc_options(**kwargs):
    """
    Set the current default options.  Only the options given are
    changed.

    Parameters
    ----------
    precision : float, default = 1e-16
        Residual :math:`|f(x)|` at which root finders stop.

        .. note:: Values this small are frequently unreachable in
           floating point for roots that are not exactly representable.
           In that case the solvers raise `SolverError` rather than
           looping indefinitely.  Pass a larger `precision` (e.g.
           1e-12) where required.

    derivative_steps : int, default = 20
        Number of step halvings used by `derivative`.  The last step
        size used is :math:`2^{1 - steps}`.

    n_rectangles : int, default = 100000
        Number of rectangles used by `integral_rectangles`.

    bisect_maxits : int, default = 1100
        Iteration limit for bisection.  This is enough to exhaust the
        resolution of any finite double precision interval.

    newton_maxits : int, default = 100
        Iteration limit for Newton's method.

    Raises
    ------
    TypeError
        If an unknown option is given.
    ValueError
        If an option value is illegal.

    See Also
    --------
    get_calc_options, calc_options

    Examples
    --------
    >>> set_calc_options(precision=1e-12)
    >>> get_calc_options().precision
    1e-12
    >>> set_calc_options(precision=1e-16)
    """
    global _calc_options
    _calc_options = replace(_calc_options, **kwargs)


@contextmanager
def calc_options(**kwargs) -> Iterator[CalcOptions]:
    """
    Context manager that temporarily changes the default options,
    restoring the previous options on exit.

    Examples
    --------
    >>> with calc_options(n_rectangles=10) as opts:
    ...     opts.n_rectangles
    10
    >>> get_calc_options().n_rectangles
    100000
    """
    global _calc_options
    previous = _calc_options
    set_calc_options(**kwargs)
    try:
        yield get_calc_options()
    finally:
        _calc_options = previous


# ----------------------------------------------------------------------

def _resolve(name: str, value):
    """Return `value`, or the current default for option `name` if
    `value` is None."""
    if value is None:
        return getattr(_calc_options, name)
    return value

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor, wait

import numpy as np

from pycalc.numeric.solve.bisect_root import bisect_root
from pycalc.options import _resolve

logger = logging.getLogger(__name__)


# ======================================================================

class _RootCollector:
    """Append-only list of roots shared by the scan tasks."""

    def __init__(self):
        self._lock = threading.Lock()
        self._roots: list[float] = []

    def append(self, root: float):
        with self._lock:
            self._roots.append(root)

    def sorted_unique(self) -> list[float]:
        with self._lock:
            return np.unique(np.asarray(self._roots, dtype=float)).tolist()


# ----------------------------------------------------------------------

def bisect_root_many(func: Callable[[float], float], xmin: float,
                     xmax: float, num_intervals: int,
                     precision: float = None, *, maxits: int = None,
                     max_workers: int = None,
                     on_error: str = 'raise') -> list[float]:
    r"""
    Find all roots of `func` on :math:`[x_{min}, x_{max}]` that can be
    bracketed by splitting the domain into `num_intervals` equal-width
    sub-intervals.  `bisect_root` is run on each sub-interval as a
    separate task in a thread pool.

    Each sub-interval contributes at most one root.  Adjacent
    sub-intervals sharing an end point that is an exact root both
    report it, so the combined result has exact duplicates removed.  A
    sub-interval containing an even number of roots (no sign change)
    contributes nothing, so `num_intervals` should be large enough to
    separate the roots of interest.

    Parameters
    ----------
    func : Callable[[float], float]
        Continuous scalar function.  It is called concurrently from
        several threads and so must not rely on shared mutable state.
    xmin, xmax : float
        Ends of the search domain.
    num_intervals : int
        Number of equal-width sub-intervals.
    precision : float, optional
        Passed to `bisect_root`.  If `None`, the current `precision`
        option is used (default = 1e-16).
    maxits : int, optional
        Passed to `bisect_root`.
    max_workers : int, optional
        Maximum number of worker threads.  If `None`, the
        `ThreadPoolExecutor` default is used.
    on_error : {'raise', 'skip'}, default = 'raise'
        Handling of a sub-interval that fails (e.g. `SolverError` from
        `bisect_root` or an exception raised by `func`):

        - 'raise': The scan fails.  All tasks are still allowed to
          finish, then the exception from the lowest failed
          sub-interval is raised.
        - 'skip': A warning is logged and the sub-interval contributes
          nothing.

    Returns
    -------
    list[float]
        Roots found in strictly ascending order, without duplicates.

    Raises
    ------
    ValueError
        If ``num_intervals < 1`` or `on_error` is unknown.

    Examples
    --------
    >>> f = lambda x: x**3 - 6*x**2 + 11*x - 6
    >>> bisect_root_many(f, 0.0, 4.0, 4, precision=1e-12)
    [1.0, 2.0, 3.0]
    """
    if num_intervals < 1:
        raise ValueError("Require num_intervals >= 1.")
    if on_error not in ('raise', 'skip'):
        raise ValueError(f"Unknown on_error option '{on_error}'.")

    # Resolve defaults once so every task sees the same values.
    precision = _resolve('precision', precision)
    maxits = _resolve('bisect_maxits', maxits)

    edges = np.linspace(xmin, xmax, num_intervals + 1).tolist()
    collector = _RootCollector()

    def scan_interval(x_lo: float, x_hi: float):
        root = bisect_root(func, x_lo, x_hi, precision, maxits=maxits)
        logger.debug("Sub-interval [%r, %r] -> %r", x_lo, x_hi, root)
        if root is not None:
            collector.append(root)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: list[Future] = [
            executor.submit(scan_interval, x_lo, x_hi)
            for x_lo, x_hi in zip(edges[:-1], edges[1:])]
        wait(futures)

    for i, future in enumerate(futures):
        exc = future.exception()
        if exc is None:
            continue
        if on_error == 'raise':
            raise exc
        logger.warning("Skipped sub-interval [%r, %r]: %s", edges[i],
                       edges[i + 1], exc)

    return collector.sorted_unique()

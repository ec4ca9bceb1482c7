#!/usr/bin/env python3

# Examples of root finding on polynomials, saving the function to a
# data file for plotting.

import logging

import numpy as np

from pycalc.data import DataFile
from pycalc.numeric import (bisect_root, bisect_root_many, derivative,
                            integral_rectangles, newton_root)


def cubic(x):
    """Roots at x = 1, 2, 3."""
    return x ** 3 - 6 * x ** 2 + 11 * x - 6


logging.basicConfig(level=logging.DEBUG)

# Single roots.
print(f"Bisection on [2.5, 3.5]: x = "
      f"{bisect_root(cubic, 2.5, 3.5, precision=1e-12, verbose=True)}")
print(f"Newton from x0 = 4.0: x = "
      f"{newton_root(cubic, 4.0, precision=1e-12, verbose=True)}")

# All roots on [-0.3, 4.1].
roots = bisect_root_many(cubic, -0.3, 4.1, 50, precision=1e-12)
print(f"\nRoots: {roots}")
print(f"Slopes: {[derivative(cubic, r) for r in roots]}")
print(f"Area between first two roots: "
      f"{integral_rectangles(cubic, roots[0], roots[1])}")

with DataFile('cubic.dat') as out:
    out.write_rows((x, cubic(x)) for x in np.linspace(-0.3, 4.1, 89))

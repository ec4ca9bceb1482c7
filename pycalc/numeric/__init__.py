"""
Numeric (:mod:`pycalc.numeric`)
===============================

.. currentmodule:: pycalc.numeric

Numeric calculus of scalar functions of a single variable.

.. autosummary::
    :toctree:

    calculus
    solve

"""
from .calculus import derivative, integral_rectangles
from .solve import (SolverError, bisect_root, bisect_root_many,
                    has_sign_change, newton_root)

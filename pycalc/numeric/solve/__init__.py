"""
======================================
Solvers (:mod:`pycalc.numeric.solve`)
======================================

.. currentmodule:: pycalc.numeric.solve

Functions for finding roots of scalar functions of a single variable.

Functions
---------

.. autosummary::
    :toctree:

    bisect_root
    bisect_root_many
    has_sign_change
    newton_root

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError

"""

from .exception import SolverError
from .bisect_root import bisect_root, has_sign_change
from .bisect_many import bisect_root_many
from .newton_root import newton_root

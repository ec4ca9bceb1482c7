"""
.. This module acts as the top-level API documentation.

.. module: pycalc

.. autosummary::
    :toctree: generated/

    data
    numeric
    options

"""

__version__ = "0.1.0"

from .options import calc_options, get_calc_options, set_calc_options

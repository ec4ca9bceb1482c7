"""
Functions relating to saving numeric results.
"""

from .datafile import DataFile

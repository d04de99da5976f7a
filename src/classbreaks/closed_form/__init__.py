"""
Module: closed_form

Purpose:
    Classifiers with a direct formula per boundary and no search:
    equal interval and quantile (incl. quartile).

Key Functions:
    - get_equal_interval(): Equal-width classes over [min, max]
    - get_quantile(): Equal-count classes over sorted data
    - get_quartile(): Quantile with 4 classes
"""

from .equal_interval import get_equal_interval
from .quantile import get_quantile, get_quartile

__all__ = [
    "get_equal_interval",
    "get_quantile",
    "get_quartile",
]

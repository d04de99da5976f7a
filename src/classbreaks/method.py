"""
Module: method

Purpose:
    Enum naming the available classification strategies.

Key Classes:
    - ClassificationMethod: EQUAL_INTERVAL, QUANTILE or JENKS

Used By:
    - config: ClassificationConfig
    - controller: classify() dispatch
"""

from enum import Enum, auto


class ClassificationMethod(Enum):
    """
    Strategy used to place class boundaries.

    Attributes:
        EQUAL_INTERVAL: Equal-width classes over [min, max]. Closed form.
        QUANTILE: Equal-count classes over sorted data. Closed form.
        JENKS: Natural breaks minimising within-class variance, found by
               exhaustive search over every contiguous partition.

    Example:
        >>> ClassificationMethod["JENKS"] is ClassificationMethod.JENKS
        True
    """

    EQUAL_INTERVAL = auto()
    QUANTILE = auto()
    JENKS = auto()

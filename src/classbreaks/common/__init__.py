"""Common utilities shared across the package."""

from __future__ import annotations

from .combinatorics import choose, naive_choose, factorial
from .thresholds import JenksThresholds, JENKS_THRESHOLDS
from .datasets import ALL_STATES_S1701, ALL_STATES_S1701_SORTED

__all__ = [
    # combinatorics
    "choose",
    "naive_choose",
    "factorial",
    # thresholds
    "JenksThresholds",
    "JENKS_THRESHOLDS",
    # datasets
    "ALL_STATES_S1701",
    "ALL_STATES_S1701_SORTED",
]

"""
Core Models Package

Immutable, validated value types shared by every classifier.

All models are frozen dataclasses: a classification result is built once
and only ever converted (Breaks <-> Ranges), never edited in place.
"""

from .ranges import RangeStyle, DataRange, Breaks, Ranges
from .partition import ClassSlice, Partition, ScoredPartition

__all__ = [
    "RangeStyle",
    "DataRange",
    "Breaks",
    "Ranges",
    "ClassSlice",
    "Partition",
    "ScoredPartition",
]

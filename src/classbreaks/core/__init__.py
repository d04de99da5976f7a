"""
classbreaks Core Package

Data models for classification output and Jenks candidates.
"""

from .models import (
    RangeStyle,
    DataRange,
    Breaks,
    Ranges,
    ClassSlice,
    Partition,
    ScoredPartition,
)

__all__ = [
    "RangeStyle",
    "DataRange",
    "Breaks",
    "Ranges",
    "ClassSlice",
    "Partition",
    "ScoredPartition",
]

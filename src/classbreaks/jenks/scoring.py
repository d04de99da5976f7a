"""
Module: jenks.scoring

Purpose:
    Goodness of variance fit (GVF) for a candidate partition.

    SDAM: squared deviations of all data from the array mean
    SDCM: squared deviations of each class from its own mean
    GVF = (SDAM - SDCM) / SDAM

    GVF is 1.0 when every class is constant and drops towards 0 (or
    below) as within-class variance approaches the overall variance.

Key Functions:
    - sdam(): Whole-dataset squared deviation
    - sdcm(): Single-class squared deviation
    - sdcm_total(): Sum of sdcm over a partition
    - gvf(): Goodness of variance fit

Numeric Notes:
    The mean is sum / count with the sum taken in the input's own domain,
    so integer data is summed exactly before the single division. All
    later arithmetic is float. NaN and inf inputs are not special-cased.

Used By:
    - jenks.policies
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from classbreaks.core.models import Partition


def _squared_deviation(values: Sequence[float]) -> float:
    mean = sum(values) / len(values)
    return sum((x - mean) ** 2 for x in values)


def sdam(data: Sequence[float]) -> float:
    """
    Sum of squared deviations from the array mean.

    Args:
        data: Full dataset (non-empty; not checked)

    Returns:
        SDAM as a float

    Example:
        >>> sdam([4, 5, 9, 10])
        26.0
    """
    return _squared_deviation(data)


def sdcm(values: Sequence[float]) -> float:
    """
    Sum of squared deviations from one class's own mean.

    Args:
        values: Members of a single class (non-empty; not checked)

    Returns:
        SDCM for the class, 0.0 for a single value
    """
    return _squared_deviation(values)


def sdcm_total(classes: Partition | Iterable[Sequence[float]]) -> float:
    """
    Sum of SDCM across all classes.

    Args:
        classes: A Partition, or any iterable of class value sequences

    Returns:
        Total within-class squared deviation
    """
    return sum(sdcm(values) for values in classes)


def gvf(
    full_data: Sequence[float],
    classes: Partition | Iterable[Sequence[float]],
    *,
    sdam_value: float | None = None,
) -> float:
    """
    Goodness of variance fit of a classification.

    Args:
        full_data: The complete dataset the classes were cut from
        classes: A Partition, or any iterable of class value sequences
        sdam_value: Precomputed sdam(full_data); saves recomputing it
            for every candidate of the same dataset

    Returns:
        (SDAM - SDCM) / SDAM; nan when SDAM is 0 (all values identical)

    Example:
        >>> gvf([4, 5, 9, 10], [[4, 5], [9, 10]])
        0.9615384615384616
    """
    total = sdam(full_data) if sdam_value is None else sdam_value
    if total == 0:
        # 0/0: constant data has no variance to explain
        return math.nan
    return (total - sdcm_total(classes)) / total

"""
Module: closed_form.quantile

Purpose:
    Quantile classification: boundaries are data values at evenly
    spaced ranks, so each class holds roughly the same number of values.

Key Functions:
    - get_quantile(): k-quantile boundaries of sorted data
    - get_quartile(): Quantile fixed at k = 4

Rank Rule:
    Boundary i is the value at index ceil(i * n / k) - 1, clamped to 0.
    The ceiling is taken in integer arithmetic so boundaries that land
    exactly on a rank never drift by one through float rounding.

Dependencies:
    - numpy: Array input

Used By:
    - controller: classify()
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from classbreaks.core.models import Breaks

logger = logging.getLogger(__name__)


def _rank_index(i: int, length: int, num_classes: int) -> int:
    item_index = -(-i * length // num_classes)  # ceil(i * n / k)
    return max(item_index - 1, 0)


def get_quantile(
    sorted_data: Sequence[float] | np.ndarray,
    num_classes: int,
) -> Optional[Breaks]:
    """
    Compute quantile class boundaries.

    Args:
        sorted_data: Values sorted ascending (not checked)
        num_classes: Number of classes (>= 1)

    Returns:
        Breaks of num_classes + 1 data values, or None when there are
        fewer values than classes

    Raises:
        ValueError: If num_classes < 1

    Example:
        >>> get_quantile([1.0, 2.0, 3.0, 4.0], 2)
        Breaks(values=(1.0, 2.0, 4.0))
    """
    if num_classes < 1:
        raise ValueError(f"num_classes must be positive: {num_classes}")

    values = np.asarray(sorted_data, dtype=np.float64)
    length = int(values.size)
    if length < num_classes:
        logger.debug(f"{length} values cannot fill {num_classes} classes")
        return None

    return Breaks(tuple(
        float(values[_rank_index(i, length, num_classes)])
        for i in range(num_classes + 1)
    ))


def get_quartile(sorted_data: Sequence[float] | np.ndarray) -> Optional[Breaks]:
    """Quartile boundaries (quantile with 4 classes)."""
    return get_quantile(sorted_data, 4)

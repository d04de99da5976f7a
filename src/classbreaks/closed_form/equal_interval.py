"""
Module: closed_form.equal_interval

Purpose:
    Equal-interval classification: split [min, max] into k classes of
    equal width.

Key Functions:
    - get_equal_interval(): k + 1 evenly spaced boundaries

Dependencies:
    - numpy: min/max over lists or arrays

Used By:
    - controller: classify()
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from classbreaks.core.models import Breaks

logger = logging.getLogger(__name__)


def get_equal_interval(
    data: Sequence[float] | np.ndarray,
    num_classes: int,
) -> Optional[Breaks]:
    """
    Compute equal-width class boundaries.

    Input need not be sorted.

    Args:
        data: Values to classify
        num_classes: Number of classes (>= 1)

    Returns:
        Breaks of num_classes + 1 values min + step * i, or None when
        there are fewer values than classes

    Raises:
        ValueError: If num_classes < 1

    Example:
        >>> get_equal_interval([1.0, 3.0], 2)
        Breaks(values=(1.0, 2.0, 3.0))
    """
    if num_classes < 1:
        raise ValueError(f"num_classes must be positive: {num_classes}")

    values = np.asarray(data, dtype=np.float64)
    if values.size < num_classes:
        logger.debug(f"{values.size} values cannot fill {num_classes} classes")
        return None

    lo = float(values.min())
    hi = float(values.max())
    step = (hi - lo) / num_classes

    return Breaks(tuple(lo + step * i for i in range(num_classes + 1)))

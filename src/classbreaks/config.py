"""
Module: config

Purpose:
    Configuration dataclass for classify(). Immutable configuration with
    validation on construction.

Key Classes:
    - ClassificationConfig: Method, class count and Jenks tolerance

Dependencies:
    - dataclasses (std)

Used By:
    - controller: classify()
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .method import ClassificationMethod


@dataclass(frozen=True)
class ClassificationConfig:
    """
    Configuration for a classification run (immutable).

    Attributes:
        num_classes: Number of classes to produce
        method: Classification strategy
        tolerance: Jenks only. When set, accept the first enumerated
            partition with GVF >= tolerance instead of searching for the
            best one
        sort_input: Sort a copy of the data before classifying. The
            classifiers themselves never sort.

    Invariants:
        - num_classes >= 1
        - tolerance is None or a number (not nan)
        - tolerance is only set for JENKS

    Example:
        >>> config = ClassificationConfig(num_classes=5, tolerance=0.9)
        >>> config.uses_tolerance
        True
    """

    num_classes: int
    method: ClassificationMethod = ClassificationMethod.JENKS
    tolerance: Optional[float] = None
    sort_input: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.num_classes < 1:
            raise ValueError(f"num_classes must be positive: {self.num_classes}")
        if self.tolerance is not None:
            if math.isnan(self.tolerance):
                raise ValueError("tolerance must be a number, got nan")
            if self.method is not ClassificationMethod.JENKS:
                raise ValueError(
                    f"tolerance only applies to JENKS, not {self.method.name}"
                )

    @property
    def uses_tolerance(self) -> bool:
        """Whether Jenks should stop at the first partition meeting the tolerance."""
        return self.method is ClassificationMethod.JENKS and self.tolerance is not None

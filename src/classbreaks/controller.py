"""
Module: controller

Purpose:
    Orchestrate a classification run end to end.
    Validate → (Sort) → Classify → Breaks

Key Functions:
    - classify(): Main entry point; dispatches on ClassificationMethod

Key Classes:
    - ClassificationResult: Breaks plus run metadata
    - ClassificationError: Raised when a strategy yields no result

Dependencies:
    - closed_form: Equal interval and quantile
    - jenks: Exhaustive natural breaks

Used By:
    - scripts/classify_demo.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from classbreaks.closed_form import get_equal_interval, get_quantile
from classbreaks.core.models import Breaks, Ranges
from classbreaks.jenks import (
    candidate_count,
    find_jenks_above_tolerance,
    get_best_jenks,
)

from .config import ClassificationConfig
from .method import ClassificationMethod
from .timing import TimingLog, timed_phase

logger = logging.getLogger(__name__)


class ClassificationError(Exception):
    """Error during classification."""
    pass


@dataclass(frozen=True)
class ClassificationResult:
    """
    Complete classification result (immutable).

    Attributes:
        method: Strategy that produced the breaks
        breaks: Class boundaries (num_classes + 1 values)
        gvf: Goodness of variance fit (JENKS only)
        candidate_count: Size of the full Jenks search space, C(n-1, k-1)
            (JENKS only). A tolerance scan can stop after far fewer.
        timings: Per-phase durations

    Example:
        >>> result = classify([4, 5, 9, 10], ClassificationConfig(num_classes=2))
        >>> result.breaks
        Breaks(values=(4, 9, 10))
    """
    method: ClassificationMethod
    breaks: Breaks
    gvf: Optional[float] = None
    candidate_count: Optional[int] = None
    timings: Optional[TimingLog] = None

    @property
    def num_classes(self) -> int:
        """Number of classes."""
        return self.breaks.num_classes

    @property
    def ranges(self) -> Ranges:
        """Breaks as explicit class intervals."""
        return self.breaks.to_ranges()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        d: dict[str, Any] = {
            "method": self.method.name.lower(),
            "num_classes": self.num_classes,
            **self.breaks.to_dict(),
            **self.ranges.to_dict(),
        }
        if self.gvf is not None:
            d["gvf"] = self.gvf
        if self.candidate_count is not None:
            d["candidate_count"] = self.candidate_count
        if self.timings is not None:
            d["timings"] = self.timings.to_dict()
        return d


def classify(
    data: Sequence[Any],
    config: ClassificationConfig,
) -> ClassificationResult:
    """
    Classify data into config.num_classes classes.

    Pipeline:
    1. Optionally sort a copy of the data
    2. Run the configured strategy
    3. Wrap the boundaries in a ClassificationResult

    Args:
        data: Values to classify; must already be sorted ascending
            unless config.sort_input is set (EQUAL_INTERVAL ignores order)
        config: Classification configuration

    Returns:
        ClassificationResult with breaks and metadata

    Raises:
        ClassificationError: If there are fewer values than classes, or
            no Jenks partition reaches the configured tolerance

    Example:
        >>> config = ClassificationConfig(
        ...     num_classes=4,
        ...     method=ClassificationMethod.QUANTILE,
        ...     sort_input=True,
        ... )
        >>> classify(values, config).breaks
    """
    timings = TimingLog()
    method = config.method

    logger.info(
        f"Classifying {len(data)} values into {config.num_classes} classes "
        f"using {method.name}"
    )

    if len(data) < config.num_classes:
        raise ClassificationError(
            f"Cannot build {config.num_classes} classes from {len(data)} values"
        )

    if config.sort_input:
        with timed_phase(timings, "sort_input"):
            data = sorted(data)

    gvf: Optional[float] = None
    count: Optional[int] = None

    if method is ClassificationMethod.EQUAL_INTERVAL:
        with timed_phase(timings, "equal_interval"):
            breaks = get_equal_interval(data, config.num_classes)

    elif method is ClassificationMethod.QUANTILE:
        with timed_phase(timings, "quantile"):
            breaks = get_quantile(data, config.num_classes)

    elif method is ClassificationMethod.JENKS:
        count = candidate_count(len(data), config.num_classes)
        breaks, gvf = _classify_jenks(data, config, timings)

    else:
        raise ClassificationError(f"Unsupported classification method: {method}")

    if breaks is None:
        raise ClassificationError(
            f"{method.name} produced no breaks for {len(data)} values "
            f"and {config.num_classes} classes"
        )

    logger.info(
        f"{method.name}: {breaks.num_classes} classes in {timings.total:.3f}s"
        + (f", GVF={gvf:.4f}" if gvf is not None else "")
    )

    return ClassificationResult(
        method=method,
        breaks=breaks,
        gvf=gvf,
        candidate_count=count,
        timings=timings,
    )


def _classify_jenks(
    data: Sequence[Any],
    config: ClassificationConfig,
    timings: TimingLog,
) -> tuple[Breaks, float]:
    """Run the Jenks search selected by config, returning breaks and GVF."""
    if config.uses_tolerance:
        with timed_phase(timings, "jenks_tolerance_scan"):
            found = find_jenks_above_tolerance(data, config.num_classes, config.tolerance)
        if found is None:
            raise ClassificationError(
                f"No {config.num_classes}-class partition reaches GVF {config.tolerance}"
            )
        return found.partition.to_breaks(), found.gvf

    with timed_phase(timings, "jenks_search"):
        best = get_best_jenks(data, config.num_classes)
    if best is None:
        raise ClassificationError(
            f"Cannot build {config.num_classes} classes from {len(data)} values"
        )
    return best.partition.to_breaks(), best.gvf

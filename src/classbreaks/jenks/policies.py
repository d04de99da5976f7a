"""
Module: jenks.policies

Purpose:
    Jenks natural breaks by exhaustive search. Every candidate partition
    is scored by GVF and one of three policies picks the result.

Key Functions:
    - get_best_jenks(): Highest-GVF partition
    - get_all_possible_jenks(): Every partition, ranked by GVF descending
    - get_jenks_above_tolerance(): First partition in enumeration order
      whose GVF reaches a tolerance
    - find_jenks_above_tolerance(): The same scan, returning the score too

Ordering Rules:
    - Ties in get_best_jenks go to the partition enumerated first.
    - get_all_possible_jenks uses a stable sort in which scores that do
      not compare (nan) count as equal, so it never raises on nan.
    - get_jenks_above_tolerance scans in enumeration order, not score
      order. Its answer is "a good enough partition", not the best one
      above the tolerance.

Dependencies:
    - jenks.generator: Candidate enumeration
    - jenks.scoring: GVF

Used By:
    - controller: classify()
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import Any, List, Optional, Sequence

from classbreaks.common.thresholds import JENKS_THRESHOLDS
from classbreaks.core.models import Partition, ScoredPartition

from .generator import generate_partitions, iter_partitions
from .scoring import gvf, sdam

logger = logging.getLogger(__name__)


def _has_enough_data(data: Sequence[Any], num_classes: int) -> bool:
    """Shared precondition for every policy."""
    if num_classes < 1:
        raise ValueError(f"num_classes must be positive: {num_classes}")
    if len(data) < num_classes:
        logger.debug(f"{len(data)} values cannot fill {num_classes} classes")
        return False
    return True


def _score_all(data: Sequence[Any], num_classes: int) -> List[ScoredPartition]:
    """Score every candidate, preserving enumeration order."""
    total = sdam(data)
    return [
        ScoredPartition(partition=p, gvf=gvf(data, p, sdam_value=total))
        for p in generate_partitions(data, num_classes)
    ]


def _by_gvf_descending(a: ScoredPartition, b: ScoredPartition) -> int:
    if a.gvf > b.gvf:
        return -1
    if a.gvf < b.gvf:
        return 1
    # Equal or incomparable (nan)
    return 0


def get_all_possible_jenks(
    sorted_data: Sequence[Any],
    num_classes: int,
) -> List[ScoredPartition]:
    """
    Score and rank every candidate partition.

    Args:
        sorted_data: Data sorted ascending (not checked)
        num_classes: Number of classes

    Returns:
        All ScoredPartitions, GVF descending; ties keep enumeration order.
        Empty when there are fewer values than classes.

    Raises:
        ValueError: If num_classes < 1

    Example:
        >>> ranked = get_all_possible_jenks([4, 5, 9, 10], 2)
        >>> ranked[0].partition.classes
        ((4, 5), (9, 10))
    """
    if not _has_enough_data(sorted_data, num_classes):
        return []

    ranked = sorted(_score_all(sorted_data, num_classes), key=cmp_to_key(_by_gvf_descending))

    preview = ranked[:JENKS_THRESHOLDS.ranked_log_preview]
    for idx, scored in enumerate(preview):
        logger.debug(f"#{idx + 1} GVF={scored.gvf:.6f} {scored.partition!r}")
    return ranked


def get_best_jenks(
    sorted_data: Sequence[Any],
    num_classes: int,
) -> Optional[ScoredPartition]:
    """
    Find the partition with the highest GVF.

    Args:
        sorted_data: Data sorted ascending (not checked)
        num_classes: Number of classes

    Returns:
        Best ScoredPartition (first enumerated wins ties), or None when
        there are fewer values than classes

    Raises:
        ValueError: If num_classes < 1

    Example:
        >>> best = get_best_jenks([4, 5, 9, 10], 2)
        >>> round(best.gvf, 4)
        0.9615
    """
    if not _has_enough_data(sorted_data, num_classes):
        return None

    best: Optional[ScoredPartition] = None
    for scored in _score_all(sorted_data, num_classes):
        if best is None or scored.gvf > best.gvf:
            best = scored

    logger.debug(f"Best GVF={best.gvf:.6f} for {num_classes} classes")
    return best


def find_jenks_above_tolerance(
    sorted_data: Sequence[Any],
    num_classes: int,
    tolerance: float,
) -> Optional[ScoredPartition]:
    """
    Scored form of get_jenks_above_tolerance().

    Same scan and stopping rule, but the accepted partition comes back
    with the GVF the scan already computed for it.

    Returns:
        First qualifying ScoredPartition in enumeration order, or None if
        none qualifies or there are fewer values than classes

    Raises:
        ValueError: If num_classes < 1
    """
    if not _has_enough_data(sorted_data, num_classes):
        return None

    total = sdam(sorted_data)
    for scanned, partition in enumerate(iter_partitions(sorted_data, num_classes), start=1):
        score = gvf(sorted_data, partition, sdam_value=total)
        if score >= tolerance:
            logger.debug(f"GVF={score:.6f} >= {tolerance} after {scanned} candidates")
            return ScoredPartition(partition=partition, gvf=score)

    logger.debug(f"No partition reached GVF {tolerance}")
    return None


def get_jenks_above_tolerance(
    sorted_data: Sequence[Any],
    num_classes: int,
    tolerance: float,
) -> Optional[Partition]:
    """
    Return the first enumerated partition whose GVF reaches `tolerance`.

    Stops at the first match, so it can be far cheaper than a full
    ranking when any sufficiently good classification will do.

    Args:
        sorted_data: Data sorted ascending (not checked)
        num_classes: Number of classes
        tolerance: Minimum acceptable GVF (inclusive)

    Returns:
        First qualifying Partition in enumeration order, or None if none
        qualifies or there are fewer values than classes

    Raises:
        ValueError: If num_classes < 1

    Example:
        >>> get_jenks_above_tolerance([4, 5, 9, 10], 2, 0.9).classes
        ((4, 5), (9, 10))
    """
    found = find_jenks_above_tolerance(sorted_data, num_classes, tolerance)
    return found.partition if found is not None else None

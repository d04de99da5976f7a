"""
Module: jenks.generator

Purpose:
    Enumerate every way of splitting a sorted sequence into k contiguous,
    non-empty classes. This is the exhaustive candidate set searched by
    the Jenks policies.

Key Functions:
    - candidate_count(): Number of partitions for (n, k)
    - iter_partitions(): Lazily yield partitions in enumeration order
    - generate_partitions(): Materialize all partitions in a pre-sized list

Algorithm:
    Cut indices are chosen with itertools.combinations over 0..n-2, so
    the enumeration order is lexicographic in the cut indices. A cut at
    index c closes a class with data[c]; the next class opens at c + 1.
    Anchored by 0 and n - 1 this gives classes
        [0, c1], [c1 + 1, c2], ..., [c_{k-1} + 1, n - 1]
    (all inclusive), which tile the data with no element repeated or
    dropped. There are C(n - 1, k - 1) such partitions; no pruning.

Dependencies:
    - itertools (std)
    - common.combinatorics: choose
    - core.models: ClassSlice, Partition

Used By:
    - jenks.policies: Best, ranked and tolerance selection
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Any, Iterator, List, Optional, Sequence

from classbreaks.common.combinatorics import choose
from classbreaks.common.thresholds import JENKS_THRESHOLDS
from classbreaks.core.models import ClassSlice, Partition

logger = logging.getLogger(__name__)


def candidate_count(length: int, num_classes: int) -> int:
    """
    Number of contiguous partitions of `length` values into `num_classes`.

    Args:
        length: Number of data values (>= num_classes)
        num_classes: Number of classes (>= 1)

    Returns:
        C(length - 1, num_classes - 1)

    Example:
        >>> candidate_count(4, 2)
        3
    """
    return choose(length - 1, num_classes - 1)


def _slices_for_cuts(cuts: Sequence[int], length: int) -> tuple[ClassSlice, ...]:
    """
    Convert inclusive cut indices into half-open class slices.

    Args:
        cuts: Strictly increasing cut indices in [0, length - 2]
        length: Number of data values

    Returns:
        One ClassSlice per class
    """
    boundaries = [0, *cuts, length - 1]
    slices = []
    for slice_idx, (prev_idx, cur_idx) in enumerate(zip(boundaries, boundaries[1:])):
        if slice_idx == 0:
            # First class includes the anchor at index 0
            slices.append(ClassSlice(prev_idx, cur_idx + 1))
        else:
            # Later classes start after the previous cut
            slices.append(ClassSlice(prev_idx + 1, cur_idx + 1))
    return tuple(slices)


def iter_partitions(
    sorted_data: Sequence[Any],
    num_classes: int,
) -> Iterator[Partition]:
    """
    Lazily yield every contiguous partition in enumeration order.

    Same partitions, same order as generate_partitions(), without holding
    the candidate set in memory. Used where a scan can stop early.

    Args:
        sorted_data: Data sorted ascending (not checked)
        num_classes: Number of classes, 1 <= num_classes <= len(sorted_data)

    Yields:
        Partition objects sharing one copy of the data
    """
    data = tuple(sorted_data)
    length = len(data)
    for cuts in combinations(range(length - 1), num_classes - 1):
        yield Partition(data=data, slices=_slices_for_cuts(cuts, length))


def generate_partitions(
    sorted_data: Sequence[Any],
    num_classes: int,
) -> List[Partition]:
    """
    Materialize every contiguous partition of the data.

    The result list is allocated up front from candidate_count() and
    filled in enumeration order.

    Args:
        sorted_data: Data sorted ascending (not checked)
        num_classes: Number of classes, 1 <= num_classes <= len(sorted_data)

    Returns:
        All C(n - 1, k - 1) partitions, lexicographic by cut indices

    Note:
        Cost is combinatorial in both time and memory. Callers are
        responsible for keeping n and k small enough; the size is only
        reported, never limited.

    Example:
        >>> [p.classes for p in generate_partitions([4, 5, 9, 10], 2)]
        [((4,), (5, 9, 10)), ((4, 5), (9, 10)), ((4, 5, 9), (10,))]
    """
    count = candidate_count(len(sorted_data), num_classes)
    if count > JENKS_THRESHOLDS.large_candidate_warning:
        logger.warning(
            f"Enumerating {count} candidate partitions "
            f"({len(sorted_data)} values, {num_classes} classes); this may be slow"
        )
    else:
        logger.debug(
            f"Enumerating {count} candidate partitions "
            f"({len(sorted_data)} values, {num_classes} classes)"
        )

    results: List[Optional[Partition]] = [None] * count
    for combo_idx, partition in enumerate(iter_partitions(sorted_data, num_classes)):
        results[combo_idx] = partition
    return results

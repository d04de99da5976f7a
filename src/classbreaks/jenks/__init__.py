"""
Module: jenks

Purpose:
    Jenks natural breaks by exhaustive enumeration. Every contiguous
    k-way partition of the sorted data is generated, scored by goodness
    of variance fit and selected by one of three policies.

Key Functions:
    - get_best_jenks(): Maximum-GVF partition
    - get_all_possible_jenks(): All partitions ranked by GVF
    - get_jenks_above_tolerance(): First partition reaching a GVF tolerance
    - generate_partitions(): Candidate enumeration
    - gvf(): Goodness of variance fit

Dependencies:
    - classbreaks.core.models: Partition, ScoredPartition
    - classbreaks.common.combinatorics: Candidate counts

Used By:
    - classbreaks.controller: classify()
"""

from .generator import candidate_count, generate_partitions, iter_partitions
from .scoring import gvf, sdam, sdcm, sdcm_total
from .policies import (
    find_jenks_above_tolerance,
    get_all_possible_jenks,
    get_best_jenks,
    get_jenks_above_tolerance,
)

__all__ = [
    "candidate_count",
    "generate_partitions",
    "iter_partitions",
    "gvf",
    "sdam",
    "sdcm",
    "sdcm_total",
    "find_jenks_above_tolerance",
    "get_all_possible_jenks",
    "get_best_jenks",
    "get_jenks_above_tolerance",
]

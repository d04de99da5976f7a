"""
Unit tests for the Jenks selection policies.
"""

import math

import pytest

from classbreaks.jenks.generator import generate_partitions
from classbreaks.jenks.policies import (
    find_jenks_above_tolerance,
    get_all_possible_jenks,
    get_best_jenks,
    get_jenks_above_tolerance,
)
from classbreaks.jenks.scoring import gvf


@pytest.fixture
def clustered_data() -> list[int]:
    """Three visible clusters."""
    return [1, 2, 3, 10, 11, 12, 30, 31]


class TestGetBestJenks:
    """Tests for get_best_jenks()."""

    def test_best_when_small_data_then_natural_split(self, small_data):
        """[4, 5] / [9, 10] is the best two-class split."""
        best = get_best_jenks(small_data, 2)

        assert best is not None
        assert best.partition.classes == ((4, 5), (9, 10))
        assert best.gvf == 0.9615384615384616

    def test_best_when_compared_to_all_candidates_then_not_beaten(self, clustered_data):
        """No candidate scores higher than the returned one."""
        best = get_best_jenks(clustered_data, 3)

        for partition in generate_partitions(clustered_data, 3):
            assert best.gvf >= gvf(clustered_data, partition)
        assert best.partition.classes == ((1, 2, 3), (10, 11, 12), (30, 31))

    def test_best_when_tied_then_first_enumerated_wins(self):
        """Symmetric data ties [1] | [2, 3] with [1, 2] | [3]."""
        best = get_best_jenks([1, 2, 3], 2)
        assert best.partition.classes == ((1,), (2, 3))

    def test_best_when_too_few_values_then_none(self):
        """Fewer values than classes is not an error."""
        assert get_best_jenks([1], 2) is None
        assert get_best_jenks([], 1) is None

    def test_best_when_length_equals_classes_then_perfect_fit(self):
        """Singleton classes have no within-class variance."""
        best = get_best_jenks([1, 4, 9], 3)
        assert best.gvf == 1.0
        assert best.partition.classes == ((1,), (4,), (9,))

    def test_best_when_zero_classes_then_raises_error(self, small_data):
        """num_classes must be positive."""
        with pytest.raises(ValueError, match="num_classes must be positive"):
            get_best_jenks(small_data, 0)


class TestGetAllPossibleJenks:
    """Tests for get_all_possible_jenks()."""

    def test_ranked_when_small_data_then_descending(self, small_data):
        """Best first; ties keep enumeration order."""
        ranked = get_all_possible_jenks(small_data, 2)

        assert [s.partition.classes for s in ranked] == [
            ((4, 5), (9, 10)),
            ((4,), (5, 9, 10)),
            ((4, 5, 9), (10,)),
        ]
        assert [s.gvf for s in ranked] == [
            0.9615384615384616,
            0.46153846153846156,
            0.46153846153846156,
        ]

    def test_ranked_when_many_candidates_then_sorted_and_complete(self, clustered_data):
        """Every candidate appears once, scores non-increasing."""
        ranked = get_all_possible_jenks(clustered_data, 3)
        scores = [s.gvf for s in ranked]

        assert len(ranked) == len(generate_partitions(clustered_data, 3))
        assert scores == sorted(scores, reverse=True)
        assert ranked[0] == get_best_jenks(clustered_data, 3)

    def test_ranked_when_scores_nan_then_no_error_and_generator_order(self):
        """Constant data scores nan everywhere; order is preserved."""
        ranked = get_all_possible_jenks([7, 7, 7, 7], 2)

        assert len(ranked) == 3
        assert all(math.isnan(s.gvf) for s in ranked)
        assert [s.partition for s in ranked] == generate_partitions([7, 7, 7, 7], 2)

    def test_ranked_when_too_few_values_then_empty(self):
        """Fewer values than classes gives an empty ranking."""
        assert get_all_possible_jenks([1, 2], 3) == []


class TestGetJenksAboveTolerance:
    """Tests for get_jenks_above_tolerance()."""

    def test_tolerance_when_reachable_then_first_match(self, small_data):
        """Only [4, 5] / [9, 10] clears 0.9."""
        result = get_jenks_above_tolerance(small_data, 2, 0.9)
        assert result.classes == ((4, 5), (9, 10))

    def test_tolerance_when_low_then_first_enumerated_not_best(self, small_data):
        """The scan stops at the first candidate, even if a better one follows."""
        result = get_jenks_above_tolerance(small_data, 2, 0.4)
        assert result.classes == ((4,), (5, 9, 10))

    def test_tolerance_when_exactly_met_then_accepted(self, small_data):
        """The comparison is inclusive."""
        result = get_jenks_above_tolerance(small_data, 2, 0.9615384615384616)
        assert result.classes == ((4, 5), (9, 10))

    def test_tolerance_when_unreachable_then_none(self, small_data):
        """No partition beats a perfect fit on non-constant data."""
        assert get_jenks_above_tolerance(small_data, 2, 0.99) is None

    def test_tolerance_when_too_few_values_then_none(self):
        """Fewer values than classes gives no result."""
        assert get_jenks_above_tolerance([1, 2], 3, 0.0) is None

    def test_find_when_reachable_then_scored_first_match(self, small_data):
        """The scored scan returns the same partition with its GVF."""
        found = find_jenks_above_tolerance(small_data, 2, 0.4)

        assert found.partition.classes == ((4,), (5, 9, 10))
        assert found.gvf == gvf(small_data, found.partition)
        assert found.gvf == 0.46153846153846156

    def test_find_when_unreachable_then_none(self, small_data):
        """No qualifying partition gives None."""
        assert find_jenks_above_tolerance(small_data, 2, 0.99) is None

"""
Unit tests for jenks.generator.
"""

import logging

import pytest

from classbreaks.common.combinatorics import choose
from classbreaks.common.thresholds import JENKS_THRESHOLDS
from classbreaks.jenks.generator import (
    candidate_count,
    generate_partitions,
    iter_partitions,
)


class TestGeneratePartitions:
    """Tests for generate_partitions()."""

    def test_generate_when_four_values_two_classes_then_three_in_order(self, small_data):
        """Cuts are enumerated lexicographically."""
        result = generate_partitions(small_data, 2)

        assert [p.classes for p in result] == [
            ((4,), (5, 9, 10)),
            ((4, 5), (9, 10)),
            ((4, 5, 9), (10,)),
        ]

    @pytest.mark.parametrize("length,num_classes", [
        (1, 1), (4, 1), (4, 2), (5, 3), (6, 4), (7, 7), (8, 3),
    ])
    def test_generate_when_any_shape_then_count_is_binomial(self, length, num_classes):
        """There are C(n - 1, k - 1) contiguous partitions."""
        data = list(range(length))
        result = generate_partitions(data, num_classes)
        assert len(result) == choose(length - 1, num_classes - 1)
        assert len(result) == candidate_count(length, num_classes)
        assert all(p is not None for p in result)

    @pytest.mark.parametrize("num_classes", [1, 2, 3, 4, 5])
    def test_generate_when_concatenated_then_reproduces_data(self, num_classes):
        """No element is dropped or duplicated across a cut."""
        data = [1, 2, 4, 8, 16, 32]
        for partition in generate_partitions(data, num_classes):
            flattened = [v for values in partition for v in values]
            assert flattened == data
            assert partition.num_classes == num_classes
            assert all(size > 0 for size in partition.sizes)

    def test_generate_when_all_partitions_then_distinct(self):
        """Each cut combination appears once."""
        result = generate_partitions(list(range(7)), 3)
        assert len({p.slices for p in result}) == len(result)

    def test_generate_when_length_equals_classes_then_singletons(self):
        """n == k leaves exactly one partition of single values."""
        result = generate_partitions([3, 1, 2], 3)
        assert len(result) == 1
        assert result[0].classes == ((3,), (1,), (2,))

    def test_generate_when_one_class_then_whole_data(self, small_data):
        """k == 1 is the dataset itself."""
        result = generate_partitions(small_data, 1)
        assert [p.classes for p in result] == [((4, 5, 9, 10),)]

    def test_generate_when_called_twice_then_shares_data_within_call(self, small_data):
        """Partitions of one call share a single data tuple."""
        result = generate_partitions(small_data, 2)
        assert all(p.data is result[0].data for p in result)


class TestIterPartitions:
    """Tests for iter_partitions()."""

    def test_iter_when_compared_to_generate_then_same_order(self):
        """Lazy and eager enumeration agree."""
        data = [2, 3, 5, 7, 11, 13]
        assert list(iter_partitions(data, 3)) == generate_partitions(data, 3)


class TestCandidateCount:
    """Tests for candidate_count()."""

    def test_candidate_count_when_census_shape_then_binomial(self):
        """52 values into 5 classes."""
        assert candidate_count(52, 5) == choose(51, 4) == 249900


class TestCandidateWarning:
    """Tests for the large candidate set warning."""

    def test_generate_when_over_threshold_then_warns_but_completes(
        self, small_data, monkeypatch, caplog
    ):
        """The threshold is reported, never enforced."""
        monkeypatch.setattr(JENKS_THRESHOLDS, "large_candidate_warning", 2)

        with caplog.at_level(logging.WARNING, logger="classbreaks.jenks.generator"):
            result = generate_partitions(small_data, 2)

        assert len(result) == 3
        assert any("3 candidate partitions" in r.getMessage() for r in caplog.records)

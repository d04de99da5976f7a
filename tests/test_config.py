"""
Unit tests for ClassificationConfig.
"""

import math

import pytest

from classbreaks import ClassificationConfig, ClassificationMethod


class TestClassificationConfig:
    """Tests for ClassificationConfig dataclass."""

    def test_init_when_defaults_then_jenks_without_tolerance(self):
        """Default method is exhaustive Jenks."""
        config = ClassificationConfig(num_classes=3)

        assert config.method is ClassificationMethod.JENKS
        assert config.tolerance is None
        assert config.sort_input is False
        assert config.uses_tolerance is False

    def test_init_when_tolerance_then_uses_tolerance(self):
        """A tolerance switches Jenks to the first-match scan."""
        config = ClassificationConfig(num_classes=3, tolerance=0.8)
        assert config.uses_tolerance is True

    def test_init_when_zero_classes_then_raises_error(self):
        """Zero classes is invalid."""
        with pytest.raises(ValueError, match="num_classes must be positive"):
            ClassificationConfig(num_classes=0)

    def test_init_when_nan_tolerance_then_raises_error(self):
        """A nan tolerance can never be met."""
        with pytest.raises(ValueError, match="tolerance must be a number"):
            ClassificationConfig(num_classes=2, tolerance=math.nan)

    def test_init_when_tolerance_with_closed_form_then_raises_error(self):
        """Tolerance only applies to Jenks."""
        with pytest.raises(ValueError, match="only applies to JENKS"):
            ClassificationConfig(
                num_classes=2,
                method=ClassificationMethod.QUANTILE,
                tolerance=0.5,
            )

    def test_init_when_frozen_then_cannot_mutate(self):
        """Configs are immutable."""
        config = ClassificationConfig(num_classes=2)
        with pytest.raises(AttributeError):
            config.num_classes = 3

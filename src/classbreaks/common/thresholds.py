"""Centralized threshold configuration.

Operational limits are advisory: the exhaustive search never refuses work,
it only reports when a request is likely to be slow.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class JenksThresholds:
    """Thresholds for the exhaustive Jenks search."""

    large_candidate_warning: int = 1_000_000  # Candidate partitions before a warning is logged
    ranked_log_preview: int = 3  # Top partitions echoed at debug level after ranking


# Global instance for easy import
JENKS_THRESHOLDS = JenksThresholds()

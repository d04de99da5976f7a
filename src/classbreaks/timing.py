"""
Module: timing

Purpose:
    Timing instrumentation for classification runs, mainly to show how
    the exhaustive Jenks search scales with data size and class count.

Key Classes:
    - TimingLog: Collects per-phase durations for one run

Key Functions:
    - timed_phase: Context manager for timing code blocks

Dependencies:
    - time (std)
    - contextlib (std)
    - dataclasses (std)

Used By:
    - controller: classify()
"""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Generator

logger = logging.getLogger(__name__)


@dataclass
class TimingLog:
    """
    Timing metrics for one classification run.

    Attributes:
        phase_timings: Dict of phase_name -> duration_seconds

    Example:
        >>> log = TimingLog()
        >>> log.log_phase("jenks_search", 0.234)
        >>> print(log.summary())
    """
    phase_timings: Dict[str, float] = field(default_factory=dict)

    def log_phase(self, phase: str, duration: float) -> None:
        """Log a phase timing, accumulating if the phase repeats."""
        self.phase_timings[phase] = self.phase_timings.get(phase, 0.0) + duration

    @property
    def total(self) -> float:
        """Total time across all phases."""
        return sum(self.phase_timings.values())

    def slowest_phase(self) -> tuple[str, float] | None:
        """Get the slowest phase and its duration."""
        if not self.phase_timings:
            return None
        return max(self.phase_timings.items(), key=lambda x: x[1])

    def summary(self) -> str:
        """Generate human-readable timing summary."""
        lines = ["", "=== Classification Timing Summary ==="]
        for phase, duration in sorted(self.phase_timings.items(), key=lambda x: -x[1]):
            lines.append(f"  {phase:25s} {duration:.3f}s")
        lines.append(f"  {'total':25s} {self.total:.3f}s")
        lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Export timing data as dictionary."""
        return {
            "phase_timings": dict(self.phase_timings),
            "total": self.total,
        }


@contextmanager
def timed_phase(log: TimingLog, phase: str) -> Generator[None, None, None]:
    """
    Context manager for timing a code phase.

    Args:
        log: TimingLog instance to record metrics
        phase: Name of the phase being timed

    Example:
        >>> log = TimingLog()
        >>> with timed_phase(log, "sort_input"):
        ...     data = sorted(data)
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start
        log.log_phase(phase, elapsed)
        logger.debug(f"{phase} took {elapsed:.4f}s")

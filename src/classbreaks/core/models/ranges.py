"""
Module: ranges

Purpose:
    Provides the breakpoint value types produced by every classifier:
    Breaks (k+1 ordered boundary values) and Ranges (k explicit class
    intervals), with lossless conversion between the two.

Key Functions:
    - DataRange.contains(value): Boundary test honouring the range style
    - Breaks.from_ranges(ranges): Shared boundary sequence of a Ranges
    - Ranges.from_breaks(breaks): Class intervals for a Breaks
    - Ranges.index_of(value): Which class a value falls into
    - *.to_dict() / *.from_dict(): JSON serialization

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.models.partition: Partition.to_breaks()
    - closed_form: Equal-interval and quantile classifiers
    - controller: ClassificationResult
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator, Optional, Sequence


class RangeStyle(Enum):
    """
    Whether a range includes its upper bound.

    Attributes:
        INCLUSIVE: start <= value <= end
        EXCLUSIVE: start <= value < end
    """

    INCLUSIVE = auto()
    EXCLUSIVE = auto()


@dataclass(frozen=True, slots=True)
class DataRange:
    """
    One class interval.

    The lower bound is always inclusive; the style only governs the
    upper bound.

    Attributes:
        start: Lower bound (inclusive)
        end: Upper bound
        style: Upper-bound style

    Example:
        >>> r = DataRange(1.0, 2.0, RangeStyle.EXCLUSIVE)
        >>> r.contains(2.0)
        False
    """

    start: float
    end: float
    style: RangeStyle = RangeStyle.EXCLUSIVE

    def contains(self, value: float) -> bool:
        """
        Check whether a value falls inside this range.

        Args:
            value: Value to test

        Returns:
            True if value is within the range per its style
        """
        if self.style is RangeStyle.INCLUSIVE:
            return self.start <= value <= self.end
        return self.start <= value < self.end

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {"start": self.start, "end": self.end, "style": self.style.name.lower()}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DataRange:
        """Deserialize from dictionary."""
        return cls(
            start=data["start"],
            end=data["end"],
            style=RangeStyle[data.get("style", "exclusive").upper()],
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        closing = "]" if self.style is RangeStyle.INCLUSIVE else ")"
        return f"DataRange[{self.start}, {self.end}{closing}"


@dataclass(frozen=True, slots=True)
class Breaks:
    """
    Ordered class boundaries.

    breaks[i] and breaks[i + 1] bound class i, so k classes need k + 1
    values. Values are non-decreasing whenever the classifier input was
    sorted; that is not re-checked here.

    Attributes:
        values: Boundary values, first is the minimum, last the maximum

    Invariants:
        - len(values) >= 2
        - num_classes == len(values) - 1

    Example:
        >>> b = Breaks((1.0, 1.5, 2.0))
        >>> b.num_classes
        2
    """

    values: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate boundary count on construction."""
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))
        if len(self.values) < 2:
            raise ValueError(f"Breaks needs at least 2 values: {self.values}")

    @property
    def num_classes(self) -> int:
        """Number of classes delimited by these boundaries."""
        return len(self.values) - 1

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    @classmethod
    def from_ranges(cls, ranges: Ranges) -> Breaks:
        """
        Extract the shared boundary sequence from ranges.

        Args:
            ranges: Well-formed Ranges

        Returns:
            Breaks holding the first start followed by every end
        """
        values = [ranges[0].start]
        values.extend(r.end for r in ranges)
        return cls(tuple(values))

    def to_ranges(self) -> Ranges:
        """Convert to explicit class intervals."""
        return Ranges.from_breaks(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {"breaks": list(self.values)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Breaks:
        """Deserialize from dictionary."""
        return cls(tuple(data["breaks"]))


@dataclass(frozen=True, slots=True)
class Ranges:
    """
    Explicit class intervals covering [min, max] without gaps.

    Every range is exclusive on its upper bound except the last, which is
    inclusive, so the maximum belongs to exactly one class.

    Attributes:
        ranges: Ordered class intervals

    Invariants:
        - At least one range
        - Only the last range is INCLUSIVE
        - ranges[i].end == ranges[i + 1].start

    Example:
        >>> r = Ranges.from_breaks(Breaks((0.0, 5.0, 10.0)))
        >>> r.index_of(5.0)
        1
        >>> r.index_of(10.0)
        1
    """

    ranges: tuple[DataRange, ...]

    def __post_init__(self) -> None:
        """Validate styles and contiguity on construction."""
        if not isinstance(self.ranges, tuple):
            object.__setattr__(self, "ranges", tuple(self.ranges))
        if not self.ranges:
            raise ValueError("Ranges needs at least one range")

        last = len(self.ranges) - 1
        for idx, r in enumerate(self.ranges):
            expected = RangeStyle.INCLUSIVE if idx == last else RangeStyle.EXCLUSIVE
            if r.style is not expected:
                raise ValueError(
                    f"Range {idx} must be {expected.name.lower()}, got {r.style.name.lower()}"
                )
        for idx, (prev, cur) in enumerate(zip(self.ranges, self.ranges[1:])):
            if prev.end != cur.start:
                raise ValueError(
                    f"Ranges {idx} and {idx + 1} are not contiguous: {prev.end} != {cur.start}"
                )

    def __len__(self) -> int:
        return len(self.ranges)

    def __iter__(self) -> Iterator[DataRange]:
        return iter(self.ranges)

    def __getitem__(self, index: int) -> DataRange:
        return self.ranges[index]

    @classmethod
    def from_breaks(cls, breaks: Breaks | Sequence[float]) -> Ranges:
        """
        Build class intervals from consecutive boundary pairs.

        Args:
            breaks: Breaks (or a plain sequence of k + 1 boundaries)

        Returns:
            Ranges with k intervals, the last one inclusive
        """
        values = tuple(breaks)
        last = len(values) - 2
        return cls(tuple(
            DataRange(
                lo,
                hi,
                RangeStyle.INCLUSIVE if idx == last else RangeStyle.EXCLUSIVE,
            )
            for idx, (lo, hi) in enumerate(zip(values, values[1:]))
        ))

    def to_breaks(self) -> Breaks:
        """Convert back to the shared boundary sequence."""
        return Breaks.from_ranges(self)

    def index_of(self, value: float) -> Optional[int]:
        """
        Find the class a value belongs to.

        Args:
            value: Value to classify

        Returns:
            Index of the containing range, or None if outside [min, max]
        """
        for idx, r in enumerate(self.ranges):
            if r.contains(value):
                return idx
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {"ranges": [r.to_dict() for r in self.ranges]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Ranges:
        """Deserialize from dictionary."""
        return cls(tuple(DataRange.from_dict(r) for r in data["ranges"]))

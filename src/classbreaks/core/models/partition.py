"""
Module: partition

Purpose:
    Provides the Partition dataclass - one candidate way of splitting a
    sorted sequence into k contiguous classes - together with the index
    pairs it is made of and its scored wrapper.

Key Functions:
    - Partition.classes: Materialize class values (copies, on demand)
    - Partition.to_breaks(): Boundary values of the classification
    - ScoredPartition: Partition paired with its GVF

Dependencies:
    - dataclasses (std)
    - .ranges.Breaks

Used By:
    - jenks.generator: Builds partitions
    - jenks.scoring: Scores partitions
    - jenks.policies: Ranks and selects partitions

Memory Model:
    Candidate sets grow combinatorially, so a Partition never copies
    values. It keeps a reference to the shared data tuple plus k
    half-open index pairs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from .ranges import Breaks


@dataclass(frozen=True, slots=True)
class ClassSlice:
    """
    Half-open index range [start, stop) into the sorted data.

    Attributes:
        start: First index (inclusive)
        stop: End index (exclusive)

    Invariants:
        - 0 <= start < stop (classes are never empty)

    Example:
        >>> s = ClassSlice(2, 5)
        >>> len(s)
        3
    """

    start: int
    stop: int

    def __post_init__(self) -> None:
        """Validate indices on construction."""
        if self.start < 0:
            raise ValueError(f"start must be >= 0: {self.start}")
        if self.stop <= self.start:
            raise ValueError(f"stop must be > start: {self.stop} <= {self.start}")

    def __len__(self) -> int:
        return self.stop - self.start

    def values(self, data: Sequence[Any]) -> Sequence[Any]:
        """Return the values this slice covers."""
        return data[self.start:self.stop]

    def __repr__(self) -> str:
        return f"ClassSlice({self.start}, {self.stop})"


@dataclass(frozen=True)
class Partition:
    """
    A split of sorted data into contiguous, non-empty classes.

    Attributes:
        data: The full sorted sequence (shared by every candidate)
        slices: One ClassSlice per class, in order

    Invariants:
        - slices[0].start == 0
        - slices[-1].stop == len(data)
        - slices[i].stop == slices[i + 1].start

    Example:
        >>> p = Partition((4, 5, 9, 10), (ClassSlice(0, 2), ClassSlice(2, 4)))
        >>> p.classes
        ((4, 5), (9, 10))
    """

    data: tuple[Any, ...]
    slices: tuple[ClassSlice, ...]

    def __post_init__(self) -> None:
        """Validate that the slices tile the data exactly."""
        if not self.slices:
            raise ValueError("Partition needs at least one class")
        if self.slices[0].start != 0:
            raise ValueError(f"First class must start at 0: {self.slices[0].start}")
        if self.slices[-1].stop != len(self.data):
            raise ValueError(
                f"Last class must end at {len(self.data)}: {self.slices[-1].stop}"
            )
        for prev, cur in zip(self.slices, self.slices[1:]):
            if prev.stop != cur.start:
                raise ValueError(f"Classes are not contiguous: {prev!r} then {cur!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def num_classes(self) -> int:
        """Number of classes."""
        return len(self.slices)

    @property
    def classes(self) -> tuple[tuple[Any, ...], ...]:
        """Class values, one tuple per class (materialized on each access)."""
        return tuple(s.values(self.data) for s in self.slices)

    @property
    def sizes(self) -> tuple[int, ...]:
        """Number of values in each class."""
        return tuple(len(s) for s in self.slices)

    def __len__(self) -> int:
        return len(self.slices)

    def __iter__(self) -> Iterator[Sequence[Any]]:
        """Iterate over class values in order."""
        for s in self.slices:
            yield s.values(self.data)

    # ─────────────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────────────

    def to_breaks(self) -> Breaks:
        """
        Boundary values for this partition.

        Each class opens at its own first value and the last boundary is
        the overall maximum, so `Breaks.to_ranges()` puts every member of
        a class in that class's range (ranges are half-open except the
        last). When equal values straddle a cut, no range can separate
        them and the lower class's range comes out empty.

        Returns:
            Breaks made of the first value of every class followed by the
            last value of the data

        Example:
            >>> Partition((4, 5, 9, 10), (ClassSlice(0, 2), ClassSlice(2, 4))).to_breaks()
            Breaks(values=(4, 9, 10))
        """
        values = [self.data[s.start] for s in self.slices]
        values.append(self.data[-1])
        return Breaks(tuple(values))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {"classes": [list(c) for c in self.classes]}

    def __repr__(self) -> str:
        return f"Partition({list(self.classes)})"


@dataclass(frozen=True)
class ScoredPartition:
    """
    A partition and its goodness of variance fit.

    Attributes:
        partition: The candidate partition
        gvf: Goodness of variance fit, at most 1.0 (nan when undefined)
    """

    partition: Partition
    gvf: float

    def __iter__(self) -> Iterator[Any]:
        """Unpack as (partition, gvf)."""
        yield self.partition
        yield self.gvf

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON output."""
        return {"gvf": self.gvf, **self.partition.to_dict()}

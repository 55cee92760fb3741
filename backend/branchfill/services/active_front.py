"""
Active front: samples that may still spawn children.

Expansion order is ascending center angle of each sample's wedge (ties: insertion
order). Samples are kept in an arena; the heap only holds (center_angle, seq, index),
so mutating a sample's child counter never disturbs heap order.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field


@dataclass
class ActiveSample:
    """Accepted sample that casts children inside its angle range (radians)."""

    x: float
    y: float
    angle_range: tuple[float, float]
    depth: int = 0
    children_spawned: int = 0
    center_angle: float = field(init=False)

    def __post_init__(self) -> None:
        low, high = self.angle_range
        if low > high:
            raise ValueError(f"angle_range must be ordered (low <= high), got {self.angle_range}")
        self.center_angle = (low + high) / 2

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


class ActiveFront:
    """Min-priority queue of arena indices keyed by center angle."""

    def __init__(self) -> None:
        self.samples: list[ActiveSample] = []
        self._heap: list[tuple[float, int, int]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def add(self, sample: ActiveSample) -> int:
        """Register a new sample in the arena and queue it. Returns its index."""
        index = len(self.samples)
        self.samples.append(sample)
        self.push(index)
        return index

    def push(self, index: int) -> None:
        """Queue (or re-queue) an arena sample by index."""
        sample = self.samples[index]
        heapq.heappush(self._heap, (sample.center_angle, next(self._counter), index))

    def pop(self) -> int:
        """Remove and return the index of the sample with the smallest center angle."""
        if not self._heap:
            raise RuntimeError("pop from an empty active front")
        _, _, index = heapq.heappop(self._heap)
        return index

    def __getitem__(self, index: int) -> ActiveSample:
        return self.samples[index]

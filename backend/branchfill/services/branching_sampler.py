"""
Branching Poisson-disk sampler.

Grows a tree of samples from the center of a size_x × size_y plane. Each expansion
pops the active sample with the smallest wedge center angle and throws up to
RETRIES darts inside its wedge:

- distance ∈ [radius, factor · radius], factor = (x / 10800) · 2 + 1, so the
  pattern gets sparser towards larger x;
- offset = (cos d − sin d, sin d + cos d) · distance, i.e. the cast direction
  turned by a further 45° and the step scaled by √2;
- a dart is accepted when it lies in [0, size_x) × [0, size_y) and is farther
  than `radius` from every sample in its grid neighborhood.

An accepted dart becomes a child with wedge direction ± angle / 2 and one
parent → child segment. The parent is re-queued until it reaches children_limit
(0 = unlimited). A sample whose darts all miss is retired.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass

from branchfill.services.active_front import ActiveFront, ActiveSample
from branchfill.services.spatial_grid import Point, SpatialGrid

logger = logging.getLogger(__name__)

# Dart throws per expansion before a sample is retired
RETRIES = 5

# Domain width at which the distance factor reaches 3 (reference canvas 10800 × 7200)
DENSITY_REFERENCE_WIDTH = 10800.0

ROOT_ANGLE_RANGE = (0.0, 2.0 * math.pi)


@dataclass(frozen=True)
class Segment:
    """Parent → child connection recorded on each accepted dart."""

    parent: Point
    child: Point
    direction: float
    parent_index: int
    child_index: int


def distance_factor(x: float) -> float:
    """Upper bound of the throw distance, in radii, for a parent at x."""
    return (x / DENSITY_REFERENCE_WIDTH) * 2 + 1


def cast_offset(direction: float, distance: float) -> Point:
    """Offset of a dart cast in `direction` (radians) at `distance`."""
    cos_d = math.cos(direction)
    sin_d = math.sin(direction)
    return ((cos_d - sin_d) * distance, (sin_d + cos_d) * distance)


class BranchingSampler:
    """Owns grid, active front, sample registry and segment list for one run."""

    def __init__(
        self,
        size_x: float,
        size_y: float,
        radius: float,
        children_limit: int = 0,
        angle: float = 360.0,
        *,
        rng: random.Random | None = None,
    ) -> None:
        if size_x <= 0 or size_y <= 0:
            raise ValueError("size_x and size_y must be positive")
        if radius <= 0:
            raise ValueError("radius must be positive")
        if children_limit < 0:
            raise ValueError("children_limit must be >= 0 (0 means unlimited)")
        if angle <= 0:
            raise ValueError("angle must be positive")

        self.size_x = size_x
        self.size_y = size_y
        self.radius = radius
        self.children_limit = children_limit
        self.angle_deg = angle
        self.angle = math.radians(angle)
        self.retries = RETRIES
        self.rng = rng if rng is not None else random.Random()

        self.grid = SpatialGrid(size_x, size_y, radius)
        self.active = ActiveFront()
        self.samples: list[Point] = []
        self.segments: list[Segment] = []

        root = ActiveSample(size_x / 2, size_y / 2, ROOT_ANGLE_RANGE, depth=0)
        self.active.add(root)
        self.samples.append(root.position)
        self.grid.insert(root.position)

    @property
    def nodes(self) -> list[ActiveSample]:
        """Every sample created in this run (arena order, root first)."""
        return self.active.samples

    def fill(self) -> list[Segment]:
        """Expand until the active front is empty. No-op on a drained front."""
        while not self.active.is_empty():
            self.generate_new_sample()
        logger.info(
            "Branching fill done: %d samples, %d segments (domain %sx%s, radius %s)",
            len(self.samples),
            len(self.segments),
            self.size_x,
            self.size_y,
            self.radius,
        )
        return self.segments

    def generate_new_sample(self) -> bool:
        """Pop one active sample and throw darts for it. Returns True if a child was accepted."""
        index = self.active.pop()
        current = self.active[index]

        for _ in range(self.retries):
            factor = distance_factor(current.x)
            distance = self.rng.uniform(1.0, factor) * self.radius
            direction = self.rng.uniform(*current.angle_range)
            dx, dy = cast_offset(direction, distance)
            candidate = (current.x + dx, current.y + dy)

            if not self._in_domain(candidate) or not self.grid.is_far_enough(candidate):
                continue

            current.children_spawned += 1
            if self.children_limit == 0 or current.children_spawned < self.children_limit:
                self.active.push(index)

            child_index = self.active.add(
                ActiveSample(
                    candidate[0],
                    candidate[1],
                    (direction - self.angle / 2, direction + self.angle / 2),
                    depth=current.depth + 1,
                )
            )
            self.samples.append(candidate)
            self.grid.insert(candidate)
            self.segments.append(
                Segment(
                    parent=current.position,
                    child=candidate,
                    direction=direction,
                    parent_index=index,
                    child_index=child_index,
                )
            )
            return True

        logger.debug(
            "Retired sample %d at (%.1f, %.1f) after %d failed throws",
            index,
            current.x,
            current.y,
            self.retries,
        )
        return False

    def _in_domain(self, point: Point) -> bool:
        x, y = point
        return 0 <= x < self.size_x and 0 <= y < self.size_y


@dataclass
class BranchingResult:
    """Result of one branching fill."""

    segments: list[Segment]
    samples: list[Point]
    params: dict


def generate_branching(
    size_x: float,
    size_y: float,
    radius: float,
    children_limit: int = 0,
    angle_deg: float = 360.0,
    seed: int | None = None,
) -> BranchingResult:
    """
    Run a full fill with a fresh sampler.

    `seed` makes the run reproducible; None draws from system entropy.
    """
    sampler = BranchingSampler(
        size_x,
        size_y,
        radius,
        children_limit=children_limit,
        angle=angle_deg,
        rng=random.Random(seed),
    )
    sampler.fill()
    return BranchingResult(
        segments=sampler.segments,
        samples=sampler.samples,
        params={
            "size_x": size_x,
            "size_y": size_y,
            "radius": radius,
            "children_limit": children_limit,
            "angle_deg": angle_deg,
            "retries": sampler.retries,
            "seed": seed,
        },
    )

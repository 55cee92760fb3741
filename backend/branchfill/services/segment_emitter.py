"""
Text primitives for recorded segments and samples.

Line:   L 1 <x1>,<y1>;<x2>,<y2>   ("L" = line, style/weight field fixed at 1)
Circle: C 1 1 5 <x>,<y>           (sample marker)

Coordinates are rounded to the nearest integer, halves away from zero.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

from branchfill.services.branching_sampler import Segment
from branchfill.services.spatial_grid import Point


def round_half_away(value: float) -> int:
    """Round to nearest integer; .5 goes away from zero (2.5 → 3, -2.5 → -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(whole) if value >= 0 else -int(whole)


def segment_record(segment: Segment) -> tuple[int, int, int, int]:
    """(parentX, parentY, childX, childY) rounded."""
    (x1, y1), (x2, y2) = segment.parent, segment.child
    return (round_half_away(x1), round_half_away(y1), round_half_away(x2), round_half_away(y2))


def format_segment(segment: Segment) -> str:
    x1, y1, x2, y2 = segment_record(segment)
    return f"L 1 {x1},{y1};{x2},{y2}"


def format_sample_marker(point: Point) -> str:
    return f"C 1 1 5 {round_half_away(point[0])},{round_half_away(point[1])}"


def iter_segment_lines(segments: Iterable[Segment]) -> Iterator[str]:
    for segment in segments:
        yield format_segment(segment)


def emit_segments(segments: Iterable[Segment]) -> list[str]:
    """One `L 1 ...` line per segment, in recording order."""
    return list(iter_segment_lines(segments))


def emit_sample_markers(samples: Iterable[Point]) -> list[str]:
    """One `C 1 1 5 ...` line per accepted sample, in acceptance order."""
    return [format_sample_marker(p) for p in samples]


def render_text(segments: Iterable[Segment], samples: Iterable[Point] | None = None) -> str:
    """Newline-terminated text stream: segment lines, then sample markers if given."""
    lines = emit_segments(segments)
    if samples is not None:
        lines.extend(emit_sample_markers(samples))
    return "".join(f"{line}\n" for line in lines)

"""Branching API: run a fill, return segments as JSON or as the L/C text stream."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from branchfill.schemas.branching import (
    BranchingParamsSchema,
    BranchingRequestSchema,
    BranchingResponseSchema,
    SamplePointSchema,
    SegmentSchema,
)
from branchfill.services.branching_sampler import BranchingResult, Segment, generate_branching
from branchfill.services.segment_emitter import render_text, round_half_away, segment_record
from branchfill.services.spatial_grid import grid_cell_count
from branchfill.settings import load_app_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _segment_to_schema(s: Segment) -> SegmentSchema:
    x1, y1, x2, y2 = segment_record(s)
    return SegmentSchema(x1=x1, y1=y1, x2=x2, y2=y2)


def _run(payload: BranchingRequestSchema) -> BranchingResult:
    """Check the grid budget, then run the sampler. Raises HTTPException on failure."""
    settings = load_app_settings()
    cells = grid_cell_count(payload.size_x, payload.size_y, payload.radius)
    if cells > settings.max_cells:
        raise HTTPException(
            status_code=422,
            detail=f"Domain too large for radius: {cells} grid cells (max {settings.max_cells})",
        )

    try:
        return generate_branching(
            size_x=payload.size_x,
            size_y=payload.size_y,
            radius=payload.radius,
            children_limit=payload.children_limit,
            angle_deg=payload.angle_deg,
            seed=payload.seed,
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        ) from exc
    except Exception:
        logger.exception("Branching fill failed.")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )


@router.post("/generate", response_model=BranchingResponseSchema)
def generate_branching_endpoint(payload: BranchingRequestSchema) -> BranchingResponseSchema:
    """
    Grow a branching pattern over size_x × size_y from its center.
    Segments are rounded to integers; samples only when include_samples is set.
    """
    result = _run(payload)

    samples = None
    if payload.include_samples:
        samples = [SamplePointSchema(x=round_half_away(x), y=round_half_away(y)) for x, y in result.samples]

    return BranchingResponseSchema(
        segments=[_segment_to_schema(s) for s in result.segments],
        segments_count=len(result.segments),
        samples_count=len(result.samples),
        samples=samples,
        params=BranchingParamsSchema(**result.params),
    )


@router.post("/lines", response_class=PlainTextResponse)
def generate_lines_endpoint(payload: BranchingRequestSchema) -> PlainTextResponse:
    """Same run as /generate, answered as one `L 1 x1,y1;x2,y2` line per segment."""
    result = _run(payload)
    samples = result.samples if payload.include_samples else None
    return PlainTextResponse(render_text(result.segments, samples))

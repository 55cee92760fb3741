"""Pydantic schemas for Branching API (request/response)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class BranchingRequestSchema(BaseModel):
    """POST body: run one branching fill."""

    model_config = ConfigDict(extra="forbid")

    size_x: float = Field(gt=0)
    size_y: float = Field(gt=0)
    radius: float = Field(gt=0)
    children_limit: int = Field(0, ge=0)
    angle_deg: float = Field(360.0, gt=0, le=360.0)
    seed: int | None = None
    include_samples: bool = False


class SegmentSchema(BaseModel):
    """Parent → child segment, coordinates rounded to integers."""

    x1: int
    y1: int
    x2: int
    y2: int


class SamplePointSchema(BaseModel):
    x: int
    y: int


class BranchingParamsSchema(BaseModel):
    """Echo of params used for generation."""

    size_x: float
    size_y: float
    radius: float
    children_limit: int
    angle_deg: float
    retries: int
    seed: int | None


class BranchingResponseSchema(BaseModel):
    """Response: segments, counts, optional samples, params."""

    segments: list[SegmentSchema]
    segments_count: int
    samples_count: int
    samples: list[SamplePointSchema] | None = None
    params: BranchingParamsSchema

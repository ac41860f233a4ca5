"""API request/response schemas."""

from __future__ import annotations
from typing import Any

from pydantic import BaseModel, Field, field_validator

from floorplan.models import (
    FloorPlan, FloorPlanDiff, Opening, Room, Segment, Wall, WallSpan,
)


def _has_length(raw: Any) -> bool:
    if isinstance(raw, dict) and all(k in raw for k in ("x1", "y1", "x2", "y2")):
        return (raw["x1"], raw["y1"]) != (raw["x2"], raw["y2"])
    return True


class WallsRequest(BaseModel):
    """Request body carrying a wall snapshot.

    Walls whose endpoints coincide are dropped here rather than failing the
    whole sketch; the geometry passes skip them anyway.
    """
    walls: list[Wall]

    @field_validator("walls", mode="before")
    @classmethod
    def drop_zero_length(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [raw for raw in value if _has_length(raw)]
        return value


class DetectRoomsResponse(BaseModel):
    rooms: list[Room]
    room_count: int
    wall_count: int


class SplitWallsResponse(BaseModel):
    segments: list[Segment]


class SegmentRequest(BaseModel):
    """A wall reduced to its length and height, plus its openings."""
    length: float = Field(gt=0)
    height: float = Field(default=2.8, gt=0)
    openings: list[Opening] = []


class SpansResponse(BaseModel):
    spans: list[WallSpan]


class PlanSpansRequest(BaseModel):
    plan: FloorPlan
    wall_id: str


class AnalyzeResponse(BaseModel):
    plan: FloorPlan
    spans: dict[str, list[WallSpan]]


class DiffRequest(BaseModel):
    baseline: FloorPlan
    current: FloorPlan


class DiffResponse(BaseModel):
    diff: FloorPlanDiff

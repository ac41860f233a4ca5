"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from floorplan.errors import WallNotFoundError
from floorplan.services.plan_service import PlanService
from floorplan.api.schemas import (
    AnalyzeResponse, DetectRoomsResponse, DiffRequest, DiffResponse,
    PlanSpansRequest, SegmentRequest, SpansResponse, SplitWallsResponse,
    WallsRequest,
)
from floorplan.models import FloorPlan

router = APIRouter()

# Shared service instance
_service = PlanService()


@router.post("/rooms/detect", response_model=DetectRoomsResponse)
async def detect_rooms(request: WallsRequest) -> DetectRoomsResponse:
    """Recompute all rooms enclosed by the given walls.

    Zero-length walls are dropped from the request and not counted.
    """
    rooms = _service.detect_rooms(request.walls)
    return DetectRoomsResponse(
        rooms=rooms,
        room_count=len(rooms),
        wall_count=len(request.walls),
    )


@router.post("/walls/split", response_model=SplitWallsResponse)
async def split_walls(request: WallsRequest) -> SplitWallsResponse:
    """Split walls at T-junctions."""
    return SplitWallsResponse(segments=_service.split_walls(request.walls))


@router.post("/walls/segment", response_model=SpansResponse)
async def segment_wall(request: SegmentRequest) -> SpansResponse:
    """Solid spans of a wall once its openings are cut out."""
    spans = _service.segment(request.length, request.height, request.openings)
    return SpansResponse(spans=spans)


@router.post("/plans/spans", response_model=SpansResponse)
async def plan_wall_spans(request: PlanSpansRequest) -> SpansResponse:
    try:
        spans = _service.segment_plan_wall(request.plan, request.wall_id)
    except WallNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return SpansResponse(spans=spans)


@router.post("/plans/analyze", response_model=AnalyzeResponse)
async def analyze_plan(plan: FloorPlan) -> AnalyzeResponse:
    """Rooms plus per-wall spans for a whole plan."""
    analyzed, spans = _service.analyze(plan)
    return AnalyzeResponse(plan=analyzed, spans=spans)


@router.post("/plans/diff", response_model=DiffResponse)
async def diff_plans(request: DiffRequest) -> DiffResponse:
    return DiffResponse(diff=_service.diff(request.baseline, request.current))


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

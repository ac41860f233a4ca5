"""High-level plan analysis service — facade for the API layer."""

from __future__ import annotations

import structlog

from floorplan.models import (
    EngineParams, FloorPlan, FloorPlanDiff, Opening, Room, Segment, Wall, WallSpan,
)
from floorplan.core.diff import diff_floor_plans
from floorplan.core.faces import RoomDetector
from floorplan.core.junctions import TJunctionSplitter
from floorplan.core.segmenter import segment_wall, split_wall_by_openings

logger = structlog.get_logger(__name__)


class PlanService:
    """Runs the geometry passes over caller-supplied snapshots."""

    def __init__(self, params: EngineParams | None = None) -> None:
        self.params = params or EngineParams()
        self.detector = RoomDetector(self.params)
        self.splitter = TJunctionSplitter(self.params)

    def detect_rooms(self, walls: list[Wall]) -> list[Room]:
        rooms = self.detector.detect(walls)
        logger.info("rooms_detected", walls=len(walls), rooms=len(rooms))
        return rooms

    def split_walls(self, walls: list[Wall]) -> list[Segment]:
        return self.splitter.split(walls)

    def segment(
        self, wall_length: float, wall_height: float, openings: list[Opening],
    ) -> list[WallSpan]:
        return split_wall_by_openings(wall_length, wall_height, openings, self.params)

    def segment_plan_wall(self, plan: FloorPlan, wall_id: str) -> list[WallSpan]:
        """Spans for one wall of a plan. Raises WallNotFoundError for unknown ids."""
        wall = plan.require_wall(wall_id)
        return segment_wall(wall, plan.openings, self.params)

    def analyze(self, plan: FloorPlan) -> tuple[FloorPlan, dict[str, list[WallSpan]]]:
        """Recompute rooms and every wall's spans for a plan snapshot."""
        rooms = self.detect_rooms(plan.walls)
        spans = {
            w.id: segment_wall(w, plan.openings, self.params)
            for w in plan.walls
            if w.length >= self.params.degenerate_length
        }
        orphans = [o.id for o in plan.openings if plan.get_wall(o.wall_id) is None]
        if orphans:
            logger.warning("orphan_openings", opening_ids=orphans)
        return plan.with_rooms(rooms), spans

    def move_wall(
        self, plan: FloorPlan, wall_id: str, x1: float, y1: float, x2: float, y2: float,
    ) -> FloorPlan:
        """Drag a wall, snapping its endpoints to the configured grid."""
        return plan.move_wall(wall_id, x1, y1, x2, y2, snap_size=self.params.snap_size)

    def make_corridor(
        self, plan: FloorPlan, wall_id: str, width: float,
    ) -> tuple[FloorPlan, list[str]]:
        return plan.make_corridor(wall_id, width, snap_size=self.params.snap_size)

    def diff(self, baseline: FloorPlan, current: FloorPlan) -> FloorPlanDiff:
        return diff_floor_plans(baseline, current)

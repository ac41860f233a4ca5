from .geometry import Point2D, Segment, distance, quantize, round_half_up, snap
from .building import (
    Wall, WallStyle, Opening, OpeningType, DoorStyle, WindowStyle, Room,
)
from .spans import WallSpan, SpanType
from .parameters import EngineParams
from .plan import FloorPlan
from .diff import FloorPlanDiff, ElementDiff, ElementKind, DiffStatus

__all__ = [
    "Point2D", "Segment", "distance", "quantize", "round_half_up", "snap",
    "Wall", "WallStyle", "Opening", "OpeningType", "DoorStyle", "WindowStyle", "Room",
    "WallSpan", "SpanType",
    "EngineParams",
    "FloorPlan",
    "FloorPlanDiff", "ElementDiff", "ElementKind", "DiffStatus",
]

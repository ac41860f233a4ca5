"""Geometric primitives used throughout the engine."""

from __future__ import annotations
import math
from pydantic import BaseModel


class Point2D(BaseModel):
    """Point on the plan, in meters (Y grows downwards on screen)."""
    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            y=self.y + (other.y - self.y) * t,
        )

    def __add__(self, other: Point2D) -> Point2D:
        return Point2D(x=self.x + other.x, y=self.y + other.y)


class Segment(BaseModel):
    """A straight wall piece, possibly a sub-segment after T-junction splitting."""
    x1: float
    y1: float
    x2: float
    y2: float
    wall_id: str = ""   # Wall this piece was cut from


SNAP_SIZE = 0.1        # Positioning grid (10cm)
KEY_SCALE = 100        # Vertex keys are quantized to centimetres


def round_half_up(value: float, digits: int = 2) -> float:
    """Round halves upwards, the way screen coordinates were always rounded."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def snap(value: float, size: float = SNAP_SIZE) -> float:
    """Snap a coordinate to the positioning grid."""
    return round(math.floor(value / size + 0.5) * size, 6)


def quantize(x: float, y: float) -> tuple[int, int]:
    """Integer centimetre key used to merge coincident points."""
    return (math.floor(x * KEY_SCALE + 0.5), math.floor(y * KEY_SCALE + 0.5))


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)

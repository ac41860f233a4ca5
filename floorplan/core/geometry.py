"""Pure geometry helpers — projection, clamping and hit testing."""

from __future__ import annotations
from typing import Iterable, Optional

from pydantic import BaseModel

from floorplan.models import Opening, Room, Segment, Wall
from floorplan.models.geometry import distance


GENERATED_POSITION_MIN = 0.05
GENERATED_POSITION_MAX = 0.95


def project_parameter(px: float, py: float, seg: Segment | Wall) -> Optional[float]:
    """Parametric position of the projection of (px, py) on the segment's line.

    Returns None for segments too short to define a direction.
    """
    dx = seg.x2 - seg.x1
    dy = seg.y2 - seg.y1
    len2 = dx * dx + dy * dy
    if len2 < 1e-4:
        return None
    return ((px - seg.x1) * dx + (py - seg.y1) * dy) / len2


def point_segment_distance(px: float, py: float, seg: Segment | Wall) -> float:
    """Distance from a point to the closest point of a segment."""
    t = project_parameter(px, py, seg)
    if t is None:
        return distance(px, py, seg.x1, seg.y1)
    t = max(0.0, min(1.0, t))
    return distance(px, py, seg.x1 + t * (seg.x2 - seg.x1), seg.y1 + t * (seg.y2 - seg.y1))


def is_point_on_segment_interior(
    px: float,
    py: float,
    seg: Segment | Wall,
    tolerance: float = 0.05,
    t_margin: float = 0.01,
) -> bool:
    """True when the point projects strictly inside the segment, close to its line."""
    t = project_parameter(px, py, seg)
    if t is None or t < t_margin or t > 1.0 - t_margin:
        return False
    proj_x = seg.x1 + t * (seg.x2 - seg.x1)
    proj_y = seg.y1 + t * (seg.y2 - seg.y1)
    return distance(px, py, proj_x, proj_y) < tolerance


def clamp_generated_position(position: float) -> float:
    """Keep machine-placed openings away from wall corners."""
    return max(GENERATED_POSITION_MIN, min(GENERATED_POSITION_MAX, position))


def bounding_box(walls: Iterable[Wall]) -> tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y) over all wall endpoints."""
    xs: list[float] = []
    ys: list[float] = []
    for w in walls:
        xs.extend((w.x1, w.x2))
        ys.extend((w.y1, w.y2))
    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))


# --- Hit testing -----------------------------------------------------------

class WallHit(BaseModel):
    wall: Wall
    t: float  # Clamped parametric position of the hit along the wall


class OpeningHit(BaseModel):
    opening: Opening


class RoomHit(BaseModel):
    room: Room


class RoomVertexHit(BaseModel):
    room: Room
    vertex_index: int


def wall_hit_test(
    walls: Iterable[Wall], x: float, y: float, threshold: float = 0.6,
) -> WallHit | None:
    """First wall passing within `threshold` of the point."""
    for w in walls:
        t = project_parameter(x, y, w)
        if t is None:
            continue
        t = max(0.0, min(1.0, t))
        p = w.point_at(t)
        if distance(x, y, p.x, p.y) < threshold:
            return WallHit(wall=w, t=t)
    return None


def opening_hit_test(
    openings: Iterable[Opening],
    walls: Iterable[Wall],
    x: float,
    y: float,
    threshold: float = 1.0,
) -> OpeningHit | None:
    """Opening whose center is nearest to the point, within `threshold`."""
    walls_by_id = {w.id: w for w in walls}
    best: OpeningHit | None = None
    best_dist = threshold
    for o in openings:
        wall = walls_by_id.get(o.wall_id)
        if wall is None:
            continue
        center = wall.point_at(o.position)
        d = distance(x, y, center.x, center.y)
        if d < best_dist:
            best_dist = d
            best = OpeningHit(opening=o)
    return best


def room_hit_test(
    rooms: Iterable[Room], x: float, y: float, threshold: float = 0.8,
) -> RoomHit | None:
    for room in rooms:
        if distance(x, y, room.cx, room.cy) < threshold:
            return RoomHit(room=room)
    return None


def room_vertex_hit_test(
    rooms: Iterable[Room], x: float, y: float, threshold: float = 0.8,
) -> RoomVertexHit | None:
    """Nearest polygon vertex of any room, within `threshold`."""
    best: RoomVertexHit | None = None
    best_dist = threshold
    for room in rooms:
        if len(room.polygon) < 3:
            continue
        for i, p in enumerate(room.polygon):
            d = distance(x, y, p.x, p.y)
            if d < best_dist:
                best_dist = d
                best = RoomVertexHit(room=room, vertex_index=i)
    return best

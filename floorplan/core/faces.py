"""Room detection by planar face enumeration.

Every directed half-edge bounds exactly one face. Walking a face means: at
the head vertex of the current half-edge, find the half-edge pointing back
to where we came from and leave along the entry *preceding* it in the
vertex's angle-sorted list (cyclically). Repeating that until the start
half-edge comes round again traces one face boundary.

With Y pointing down the screen, bounded faces come out with positive
shoelace area and the outer face of every connected component with negative
area.
"""

from __future__ import annotations
from enum import Enum

import structlog
from pydantic import BaseModel

from floorplan.ids import new_id
from floorplan.models import EngineParams, Point2D, Room, Wall, round_half_up
from floorplan.core.geometry import bounding_box
from floorplan.core.graph import PlanarGraph
from floorplan.core.junctions import split_at_t_junctions

logger = structlog.get_logger(__name__)


class FaceStatus(str, Enum):
    CLOSED = "closed"
    MALFORMED = "malformed"     # Dead end or missing back-edge
    STEP_LIMIT = "step_limit"   # Walk did not close within the step bound


class FaceTrace(BaseModel):
    """Outcome of walking a single face from one starting half-edge."""
    status: FaceStatus
    vertex_ids: list[int] = []
    steps: int = 0

    @property
    def is_closed(self) -> bool:
        return self.status == FaceStatus.CLOSED


def max_face_steps(graph: PlanarGraph) -> int:
    return 2 * graph.vertex_count + 10


def trace_face(
    graph: PlanarGraph,
    u: int,
    v: int,
    visited: set[tuple[int, int]],
    max_steps: int,
) -> FaceTrace:
    """Walk the face to the left of half-edge u->v, marking half-edges visited."""
    start = (u, v)
    face: list[int] = []
    cur_from, cur_to = u, v
    steps = 0

    while steps < max_steps:
        he = (cur_from, cur_to)
        if he in visited:
            status = FaceStatus.CLOSED if he == start else FaceStatus.MALFORMED
            return FaceTrace(status=status, vertex_ids=face, steps=steps)
        visited.add(he)
        face.append(cur_from)

        edges = graph.half_edges(cur_to)
        back_idx = next((i for i, e in enumerate(edges) if e.to == cur_from), None)
        if back_idx is None:
            return FaceTrace(status=FaceStatus.MALFORMED, vertex_ids=face, steps=steps)

        cur_from, cur_to = cur_to, edges[(back_idx - 1) % len(edges)].to
        steps += 1

    if (cur_from, cur_to) == start:
        return FaceTrace(status=FaceStatus.CLOSED, vertex_ids=face, steps=steps)
    return FaceTrace(status=FaceStatus.STEP_LIMIT, vertex_ids=face, steps=steps)


def enumerate_faces(graph: PlanarGraph) -> list[FaceTrace]:
    """Trace every face of the graph once, including malformed attempts."""
    visited: set[tuple[int, int]] = set()
    max_steps = max_face_steps(graph)
    traces: list[FaceTrace] = []

    for u, edges in graph.adjacency.items():
        for edge in edges:
            if (u, edge.to) in visited:
                continue
            traces.append(trace_face(graph, u, edge.to, visited, max_steps))
    return traces


def shoelace_area(polygon: list[Point2D]) -> float:
    """Signed polygon area. Positive for bounded faces as traced by `trace_face`."""
    area = 0.0
    n = len(polygon)
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i].x * polygon[j].y
        area -= polygon[j].x * polygon[i].y
    return area / 2


def vertex_centroid(polygon: list[Point2D]) -> Point2D:
    """Arithmetic mean of the polygon's vertices."""
    total = polygon[0]
    for p in polygon[1:]:
        total = total + p
    n = len(polygon)
    return Point2D(x=total.x / n, y=total.y / n)


class RoomDetector:
    """
    Full-recompute room detection over a wall snapshot.

    Splits walls at T-junctions, builds the planar graph, enumerates faces
    and keeps the ones that look like rooms. Malformed faces and slivers are
    dropped one by one; the rest of the plan still yields its rooms.

    When more than one face survives, any face larger than
    `exterior_area_ratio` of the wall bounding box is treated as the
    exterior. A shell with one small closet in a corner therefore reports
    only the closet: the main room fills too much of the bbox. A lone closed
    loop is always kept.
    """

    def __init__(self, params: EngineParams | None = None) -> None:
        self.params = params or EngineParams()

    def detect(self, walls: list[Wall]) -> list[Room]:
        p = self.params
        usable = [w for w in walls if w.length >= p.degenerate_length]
        if len(usable) < 3:
            logger.debug("room_detection_skipped", walls=len(usable))
            return []

        segments = split_at_t_junctions(usable, p)
        graph = PlanarGraph.from_segments(segments)
        traces = enumerate_faces(graph)

        candidates: list[tuple[list[Point2D], float]] = []
        for trace in traces:
            if not trace.is_closed:
                logger.debug(
                    "face_dropped",
                    reason=trace.status.value,
                    vertices=len(trace.vertex_ids),
                )
                continue
            if len(trace.vertex_ids) < 3:
                continue
            polygon = [graph.vertices[i] for i in trace.vertex_ids]
            area = shoelace_area(polygon)
            if area < p.min_room_area:
                continue
            candidates.append((polygon, area))

        min_x, min_y, max_x, max_y = bounding_box(usable)
        exterior_limit = (max_x - min_x) * (max_y - min_y) * p.exterior_area_ratio

        rooms: list[Room] = []
        for polygon, area in candidates:
            # A lone closed loop is a room even though it fills its own bbox
            if len(candidates) > 1 and area > exterior_limit:
                logger.debug("face_dropped", reason="exterior", area=round(area, 2))
                continue
            rooms.append(self._to_room(polygon, area))

        logger.debug(
            "rooms_detected",
            walls=len(usable),
            segments=len(segments),
            faces=len(traces),
            rooms=len(rooms),
        )
        return rooms

    def _to_room(self, polygon: list[Point2D], area: float) -> Room:
        c = vertex_centroid(polygon)
        return Room(
            id=new_id("room"),
            cx=round_half_up(c.x),
            cy=round_half_up(c.y),
            area=round_half_up(area),
            polygon=[
                Point2D(x=round_half_up(pt.x), y=round_half_up(pt.y))
                for pt in polygon
            ],
        )


def detect_rooms(walls: list[Wall], params: EngineParams | None = None) -> list[Room]:
    """Detect enclosed rooms in a wall set. Room order is not stable across runs."""
    return RoomDetector(params).detect(walls)

"""T-junction splitting — make every wall endpoint a shared graph vertex."""

from __future__ import annotations

import structlog

from floorplan.models import EngineParams, Point2D, Segment, Wall, quantize
from floorplan.core.geometry import is_point_on_segment_interior, project_parameter

logger = structlog.get_logger(__name__)


class TJunctionSplitter:
    """Splits walls wherever another wall's endpoint lands on their interior.

    Raw sketches routinely draw a wall up to the middle of another one. Face
    enumeration needs a planar graph where no edge passes through a vertex it
    does not end at, so those walls are cut at the touching endpoint.
    Collinear overlapping walls are left as they are.
    """

    def __init__(self, params: EngineParams | None = None) -> None:
        self.params = params or EngineParams()

    def split(self, walls: list[Wall]) -> list[Segment]:
        usable = [w for w in walls if w.length >= self.params.degenerate_length]
        endpoints = self._collect_endpoints(usable)

        segments: list[Segment] = []
        for wall in usable:
            segments.extend(self._split_wall(wall, endpoints))

        logger.debug(
            "walls_split",
            walls=len(walls),
            usable=len(usable),
            segments=len(segments),
        )
        return segments

    def _collect_endpoints(self, walls: list[Wall]) -> list[Point2D]:
        """Unique wall endpoints, merged at centimetre precision."""
        seen: set[tuple[int, int]] = set()
        points: list[Point2D] = []
        for wall in walls:
            for pt in (wall.start, wall.end):
                key = quantize(pt.x, pt.y)
                if key not in seen:
                    seen.add(key)
                    points.append(pt)
        return points

    def _split_wall(self, wall: Wall, endpoints: list[Point2D]) -> list[Segment]:
        p = self.params

        hits: list[tuple[float, Point2D]] = []
        for pt in endpoints:
            if is_point_on_segment_interior(
                pt.x, pt.y, wall,
                tolerance=p.junction_tolerance,
                t_margin=p.junction_t_margin,
            ):
                hits.append((project_parameter(pt.x, pt.y, wall), pt))

        if not hits:
            return [wall.as_segment()]

        hits.sort(key=lambda h: h[0])
        unique = [hits[0]]
        for t, pt in hits[1:]:
            if abs(t - unique[-1][0]) > p.split_t_merge:
                unique.append((t, pt))

        pieces: list[Segment] = []
        prev = wall.start
        for _, pt in unique:
            if prev.distance_to(pt) > p.min_segment_length:
                pieces.append(Segment(
                    x1=prev.x, y1=prev.y, x2=pt.x, y2=pt.y, wall_id=wall.id,
                ))
            prev = pt
        if prev.distance_to(wall.end) > p.min_segment_length:
            pieces.append(Segment(
                x1=prev.x, y1=prev.y, x2=wall.x2, y2=wall.y2, wall_id=wall.id,
            ))
        return pieces


def split_at_t_junctions(
    walls: list[Wall], params: EngineParams | None = None,
) -> list[Segment]:
    """Return straight segments with no original endpoint left inside any of them."""
    return TJunctionSplitter(params).split(walls)

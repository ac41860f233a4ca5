"""Planar graph over split wall segments, with angle-ordered adjacency."""

from __future__ import annotations
import math

import structlog
from pydantic import BaseModel

from floorplan.models import Point2D, Segment, quantize

logger = structlog.get_logger(__name__)


class HalfEdge(BaseModel):
    """Directed edge leaving a vertex."""
    to: int
    angle: float  # atan2 of the outgoing direction, in (-pi, pi]


class PlanarGraph:
    """
    Undirected graph of wall segments, rebuilt from scratch per detection pass.

    Vertices are wall endpoints merged at centimetre precision; the first
    coordinates seen for a key are kept. Each vertex stores its outgoing
    half-edges sorted by angle ascending; that ordering is all the face
    walk needs.
    """

    def __init__(self) -> None:
        self.vertices: list[Point2D] = []
        self.adjacency: dict[int, list[HalfEdge]] = {}
        self._ids: dict[tuple[int, int], int] = {}
        self._edges: set[tuple[int, int]] = set()

    @classmethod
    def from_segments(cls, segments: list[Segment]) -> PlanarGraph:
        graph = cls()
        for seg in segments:
            graph.add_segment(seg)
        graph.sort_edges()
        logger.debug(
            "graph_built",
            segments=len(segments),
            vertices=graph.vertex_count,
            edges=graph.edge_count,
        )
        return graph

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def vertex_id(self, x: float, y: float) -> int:
        key = quantize(x, y)
        vid = self._ids.get(key)
        if vid is None:
            vid = len(self.vertices)
            self.vertices.append(Point2D(x=x, y=y))
            self._ids[key] = vid
        return vid

    def add_segment(self, seg: Segment) -> bool:
        """Insert a segment; returns False for self-loops and duplicate edges."""
        u = self.vertex_id(seg.x1, seg.y1)
        v = self.vertex_id(seg.x2, seg.y2)
        if u == v:
            return False

        key = (u, v) if u < v else (v, u)
        if key in self._edges:
            return False
        self._edges.add(key)

        pu, pv = self.vertices[u], self.vertices[v]
        self.adjacency.setdefault(u, []).append(
            HalfEdge(to=v, angle=math.atan2(pv.y - pu.y, pv.x - pu.x))
        )
        self.adjacency.setdefault(v, []).append(
            HalfEdge(to=u, angle=math.atan2(pu.y - pv.y, pu.x - pv.x))
        )
        return True

    def sort_edges(self) -> None:
        for edges in self.adjacency.values():
            edges.sort(key=lambda e: e.angle)

    def half_edges(self, vertex: int) -> list[HalfEdge]:
        return self.adjacency.get(vertex, [])

    def degree(self, vertex: int) -> int:
        return len(self.adjacency.get(vertex, []))

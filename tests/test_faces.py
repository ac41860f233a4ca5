"""
Unit tests for face enumeration and room detection.

Scenarios: two-room rectangle, single room, open sketches, dangling walls,
the exterior-face heuristic, malformed graphs and the sample apartments.
"""

import unittest

from floorplan.core.faces import (
    FaceStatus,
    RoomDetector,
    detect_rooms,
    enumerate_faces,
    max_face_steps,
    shoelace_area,
    trace_face,
    vertex_centroid,
)
from floorplan.core.graph import HalfEdge, PlanarGraph
from floorplan.core.junctions import split_at_t_junctions
from floorplan.defaults import default_apartment, reference_apartment
from floorplan.models import EngineParams, Point2D, Segment, Wall


def _walls(*coords):
    return [
        Wall(id=f"w{i}", x1=x1, y1=y1, x2=x2, y2=y2)
        for i, (x1, y1, x2, y2) in enumerate(coords)
    ]


def _rectangle(w, h):
    return [(0, 0, w, 0), (w, 0, w, h), (w, h, 0, h), (0, h, 0, 0)]


def _summary(rooms):
    """Order-independent view of a room list."""
    return sorted((r.area, r.cx, r.cy) for r in rooms)


class TestPolygonHelpers(unittest.TestCase):
    def test_shoelace_sign_follows_vertex_order(self):
        square = [Point2D(x=0, y=0), Point2D(x=2, y=0), Point2D(x=2, y=2), Point2D(x=0, y=2)]
        self.assertAlmostEqual(shoelace_area(square), 4.0)
        self.assertAlmostEqual(shoelace_area(list(reversed(square))), -4.0)

    def test_vertex_centroid_is_mean_of_vertices(self):
        tri = [Point2D(x=0, y=0), Point2D(x=3, y=0), Point2D(x=0, y=3)]
        c = vertex_centroid(tri)
        self.assertAlmostEqual(c.x, 1.0)
        self.assertAlmostEqual(c.y, 1.0)

    def test_vertex_centroid_leaves_polygon_untouched(self):
        square = [Point2D(x=1, y=1), Point2D(x=3, y=1), Point2D(x=3, y=5), Point2D(x=1, y=5)]
        c = vertex_centroid(square)
        self.assertEqual((c.x, c.y), (2.0, 3.0))
        self.assertEqual((square[0].x, square[0].y), (1, 1))


class TestFaceTracing(unittest.TestCase):
    def setUp(self):
        walls = _walls(*_rectangle(8, 6))
        self.graph = PlanarGraph.from_segments(split_at_t_junctions(walls))

    def test_rectangle_has_inner_and_outer_face(self):
        traces = enumerate_faces(self.graph)
        self.assertEqual(len(traces), 2)
        self.assertTrue(all(t.status == FaceStatus.CLOSED for t in traces))
        areas = sorted(
            shoelace_area([self.graph.vertices[i] for i in t.vertex_ids]) for t in traces
        )
        self.assertAlmostEqual(areas[0], -48.0)
        self.assertAlmostEqual(areas[1], 48.0)

    def test_every_half_edge_visited_once(self):
        traces = enumerate_faces(self.graph)
        self.assertEqual(sum(len(t.vertex_ids) for t in traces), 2 * self.graph.edge_count)

    def test_step_bound(self):
        self.assertEqual(max_face_steps(self.graph), 2 * 4 + 10)

    def test_step_limit_is_reported(self):
        trace = trace_face(self.graph, 0, 1, set(), max_steps=2)
        self.assertEqual(trace.status, FaceStatus.STEP_LIMIT)
        self.assertEqual(len(trace.vertex_ids), 2)
        self.assertFalse(trace.is_closed)

    def test_missing_back_edge_is_malformed(self):
        graph = PlanarGraph()
        a = graph.vertex_id(0, 0)
        b = graph.vertex_id(1, 0)
        graph.adjacency[a] = [HalfEdge(to=b, angle=0.0)]
        trace = trace_face(graph, a, b, set(), max_steps=10)
        self.assertEqual(trace.status, FaceStatus.MALFORMED)

    def test_malformed_face_does_not_stop_enumeration(self):
        # Vertex 4 points at vertex 0, which has no half-edge back to it
        stray = self.graph.vertex_id(20, 20)
        self.graph.adjacency[stray] = [HalfEdge(to=0, angle=-2.0)]
        traces = enumerate_faces(self.graph)
        statuses = [t.status for t in traces]
        self.assertEqual(statuses.count(FaceStatus.CLOSED), 2)
        self.assertEqual(statuses.count(FaceStatus.MALFORMED), 1)


class TestDetectRooms(unittest.TestCase):
    def test_rectangle_with_divider_gives_two_rooms(self):
        walls = _walls(*_rectangle(8, 6), (4, 0, 4, 6))
        rooms = detect_rooms(walls)
        self.assertEqual(_summary(rooms), [(24.0, 2.0, 3.0), (24.0, 6.0, 3.0)])
        for room in rooms:
            self.assertEqual(len(room.polygon), 4)
            self.assertTrue(room.id.startswith("room-"))

    def test_divider_drawn_to_wall_interiors(self):
        # Top and bottom walls are drawn whole; the divider only touches them
        walls = _walls((0, 0, 8, 0), (8, 0, 8, 6), (0, 6, 8, 6), (0, 0, 0, 6), (4, 6, 4, 0))
        self.assertEqual(_summary(detect_rooms(walls)), [(24.0, 2.0, 3.0), (24.0, 6.0, 3.0)])

    def test_single_room(self):
        rooms = detect_rooms(_walls(*_rectangle(5, 3)))
        self.assertEqual(len(rooms), 1)
        self.assertAlmostEqual(rooms[0].area, 15.0)
        self.assertAlmostEqual(rooms[0].cx, 2.5)
        self.assertAlmostEqual(rooms[0].cy, 1.5)

    def test_fewer_than_three_walls(self):
        self.assertEqual(detect_rooms(_walls((0, 0, 4, 0), (0, 2, 4, 2))), [])
        self.assertEqual(detect_rooms([]), [])

    def test_degenerate_walls_do_not_count(self):
        walls = _walls((0, 0, 4, 0), (4, 0, 4, 3), (4, 3, 4.004, 3))
        self.assertEqual(detect_rooms(walls), [])

    def test_open_sketch_has_no_rooms(self):
        walls = _walls((0, 0, 4, 0), (4, 0, 4, 3), (4, 3, 0, 3))
        self.assertEqual(detect_rooms(walls), [])

    def test_rectangle_with_gap_has_no_rooms(self):
        walls = _walls((0, 0, 4, 0), (4, 0, 4, 3), (4, 3, 0, 3), (0, 3, 0, 1))
        self.assertEqual(detect_rooms(walls), [])

    def test_dangling_wall_inside_room(self):
        walls = _walls(*_rectangle(6, 4), (3, 0, 3, 2))
        rooms = detect_rooms(walls)
        self.assertEqual(len(rooms), 1)
        self.assertAlmostEqual(rooms[0].area, 24.0)

    def test_large_face_treated_as_exterior_when_other_rooms_exist(self):
        # 10x10 shell with a 1x1 closet: the 99m² face exceeds 80% of the bbox
        walls = _walls(*_rectangle(10, 10), (9, 0, 9, 1), (9, 1, 10, 1))
        rooms = detect_rooms(walls)
        self.assertEqual(_summary(rooms), [(1.0, 9.5, 0.5)])

    def test_corner_closet_hides_main_room(self):
        walls = _walls(*_rectangle(5, 3), (4.2, 0, 4.2, 0.8), (4.2, 0.8, 5, 0.8))
        self.assertEqual(_summary(detect_rooms(walls)), [(0.64, 4.6, 0.4)])

        loose = EngineParams(exterior_area_ratio=1.0)
        areas = sorted(r.area for r in detect_rooms(walls, loose))
        self.assertEqual(areas, [0.64, 14.36])

    def test_slivers_are_discarded(self):
        walls = _walls(*_rectangle(8, 6), (0, 0.3, 8, 0.3))
        areas = sorted(r.area for r in detect_rooms(walls, EngineParams(min_room_area=3.0)))
        self.assertEqual(areas, [45.6])

    def test_min_room_area_parameter(self):
        walls = _walls(*_rectangle(8, 6), (4, 0, 4, 6))
        self.assertEqual(RoomDetector(EngineParams(min_room_area=30)).detect(walls), [])

    def test_idempotent(self):
        walls = _walls(*_rectangle(8, 6), (4, 0, 4, 6), (0, 3, 4, 3))
        first = detect_rooms(walls)
        second = detect_rooms(walls)
        self.assertEqual(_summary(first), _summary(second))
        self.assertEqual(len(first), 3)

    def test_input_is_not_mutated(self):
        walls = _walls(*_rectangle(8, 6), (4, 0, 4, 6))
        before = [w.model_dump() for w in walls]
        detect_rooms(walls)
        self.assertEqual([w.model_dump() for w in walls], before)

    def test_default_apartment(self):
        rooms = detect_rooms(default_apartment().walls)
        self.assertEqual(_summary(rooms), [(16.0, 6.0, 2.0), (32.0, 4.0, 3.33)])

    def test_reference_apartment(self):
        rooms = detect_rooms(reference_apartment().walls)
        self.assertEqual(len(rooms), 18)
        # Balcony, main floor and the addition
        self.assertAlmostEqual(sum(r.area for r in rooms), 16.25 + 112.0 + 30.0)
        self.assertIn((2.25, 8.75, 6.25), _summary(rooms))
        self.assertTrue(all(r.area >= 0.5 for r in rooms))


class TestDegenerateGraphInput(unittest.TestCase):
    def test_graph_with_only_collinear_segments(self):
        graph = PlanarGraph.from_segments([
            Segment(x1=0, y1=0, x2=1, y2=0),
            Segment(x1=1, y1=0, x2=2, y2=0),
        ])
        traces = enumerate_faces(graph)
        self.assertEqual(len(traces), 1)
        self.assertEqual(traces[0].status, FaceStatus.CLOSED)


if __name__ == "__main__":
    unittest.main()

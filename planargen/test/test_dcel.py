# tests/test_dcel.py

import unittest

from planargen.DCEL.dcel import PlanarGraph
from planargen.DCEL.halfedge import PlanarEdge
from planargen.PlanarGeneration.apollonian import create_apollonian_network


class TestHalfEdgePrimitives(unittest.TestCase):

    def setUp(self):
        self.graph = create_apollonian_network(12, 5)

    def test_reversed_edge_is_symmetric(self):
        for e in self.graph.edges:
            r = e.reversed_edge
            self.assertIs(r.reversed_edge, e)
            self.assertIs(e.target, r.start)
            self.assertIs(e.right_face, r.left_face)
            self.assertEqual(e.index, r.index)

    def test_reversed_edge_can_only_be_set_once(self):
        graph = PlanarGraph()
        a, b, c = graph.add_vertex(), graph.add_vertex(), graph.add_vertex()
        f0, f1 = graph.add_face(), graph.add_face()
        ab = PlanarEdge.create(a, b, f0, f1, 0)
        bc = PlanarEdge.create(b, c, f0, f1, 1)
        with self.assertRaises(RuntimeError):
            ab._set_reversed_edge(bc)
        # 失败的设置不能改变原有的配对
        self.assertIs(ab.reversed_edge.reversed_edge, ab)

    def test_navigation_is_consistent(self):
        for e in self.graph.edges:
            for half in (e, e.reversed_edge):
                nxt = half.next_edge()
                prev = half.previous_edge()
                self.assertIs(half.left_face, nxt.left_face)
                self.assertIs(half.left_face, prev.left_face)
                self.assertIs(half.reversed_edge, half.next_edge_at_start().previous_edge())
                self.assertIs(nxt.previous_edge(), half)
                self.assertIs(half.next_edge_at_start().previous_edge_at_start(), half)

    def test_rotation_wraps_around(self):
        v = self.graph.vertices[0]
        self.assertIs(v.next_edge(v.edges[-1]), v.edges[0])
        self.assertIs(v.previous_edge(v.edges[0]), v.edges[-1])

    def test_neighbors_and_edge_to(self):
        v = self.graph.vertices[3]
        cw = v.neighbors_cw()
        self.assertEqual(len(cw), v.degree)
        self.assertEqual(v.neighbors_ccw(), cw[::-1])
        for u in cw:
            self.assertTrue(v.has_neighbor(u))
            self.assertIs(v.edge_to(u).target, u)
        self.assertFalse(v.has_neighbor(v))
        self.assertIsNone(v.edge_to(v))

    def test_face_vertices_follow_edges(self):
        for face in self.graph.faces:
            self.assertEqual(face.size, 3)
            self.assertEqual(face.vertices(), [e.start for e in face.edges])

    def test_repr(self):
        graph = create_apollonian_network(3, 0)
        e0 = graph.edges[0]
        self.assertEqual(repr(e0), "(0->1)[1/0]")
        self.assertEqual(repr(graph.vertices[0]), "<0>[deg:2]{(0->2)[0/1](0->1)[1/0]}")
        self.assertEqual(repr(graph.faces[1]), "<1>[size:3]{(0->1)[1/0](1->2)[1/0](2->0)[1/0]}")
        self.assertIn("[n = 3, m = 3, f = 2]", repr(graph))


class TestPlanarGraphContainer(unittest.TestCase):

    def test_counts_and_arenas(self):
        graph = create_apollonian_network(9, 1)
        self.assertEqual((graph.n, graph.m, graph.f), (9, 21, 14))
        self.assertEqual([v.id for v in graph.vertices], list(range(9)))
        self.assertEqual([face.index for face in graph.faces], list(range(14)))
        self.assertEqual([e.index for e in graph.edges], list(range(21)))

    def test_add_edge_does_not_wire(self):
        graph = PlanarGraph()
        a, b = graph.add_vertex(), graph.add_vertex()
        f = graph.add_face()
        e = PlanarEdge.create(a, b, f, f, 0)
        graph.add_edge(e)
        self.assertEqual(graph.m, 1)
        self.assertEqual(a.degree, 0)
        self.assertEqual(f.size, 0)
        # 未接入旋转的边不能导航，is_valid 只报告不抛异常
        with self.assertLogs("planargen", level="WARNING") as logs:
            self.assertFalse(graph.is_valid())
        self.assertTrue(any("rotation" in line for line in logs.output))

    def test_triangulated_and_three_regular(self):
        k4 = create_apollonian_network(4, 3)
        self.assertTrue(k4.is_triangulated())
        self.assertTrue(k4.is_three_regular())
        graph = create_apollonian_network(10, 3)
        self.assertTrue(graph.is_triangulated())
        self.assertFalse(graph.is_three_regular())

    def test_invalid_face_assignment_is_reported(self):
        graph = create_apollonian_network(4, 2)
        e = graph.edges[0]
        wrong = next(face for face in graph.faces
                     if face is not e.left_face and face is not e.right_face)
        e.left_face = wrong
        with self.assertLogs("planargen", level="WARNING"):
            self.assertFalse(graph.is_valid())

    def test_broken_rotation_is_reported(self):
        graph = create_apollonian_network(6, 2)
        v = graph.vertices[5]
        v.edges[0], v.edges[1] = v.edges[1], v.edges[0]
        with self.assertLogs("planargen", level="WARNING"):
            self.assertFalse(graph.is_valid())

    def test_euler_violation_is_reported(self):
        graph = create_apollonian_network(5, 2)
        graph.add_face()
        with self.assertLogs("planargen", level="WARNING") as logs:
            self.assertFalse(graph.is_valid())
        self.assertTrue(any("Euler" in line for line in logs.output))


if __name__ == "__main__":
    unittest.main()

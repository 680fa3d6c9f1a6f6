# tests/test_one_planar.py

import unittest

from planargen.PlanarGeneration.apollonian import create_apollonian_network
from planargen.PlanarGeneration.flips import flip_edges
from planargen.PlanarGeneration.one_planar import create_one_planar_graph
from planargen.PlanarGeneration.convert import convert_planar_graph_to_graph


class TestOnePlanarAugmentation(unittest.TestCase):

    def make_triangulation(self, n, flips, seed):
        graph = create_apollonian_network(n, seed)
        flip_edges(graph, flips, seed + 1)
        return graph

    def test_added_edges_are_new_and_marked(self):
        for n, flips, seed in [(6, 0, 1), (20, 40, 2), (50, 100, 3), (120, 300, 4)]:
            graph = self.make_triangulation(n, flips, seed)
            m = graph.m
            original = {frozenset(p) for p in graph.edge_pairs()}

            create_one_planar_graph(graph, seed + 2)

            added = graph.edges[m:]
            self.assertEqual([e.index for e in added], list(range(m, graph.m)))
            for e in added:
                pair = frozenset((e.start.id, e.target.id))
                self.assertEqual(len(pair), 2, msg=f"self-loop {e}")
                self.assertNotIn(pair, original)
            self.assertTrue(all(e.index < m for e in graph.edges[:m]))

            flat = convert_planar_graph_to_graph(graph)
            self.assertTrue(flat.is_valid())
            self.assertLessEqual(graph.m, 4 * n - 8)

    def test_edges_are_added(self):
        graph = self.make_triangulation(60, 120, 5)
        m = graph.m
        create_one_planar_graph(graph, 6)
        self.assertGreater(graph.m, m)

    def test_rotations_stay_consistent(self):
        graph = self.make_triangulation(40, 80, 7)
        create_one_planar_graph(graph, 8)
        for v in graph.vertices:
            for e in v.edges:
                self.assertIs(e.start, v)
                self.assertIn(e.reversed_edge, e.target.edges)
        self.assertEqual(sum(v.degree for v in graph.vertices), 2 * graph.m)

    def test_crossed_edge_hosts_one_crossing(self):
        # 每条新边 x-y 的两侧在 x 处都是原始边
        graph = self.make_triangulation(45, 90, 9)
        m = graph.m
        create_one_planar_graph(graph, 10)
        for e in graph.edges[m:]:
            for half in (e, e.reversed_edge):
                self.assertLess(half.previous_edge_at_start().index, m)
                self.assertLess(half.next_edge_at_start().index, m)

    def test_each_original_edge_crossed_at_most_once(self):
        graph = self.make_triangulation(45, 90, 13)
        m = graph.m
        original = {frozenset(p): e.index for p, e in zip(graph.edge_pairs(), graph.edges)}
        create_one_planar_graph(graph, 14)

        crossed = []
        for e in graph.edges[m:]:
            # x-y 在 x 处夹在 x-u 与 x-v 之间，被交叉的边是 u-v
            u = e.previous_edge_at_start().target
            v = e.next_edge_at_start().target
            uv = frozenset((u.id, v.id))
            self.assertIn(uv, original, msg=f"{e} does not cross an original edge")
            back = e.reversed_edge
            self.assertEqual(frozenset((back.previous_edge_at_start().target.id,
                                        back.next_edge_at_start().target.id)), uv)
            crossed.append(original[uv])
        self.assertGreater(len(crossed), 0)
        self.assertEqual(len(crossed), len(set(crossed)))

    def test_small_graphs(self):
        triangle = create_apollonian_network(3, 0)
        create_one_planar_graph(triangle, 0)
        self.assertEqual(triangle.m, 3)

        k4 = create_apollonian_network(4, 0)
        create_one_planar_graph(k4, 0)
        self.assertEqual(k4.m, 6)

    def test_name_and_reproducibility(self):
        a = self.make_triangulation(30, 50, 11)
        b = self.make_triangulation(30, 50, 11)
        name = a.name
        create_one_planar_graph(a, 12)
        create_one_planar_graph(b, 12)
        self.assertEqual(a.name, f"1-{name}")
        self.assertEqual(a.edge_pairs(), b.edge_pairs())


if __name__ == "__main__":
    unittest.main()

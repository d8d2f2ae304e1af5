import unittest

import vgraph as vg


class Line(vg.VGraph):
    def out_edges(self, node):
        return {1: [2], 2: [3]}.get(node, [])

    def dist(self, from_node, to_node):
        return 1


class Cycles(vg.VGraph):
    def out_edges(self, node):
        return {
            1: [2, 3],
            2: [3, 6],
            3: [4, 5],
            4: [10, 5],
            5: [1],
            6: [2],
            7: [8],
            8: [9],
            9: [10],
            10: [1],
        }.get(node, [])

    def dist(self, from_node, to_node):
        return 3 if from_node == 3 else 1


class CountingGraph(vg.VGraph):
    def __init__(self, graph):
        self.graph = graph
        self.expanded = []

    def out_edges(self, node):
        self.expanded.append(node)
        return self.graph.out_edges(node)

    def dist(self, from_node, to_node):
        return self.graph.dist(from_node, to_node)


class TestBFS(unittest.TestCase):
    def test_line(self):
        self.assertEqual(vg.breadth_first_search(Line(), 1, 3), [1, 2, 3])

    def test_start_is_end(self):
        g = CountingGraph(Line())
        self.assertEqual(vg.breadth_first_search(g, 2, 2), [2])
        self.assertEqual(g.expanded, [])

    def test_unreachable_terminates(self):
        self.assertIsNone(vg.breadth_first_search(Cycles(), 1, 33))

    def test_unreachable_in_graph(self):
        # 7 leads into the cycle, but nothing leads back to 7
        self.assertIsNone(vg.breadth_first_search(Cycles(), 1, 7))

    def test_fewest_edges(self):
        self.assertEqual(vg.breadth_first_search(Cycles(), 1, 5), [1, 3, 5])
        self.assertEqual(vg.breadth_first_search(Cycles(), 6, 10), [6, 2, 3, 4, 10])

    def test_ignores_distances(self):
        g = vg.AdjacencyGraph(
            {1: [2, 3], 3: [4], 4: [2]},
            distances={(1, 2): 10},
        )
        self.assertEqual(vg.breadth_first_search(g, 1, 2), [1, 2])

    def test_edge_back_to_start(self):
        g = vg.AdjacencyGraph({1: [2], 2: [1, 3]})
        self.assertEqual(vg.breadth_first_search(g, 1, 3), [1, 2, 3])

    def test_each_node_expanded_once(self):
        g = CountingGraph(Cycles())
        self.assertIsNone(vg.breadth_first_search(g, 1, 33))
        self.assertEqual(sorted(g.expanded), [1, 2, 3, 4, 5, 6, 10])

    def test_predicate_goal(self):
        path = vg.BFS().search(Cycles(), 1, lambda node: node > 5)
        self.assertEqual(path, [1, 2, 6])

    def test_max_iterations(self):
        self.assertIsNone(vg.BFS(max_iterations=1).search(Line(), 1, lambda n: n == 3))
        self.assertEqual(
            vg.BFS(max_iterations=2).search(Line(), 1, lambda n: n == 3), [1, 2, 3]
        )

    def test_verbose(self):
        self.assertEqual(
            vg.BFS(verbose=True).search(Cycles(), 1, lambda n: n == 10),
            [1, 3, 4, 10],
        )

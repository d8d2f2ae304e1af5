import itertools
from typing import Callable

from .virtual_graph import VGraph


class FilterEdgesGraph(VGraph):
    """
    Restricts the edges of an underlying graph to those accepted by ``include_edge``.
    Distances are those of the underlying graph.

    :param graph: The graph to filter the edges of.
    :param include_edge: Returns True if the edge from s to t should be kept.
    """

    def __init__(self, graph: VGraph, include_edge: Callable[[object, object], bool]):
        self.graph = graph
        self.include_edge = include_edge

    def out_edges(self, node):
        return [t for t in self.graph.out_edges(node) if self.include_edge(node, t)]

    def dist(self, from_node, to_node):
        return self.graph.dist(from_node, to_node)

    def zero_distance(self):
        return self.graph.zero_distance()


class LimitEdgesGraph(VGraph):
    """
    Limits the number of edges that can be expanded from a node, by only expanding the first
    ``limit`` edges.

    :param graph: The graph to limit the edges of.
    :param limit: The limit on the number of edges to expand.
    """

    def __init__(self, graph: VGraph, limit: int):
        assert limit >= 0, "Cannot have a negative edge limit."
        self.graph = graph
        self.limit = limit

    def out_edges(self, node):
        return list(itertools.islice(self.graph.out_edges(node), self.limit))

    def dist(self, from_node, to_node):
        return self.graph.dist(from_node, to_node)

    def zero_distance(self):
        return self.graph.zero_distance()

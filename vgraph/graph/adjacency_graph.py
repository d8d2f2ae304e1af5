from typing import Dict, Hashable, Iterable, Mapping, Optional, Tuple

from frozendict import frozendict

from .virtual_graph import VGraph


class AdjacencyGraph(VGraph):
    """
    A finite graph given explicitly as an adjacency mapping. The mappings are frozen on
    construction, so a single instance can be searched from several threads at once.

    :param edges: Maps each node to its successors, in expansion order. Nodes that
        do not appear have no successors.
    :param distances: Maps ``(from_node, to_node)`` to the cost of that edge. Edges
        that do not appear cost ``default_distance``.
    :param default_distance: The cost of edges missing from ``distances``.
    """

    def __init__(
        self,
        edges: Mapping[Hashable, Iterable[Hashable]],
        distances: Optional[Mapping[Tuple[Hashable, Hashable], object]] = None,
        default_distance=1,
    ):
        self.edges: Dict[Hashable, Tuple[Hashable]] = frozendict(
            {node: tuple(successors) for node, successors in edges.items()}
        )
        self.distances = frozendict(distances or {})
        self.default_distance = default_distance

    def out_edges(self, node):
        return self.edges.get(node, ())

    def dist(self, from_node, to_node):
        if to_node not in self.out_edges(from_node):
            raise ValueError(f"No edge from {from_node!r} to {to_node!r}")
        return self.distances.get((from_node, to_node), self.default_distance)

    def nodes(self):
        """
        All the nodes mentioned in the graph, either as a source or as a target of an edge.
        """
        result = set(self.edges)
        for successors in self.edges.values():
            result.update(successors)
        return result

from typing import Sequence, TypeVar

from vgraph.graph.virtual_graph import VGraph

N = TypeVar("N")
D = TypeVar("D")


class InvalidPathError(Exception):
    """
    Raised when a path contains two consecutive nodes that are not connected by an edge.
    """


def path_length(graph: VGraph, path: Sequence[N], check_edges: bool = False) -> D:
    """
    Computes the total distance along a path, i.e., the sum of ``graph.dist`` over
    each pair of consecutive nodes. Paths with fewer than two nodes have length
    ``graph.zero_distance()``.

    :param graph: The graph the path lives in.
    :param path: The nodes of the path, in order.
    :param check_edges: If True, verify that each step of the path is an edge of the
        graph, raising ``InvalidPathError`` otherwise.
    """
    distance = graph.zero_distance()
    for from_node, to_node in zip(path, path[1:]):
        if check_edges and to_node not in graph.out_edges(from_node):
            raise InvalidPathError(
                f"No edge from {from_node!r} to {to_node!r} in path {list(path)!r}"
            )
        distance = distance + graph.dist(from_node, to_node)
    return distance

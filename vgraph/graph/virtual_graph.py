from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, TypeVar

N = TypeVar("N")
D = TypeVar("D")


class VGraph(ABC, Generic[N, D]):
    """
    Represents a virtual graph: nodes are never stored, they are produced on demand
    by ``out_edges``. The graph may be infinite, e.g., the states of a puzzle.

    Nodes must be hashable. Distances must support ``+`` and ``<``, and should be
    non-negative for the shortest path guarantees of the searches to hold.
    """

    @abstractmethod
    def out_edges(self, node: N) -> Iterable[N]:
        """
        Find the direct successors of a node. Called every time the node is expanded,
        so it should be cheap or memoized by the implementation.
        """

    @abstractmethod
    def dist(self, from_node: N, to_node: N) -> D:
        """
        The cost of the edge from ``from_node`` to ``to_node``. Only called when
        ``to_node`` is one of ``out_edges(from_node)``.
        """

    def zero_distance(self) -> D:
        """
        The identity distance, i.e., the cost of an empty path.
        """
        return 0

    def filter_edges(self, include_edge: Callable[[N, N], bool]) -> "VGraph[N, D]":
        """
        Produce a graph that only contains the edges for which ``include_edge`` is True.
        """
        # pylint: disable=cyclic-import
        from .graph_transformer import FilterEdgesGraph

        return FilterEdgesGraph(self, include_edge)

    def limit_edges(self, limit: int) -> "VGraph[N, D]":
        """
        Produce a graph that only expands the first ``limit`` edges of each node.
        """
        # pylint: disable=cyclic-import
        from .graph_transformer import LimitEdgesGraph

        return LimitEdgesGraph(self, limit)

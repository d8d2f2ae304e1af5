from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from typing_extensions import TypeVar

from vgraph.graph.virtual_graph import VGraph

N = TypeVar("N")


class SearchStrategy(ABC):
    @abstractmethod
    def search(
        self, graph: VGraph, start: N, is_goal: Callable[[N], bool]
    ) -> Optional[List[N]]:
        """Find a path from ``start`` to a node satisfying ``is_goal``.

        Args:
            graph (VGraph): The graph to search over.
            start: The node to start from.
            is_goal: Predicate identifying the goal nodes.

        Returns:
            The path from ``start`` to the goal, both included, or None if no goal
            node was found.
        """

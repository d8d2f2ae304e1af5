import heapq
from dataclasses import dataclass
from typing import Callable, Generic, List, Optional, TypeVar

from tqdm.auto import tqdm

from vgraph.graph.virtual_graph import VGraph

from .back_track import back_track
from .search_strategy import SearchStrategy

N = TypeVar("N")
D = TypeVar("D")


def a_star_search(
    graph: VGraph,
    start: N,
    is_goal: Callable[[N], bool],
    heuristic: Callable[[N], D],
) -> Optional[List[N]]:
    """
    Finds a path of minimal total distance from ``start`` to any node satisfying
    ``is_goal``, guided by ``heuristic``.

    The result is optimal when all edge distances are non-negative and the heuristic is
    admissible (never overestimates the remaining distance) and consistent
    (``h(u) <= dist(u, v) + h(v)`` on every edge). A heuristic that always returns
    zero makes this Dijkstra's algorithm. Negative distances and inconsistent heuristics
    are not detected; they can produce suboptimal paths, and a graph with infinitely
    many reachable nodes and no reachable goal is searched forever.

    :param graph: Graph to search over
    :param start: Node to start from
    :param is_goal: Predicate identifying the goal nodes
    :param heuristic: Estimate of the remaining distance from a node to a goal
    :return: The path from ``start`` to the goal, both included, or None if no goal
        is reachable. If ``is_goal(start)``, the path is ``[start]``.
    """
    return AStar(heuristic).search(graph, start, is_goal)


class AStar(SearchStrategy):
    """
    Performs an A* search on the given graph. The open set is a heap of nodes ordered
    by ``f = g + h``, where ``g`` is the best known distance from the start and ``h`` is
    the heuristic. Nodes with the same ``f`` are ordered by the nodes themselves, so nodes
    must be comparable with ``<`` when ties can occur.

    A node is finalized the first time it is popped; later heap entries for it are stale
    and skipped, so every node is expanded at most once.

    :param heuristic: Estimate of the remaining distance from a node to a goal. If None,
        the zero heuristic is used.
    :param max_iterations: Maximum number of nodes to expand. If None, no limit is applied.
        If the limit is reached before a goal is found, the search returns None.
    :param verbose: Whether to display a progress bar.
    """

    def __init__(
        self,
        heuristic: Optional[Callable[[N], D]] = None,
        max_iterations: Optional[int] = None,
        verbose: bool = False,
    ):
        assert max_iterations is None or max_iterations > 0
        self.heuristic = heuristic
        self.max_iterations = max_iterations
        self.verbose = verbose

    def estimate(self, graph: VGraph, node: N) -> D:
        """
        The heuristic estimate for the given node.
        """
        if self.heuristic is None:
            return graph.zero_distance()
        return self.heuristic(node)

    def search(
        self, graph: VGraph, start: N, is_goal: Callable[[N], bool]
    ) -> Optional[List[N]]:
        prev = {}
        dist_from_start = {start: graph.zero_distance()}
        finalized = set()
        fringe = [_AStarNode(self.estimate(graph, start), start)]
        iterations = 0
        with tqdm(disable=not self.verbose, leave=False) as pbar:
            while fringe:
                entry = heapq.heappop(fringe)
                node = entry.node
                if node in finalized:
                    continue
                finalized.add(node)
                if is_goal(node):
                    return back_track(prev, node)
                if self.max_iterations is not None and iterations >= self.max_iterations:
                    break
                iterations += 1
                node_dist = dist_from_start[node]
                for child in graph.out_edges(node):
                    if child in finalized:
                        continue
                    child_dist = node_dist + graph.dist(node, child)
                    if child in dist_from_start and not (
                        child_dist < dist_from_start[child]
                    ):
                        continue
                    dist_from_start[child] = child_dist
                    prev[child] = node
                    heapq.heappush(
                        fringe,
                        _AStarNode(child_dist + self.estimate(graph, child), child),
                    )
                pbar.set_description(
                    f"Cost: {entry.cost}, Fringe: {len(fringe)}, Done: {len(finalized)}"
                )
                pbar.update(1)
        return None


@dataclass(order=True)
class _AStarNode(Generic[N, D]):
    """
    Represents an entry of the A* open set.
    """

    cost: D
    node: N

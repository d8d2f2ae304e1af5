from collections import deque
from typing import Callable, List, Optional, TypeVar

from tqdm.auto import tqdm

from vgraph.graph.virtual_graph import VGraph

from .back_track import back_track
from .search_strategy import SearchStrategy

N = TypeVar("N")


def breadth_first_search(graph: VGraph, start: N, end: N) -> Optional[List[N]]:
    """
    Finds a path from ``start`` to ``end`` with the fewest edges, ignoring distances.

    :param graph: Graph to search over
    :param start: Node to start from
    :param end: Node to find
    :return: The path from ``start`` to ``end``, both included, or None if ``end`` is
        not reachable. If ``start == end`` the path is ``[start]``.
    """
    return BFS().search(graph, start, lambda node: node == end)


class BFS(SearchStrategy):
    """
    Performs a breadth-first search on the given graph, returning the path with
    the fewest edges to the first goal node dequeued. Each node is enqueued at most
    once, so the search terminates on any finite graph, even one with cycles.

    :param max_iterations: Maximum number of nodes to expand. If None, no limit is applied.
        If the limit is reached before a goal is found, the search returns None.
    :param verbose: Whether to display a progress bar.
    """

    def __init__(self, max_iterations: Optional[int] = None, verbose: bool = False):
        assert max_iterations is None or max_iterations > 0
        self.max_iterations = max_iterations
        self.verbose = verbose

    def search(
        self, graph: VGraph, start: N, is_goal: Callable[[N], bool]
    ) -> Optional[List[N]]:
        fringe = deque([start])
        prev = {}
        # the start is discovered up front, so it never gets a predecessor
        discovered = {start}
        iterations = 0
        with tqdm(disable=not self.verbose, leave=False) as pbar:
            while fringe:
                node = fringe.popleft()
                if is_goal(node):
                    return back_track(prev, node)
                if self.max_iterations is not None and iterations >= self.max_iterations:
                    break
                iterations += 1
                for child in graph.out_edges(node):
                    if child in discovered:
                        continue
                    discovered.add(child)
                    prev[child] = node
                    fringe.append(child)
                pbar.set_description(f"Fringe: {len(fringe)}, Seen: {len(discovered)}")
                pbar.update(1)
        return None

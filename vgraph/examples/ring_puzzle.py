# A puzzle with tiles arranged in a ring. A token starts on one of the tiles with
# some sum, and each turn it moves one tile left or right, adding the value of the
# tile it lands on to the sum. The goal is to reach a target sum in as few turns as
# possible. Once the sum goes negative the game is over.

from dataclasses import dataclass
from typing import List, Optional, Sequence

from vgraph.graph.virtual_graph import VGraph
from vgraph.search.astar_search import a_star_search


@dataclass(frozen=True, order=True)
class RingState:
    """
    A state of the ring puzzle.

    :field position: Index of the tile the token is on.
    :field sum: The sum accumulated so far.
    """

    position: int
    sum: int


class RingPuzzle(VGraph):
    """
    The ring puzzle as a graph over ``RingState``, where every move costs 1.

    :param spaces: The values of the tiles, in ring order.
    """

    def __init__(self, spaces: Sequence[int]):
        assert len(spaces) > 0, "Cannot have an empty ring."
        self.spaces = tuple(spaces)

    def move_to(self, state: RingState, position: int) -> RingState:
        position = position % len(self.spaces)
        return RingState(position, state.sum + self.spaces[position])

    def out_edges(self, node: RingState) -> List[RingState]:
        if node.sum < 0:
            return []
        return [
            self.move_to(node, node.position - 1),
            self.move_to(node, node.position + 1),
        ]

    def dist(self, from_node, to_node):
        return 1


def solve_ring_puzzle(
    spaces: Sequence[int], start_sum: int, target: int = 0, start_position: int = 0
) -> Optional[List[RingState]]:
    """
    Finds the shortest sequence of states that reaches ``target``, or None if there is
    none. The search does not terminate if the reachable sums are unbounded and
    ``target`` is never reached.
    """
    return a_star_search(
        RingPuzzle(spaces),
        RingState(start_position, start_sum),
        lambda state: state.sum == target,
        lambda state: 0,
    )

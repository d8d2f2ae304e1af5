from typing import Dict, List, TypeVar

N = TypeVar("N")


def back_track(prev: Dict[N, N], end: N) -> List[N]:
    """
    Given a map from each discovered node to the node it was reached from, produce
    the path from the root of the map (the start of the search) to ``end``.

    The map must be acyclic, which holds for the maps built by the searches, since the
    start node never receives a predecessor.

    :param prev: Map from each node to its predecessor.
    :param end: The last node of the path.
    """
    path = [end]
    cur = end
    while cur in prev:
        cur = prev[cur]
        path.append(cur)
    path.reverse()
    return path

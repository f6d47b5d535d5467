"""Breadth-first search for augmenting paths in the residual network."""

from collections import deque
from typing import Dict, List, Optional

from .network import FlowNetwork


NO_PARENT = -1


def find_augmenting_path(network: FlowNetwork) -> Optional[Dict[int, int]]:
    """
    Find a shortest source->sink path over edges with residual capacity.

    Returns the parent map of the search (source maps to NO_PARENT) when the
    sink is reached, or None once every reachable node has been explored.
    Neighbours are visited in adjacency order, which fixes the choice among
    equally short paths.
    """
    source, sink = network.source, network.sink
    parents: Dict[int, int] = {source: NO_PARENT}
    queue = deque([source])

    while queue:
        u = queue.popleft()
        for v in network.adjacency[u]:
            if v in parents or network.residual(u, v) <= 0:
                continue
            parents[v] = u
            if v == sink:
                return parents
            queue.append(v)

    return None


def path_from_parents(parents: Dict[int, int], source: int, sink: int) -> List[int]:
    """Walk a parent map back from the sink into a source->sink node list."""
    if sink not in parents:
        raise KeyError(f"Sink {sink} was not reached by the search")

    path = [sink]
    node = sink
    while node != source:
        node = parents[node]
        path.append(node)
    path.reverse()
    return path

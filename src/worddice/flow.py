"""Edmonds-Karp maximum flow over a dice/letter network."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .models import NodeKind
from .network import FlowNetwork
from .search import find_augmenting_path, path_from_parents


class FlowOutcome(BaseModel):
    """Result of running max flow on one network."""
    total_flow: int = 0
    assignment: List[Optional[int]] = Field(default_factory=list)  # die index per letter position
    augmentations: int = 0


def bottleneck(network: FlowNetwork, path: List[int]) -> int:
    """Smallest residual capacity along a path."""
    return min(network.residual(u, v) for u, v in zip(path, path[1:]))


def augment(network: FlowNetwork, path: List[int]) -> int:
    """Push the bottleneck amount of flow along a path and return it."""
    amount = bottleneck(network, path)
    for u, v in zip(path, path[1:]):
        network.capacity[u][v] -= amount
        network.capacity[v][u] += amount
    return amount


def record_bindings(network: FlowNetwork, path: List[int], assignment: List[Optional[int]]) -> None:
    """
    Write the die used for each letter reached by a die->letter hop.

    Letter->die hops on the same path withdraw an earlier binding; the
    letter they leave is always re-bound by a die->letter hop on this path.
    """
    for u, v in zip(path, path[1:]):
        a, b = network.node_at(u), network.node_at(v)
        if a.kind == NodeKind.DIE and b.kind == NodeKind.LETTER:
            assignment[b.index] = a.index


def edmonds_karp(network: FlowNetwork) -> FlowOutcome:
    """
    Run Edmonds-Karp until no augmenting path remains.

    The network's residual capacities are updated in place. Returns the
    total flow and the die bound to each letter position (None where no
    die reached that letter).
    """
    assignment: List[Optional[int]] = [None] * len(network.word)
    total_flow = 0
    augmentations = 0

    while True:
        parents = find_augmenting_path(network)
        if parents is None:
            break

        path = path_from_parents(parents, network.source, network.sink)
        total_flow += augment(network, path)
        record_bindings(network, path, assignment)
        augmentations += 1

    return FlowOutcome(
        total_flow=total_flow,
        assignment=assignment,
        augmentations=augmentations,
    )

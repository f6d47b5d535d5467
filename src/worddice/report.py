"""Formatting spelling results and flow networks for display."""

import json
from pathlib import Path

from .models import NodeKind, RunResult, SpellResult
from .network import FlowNetwork


def format_result(result: SpellResult) -> str:
    """
    Format one result the way the command line prints it.

    Spelled words print as `0,2,1: word`, others as `Cannot spell word`.
    """
    if result.spelled:
        return f"{','.join(str(d) for d in result.dice)}: {result.word}"
    return f"Cannot spell {result.word}"


def render_network(network: FlowNetwork) -> str:
    """
    Render the forward edges of a network, one line per node.

    Example for dice ["ab", "a"] and word "ab":
        Node 0: SOURCE Edges to 1 2
        Node 1: ab Edges to 3 4
        Node 2: a Edges to 3
        Node 3: a Edges to 5
        Node 4: b Edges to 5
        Node 5: SINK Edges to
    """
    lines = []

    for u in range(network.size):
        node = network.node_at(u)
        targets = [v for v in network.adjacency[u] if network.original[u][v] > 0]

        if node.kind == NodeKind.SOURCE:
            label = "SOURCE"
        elif node.kind == NodeKind.DIE:
            label = network.dice[node.index].faces
        elif node.kind == NodeKind.LETTER:
            label = network.word[node.index]
        else:
            label = "SINK"

        line = f"Node {u}: {label} Edges to"
        if targets:
            line += " " + " ".join(str(v) for v in targets)
        lines.append(line)

    return "\n".join(lines)


def save_run(run: RunResult, path: str | Path) -> None:
    """Save a run record to a JSON file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(run.model_dump(mode="json"), f, indent=2, default=str)

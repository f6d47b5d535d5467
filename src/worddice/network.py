"""Flow network construction for spelling a word with dice."""

from typing import List, Tuple

from pydantic import BaseModel, Field

from .models import Die, Node, NodeKind, SOURCE, SINK, die_node, letter_node


class FlowNetwork(BaseModel):
    """
    Layered unit-capacity network: source -> dice -> letters -> sink.

    Nodes are addressed either by their tagged `Node` value or by a dense
    integer id used to index the capacity matrix and adjacency lists.
    Dense ids are laid out as source, dice in pool order, letters in word
    order, sink.

    Attributes:
        dice: The dice pool
        word: The word being spelled
        capacity: Residual capacity matrix, mutated while flow is pushed
        original: Capacity matrix as built, never mutated
        adjacency: Neighbours of each node (both edge directions), ascending
    """

    dice: List[Die] = Field(default_factory=list)
    word: str = ""
    capacity: List[List[int]] = Field(default_factory=list)
    original: List[List[int]] = Field(default_factory=list)
    adjacency: List[List[int]] = Field(default_factory=list)

    @property
    def size(self) -> int:
        """Total number of nodes."""
        return len(self.dice) + len(self.word) + 2

    @property
    def source(self) -> int:
        return self.node_id(SOURCE)

    @property
    def sink(self) -> int:
        return self.node_id(SINK)

    def node_id(self, node: Node) -> int:
        """Map a tagged node to its dense id."""
        if node.kind == NodeKind.SOURCE:
            return 0
        if node.kind == NodeKind.DIE:
            if not 0 <= node.index < len(self.dice):
                raise IndexError(f"Die index {node.index} out of range for {len(self.dice)} dice")
            return 1 + node.index
        if node.kind == NodeKind.LETTER:
            if not 0 <= node.index < len(self.word):
                raise IndexError(f"Letter position {node.index} out of range for '{self.word}'")
            return 1 + len(self.dice) + node.index
        return 1 + len(self.dice) + len(self.word)

    def node_at(self, node_id: int) -> Node:
        """Map a dense id back to its tagged node."""
        if not 0 <= node_id < self.size:
            raise IndexError(f"Node id {node_id} out of range for network of size {self.size}")
        if node_id == 0:
            return SOURCE
        if node_id <= len(self.dice):
            return die_node(node_id - 1)
        if node_id <= len(self.dice) + len(self.word):
            return letter_node(node_id - 1 - len(self.dice))
        return SINK

    def add_edge(self, u: Node, v: Node, capacity: int = 1) -> None:
        """Add a forward edge u->v and its zero-capacity reverse edge."""
        a, b = self.node_id(u), self.node_id(v)
        self.capacity[a][b] += capacity
        self.original[a][b] += capacity
        if b not in self.adjacency[a]:
            self.adjacency[a].append(b)
        if a not in self.adjacency[b]:
            self.adjacency[b].append(a)

    def residual(self, u: int, v: int) -> int:
        """Residual capacity of the edge between two dense ids."""
        return self.capacity[u][v]

    def edges(self) -> List[Tuple[int, int]]:
        """All forward edges as built, in (u, v) order."""
        return [
            (u, v)
            for u in range(self.size)
            for v in self.adjacency[u]
            if self.original[u][v] > 0
        ]

    def flow_on(self, u: int, v: int) -> int:
        """Flow currently pushed across the forward edge u->v."""
        return self.original[u][v] - self.capacity[u][v]


def build_network(dice: List[Die], word: str, ignore_case: bool = False) -> FlowNetwork:
    """
    Build a fresh flow network for one word against the dice pool.

    Every source->die, matching die->letter and letter->sink edge gets
    capacity 1; each has a reverse edge starting at 0 so that flow can be
    withdrawn later. Adjacency is sorted so that searches enumerate dice
    by ascending index and letters by ascending position.
    """
    size = len(dice) + len(word) + 2
    network = FlowNetwork(
        dice=list(dice),
        word=word,
        capacity=[[0] * size for _ in range(size)],
        original=[[0] * size for _ in range(size)],
        adjacency=[[] for _ in range(size)],
    )

    for j in range(len(dice)):
        network.add_edge(SOURCE, die_node(j))

    for position, letter in enumerate(word):
        for j, die in enumerate(dice):
            if die.contains(letter, ignore_case=ignore_case):
                network.add_edge(die_node(j), letter_node(position))

    for position in range(len(word)):
        network.add_edge(letter_node(position), SINK)

    for neighbours in network.adjacency:
        neighbours.sort()

    return network

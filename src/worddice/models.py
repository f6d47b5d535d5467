"""Data models for dice spelling."""

from enum import Enum
from typing import List, Optional, NamedTuple
from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    """Layer a flow network node belongs to."""
    SOURCE = "SOURCE"
    DIE = "DIE"
    LETTER = "LETTER"
    SINK = "SINK"


class Node(NamedTuple):
    """A flow network node: its layer plus a die index or letter position."""
    kind: NodeKind
    index: int = 0


SOURCE = Node(NodeKind.SOURCE)
SINK = Node(NodeKind.SINK)


def die_node(index: int) -> Node:
    return Node(NodeKind.DIE, index)


def letter_node(position: int) -> Node:
    return Node(NodeKind.LETTER, position)


class Die(BaseModel):
    """A single die: the letters printed on its faces."""
    index: int = Field(..., ge=0)
    faces: str

    def contains(self, letter: str, ignore_case: bool = False) -> bool:
        """Check whether any face of the die shows the letter."""
        if not letter:
            return False
        if ignore_case:
            return letter.lower() in self.faces.lower()
        return letter in self.faces


class InputIssue(BaseModel):
    """A non-fatal problem found while reading input."""
    code: str
    message: str
    line: Optional[int] = None


class SpellResult(BaseModel):
    """Outcome of spelling one word with the dice pool."""
    word: str
    spelled: bool
    dice: Optional[List[int]] = None  # die index per letter position, only on success
    flow: int = 0
    error: Optional[str] = None


class RunConfig(BaseModel):
    """Configuration for a spelling run."""
    ignore_case: bool = False
    strip_whitespace: bool = False
    show_graph: bool = False


class RunResult(BaseModel):
    """Complete record of a spelling run."""
    config: RunConfig = Field(default_factory=RunConfig)
    dice: List[str] = Field(default_factory=list)
    results: List[SpellResult] = Field(default_factory=list)
    issues: List[InputIssue] = Field(default_factory=list)
    spelled_count: int = 0
    failed_count: int = 0
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0

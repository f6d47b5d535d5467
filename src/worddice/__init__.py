"""Spelling words with dice via bipartite matching."""

from .models import (
    NodeKind,
    Node,
    Die,
    InputIssue,
    SpellResult,
    RunConfig,
    RunResult,
)
from .network import FlowNetwork, build_network
from .search import find_augmenting_path, path_from_parents, NO_PARENT
from .flow import FlowOutcome, edmonds_karp, augment
from .solver import spell_word, spell_words, interpret, NO_VALID_ASSIGNMENT
from .loading import load_dice, load_words, parse_dice, read_lines
from .report import format_result, render_network, save_run

__all__ = [
    # Models
    "NodeKind",
    "Node",
    "Die",
    "InputIssue",
    "SpellResult",
    "RunConfig",
    "RunResult",
    # Flow network
    "FlowNetwork",
    "build_network",
    "find_augmenting_path",
    "path_from_parents",
    "NO_PARENT",
    "FlowOutcome",
    "edmonds_karp",
    "augment",
    # Spelling
    "spell_word",
    "spell_words",
    "interpret",
    "NO_VALID_ASSIGNMENT",
    # Input / output
    "load_dice",
    "load_words",
    "parse_dice",
    "read_lines",
    "format_result",
    "render_network",
    "save_run",
]

"""Reading dice and word lists from line-oriented text files."""

from pathlib import Path
from typing import List, Tuple

from .models import Die, InputIssue


def split_lines(text: str, strip_whitespace: bool = False) -> List[str]:
    """
    Split text into lines, dropping line terminators.

    A trailing newline does not produce an extra empty line, but blank
    lines inside the text are kept.
    """
    lines = text.splitlines()
    if strip_whitespace:
        lines = [line.strip() for line in lines]
    return lines


def read_lines(path: str | Path, strip_whitespace: bool = False) -> List[str]:
    """Read a text file into a list of lines."""
    path = Path(path)

    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return split_lines(f.read(), strip_whitespace=strip_whitespace)


def parse_dice(lines: List[str]) -> Tuple[List[Die], List[InputIssue]]:
    """
    Turn dice lines into Die models with issue collection.

    Blank lines still become dice (matching nothing) so that the indices of
    the dice after them stay aligned with their line numbers.
    """
    dice: List[Die] = []
    issues: List[InputIssue] = []

    for i, line in enumerate(lines):
        if not line:
            issues.append(InputIssue(
                code="EMPTY_DIE",
                message=f"Die {i} has no letters and cannot spell anything",
                line=i + 1,
            ))
        dice.append(Die(index=i, faces=line))

    return dice, issues


def load_dice(path: str | Path, strip_whitespace: bool = False) -> Tuple[List[Die], List[InputIssue]]:
    """Load the dice pool, one die per line."""
    return parse_dice(read_lines(path, strip_whitespace=strip_whitespace))


def load_words(path: str | Path, strip_whitespace: bool = False) -> List[str]:
    """Load the words to spell, one per line. Empty lines are empty words."""
    return read_lines(path, strip_whitespace=strip_whitespace)

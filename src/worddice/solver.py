"""
Spelling words with a pool of dice.

Each word is checked independently: a fresh flow network is built, max flow
is run to convergence, and the flow is compared to the word length. Flow
equal to the length means every letter got its own die.
"""

from typing import Callable, List, Optional, Sequence, Union

from .models import Die, SpellResult
from .network import build_network
from .flow import FlowOutcome, edmonds_karp


NO_VALID_ASSIGNMENT = "NO_VALID_ASSIGNMENT"

DiceInput = Sequence[Union[Die, str]]


def as_dice(dice: DiceInput) -> List[Die]:
    """Accept either Die models or raw face strings."""
    return [
        die if isinstance(die, Die) else Die(index=i, faces=die)
        for i, die in enumerate(dice)
    ]


def interpret(word: str, outcome: FlowOutcome) -> SpellResult:
    """Turn a max-flow outcome into a spelled / not-spelled verdict."""
    if outcome.total_flow == len(word) and None not in outcome.assignment:
        return SpellResult(
            word=word,
            spelled=True,
            dice=list(outcome.assignment),
            flow=outcome.total_flow,
        )

    return SpellResult(
        word=word,
        spelled=False,
        flow=outcome.total_flow,
        error=NO_VALID_ASSIGNMENT,
    )


def spell_word(dice: DiceInput, word: str, ignore_case: bool = False) -> SpellResult:
    """
    Decide whether a word can be spelled with distinct dice.

    Args:
        dice: The dice pool, as Die models or face strings
        word: The word to spell
        ignore_case: Compare letters case-insensitively

    Returns:
        SpellResult with the die index per letter on success
    """
    network = build_network(as_dice(dice), word, ignore_case=ignore_case)
    outcome = edmonds_karp(network)
    return interpret(word, outcome)


def spell_words(
    dice: DiceInput,
    words: Sequence[str],
    ignore_case: bool = False,
    on_word: Optional[Callable[[SpellResult], None]] = None,
) -> List[SpellResult]:
    """Spell every word in order; nothing is shared between words."""
    pool = as_dice(dice)
    results = []
    for word in words:
        result = spell_word(pool, word, ignore_case=ignore_case)
        results.append(result)
        if on_word:
            on_word(result)
    return results

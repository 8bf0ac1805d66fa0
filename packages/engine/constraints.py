"""
Per-letter knowledge accumulated across guesses.

Given:
  - the knowledge map so far (letter -> best LetterOutcome)
  - a newly accepted ScoredGuess

Produce:
  - the strengthened knowledge map.

Knowledge only ever gets stronger. EXACT_MATCH is sticky: once a letter has
been seen in its right place, later guesses that use it elsewhere (and so
score it WRONG_POSITION) do not downgrade it.
"""

from __future__ import annotations

import string
from typing import Dict, Set

from .scoring import HINT_OUTCOMES, LetterOutcome, ScoredGuess

LETTERS = string.ascii_uppercase

# letter -> best outcome seen so far
Knowledge = Dict[str, LetterOutcome]


def initial_knowledge() -> Knowledge:
    """All 26 letters, nothing learned yet (insertion order is A..Z)."""
    return {c: LetterOutcome.UNKNOWN for c in LETTERS}


def merge(existing: LetterOutcome, new: LetterOutcome) -> LetterOutcome:
    """
    Combine what we knew about a letter with a fresh observation.

      existing EXACT_MATCH  -> kept
      new EXACT_MATCH       -> wins
      new WRONG_POSITION    -> wins (existing is not EXACT_MATCH here)
      new NO_MATCH          -> wins only over UNKNOWN
      anything else         -> existing kept
    """
    if existing is LetterOutcome.EXACT_MATCH:
        return existing
    if new is LetterOutcome.EXACT_MATCH:
        return new
    if new is LetterOutcome.WRONG_POSITION:
        return new
    if new is LetterOutcome.NO_MATCH and existing is LetterOutcome.UNKNOWN:
        return new
    return existing


def update_knowledge(knowledge: Knowledge, guess: ScoredGuess) -> None:
    """
    Merge every position of `guess` into `knowledge`, in place.

    Letters are merged by identity, not position. Letters absent from the
    map are skipped rather than added.
    """
    for sl in guess:
        if sl.letter in knowledge:
            knowledge[sl.letter] = merge(knowledge[sl.letter], sl.outcome)


def hint_letters(knowledge: Knowledge) -> Set[str]:
    """Letters known to be in the target."""
    return {c for c, outcome in knowledge.items() if outcome in HINT_OUTCOMES}


def missing_hints(guess: ScoredGuess, knowledge: Knowledge) -> Set[str]:
    """Hint letters that `guess` does not use anywhere."""
    return {c for c in hint_letters(knowledge) if not guess.includes(c)}

"""
Guess acceptance gates.

This module answers the question: "Is this guess acceptable right now?"
A scored guess is accepted iff:
  - it has not been played before (same letters and outcomes), and
  - it uses every letter already known to be in the target.

Each gate raises on failure and returns None otherwise, so callers can run
them back to back before touching any state.
"""

from typing import Sequence

from .constraints import Knowledge, missing_hints
from .errors import DuplicateGuessError, UnusedHintsError
from .scoring import ScoredGuess


def check_unique_guess(guess: ScoredGuess, history: Sequence[ScoredGuess]) -> None:
    if guess in history:
        raise DuplicateGuessError(guess)


def check_hints_used(guess: ScoredGuess, knowledge: Knowledge) -> None:
    missing = missing_hints(guess, knowledge)
    if missing:
        raise UnusedHintsError(guess, missing)


def validate_guess(guess: ScoredGuess, history: Sequence[ScoredGuess],
                   knowledge: Knowledge) -> None:
    """Run all gates in order: duplicates first, then hints."""
    check_unique_guess(guess, history)
    check_hints_used(guess, knowledge)

"""
Exceptions raised by the engine.

Everything here is recoverable: a rejected word or guess never changes the
game state, so callers can simply re-prompt.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Tuple

if TYPE_CHECKING:
    from .scoring import ScoredGuess


class WordleError(Exception):
    """Base class for every error raised by the engine."""


class InvalidWordError(WordleError, ValueError):
    """Raw text is not exactly `size` alphabetic characters."""

    def __init__(self, raw: str, size: int):
        self.raw = raw
        self.size = size
        super().__init__(f"not a {size}-letter word: {raw!r}")


class GuessError(WordleError):
    """A well-formed guess the game refused to accept."""

    def __init__(self, guess: "ScoredGuess", message: str):
        self.guess = guess
        super().__init__(message)


class DuplicateGuessError(GuessError):
    def __init__(self, guess: "ScoredGuess"):
        super().__init__(guess, f"guess already used: {guess.word}")


class UnusedHintsError(GuessError):
    """The guess leaves out letters already known to be in the target."""

    def __init__(self, guess: "ScoredGuess", missing: Iterable[str]):
        self.missing: Tuple[str, ...] = tuple(sorted(missing))
        super().__init__(
            guess, f"guess {guess.word} is missing known hints: {', '.join(self.missing)}"
        )

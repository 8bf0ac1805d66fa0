"""
Game state machine.

One GameState per game. The only mutating operation is submit_guess, which
either accepts a guess (score, record, merge knowledge, maybe finish the
game) or raises a GuessError and leaves everything untouched.

    IN_PROGRESS --all exact--> SUCCESS
    IN_PROGRESS --limit hit--> FAILURE

Both terminal states are sticky. A GameState is not thread-safe; callers
that share one must serialize submissions themselves.
"""

from __future__ import annotations

import logging
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple

from .constraints import Knowledge, initial_knowledge, update_knowledge
from .errors import GuessError
from .scoring import LetterOutcome, ScoredGuess, evaluate
from .validation import validate_guess
from .word import Word

logger = logging.getLogger(__name__)

# Single source of truth for the guess budget.
MAX_GUESSES = 6


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    SUCCESS = "success"
    FAILURE = "failure"

    @property
    def terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class GameState:
    def __init__(self, target: Word, *, max_guesses: int = MAX_GUESSES):
        if max_guesses < 1:
            raise ValueError(f"max_guesses must be >= 1; got {max_guesses}")
        self._target = target
        self._max_guesses = max_guesses
        self._guesses: List[ScoredGuess] = []
        self._knowledge: Knowledge = initial_knowledge()
        self._status = GameStatus.IN_PROGRESS

    @property
    def target(self) -> Word:
        return self._target

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def guesses(self) -> Tuple[ScoredGuess, ...]:
        """Accepted guesses, oldest first."""
        return tuple(self._guesses)

    @property
    def knowledge(self) -> Mapping[str, LetterOutcome]:
        """Read-only snapshot of per-letter knowledge, A..Z."""
        return MappingProxyType(dict(self._knowledge))

    @property
    def remaining(self) -> int:
        return self._max_guesses - len(self._guesses)

    def submit_guess(self, candidate: Word) -> GameStatus:
        """
        Play `candidate` and return the resulting status.

        Once the game is over (or the guess budget is spent) this is a
        no-op that returns the final status.

        Raises:
            DuplicateGuessError: the same scored guess was already played.
            UnusedHintsError:    a letter known to be in the target is unused.
            ValueError:          candidate length differs from the target's.
        """
        if self._status.terminal or len(self._guesses) >= self._max_guesses:
            return self._status

        guess = evaluate(self._target, candidate)
        try:
            validate_guess(guess, self._guesses, self._knowledge)
        except GuessError as e:
            logger.info("rejected guess %s: %s", guess.word, e)
            raise

        self._guesses.append(guess)
        update_knowledge(self._knowledge, guess)

        if guess.perfect_match():
            self._status = GameStatus.SUCCESS
        elif len(self._guesses) >= self._max_guesses:
            self._status = GameStatus.FAILURE

        logger.debug(
            "guess %d/%d %s -> %s", len(self._guesses), self._max_guesses,
            guess.word, self._status.value,
        )
        return self._status

    def __repr__(self) -> str:
        words = [g.word for g in self._guesses]
        return (
            f"GameState(target={str(self._target)!r}, guesses={words!r}, "
            f"status={self._status.name})"
        )

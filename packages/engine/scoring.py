"""
Wordle-style scoring (feedback) for a single (target, guess) pair.

Conventions:
  - EXACT_MATCH    : correct letter in the correct position
  - WRONG_POSITION : letter occurs in the target, but not here
  - NO_MATCH       : letter does not occur in the target at all
  - UNKNOWN        : nothing learned yet (only ever seen in knowledge maps)

The outcome values are ordered by strength, which is what knowledge merging
relies on: UNKNOWN < NO_MATCH < WRONG_POSITION < EXACT_MATCH.

Algorithm (single pass):
  For each position, an exact match wins; otherwise the letter is
  WRONG_POSITION if it appears ANYWHERE in the target. Unlike the two-pass
  variant, yellows are not capped by the target's letter multiplicities, so
  a repeated guess letter can light up yellow more than once from a single
  occurrence in the target (G = exact, Y = wrong position, - = no match):

    evaluate(TODAY, OOOOO) -> YGYYY   (two-pass would give -G---)
    evaluate(TODAY, DDXXX) -> YY---
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Tuple

from .word import Word


class LetterOutcome(IntEnum):
    UNKNOWN = 0
    NO_MATCH = 1
    WRONG_POSITION = 2
    EXACT_MATCH = 3


# Outcomes that prove a letter is in the target.
HINT_OUTCOMES = (LetterOutcome.WRONG_POSITION, LetterOutcome.EXACT_MATCH)


@dataclass(frozen=True)
class ScoredLetter:
    letter: str
    outcome: LetterOutcome


@dataclass(frozen=True)
class ScoredGuess:
    """One evaluated guess: a (letter, outcome) pair per position."""
    letters: Tuple[ScoredLetter, ...]

    def __iter__(self) -> Iterator[ScoredLetter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    @property
    def word(self) -> str:
        return "".join(sl.letter for sl in self.letters)

    @property
    def outcomes(self) -> Tuple[LetterOutcome, ...]:
        return tuple(sl.outcome for sl in self.letters)

    def perfect_match(self) -> bool:
        return all(sl.outcome is LetterOutcome.EXACT_MATCH for sl in self.letters)

    def includes(self, letter: str) -> bool:
        return any(sl.letter == letter for sl in self.letters)


def evaluate(target: Word, guess: Word) -> ScoredGuess:
    """
    Score `guess` against `target`.

    Preconditions:
      - len(guess) == len(target)

    Examples:
      evaluate(TODAY, TODAY) -> all EXACT_MATCH
      evaluate(TODAY, TXDAY) -> T=EXACT, X=NO_MATCH, D/A/Y=EXACT
    """
    if len(guess) != len(target):
        raise ValueError(
            f"guess length {len(guess)} does not match target length {len(target)}"
        )

    scored = []
    for t, g in zip(target, guess):
        if g == t:
            outcome = LetterOutcome.EXACT_MATCH
        elif g in target:
            outcome = LetterOutcome.WRONG_POSITION
        else:
            outcome = LetterOutcome.NO_MATCH
        scored.append(ScoredLetter(g, outcome))

    return ScoredGuess(tuple(scored))

"""
Validated fixed-length words.

A Word is the only way text enters the engine. Parsing is all-or-nothing:
either the raw string is exactly `size` alphabetic characters and we get an
upper-cased Word back, or InvalidWordError is raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from .errors import InvalidWordError

# Single source of truth for word length.
WORD_SIZE = 5


@dataclass(frozen=True)
class Word:
    letters: Tuple[str, ...]

    def __post_init__(self):
        # every letter is a single A-Z character, already upper-cased
        if not all(isinstance(c, str) and len(c) == 1 and "A" <= c <= "Z"
                   for c in self.letters):
            raise InvalidWordError("".join(map(str, self.letters)), len(self.letters))

    @classmethod
    def parse(cls, raw: str, size: int = WORD_SIZE) -> "Word":
        """
        Build a Word from raw text.

        Accepts exactly `size` alphabetic characters, in any case. Digits,
        punctuation and whitespace (including surrounding whitespace) are
        rejected; trimming is the caller's job.

        Examples:
          Word.parse("today") -> Word("TODAY")
          Word.parse("to day") -> InvalidWordError
        """
        if not isinstance(raw, str) or len(raw) != size:
            raise InvalidWordError(raw, size)
        # ASCII only: knowledge is tracked for A-Z
        if not (raw.isascii() and raw.isalpha()):
            raise InvalidWordError(raw, size)
        return cls(tuple(raw.upper()))

    def __iter__(self) -> Iterator[str]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, i: int) -> str:
        return self.letters[i]

    def __contains__(self, letter: object) -> bool:
        return letter in self.letters

    def __str__(self) -> str:
        return "".join(self.letters)

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"

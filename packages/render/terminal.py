"""
Terminal rendering of a game.

Everything here is a pure function of engine values: outcome -> category ->
colorama colour. Console setup (colorama.just_fix_windows_console) is left
to the entry point. Nothing in the engine imports this module, so the engine
runs and tests headless.

Transcript layout (what `format_game` returns):

    guesses:
    1 - T X D A Y
    <blank>
    letters: A B C ... Z
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Mapping

from colorama import Fore, Style

from packages.engine import LETTERS, GameState, GameStatus, LetterOutcome, ScoredGuess


class Category(Enum):
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    CAUTION = "caution"
    POSITIVE = "positive"


_CATEGORY = {
    LetterOutcome.UNKNOWN: Category.NEUTRAL,
    LetterOutcome.NO_MATCH: Category.NEGATIVE,
    LetterOutcome.WRONG_POSITION: Category.CAUTION,
    LetterOutcome.EXACT_MATCH: Category.POSITIVE,
}

COLOURS = {
    Category.NEUTRAL: Fore.WHITE,
    Category.NEGATIVE: Fore.RED,
    Category.CAUTION: Fore.YELLOW,
    Category.POSITIVE: Fore.GREEN,
}

# Compact pattern characters, same convention as the CSV reports.
_PATTERN_CHAR = {
    LetterOutcome.UNKNOWN: "?",
    LetterOutcome.NO_MATCH: "-",
    LetterOutcome.WRONG_POSITION: "Y",
    LetterOutcome.EXACT_MATCH: "G",
}


def category_for(outcome: LetterOutcome) -> Category:
    return _CATEGORY[outcome]


def paint(text: str, outcome: LetterOutcome) -> str:
    return f"{COLOURS[category_for(outcome)]}{text}{Style.RESET_ALL}"


def format_letter(letter: str, outcome: LetterOutcome, color: bool = True) -> str:
    text = f"{letter} "
    return paint(text, outcome) if color else text


def format_guess(guess: ScoredGuess, color: bool = True) -> str:
    return "".join(format_letter(sl.letter, sl.outcome, color) for sl in guess)


def format_knowledge(knowledge: Mapping[str, LetterOutcome], color: bool = True) -> str:
    """Alphabetical snapshot; letters missing from the map are skipped."""
    return "".join(
        format_letter(c, knowledge[c], color) for c in LETTERS if c in knowledge
    )


def format_history(guesses: Iterable[ScoredGuess], color: bool = True) -> str:
    lines = [f"{i} - {format_guess(g, color)}" for i, g in enumerate(guesses, start=1)]
    return "".join(line + "\n" for line in lines)


def format_game(state: GameState, color: bool = True) -> str:
    return (
        "guesses:\n"
        + format_history(state.guesses, color)
        + "\n"
        + f"letters: {format_knowledge(state.knowledge, color)}\n"
    )


def pattern(guess: ScoredGuess) -> str:
    """
    One character per position: G (exact), Y (wrong position), - (no match).
    Example: TXDAY against TODAY -> "G-GGG"
    """
    return "".join(_PATTERN_CHAR[o] for o in guess.outcomes)


def format_summary(state: GameState) -> str:
    """Share-style one-liner, e.g. "3/6 G-GGG YGGGG GGGGG"."""
    score = len(state.guesses) if state.status is GameStatus.SUCCESS else "X"
    blocks = " ".join(pattern(g) for g in state.guesses)
    return f"{score}/{state.max_guesses} {blocks}".rstrip()

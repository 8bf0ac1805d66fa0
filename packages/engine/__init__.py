from .word import Word, WORD_SIZE
from .scoring import LetterOutcome, ScoredGuess, ScoredLetter, evaluate
from .constraints import LETTERS, merge
from .game import GameState, GameStatus, MAX_GUESSES
from .errors import (
    WordleError, InvalidWordError, GuessError, DuplicateGuessError, UnusedHintsError,
)

__all__ = [
    "Word", "WORD_SIZE",
    "LetterOutcome", "ScoredGuess", "ScoredLetter", "evaluate",
    "LETTERS", "merge",
    "GameState", "GameStatus", "MAX_GUESSES",
    "WordleError", "InvalidWordError", "GuessError", "DuplicateGuessError",
    "UnusedHintsError",
]

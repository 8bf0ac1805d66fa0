"""
Scripted (non-interactive) game runs.

- run_script: play one game from a fixed list of raw guesses.
- run_batch:  play many scripted games in sequence.
- load_games: parse a script file into (target, guesses) pairs.

A script is what a player would have typed: guesses that are malformed,
repeated or ignore known hints are recorded as rejected and skipped, exactly
as the interactive prompt would re-prompt. Play stops at the first terminal
status; leftover guesses are ignored.

Script file format, one game per line:

    # comment
    TODAY  arise txday tyday today
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Dict, Iterable, List, Sequence, Tuple

from packages.engine import (
    MAX_GUESSES, WORD_SIZE, DuplicateGuessError, GameState, GameStatus, InvalidWordError,
    UnusedHintsError, Word,
)
from packages.render import pattern

from .io import read_lines

logger = logging.getLogger(__name__)

Game = Tuple[str, List[str]]  # (target, raw guesses)


def run_script(
        target: str,
        guesses: Iterable[str],
        *,
        size: int = WORD_SIZE,
        max_guesses: int = MAX_GUESSES,
) -> Dict:
    """
    Play `guesses` against `target` until the game ends or guesses run out.

    Returns:
        dict with keys:
            target (str), status (str), success (bool), guesses (int),
            rejected (list[(raw, reason)]), history (list[(word, pattern)]),
            time_ms (float)

    Raises:
        InvalidWordError if `target` itself is not a valid word.
    """
    game = GameState(Word.parse(target, size=size), max_guesses=max_guesses)
    rejected: List[Tuple[str, str]] = []

    t0 = time.perf_counter_ns()
    for raw in guesses:
        if game.status.terminal:
            break
        try:
            game.submit_guess(Word.parse(raw, size=size))
        except InvalidWordError:
            rejected.append((raw, "invalid"))
        except DuplicateGuessError:
            rejected.append((raw, "duplicate"))
        except UnusedHintsError:
            rejected.append((raw, "unused_hints"))
    dt = (time.perf_counter_ns() - t0) / 1_000_000.0

    return {
        "target": str(game.target),
        "status": game.status.value,
        "success": game.status is GameStatus.SUCCESS,
        "guesses": len(game.guesses),
        "rejected": rejected,
        "history": [(g.word, pattern(g)) for g in game.guesses],
        "time_ms": dt,
    }


def run_batch(
        games: Sequence[Game],
        *,
        size: int = WORD_SIZE,
        max_guesses: int = MAX_GUESSES,
) -> List[Dict]:
    """Run many scripted games back-to-back, in order."""
    out: List[Dict] = []
    for target, guesses in games:
        out.append(run_script(target, guesses, size=size, max_guesses=max_guesses))
    return out


def load_games(path: Path | str, *, size: int = WORD_SIZE) -> List[Game]:
    """
    Parse a script file. Blank lines and '#' comments are skipped.

    Targets are validated up front so a bad line fails the whole load with
    its line number; guesses are left raw (rejecting them is part of play).
    """
    games: List[Game] = []
    for lineno, line in enumerate(read_lines(path), start=1):
        tokens = line.split()
        if not tokens or tokens[0].startswith("#"):
            continue
        target, guesses = tokens[0], tokens[1:]
        try:
            Word.parse(target, size=size)
        except InvalidWordError as e:
            raise ValueError(f"{path}:{lineno}: invalid target word: {target}") from e
        if not guesses:
            logger.warning("%s:%d: game for %s has no guesses", path, lineno, target)
        games.append((target, guesses))
    return games

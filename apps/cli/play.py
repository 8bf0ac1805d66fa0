# apps/cli/play.py
"""
Interactive terminal game.

    wordle-play today
    wordle-play crane --no-color

Prints the board, then reads one guess per line until the game ends. An
empty line (or EOF) quits early. Malformed words, repeated guesses and
guesses that ignore known hints are reported and re-prompted; the game
state is never affected by them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

import colorama

from packages.engine import (
    MAX_GUESSES, WORD_SIZE, DuplicateGuessError, GameState, GameStatus, InvalidWordError,
    UnusedHintsError, Word,
)
from packages.render import format_game, format_summary

logger = logging.getLogger(__name__)

PROMPT = "> "


def read_line(input: TextIO, output: TextIO) -> Optional[str]:
    """Prompt and read one trimmed line; None on EOF or a blank line."""
    output.write(PROMPT)
    output.flush()
    raw = input.readline()
    line = raw.strip()
    return line or None


def read_guess(input: TextIO, output: TextIO, size: int = WORD_SIZE) -> Optional[Word]:
    """Keep prompting until a well-formed word arrives (or the player quits)."""
    while True:
        line = read_line(input, output)
        if line is None:
            return None
        try:
            return Word.parse(line, size=size)
        except InvalidWordError:
            output.write(f"invalid word: {line}\n")


def play_game(
        target: Word,
        input: TextIO,
        output: TextIO,
        *,
        max_guesses: int = MAX_GUESSES,
        color: bool = True,
) -> GameStatus:
    """
    Run one game over text streams and return the final status.
    Quitting early leaves the status IN_PROGRESS.
    """
    game = GameState(target, max_guesses=max_guesses)
    output.write(format_game(game, color))

    while game.status is GameStatus.IN_PROGRESS:
        while True:
            guess = read_guess(input, output, size=len(target))
            if guess is None:
                logger.info("player quit after %d guess(es)", len(game.guesses))
                return game.status
            try:
                game.submit_guess(guess)
                break
            except DuplicateGuessError:
                output.write("guess already used\n")
            except UnusedHintsError:
                output.write("guess missing known hints\n")
        output.write(format_game(game, color))

    if game.status is GameStatus.SUCCESS:
        output.write(f"solved in {len(game.guesses)}/{game.max_guesses}\n")
    else:
        output.write(f"out of guesses, the word was {game.target}\n")
    output.write(format_summary(game) + "\n")
    return game.status


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Play a hint-enforcing Wordle in the terminal")
    ap.add_argument("target", help="the secret word to guess")
    ap.add_argument("--size", type=int, default=WORD_SIZE, help="word length (default 5)")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES,
                    help="guess budget (default 6)")
    ap.add_argument("--no-color", action="store_true", help="plain text, no ANSI colours")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="diagnostics written to stderr")
    return ap


def main(argv: Optional[List[str]] = None, *, input: TextIO = sys.stdin,
         output: TextIO = sys.stdout) -> int:
    """
    Parse CLI args, validate the target, play. Exit code: 0 on a win,
    1 on a loss or early quit, 2 on a bad target.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    if args.max_guesses < 1:
        output.write(f"invalid guess budget: {args.max_guesses}\n")
        return 2

    try:
        target = Word.parse(args.target, size=args.size)
    except InvalidWordError:
        output.write(f"invalid target word: {args.target}\n")
        return 2

    if not args.no_color:
        colorama.just_fix_windows_console()

    status = play_game(target, input, output, max_guesses=args.max_guesses,
                       color=not args.no_color)
    return 0 if status is GameStatus.SUCCESS else 1


if __name__ == "__main__":
    sys.exit(main())

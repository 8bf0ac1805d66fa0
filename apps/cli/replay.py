# apps/cli/replay.py
"""
Replay scripted games in bulk.

This script:
  1) Loads a script file (one game per line: TARGET GUESS GUESS ...).
  2) Plays every game through the engine with a live progress indicator.
  3) Writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: per-status and per-rejection counts for the run
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from packages.engine import MAX_GUESSES, WORD_SIZE
from packages.harness import load_games, run_script, summarize, write_csv, write_summary
from packages.harness.io import timestamp_id

logger = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, load the script, replay with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="Replay scripted Wordle games")
    ap.add_argument("script", help="path to script file (TARGET GUESS GUESS ... per line)")
    ap.add_argument("--size", type=int, default=WORD_SIZE, help="word length (default 5)")
    ap.add_argument("--max-guesses", type=int, default=MAX_GUESSES,
                    help="guess budget (default 6)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["bar", "plain", "off"],
        default="bar",
        help="Show run progress (bar=tqdm, plain=one line per game)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    # 1) Load games (fails fast on a bad target line)
    try:
        games = load_games(args.script, size=args.size)
    except (FileNotFoundError, ValueError) as e:
        print(f"cannot load script: {e}", file=sys.stderr)
        return 2

    # 2) Replay with progress
    iterator = games
    if args.progress == "bar":
        iterator = tqdm(games, ncols=80, desc="Replaying", unit="game")

    results = []
    for idx, (target, guesses) in enumerate(iterator, 1):
        r = run_script(target, guesses, size=args.size, max_guesses=args.max_guesses)
        results.append(r)
        if r["rejected"]:
            logger.info("%s: %d rejected guess(es)", target, len(r["rejected"]))
        if args.progress == "plain":
            print(f"[{idx}/{len(games)}] {r['target']} {r['status']} in {r['guesses']}",
                  file=sys.stderr)

    # 3) Write outputs (CSV + summary), named after the script
    stem = f"{Path(args.script).stem}_{timestamp_id()}"
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = write_csv(results, str(outdir / f"{stem}.csv"), max_guesses=args.max_guesses)
    summary = summarize(results)
    summary.update(script=args.script, size=args.size, max_guesses=args.max_guesses)
    summary_path = write_summary(summary, str(outdir / f"{stem}_summary.json"))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {summary_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

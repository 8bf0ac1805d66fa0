"""
Reading scripts and writing replay reports.

- read_lines:    load a UTF-8 script file.
- write_csv:     one row per game: outcome, rejection count, then the
                 accepted guesses with their G/Y/- patterns.
- summarize:     per-status game counts and per-reason rejection counts.
- write_summary: dump the summary (plus run settings) as JSON.
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List
import csv
import json
import datetime as dt


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_csv(results: Iterable[Dict], path: str, max_guesses: int) -> str:
    """
    Columns: target, status, guesses, rejected, then guess_i / patt_i for
    every slot of the guess budget (empty once the game stopped).
    Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["target", "status", "guesses", "rejected"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "target": r["target"],
                "status": r["status"],
                "guesses": r["guesses"],
                "rejected": len(r["rejected"]),
            }
            hist = r["history"]
            for i in range(1, max_guesses + 1):
                word, patt = hist[i - 1] if i <= len(hist) else ("", "")
                row[f"guess_{i}"] = word
                row[f"patt_{i}"] = patt
            w.writerow(row)

    return str(p)


def summarize(results: Iterable[Dict]) -> Dict:
    """
    Example:
      {"games": 2, "status": {"success": 1, "failure": 1},
       "rejected": {"duplicate": 1}, "mean_guesses_to_win": 3.0}
    """
    results = list(results)
    wins = [r["guesses"] for r in results if r["success"]]
    return {
        "games": len(results),
        "status": dict(Counter(r["status"] for r in results)),
        "rejected": dict(Counter(reason for r in results for _, reason in r["rejected"])),
        "mean_guesses_to_win": round(sum(wins) / len(wins), 3) if wins else None,
    }


def write_summary(summary: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """Compact UTC timestamp for report filenames, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")

import csv
import json
from pathlib import Path

import pytest
from apps.cli import replay
from packages.harness import load_games, run_batch, run_script, summarize, write_csv

LOSING_RUN = ["txday", "ytxda", "aytxd", "daytx", "xdayt", "tyday"]


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_run_script_records_rejections():
    r = run_script("today", ["arise", "arise", "xxxxx", "12345", "today", "tidal"])
    assert r["success"] is True
    assert r["status"] == "success"
    assert r["guesses"] == 2
    assert r["history"] == [("ARISE", "Y----"), ("TODAY", "GGGGG")]
    # play stops at the win, so "tidal" is never looked at
    assert r["rejected"] == [("arise", "duplicate"), ("xxxxx", "unused_hints"),
                             ("12345", "invalid")]


def test_run_script_failure():
    r = run_script("today", LOSING_RUN + ["today"])
    assert r["success"] is False
    assert r["status"] == "failure"
    assert r["guesses"] == 6
    assert r["rejected"] == []


def test_run_script_unfinished():
    r = run_script("today", ["arise"])
    assert r["status"] == "in_progress"


def test_run_batch_preserves_order():
    out = run_batch([("today", ["today"]), ("crane", ["arise"])])
    assert [r["target"] for r in out] == ["TODAY", "CRANE"]
    assert [r["success"] for r in out] == [True, False]


def test_load_games_skips_comments_and_blanks(tmp_path: Path):
    script = tmp_path / "games.txt"
    _write(script, ["# warmup", "", "today arise today", "  crane   raise crane  "])
    assert load_games(script) == [
        ("today", ["arise", "today"]),
        ("crane", ["raise", "crane"]),
    ]


def test_load_games_rejects_bad_target(tmp_path: Path):
    script = tmp_path / "games.txt"
    _write(script, ["today today", "oops today"])
    with pytest.raises(ValueError, match=r":2: invalid target word: oops"):
        load_games(script)


def test_load_games_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_games(tmp_path / "nope.txt")


def test_write_csv(tmp_path: Path):
    results = [run_script("today", ["txday", "today"])]
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_guesses=6)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    row = rows[0]
    assert row["target"] == "TODAY" and row["status"] == "success"
    assert row["guess_1"] == "TXDAY" and row["patt_1"] == "G-GGG"
    assert row["guess_3"] == "" and row["patt_6"] == ""


def test_replay_main_writes_reports(tmp_path: Path, capsys):
    script = tmp_path / "games.txt"
    _write(script, ["today today", "crane " + " ".join(LOSING_RUN)])
    outdir = tmp_path / "reports"

    assert replay.main([str(script), "--outdir", str(outdir), "--progress", "off"]) == 0

    csvs = list(outdir.glob("games_*.csv"))
    summaries = list(outdir.glob("games_*_summary.json"))
    assert len(csvs) == 1 and len(summaries) == 1
    summary = json.loads(summaries[0].read_text(encoding="utf-8"))
    assert summary["games"] == 2
    assert summary["status"] == {"success": 1, "failure": 1}
    assert summary["max_guesses"] == 6
    assert "Wrote:" in capsys.readouterr().out


def test_replay_main_bad_script(tmp_path: Path):
    assert replay.main([str(tmp_path / "missing.txt"), "--outdir", str(tmp_path)]) == 2


def test_summarize_counts_statuses_and_rejections():
    results = run_batch([
        ("today", ["arise", "arise", "today"]),
        ("today", ["txday", "xxxxx", "today"]),
        ("crane", LOSING_RUN),
    ])
    assert summarize(results) == {
        "games": 3,
        "status": {"success": 2, "failure": 1},
        "rejected": {"duplicate": 1, "unused_hints": 1},
        "mean_guesses_to_win": 2.0,
    }


def test_summarize_without_wins():
    assert summarize([run_script("today", ["arise"])])["mean_guesses_to_win"] is None

from .core import run_script, run_batch, load_games
from .io import read_lines, write_csv, summarize, write_summary

__all__ = ["run_script", "run_batch", "load_games", "read_lines", "write_csv", "summarize",
           "write_summary"]

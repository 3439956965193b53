"""
I/O utilities for simulation runs and session exports.

Responsibilities:
- write_csv:      flatten per-session results into a tidy CSV (one row per session).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- export_result:  save one GameResult as txt / csv / json.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Choice strings are prefixed with an apostrophe in CSVs so spreadsheet apps
  keep e.g. "LR" style values as text and never try to evaluate them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List
import csv
import json
import subprocess
import datetime as dt

from mindreader.engine import GameResult

EXPORT_FORMATS = ("txt", "csv", "json")


def _excel_safe(text: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "LRRL" -> "'LRRL"
    """
    return "'" + text if text else text


def write_csv(results: List[Dict], path: str, *, policy_id: str, letters: str) -> str:
    """
    Serialize a batch of session results to CSV.

    Schema (columns):
      policy, letters, secret, choices, turns, left_size, right_size,
      in_left, in_right, time_ms, left_words, right_words

    Word pools are joined with spaces.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["policy", "letters", "secret", "choices", "turns", "left_size", "right_size",
              "in_left", "in_right", "time_ms", "left_words", "right_words"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()
        for r in results:
            w.writerow({
                "policy": policy_id,
                "letters": letters,
                "secret": r["secret"],
                "choices": _excel_safe(r["choices"]),
                "turns": r["turns"],
                "left_size": len(r["left_words"]),
                "right_size": len(r["right_words"]),
                "in_left": r["in_left"],
                "in_right": r["in_right"],
                "time_ms": round(float(r["time_ms"]), 3),
                "left_words": " ".join(r["left_words"]),
                "right_words": " ".join(r["right_words"]),
            })

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and word list validation.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (policy, words, letters, seed, sample, outdir)
      - word_list: output of datasets.validate_word_list(...)
      - summary: output of harness.summarize(...)
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def export_result(result: GameResult, path: str, fmt: str = "txt") -> str:
    """
    Save a finished session's result.

      txt  : the same summary text shown at the end of a session
      csv  : one row per word: side, word
      json : GameResult.to_dict()
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"export format must be one of {EXPORT_FORMATS}; got {fmt!r}")

    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if fmt == "txt":
        # full pools, no "... and K more"
        n = max(len(result.left_words), len(result.right_words))
        p.write_text(result.summary_text(preview=n) + "\n", encoding="utf-8")
    elif fmt == "csv":
        with p.open("w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["side", "word"])
            w.writerows(("left", word) for word in result.left_words)
            w.writerows(("right", word) for word in result.right_words)
    else:
        with p.open("w", encoding="utf-8") as f:
            json.dump(result.to_dict(), f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"

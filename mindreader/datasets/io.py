from __future__ import annotations
from pathlib import Path
from typing import Iterable, List


def read_lines(p: Path | str) -> List[str]:
    """
    Read a text file into a list of lines. A leading UTF-8 BOM (common in
    lists exported from spreadsheets) is dropped.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return p.read_text(encoding="utf-8-sig").splitlines()


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write one entry per line (UTF-8, trailing newline), creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("".join(f"{ln}\n" for ln in lines), encoding="utf-8")
    return str(p)


def load_word_list(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, keeping the original casing and
    dropping blank lines. Duplicates are kept.
    """
    return [w.strip() for w in read_lines(p) if w.strip()]

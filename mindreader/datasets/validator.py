"""
Word list validator for mindreader.

What this module does:
- Validate a word list file (one word per line) and, optionally, the letter
  sequence it will be played with.
- Flag lines that are not purely alphabetic, duplicates (case-insensitive)
  and an empty list; compute SHA-256 of the raw file.
- Flag letters that no word contains or that every word contains: those
  questions never separate anything.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from mindreader.datasets import validate_word_list, pretty_summary
    rep = validate_word_list("words.txt", letters="NTRLCSEUAI")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple
import hashlib

from mindreader.engine import classify


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words after cleaning
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words, case-insensitive
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class LettersReport:
    """How useful each letter of the sequence is against the list."""
    sequence: str
    valid: bool                                          # letters only, non-empty
    never_present: List[str] = field(default_factory=list)   # no word contains it
    always_present: List[str] = field(default_factory=list)  # every word contains it


@dataclass
class ValidationReport:
    words: FileReport
    letters: Optional[LettersReport]
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words and count invalid lines.

    Rules:
      - one token per line, letters only (any case)
      - blank lines are skipped, not counted as invalid

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8-sig") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _check_letters(words: List[str], letters: str) -> LettersReport:
    ok = bool(letters) and letters.isalpha()
    rep = LettersReport(sequence=letters, valid=ok)
    if not ok or not words:
        return rep
    for ch in dict.fromkeys(letters.upper()):
        hits = sum(1 for w in words if classify(w, ch))
        if hits == 0:
            rep.never_present.append(ch)
        elif hits == len(words):
            rep.always_present.append(ch)
    return rep


# -----------------------------
# Public API
# -----------------------------

def validate_word_list(path: str, letters: Optional[str] = None) -> Dict:
    """
    Validate a word list file, and the letter sequence if given.

    Returns
    -------
    Dict
        JSON-serializable ValidationReport. `passed` is strict: the file
        exists, has at least two valid words, no invalid lines, and the
        letter sequence (if any) is letters only. Duplicates and letters
        that never split the list are reported in `issues` without failing.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        rep = ValidationReport(
            words=FileReport(path, False, 0, "", 0, 0),
            letters=LettersReport(letters, bool(letters) and letters.isalpha()) if letters is not None else None,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p)
    unique = {w.lower() for w in words}

    words_report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(unique),
        invalid_lines=invalid,
    )

    if words_report.count < 2:
        issues.append(f"word list has {words_report.count} valid word(s); need at least 2")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if words_report.count != words_report.unique_count:
        issues.append("word list contains duplicate words")

    letters_report = None
    if letters is not None:
        letters_report = _check_letters(words, letters)
        if not letters_report.valid:
            issues.append(f"letter sequence must be letters only: {letters!r}")
        if letters_report.never_present:
            issues.append(f"letters in no word: {''.join(letters_report.never_present)}")
        if letters_report.always_present:
            issues.append(f"letters in every word: {''.join(letters_report.always_present)}")

    passed = (
            words_report.count >= 2
            and invalid == 0
            and (letters_report is None or letters_report.valid)
    )

    rep = ValidationReport(
        words=words_report,
        letters=letters_report,
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for the console.

    Example:
        words=32 (uniq=32, sha=abc123...) | letters=NTRLCSEUAI | OK
    """
    w = report["words"]
    sha = (w.get("sha256") or "")[:12]
    letters = report.get("letters")
    seq = letters["sequence"] if letters else "-"
    status = "OK" if report["passed"] else "FAIL"
    return f"words={w['count']} (uniq={w['unique_count']}, sha={sha}) | letters={seq} | {status}"

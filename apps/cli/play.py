# apps/cli/play.py
"""
Interactive terminal session.

The performer picks a word list and a letter sequence; the spectator answers
L or R for each letter. At the end both pools are printed (and optionally
exported).

Commands at the prompt (choices are case-insensitive):
  L / R   : answer for the current letter
  :reset  : reset the session
  :quit   : quit without a result

In the demo session (predefined words with their own letter sequence) the
status line also shows the word whose initial letter is being asked.

Usage:
    python -m apps.cli.play --word-list en-uk --letters vowels-only
    python -m apps.cli.play --words my_words.txt --letters NTRLCSEUAI --export out.json --format json
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional, Sequence

from mindreader.datasets import (
    DEFAULT_LETTER_SEQUENCES, DEFAULT_WORD_LISTS, LETTER_SEQUENCE, PREDEFINED_WORDS,
    Preferences, get_word_list, load_word_list, resolve_letters,
)
from mindreader.engine import (
    PREVIEW_WORDS, FilterState, game_result, initialize, transition, word_at,
)
from mindreader.harness.io import export_result

RESET = ":reset"
QUIT = ":quit"


def _status_line(state: FilterState, cue_words: Sequence[str] = ()) -> str:
    pos, total = state.progress
    history = "".join(state.sequence) or "-"
    letter = state.current_letter
    cue = word_at(cue_words, state.current_letter_index)
    if cue:
        letter = f"{letter} ({cue})"
    return (f"Letter {pos}/{total}: {letter} | "
            f"left={len(state.left_words)} right={len(state.right_words)} | choices={history}")


def play(
        words: List[str],
        letters: str,
        *,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
) -> Optional[FilterState]:
    """
    Run the prompt loop until the session completes. Returns the final state,
    or None if the user quit (or input ran out).
    """
    demo = list(words) == PREDEFINED_WORDS and letters == LETTER_SEQUENCE
    cue_words = PREDEFINED_WORDS if demo else ()

    state = initialize(words, letters)
    while not state.is_complete:
        try:
            raw = read(_status_line(state, cue_words) + " > ")
        except EOFError:
            return None
        cmd = raw.strip()
        if cmd.lower() == QUIT:
            return None
        if cmd.lower() == RESET:
            state = initialize(words, letters)
            write("Session reset.")
            continue
        try:
            state = transition(state, cmd.upper())
        except ValueError as e:
            write(f"! {e} (or {RESET} / {QUIT})")
    return state


def _load_words(args) -> List[str]:
    if args.words:
        return load_word_list(args.words)
    if args.word_list:
        return list(get_word_list(args.word_list).words)
    return list(PREDEFINED_WORDS)


def main(argv: Optional[List[str]] = None) -> int:
    list_ids = ", ".join(wl.id for wl in DEFAULT_WORD_LISTS)
    seq_ids = ", ".join(ls.id for ls in DEFAULT_LETTER_SEQUENCES)

    ap = argparse.ArgumentParser(description="mindreader: play one session in the terminal")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--word-list", help=f"built-in word list id (one of: {list_ids})")
    src.add_argument("--words", help="path to a word list file (one word per line)")
    ap.add_argument("--letters", default=LETTER_SEQUENCE,
                    help=f"letter sequence id (one of: {seq_ids}) or literal letters")
    ap.add_argument("--preview", type=int, default=PREVIEW_WORDS,
                    help="words shown per pool in the summary")
    ap.add_argument("--export", help="write the result to this path")
    ap.add_argument("--format", dest="export_format", default="txt",
                    help="export format: txt, csv or json")
    args = ap.parse_args(argv)
    if args.preview < 0:
        ap.error(f"--preview must be >= 0; got {args.preview}")

    try:
        prefs = Preferences(export_format=args.export_format)
        words = _load_words(args)
        letters = resolve_letters(args.letters)
    except (ValueError, FileNotFoundError) as e:
        ap.error(str(e))

    state = play(words, letters)
    if state is None:
        print("Bye.")
        return 1

    result = game_result(state)
    print("\nGame Complete!\n")
    print(result.summary_text(preview=args.preview))

    if args.export:
        path = export_result(result, args.export, prefs.export_format)
        print(f"Wrote: {path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

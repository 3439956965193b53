"""
Filter state and its transition function.

A session is a chain of immutable FilterState values:

    state = initialize(words, "NTRLCSEUAI")
    state = transition(state, "L")
    state = transition(state, "R")
    ...

The engine holds nothing between calls; whoever drives the session keeps the
latest state. Each transition filters the left pool by the left pattern and
the right pool by the right pattern (see partition.py), so the two pools
start identical and drift apart as choices accumulate.

Degenerate inputs are defined behavior rather than errors:
  - empty letter sequence -> current_letter == "" and the first transition
    completes the session
  - empty or single-word list -> the first transition completes the session
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, Iterable, Tuple

from .errors import SessionComplete
from .partition import Choice, check_choice, partition, should_end


@dataclass(frozen=True)
class FilterState:
    current_letter: str
    current_letter_index: int
    sequence: Tuple[str, ...]
    left_words: Tuple[str, ...]
    right_words: Tuple[str, ...]
    used_letters: FrozenSet[str] = field(default_factory=frozenset)
    is_complete: bool = False
    letter_sequence: str = ""

    @property
    def progress(self) -> Tuple[int, int]:
        """(position, total) for display, e.g. (3, 10) while asking the third letter."""
        total = len(self.letter_sequence)
        return min(self.current_letter_index + 1, total), total

    def to_dict(self) -> Dict:
        """JSON-friendly view (used by exports and run manifests)."""
        return {
            "current_letter": self.current_letter,
            "current_letter_index": self.current_letter_index,
            "sequence": list(self.sequence),
            "left_words": list(self.left_words),
            "right_words": list(self.right_words),
            "used_letters": sorted(self.used_letters),
            "is_complete": self.is_complete,
            "letter_sequence": self.letter_sequence,
        }


def _letter_at(letters: str, i: int) -> str:
    return letters[i] if 0 <= i < len(letters) else ""


def initialize(word_list: Iterable[str], letter_sequence: Iterable[str]) -> FilterState:
    """
    Fresh session state: index 0, no history, both pools equal to `word_list`.

    `letter_sequence` may be a string or any iterable of single letters.
    """
    letters = "".join(letter_sequence)
    words = tuple(word_list)
    return FilterState(
        current_letter=_letter_at(letters, 0),
        current_letter_index=0,
        sequence=(),
        left_words=words,
        right_words=words,
        used_letters=frozenset(),
        is_complete=False,
        letter_sequence=letters,
    )


def transition(state: FilterState, choice: Choice, *, strict: bool = False) -> FilterState:
    """
    Apply one choice and return the next state. `state` itself is untouched.

    Raises:
      InvalidChoice   : `choice` is not 'L' or 'R' (checked before any work)
      SessionComplete : `strict` is set and `state.is_complete` is already true

    Without `strict`, calling on a complete state keeps narrowing the pools
    with current_letter == "".
    """
    check_choice(choice)
    if strict and state.is_complete:
        raise SessionComplete(
            f"session already complete after {len(state.sequence)} choice(s)")

    letter = state.current_letter

    # Each pool keeps only its own half of the split
    left_words, _ = partition(state.left_words, letter, choice)
    _, right_words = partition(state.right_words, letter, choice)

    nxt = state.current_letter_index + 1
    letters = state.letter_sequence

    return replace(
        state,
        current_letter=_letter_at(letters, nxt),
        current_letter_index=nxt,
        sequence=state.sequence + (choice,),
        left_words=tuple(left_words),
        right_words=tuple(right_words),
        used_letters=state.used_letters | {letter},
        is_complete=nxt >= len(letters) or should_end(left_words, right_words),
    )

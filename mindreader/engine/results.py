"""
End-of-session summary derived from a FilterState.

Front ends show the two pools, how many choices were made and the last
choice. Long pools are previewed: the first `preview` words, then
"... and K more".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .state import FilterState

PREVIEW_WORDS = 5


@dataclass(frozen=True)
class GameResult:
    left_words: List[str]
    right_words: List[str]
    total_choices: int
    final_choice: Optional[str]

    def to_dict(self) -> Dict:
        return {
            "left_words": list(self.left_words),
            "right_words": list(self.right_words),
            "total_choices": self.total_choices,
            "final_choice": self.final_choice,
        }

    def summary_text(self, preview: int = PREVIEW_WORDS) -> str:
        lines = [
            f"Total Choices: {self.total_choices}",
            "",
            f"Left Pattern Words ({len(self.left_words)}):",
            _preview(self.left_words, preview),
            "",
            f"Right Pattern Words ({len(self.right_words)}):",
            _preview(self.right_words, preview),
        ]
        return "\n".join(lines)


def _preview(words: Sequence[str], n: int) -> str:
    n = max(n, 0)
    text = ", ".join(words[:n])
    if len(words) > n:
        text += f"... and {len(words) - n} more"
    return text


def game_result(state: FilterState) -> GameResult:
    return GameResult(
        left_words=list(state.left_words),
        right_words=list(state.right_words),
        total_choices=len(state.sequence),
        final_choice=state.sequence[-1] if state.sequence else None,
    )


def word_at(words: Sequence[str], index: int) -> str:
    """Word at `index` of a display list, or "" when out of range."""
    if 0 <= index < len(words):
        return words[index]
    return ""

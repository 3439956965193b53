"""
Honest spectators.

The spectator thinks of `secret` and, for each letter asked, points to one
side depending on whether the secret contains it. Which side means
"contains" decides the pool the secret survives in:

  - left_contains  : L when the letter is in the secret -> stays in left_words
  - right_contains : R when the letter is in the secret -> stays in right_words

Both follow from the dual interpretation in mindreader.engine.partition.
"""

from __future__ import annotations

from mindreader.engine import FilterState, classify
from .base import BasePolicy, register


@register
class LeftContainsPolicy(BasePolicy):
    id = "left_contains"
    name = "Left = contains"
    version = "1.0.0"

    def next_choice(self, state: FilterState) -> str:
        return "L" if classify(self.secret, state.current_letter) else "R"


@register
class RightContainsPolicy(BasePolicy):
    id = "right_contains"
    name = "Right = contains"
    version = "1.0.0"

    def next_choice(self, state: FilterState) -> str:
        return "R" if classify(self.secret, state.current_letter) else "L"

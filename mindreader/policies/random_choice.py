"""
Random spectator.

Ignores the secret and flips a seeded coin every turn. Baseline for how
often a secret survives by chance.
"""

from __future__ import annotations

from mindreader.engine import CHOICES, FilterState
from .base import BasePolicy, register


@register
class RandomPolicy(BasePolicy):
    id = "random"
    name = "Random"
    version = "1.0.0"

    def next_choice(self, state: FilterState) -> str:
        return self.rng.choice(CHOICES)

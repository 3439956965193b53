from __future__ import annotations
import random
from typing import Dict, Type

from mindreader.engine import FilterState

# ---- Global policy registry ----
REGISTRY: Dict[str, Type["BasePolicy"]] = {}


def register(cls: Type["BasePolicy"]) -> Type["BasePolicy"]:
    """
    Decorator: @register on a policy class adds it to REGISTRY by its `id`.
    """
    pid = getattr(cls, "id", None)
    if not pid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if pid in REGISTRY:
        raise ValueError(f"Duplicate policy id: {pid}")
    REGISTRY[pid] = cls
    return cls


# ---- Base class that policies inherit ----
class BasePolicy:
    """A simulated spectator: holds a secret word and answers L/R per letter."""
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.secret: str = ""
        self.rng = random.Random()

    def reset(self, *, secret: str, seed: int | None = None) -> None:
        self.secret = secret
        if seed is not None:
            self.rng.seed(seed)

    def next_choice(self, state: FilterState) -> str:
        raise NotImplementedError("Override in subclass")

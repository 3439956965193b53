from __future__ import annotations
from typing import List
from .base import BasePolicy, REGISTRY, register

from . import spectator  # noqa: F401
from . import random_choice  # noqa: F401


def create_policy(policy_id: str) -> BasePolicy:
    """
    Factory: instantiate a registered policy by id.
    """
    try:
        cls = REGISTRY[policy_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown policy id: {policy_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_policy_ids() -> List[str]:
    """
    Return all registered policy ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())

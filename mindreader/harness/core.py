"""
Simulation harness core primitives.

- run_case:  play one session (one secret word) with a given policy.
- run_batch: play one session per word of the list (optionally a prefix sample).
- summarize: aggregate a batch into turn / pool-size statistics.

A session always ends: every transition advances the letter index, so at most
len(letters) choices are made (one, if the sequence is empty).

These functions are UI-agnostic so the CLI, a notebook or tests can reuse
them unchanged.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List

import numpy as np

from mindreader.engine import initialize, transition


def run_case(
        policy,
        secret: str,
        *,
        words: Iterable[str],
        letters: str,
        seed: int | None = None,
) -> Dict:
    """
    Drive one session from initialize() until the state is complete.

    Args:
        policy:   an object implementing BasePolicy.next_choice(state)
        secret:   the word the simulated spectator is thinking of
        words:    full candidate pool
        letters:  letter sequence to ask
        seed:     RNG seed for policies that randomize

    Returns:
        dict with keys:
            secret, choices (str, e.g. "LRRL"), turns, left_words, right_words,
            in_left, in_right, time_ms
    """
    policy.reset(secret=secret, seed=seed)
    state = initialize(words, letters)

    t0 = time.perf_counter()
    while not state.is_complete:
        state = transition(state, policy.next_choice(state))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "secret": secret,
        "choices": "".join(state.sequence),
        "turns": len(state.sequence),
        "left_words": list(state.left_words),
        "right_words": list(state.right_words),
        "in_left": secret in state.left_words,
        "in_right": secret in state.right_words,
        "time_ms": dt,
    }


def run_batch(
        policy,
        words: List[str],
        *,
        letters: str,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Play one case per word, each word taking a turn as the secret. If `sample`
    is given only the first K words are used as secrets; the pool is always
    the full list.

    Each case's seed is derived from the base seed (seed + index).
    """
    secrets = list(words)
    if sample is not None:
        secrets = secrets[:sample]

    out: List[Dict] = []
    for idx, secret in enumerate(secrets, start=1):
        case_seed = None if seed is None else (seed + idx)
        out.append(run_case(policy, secret, words=words, letters=letters, seed=case_seed))
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Batch statistics: mean/median/max of turns and final pool sizes, and the
    fraction of cases where the secret survived in each pool.
    """
    if not results:
        return {"cases": 0}

    turns = np.array([r["turns"] for r in results], dtype=float)
    left = np.array([len(r["left_words"]) for r in results], dtype=float)
    right = np.array([len(r["right_words"]) for r in results], dtype=float)
    in_left = np.array([r["in_left"] for r in results], dtype=bool)
    in_right = np.array([r["in_right"] for r in results], dtype=bool)

    def _stats(a: np.ndarray) -> Dict[str, float]:
        return {"mean": float(a.mean()), "median": float(np.median(a)), "max": float(a.max())}

    return {
        "cases": len(results),
        "turns": _stats(turns),
        "left_size": _stats(left),
        "right_size": _stats(right),
        "left_hit_rate": float(in_left.mean()),
        "right_hit_rate": float(in_right.mean()),
    }

# apps/cli/run.py
"""
CLI entry point for batch simulations.

This script:
  1) Validates the word list against the letter sequence (prints counts + SHA).
  2) Instantiates the requested policy (simulated spectator).
  3) Plays one session per word as the secret, with a live progress indicator, and writes:
       - CSV:  per-session results (choices, final pools, whether the secret survived)
       - JSON: manifest with config, word list report, summary stats, git commit
"""

from __future__ import annotations

import argparse
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from mindreader.datasets import (
    DEFAULT_WORD_LISTS, LETTER_SEQUENCE, PREDEFINED_WORDS, get_word_list, load_word_list,
    pretty_summary, resolve_letters, validate_word_list, write_lines,
)
from mindreader.harness import run_case, summarize
from mindreader.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from mindreader.policies import create_policy, get_policy_ids


def _words_file(args, outdir: Path) -> str:
    """
    Path of the word list to validate. Built-in lists are written to the
    output directory first so the manifest hash covers exactly what was played.
    """
    if args.words:
        return args.words
    words = get_word_list(args.word_list).words if args.word_list else PREDEFINED_WORDS
    return write_lines(words, outdir / "words.txt")


def main(argv=None):
    """
    Parse CLI args, validate the list, run the batch with progress, and write outputs.
    """
    policy_choices = ", ".join(get_policy_ids())
    list_ids = ", ".join(wl.id for wl in DEFAULT_WORD_LISTS)

    ap = argparse.ArgumentParser(description="mindreader: run policy simulations")
    ap.add_argument("--policy", default="left_contains",
                    help=f"policy id (one of: {policy_choices})")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--word-list", help=f"built-in word list id (one of: {list_ids})")
    src.add_argument("--words", help="path to a word list file (one word per line)")
    ap.add_argument("--letters", default=LETTER_SEQUENCE,
                    help="letter sequence id or literal letters")
    ap.add_argument("--sample", type=int,
                    help="use only a subset of words as secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    try:
        letters = resolve_letters(args.letters)
        policy = create_policy(args.policy)
    except ValueError as e:
        ap.error(str(e))

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 1) Validate the list and print a one-liner summary
    try:
        words_path = _words_file(args, outdir)
    except ValueError as e:
        ap.error(str(e))
    rep = validate_word_list(words_path, letters=letters)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        print(f"  - {issue}")

    try:
        words = load_word_list(words_path)
    except FileNotFoundError as e:
        ap.error(f"word list not found: {e}")

    # 2) Choose secrets (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        secrets = pool[: args.sample]
    else:
        secrets = list(words)

    total = len(secrets)

    # 3) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(secrets, ncols=80, desc="Running", unit="session") if mode == "bar" else secrets

    for idx, secret in enumerate(iterator, 1):
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        results.append(run_case(policy, secret, words=words, letters=letters, seed=per_seed))

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    summary = summarize(results)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), policy_id=policy.id, letters=letters)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "letters": letters,
        "word_list": rep,
        "num_cases": len(results),
        "policy_id": policy.id,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))

    if summary["cases"]:
        print(
            f"turns mean={summary['turns']['mean']:.2f} | "
            f"left size mean={summary['left_size']['mean']:.2f} | "
            f"right size mean={summary['right_size']['mean']:.2f} | "
            f"hit rate L={summary['left_hit_rate']:.2%} R={summary['right_hit_rate']:.2%}"
        )
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()

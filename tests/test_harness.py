import csv
import json
from pathlib import Path

import pytest
from mindreader.datasets import LETTER_SEQUENCE, PREDEFINED_WORDS
from mindreader.engine import game_result, initialize, transition
from mindreader.harness import export_result, run_batch, run_case, summarize, write_csv, write_manifest
from mindreader.policies import create_policy, get_policy_ids


def test_policy_registry():
    assert get_policy_ids() == ["left_contains", "random", "right_contains"]
    with pytest.raises(ValueError, match="Available"):
        create_policy("psychic")


@pytest.mark.parametrize("secret", PREDEFINED_WORDS)
def test_left_contains_keeps_secret_on_left(secret):
    r = run_case(create_policy("left_contains"), secret,
                 words=PREDEFINED_WORDS, letters=LETTER_SEQUENCE)
    assert r["in_left"] is True
    assert 1 <= r["turns"] <= len(LETTER_SEQUENCE)
    assert len(r["choices"]) == r["turns"]


@pytest.mark.parametrize("secret", PREDEFINED_WORDS)
def test_right_contains_keeps_secret_on_right(secret):
    r = run_case(create_policy("right_contains"), secret,
                 words=PREDEFINED_WORDS, letters=LETTER_SEQUENCE)
    assert r["in_right"] is True


def test_run_case_matches_manual_transitions():
    r = run_case(create_policy("left_contains"), "Elephant",
                 words=PREDEFINED_WORDS, letters=LETTER_SEQUENCE)
    s = initialize(PREDEFINED_WORDS, LETTER_SEQUENCE)
    for c in r["choices"]:
        s = transition(s, c)
    assert s.is_complete
    assert list(s.left_words) == r["left_words"]
    assert list(s.right_words) == r["right_words"]


def test_random_policy_is_reproducible():
    a = run_case(create_policy("random"), "Loveable",
                 words=PREDEFINED_WORDS, letters=LETTER_SEQUENCE, seed=5)
    b = run_case(create_policy("random"), "Loveable",
                 words=PREDEFINED_WORDS, letters=LETTER_SEQUENCE, seed=5)
    assert a["choices"] == b["choices"]


def test_run_batch_and_summarize():
    results = run_batch(create_policy("left_contains"), PREDEFINED_WORDS,
                        letters=LETTER_SEQUENCE, sample=4)
    assert [r["secret"] for r in results] == PREDEFINED_WORDS[:4]
    s = summarize(results)
    assert s["cases"] == 4
    assert s["left_hit_rate"] == 1.0
    assert 1.0 <= s["turns"]["mean"] <= s["turns"]["max"] <= len(LETTER_SEQUENCE)
    assert summarize([]) == {"cases": 0}


def test_write_csv_and_manifest(tmp_path: Path):
    results = run_batch(create_policy("left_contains"), PREDEFINED_WORDS, letters=LETTER_SEQUENCE)
    out = write_csv(results, str(tmp_path / "run.csv"), policy_id="left_contains",
                    letters=LETTER_SEQUENCE)
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 10
    assert rows[0]["choices"].startswith("'")
    assert rows[0]["policy"] == "left_contains"

    m = write_manifest({"summary": summarize(results)}, str(tmp_path / "m.json"))
    assert json.loads(Path(m).read_text(encoding="utf-8"))["summary"]["cases"] == 10


@pytest.mark.parametrize("fmt", ["txt", "csv", "json"])
def test_export_result(tmp_path: Path, fmt):
    s = transition(initialize(PREDEFINED_WORDS, LETTER_SEQUENCE), "L")
    path = export_result(game_result(s), str(tmp_path / f"result.{fmt}"), fmt)
    text = Path(path).read_text(encoding="utf-8")
    if fmt == "txt":
        assert "Total Choices: 1" in text and "more" not in text
    elif fmt == "csv":
        assert text.splitlines()[0] == "side,word"
        assert len(text.splitlines()) == 11
    else:
        assert json.loads(text)["final_choice"] == "L"


def test_export_result_rejects_unknown_format(tmp_path: Path):
    with pytest.raises(ValueError):
        export_result(game_result(initialize(["a", "b"], "A")), str(tmp_path / "x"), "pdf")

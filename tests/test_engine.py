import random

import pytest
from mindreader.engine import (
    InvalidChoice, SessionComplete, classify, initialize, partition, should_end, transition,
)

WORDS = ["Necessary", "Toothbrush", "Remember", "Loveable", "Clementine",
         "Swingset", "Elephant", "Umbrella", "Antidote", "Impression"]
LETTERS = "NTRLCSEUAI"
WITH_N = ["Necessary", "Clementine", "Swingset", "Elephant", "Antidote", "Impression"]
WITHOUT_N = ["Toothbrush", "Remember", "Loveable", "Umbrella"]


@pytest.mark.parametrize("word,letter,expected", [
    ("Necessary", "N", True),
    ("Necessary", "n", True),
    ("necessary", "N", True),
    ("Remember", "N", False),
    ("Swingset", "n", True),
    ("Elephant", "N", True),
    ("", "A", False),
])
def test_classify_case_insensitive(word, letter, expected):
    assert classify(word, letter) is expected


def test_partition_left_choice_puts_contains_on_left():
    left, right = partition(WORDS, "N", "L")
    assert left == WITH_N
    assert right == WITHOUT_N


def test_partition_right_choice_swaps_sides():
    left, right = partition(WORDS, "N", "R")
    assert left == WITHOUT_N
    assert right == WITH_N


def test_partition_completeness_random_pools():
    rng = random.Random(7)
    alphabet = "abcdeXYZ"
    for _ in range(200):
        words = ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 6)))
                 for _ in range(rng.randint(0, 12))]
        letter = rng.choice("abcxyzQ")
        choice = rng.choice("LR")
        left, right = partition(words, letter, choice)
        assert len(left) + len(right) == len(words)
        assert sorted(left + right) == sorted(words)


def test_partition_keeps_duplicates():
    left, right = partition(["ant", "ant", "bee"], "a", "L")
    assert left == ["ant", "ant"] and right == ["bee"]


@pytest.mark.parametrize("bad", ["", "l", "X", "LR", None, 0])
def test_partition_rejects_invalid_choice(bad):
    with pytest.raises(InvalidChoice):
        partition(WORDS, "N", bad)


def test_initialize_default_data():
    s = initialize(WORDS, LETTERS)
    assert s.current_letter == "N"
    assert s.current_letter_index == 0
    assert s.sequence == ()
    assert len(s.left_words) == 10 and len(s.right_words) == 10
    assert s.used_letters == frozenset()
    assert s.is_complete is False
    assert s.letter_sequence == LETTERS


def test_initialize_copies_word_list():
    words = list(WORDS)
    s = initialize(words, LETTERS)
    words.append("Extra")
    assert len(s.left_words) == 10


def test_first_transition_on_default_data():
    s = transition(initialize(WORDS, LETTERS), "L")
    assert list(s.left_words) == WITH_N
    assert list(s.right_words) == WITHOUT_N
    assert s.current_letter == "T"
    assert s.current_letter_index == 1
    assert s.sequence == ("L",)
    assert s.used_letters == {"N"}
    assert s.is_complete is False


def test_pools_filter_independently():
    # left pool keeps the left half, right pool keeps the right half
    s = transition(initialize(WORDS, LETTERS), "R")
    assert list(s.left_words) == WITHOUT_N
    assert list(s.right_words) == WITH_N
    s2 = transition(s, "L")  # letter T
    assert list(s2.left_words) == [w for w in WITHOUT_N if "t" in w.lower()]
    assert list(s2.right_words) == [w for w in WITH_N if "t" not in w.lower()]


def test_invalid_choice_leaves_state_untouched():
    s = initialize(WORDS, LETTERS)
    with pytest.raises(InvalidChoice):
        transition(s, "")
    assert s == initialize(WORDS, LETTERS)


def test_transition_does_not_mutate_input():
    s = initialize(WORDS, LETTERS)
    transition(s, "L")
    assert s.current_letter_index == 0 and s.sequence == ()


def test_single_letter_sequence_completes_after_one_choice():
    s = transition(initialize(WORDS, "Z"), "L")
    assert s.current_letter_index == 1
    assert s.current_letter == ""
    assert s.is_complete is True


def test_empty_inputs_are_degenerate_not_errors():
    s = initialize(WORDS, "")
    assert s.current_letter == ""
    assert transition(s, "L").is_complete is True

    s = initialize([], LETTERS)
    assert transition(s, "R").is_complete is True


def test_random_walk_properties():
    rng = random.Random(42)
    for _ in range(50):
        s = initialize(WORDS, LETTERS)
        choices = []
        for n in range(1, 15):
            prev = s
            c = rng.choice("LR")
            choices.append(c)
            s = transition(s, c)
            # monotonic narrowing
            assert len(s.left_words) <= len(prev.left_words)
            assert len(s.right_words) <= len(prev.right_words)
            # index bound
            assert s.current_letter_index == n
            assert s.current_letter == (LETTERS[n] if n < len(LETTERS) else "")
            # history integrity
            assert list(s.sequence) == choices
            # termination correctness
            expected = (n >= len(LETTERS) or len(s.left_words) <= 1
                        or len(s.right_words) <= 1)
            assert s.is_complete is expected


def test_complete_state_stays_complete_and_keeps_narrowing():
    s = transition(initialize(["ab", "cd", "ef"], "A"), "L")
    assert s.is_complete
    s2 = transition(s, "R")
    assert s2.is_complete
    assert s2.current_letter == ""
    assert s2.current_letter_index == 2
    assert len(s2.left_words) <= len(s.left_words)


def test_strict_mode_rejects_after_completion():
    s = transition(initialize(WORDS, "N"), "L")
    with pytest.raises(SessionComplete):
        transition(s, "L", strict=True)


def test_used_letters_do_not_affect_filtering():
    from dataclasses import replace
    s = transition(initialize(WORDS, LETTERS), "L")
    tampered = replace(s, used_letters=frozenset("XYZ"))
    a = transition(s, "R")
    b = transition(tampered, "R")
    assert a.left_words == b.left_words and a.right_words == b.right_words
    assert a.is_complete == b.is_complete


def test_should_end():
    assert should_end(["a"], ["b", "c"]) is True
    assert should_end(["a", "b"], []) is True
    assert should_end(["a", "b"], ["c", "d"]) is False


def test_progress_and_to_dict():
    s = initialize(WORDS, LETTERS)
    assert s.progress == (1, 10)
    d = transition(s, "L").to_dict()
    assert d["sequence"] == ["L"] and d["used_letters"] == ["N"]

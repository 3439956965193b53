"""
Built-in word lists, letter sequences and preferences.

The ten predefined words and LETTER_SEQUENCE make up the demo session: each
word's initial letter is the letter asked at the same position.

Custom lists/sequences follow the same rules as the settings form:
  - word list  : one word per line, blank lines dropped, name required,
                 at least 3 words
  - sequence   : name required, 3..50 characters, letters a-z only
"""

from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import Dict, List

from mindreader.engine import FilterState, initialize

PREDEFINED_WORDS: List[str] = [
    "Necessary",
    "Toothbrush",
    "Remember",
    "Loveable",
    "Clementine",
    "Swingset",
    "Elephant",
    "Umbrella",
    "Antidote",
    "Impression",
]

LETTER_SEQUENCE = "NTRLCSEUAI"

# Bounds for user-defined word lists and letter sequences
MIN_CUSTOM_WORDS = 3
MIN_SEQUENCE_LEN = 3
MAX_SEQUENCE_LEN = 50

EXPORT_FORMATS = ("txt", "csv", "json")

_LETTERS_RE = re.compile(r"^[A-Za-z]+$")


@dataclass
class WordList:
    id: str
    name: str
    words: List[str]
    is_custom: bool = False


@dataclass
class LetterSequence:
    id: str
    name: str
    sequence: str
    is_custom: bool = False


@dataclass
class Preferences:
    export_format: str = "txt"

    def __post_init__(self):
        if self.export_format not in EXPORT_FORMATS:
            raise ValueError(
                f"export_format must be one of {EXPORT_FORMATS}; got {self.export_format!r}")


DEFAULT_WORD_LISTS: List[WordList] = [
    WordList("en-uk", "EN-UK Dictionary", [
        "apple", "banana", "cherry", "dragon", "elephant", "flamingo", "giraffe", "hamburger",
        "iceberg", "jacket", "kangaroo", "lemon", "mountain", "notebook", "orange", "penguin",
        "queen", "rainbow", "sunshine", "tiger", "umbrella", "violin", "watermelon", "xylophone",
        "yellow", "zebra", "airplane", "butterfly", "camera", "dolphin", "eagle", "fireworks",
    ]),
    WordList("19k-words", "19K Words", [
        "abandon", "ability", "abroad", "absolute", "accept", "access", "account", "achieve",
        "across", "action", "active", "actual", "admit", "adopt", "adult", "advance",
        "advantage", "adventure", "advertise", "advice", "affect", "afford", "afraid", "after",
        "again", "against", "age", "agency", "agent", "agree", "agreement", "ahead",
    ]),
    WordList("all-names", "All Names", [
        "alex", "bella", "chris", "diana", "emma", "frank", "grace", "henry",
        "isabella", "james", "kate", "leo", "maya", "noah", "olivia", "paul",
        "quinn", "rachel", "sam", "taylor", "uma", "victor", "willa", "xavier",
        "yara", "zoe", "adam", "beth", "carl", "daisy", "eric", "fiona",
    ]),
    WordList("boys-names", "Boys Names", [
        "aaron", "benjamin", "christopher", "daniel", "ethan", "finn", "gabriel", "henry",
        "isaac", "jack", "kevin", "liam", "mason", "noah", "owen", "parker",
        "quinn", "ryan", "samuel", "thomas", "ulysses", "victor", "william", "xavier",
        "yusuf", "zachary", "alex", "blake", "carter", "dylan", "elijah", "felix",
    ]),
    WordList("girls-names", "Girls Names", [
        "ava", "bella", "charlotte", "diana", "emma", "fiona", "grace", "hannah",
        "isabella", "julia", "kate", "lily", "maya", "nora", "olivia", "penelope",
        "quinn", "ruby", "sophia", "taylor", "una", "violet", "willow", "xena",
        "yara", "zoe", "alice", "brooklyn", "claire", "daisy", "eve", "faith",
    ]),
    WordList("months-stars", "Months & Star Signs", [
        "january", "february", "march", "april", "may", "june", "july", "august",
        "september", "october", "november", "december", "aries", "taurus", "gemini", "cancer",
        "leo", "virgo", "libra", "scorpio", "sagittarius", "capricorn", "aquarius", "pisces",
    ]),
]

DEFAULT_LETTER_SEQUENCES: List[LetterSequence] = [
    LetterSequence("full-alphabet", "Full Alphabet", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
    LetterSequence("seatjk", "SEATJK", "SEATJK"),
    LetterSequence("vowels-only", "Vowels Only", "AEIOU"),
    LetterSequence("most-frequent", "Most Frequent", "ETAOINSHRDLUCMFWYPVBGKJQXZ"),
]

_WORD_LISTS: Dict[str, WordList] = {wl.id: wl for wl in DEFAULT_WORD_LISTS}
_SEQUENCES: Dict[str, LetterSequence] = {ls.id: ls for ls in DEFAULT_LETTER_SEQUENCES}


def initialize_default() -> FilterState:
    """Demo session over PREDEFINED_WORDS and LETTER_SEQUENCE."""
    return initialize(PREDEFINED_WORDS, LETTER_SEQUENCE)


def get_word_list(list_id: str) -> WordList:
    try:
        return _WORD_LISTS[list_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown word list id: {list_id}. Available: {sorted(_WORD_LISTS)}") from e


def get_letter_sequence(seq_id: str) -> LetterSequence:
    try:
        return _SEQUENCES[seq_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown letter sequence id: {seq_id}. Available: {sorted(_SEQUENCES)}") from e


def _custom_id() -> str:
    # millisecond timestamp
    return f"custom-{int(time.time() * 1000)}"


def make_custom_word_list(name: str, text: str) -> WordList:
    """Build a custom list from newline-separated `text` (blank lines dropped)."""
    name = (name or "").strip()
    words = [w.strip() for w in (text or "").split("\n") if w.strip()]
    if not name:
        raise ValueError("custom word list needs a name")
    if len(words) < MIN_CUSTOM_WORDS:
        raise ValueError(
            f"custom word list needs at least {MIN_CUSTOM_WORDS} words; got {len(words)}")
    return WordList(_custom_id(), name, words, is_custom=True)


def make_custom_letter_sequence(name: str, sequence: str) -> LetterSequence:
    name = (name or "").strip()
    sequence = (sequence or "").strip()
    if not name or not sequence:
        raise ValueError("custom letter sequence needs a name and a sequence")
    if not (MIN_SEQUENCE_LEN <= len(sequence) <= MAX_SEQUENCE_LEN):
        raise ValueError(
            f"letter sequence must be {MIN_SEQUENCE_LEN}-{MAX_SEQUENCE_LEN} characters; "
            f"got {len(sequence)}")
    if not _LETTERS_RE.match(sequence):
        raise ValueError("letter sequence may only contain letters A-Z")
    return LetterSequence(_custom_id(), name, sequence.upper(), is_custom=True)


def resolve_letters(value: str) -> str:
    """
    Accept either a built-in sequence id ("vowels-only") or literal letters
    ("NTRL"). Literal letters are upper-cased; anything else raises ValueError.
    """
    if value in _SEQUENCES:
        return _SEQUENCES[value].sequence
    if not _LETTERS_RE.match(value or ""):
        raise ValueError(
            f"letters must be a sequence id ({sorted(_SEQUENCES)}) or letters A-Z; got {value!r}")
    return value.upper()

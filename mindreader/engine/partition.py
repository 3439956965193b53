"""
Letter membership and the dual-interpretation split.

Conventions:
  - 'L' : left choice
  - 'R' : right choice

For a letter and a choice, every word lands on exactly one side:
  - left pattern  : (L and word contains letter) or (R and it does not)
  - right pattern : (R and word contains letter) or (L and it does not)

So 'contains' and 'does not contain' split the pool exactly, and the choice
only decides which physical side gets the 'contains' half.
"""

from typing import Iterable, List, Literal, Tuple

from .errors import InvalidChoice

Choice = Literal["L", "R"]
CHOICES: Tuple[str, str] = ("L", "R")


def check_choice(choice) -> str:
    """Return `choice` unchanged if it is 'L' or 'R', else raise InvalidChoice."""
    if not isinstance(choice, str) or choice not in CHOICES:
        raise InvalidChoice(choice)
    return choice


def classify(word: str, letter: str) -> bool:
    """
    True if `letter` appears anywhere in `word`, ignoring case.

    Examples:
      classify("Necessary", "n") -> True
      classify("Remember", "N")  -> False
    """
    return letter.upper() in word.upper()


def partition(words: Iterable[str], letter: str, choice: Choice) -> Tuple[List[str], List[str]]:
    """
    Split `words` into (left_words, right_words) for one choice on `letter`.

    Order is preserved on each side and duplicates are kept, so
    len(left) + len(right) == len(words) always holds.
    """
    check_choice(choice)
    # The side that collects the words containing the letter
    contains_left = choice == "L"

    left: List[str] = []
    right: List[str] = []
    for w in words:
        if classify(w, letter) == contains_left:
            left.append(w)
        else:
            right.append(w)
    return left, right


def should_end(left_words, right_words) -> bool:
    """True once either pool has narrowed to a single word (or none)."""
    return len(left_words) <= 1 or len(right_words) <= 1

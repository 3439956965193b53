from .defaults import (
    PREDEFINED_WORDS, LETTER_SEQUENCE, DEFAULT_WORD_LISTS, DEFAULT_LETTER_SEQUENCES,
    WordList, LetterSequence, Preferences,
    initialize_default, get_word_list, get_letter_sequence, resolve_letters,
    make_custom_word_list, make_custom_letter_sequence,
)
from .validator import validate_word_list, pretty_summary
from .io import read_lines, write_lines, load_word_list

__all__ = [
    "PREDEFINED_WORDS", "LETTER_SEQUENCE", "DEFAULT_WORD_LISTS", "DEFAULT_LETTER_SEQUENCES",
    "WordList", "LetterSequence", "Preferences",
    "initialize_default", "get_word_list", "get_letter_sequence", "resolve_letters",
    "make_custom_word_list", "make_custom_letter_sequence",
    "validate_word_list", "pretty_summary",
    "read_lines", "write_lines", "load_word_list",
]

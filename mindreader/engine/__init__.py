from .errors import InvalidChoice, SessionComplete
from .partition import CHOICES, Choice, check_choice, classify, partition, should_end
from .state import FilterState, initialize, transition
from .results import GameResult, PREVIEW_WORDS, game_result, word_at

__all__ = [
    "InvalidChoice", "SessionComplete",
    "CHOICES", "Choice", "check_choice", "classify", "partition", "should_end",
    "FilterState", "initialize", "transition",
    "GameResult", "PREVIEW_WORDS", "game_result", "word_at",
]

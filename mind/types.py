"""
Labels for clarity.
"""

from enum import Enum
from typing import List, Literal

CODE_LENGTH = 4  # symbols per secret / guess

Symbol = str  # one character, '0' -> '9'
Code = str  # CODE_LENGTH symbols, e.g. "2340"
GameStatus = Literal["in_progress", "won", "lost"]
ColorMode = Literal["auto", "mono", "dark", "light", "grey"]


class FeedbackTag(str, Enum):
    GREEN = "green"    # right digit, right place
    YELLOW = "yellow"  # digit appears somewhere else in the secret
    RED = "red"        # digit is not in the secret at all


Feedback = List[FeedbackTag]  # one tag per guess position


def is_valid_symbol(ch: Symbol) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"

"""
Game loop
Runs the attempts one after another: prompt, read a guess, score it, print
the tags. Stops at the first all-GREEN guess or when chances run out.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .editor import InputEditor
from .engine import score, is_win
from .theme import ColorTheme
from .types import Code, Feedback, GameStatus

@dataclass
class Attempt:
    index: int  # 1-based
    guess: Code
    feedback: Feedback

@dataclass
class Outcome:
    secret: Code
    status: GameStatus = "in_progress"
    attempts: List[Attempt] = field(default_factory=list)

    @property
    def winning_attempt(self) -> Optional[int]:
        if self.status != "won" or not self.attempts:
            return None
        return self.attempts[-1].index


class GameLoop:
    def __init__(self, editor: InputEditor, theme: ColorTheme, write: Callable[[str], None]) -> None:
        self.editor = editor
        self.theme = theme
        self._write = write

    def play(self, secret: Code, chances: int) -> Outcome:
        outcome = Outcome(secret=secret)

        index = 1
        while index <= chances:
            self._write(" %2d. " % index)
            guess = self.editor.read_guess()

            feedback = score(guess, secret)
            outcome.attempts.append(Attempt(index=index, guess=guess, feedback=feedback))
            self._render(feedback)

            if is_win(feedback):
                outcome.status = "won"
                return outcome
            index += 1

        outcome.status = "lost"
        return outcome

    def reveal(self, secret: Code) -> None:
        """Print the secret; only called after a loss (or when input ran out)."""
        self._write(" answer:" + "".join(" " + symbol for symbol in secret) + "\n")

    def _render(self, feedback: Feedback) -> None:
        line = " "
        for tag in feedback:
            line += self.theme.render(tag) + " "
        self._write(line + "\n")

"""
Raw-terminal line editor for one guess.

The terminal does not echo anything in raw mode, so the editor echoes each
digit itself (digit + space) and rubs it out again on backspace / ^U.

Keys:
- '0'..'9'        append (ignored once the guess is full)
- DEL / BS        drop the last digit
- ^U              drop the whole guess
- Enter (\\n, \\r) submit, only when the guess is full
- anything else   ignored
"""

from enum import Enum
from typing import Callable, List, Optional

from .types import CODE_LENGTH, Code, is_valid_symbol

BACKSPACE_KEYS = ("\x7f", "\x08")
KILL_LINE = "\x15"  # ^U
SUBMIT_KEYS = ("\n", "\r")

CURSOR_BACK = "\b"
CLEAR_TO_EOL = "\033[K"

class EditorState(str, Enum):
    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"

class InputEditor:
    def __init__(self, read_char: Callable[[], str], write: Callable[[str], None],
                 length: int = CODE_LENGTH) -> None:
        self._read_char = read_char
        self._write = write
        self.length = length
        self._buffer: List[str] = []

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    @property
    def state(self) -> EditorState:
        if not self._buffer:
            return EditorState.EMPTY
        if len(self._buffer) < self.length:
            return EditorState.PARTIAL
        return EditorState.FULL

    def read_guess(self) -> Code:
        """
        Block until the player submits a full guess.
        Raises EOFError if the character source runs dry first.
        """
        while True:
            ch = self._read_char()
            if ch == "":
                raise EOFError("input ended before the guess was complete")
            guess = self.feed(ch)
            if guess is not None:
                return guess

    def feed(self, ch: str) -> Optional[Code]:
        """Apply one key. Returns the guess only when it is submitted."""
        if is_valid_symbol(ch):
            if len(self._buffer) < self.length:
                self._buffer.append(ch)
                self._write(ch + " ")
            return None

        if ch in SUBMIT_KEYS:
            if self.state is EditorState.FULL:
                guess = self.buffer
                self._buffer = []
                return guess
            return None

        if ch in BACKSPACE_KEYS:
            if self._buffer:
                self._erase(1)
                self._buffer.pop()
        elif ch == KILL_LINE:
            if self._buffer:
                self._erase(len(self._buffer))
                self._buffer = []
        return None

    def _erase(self, count: int) -> None:
        # each echoed digit takes two cells: the digit and its trailing space
        self._write(CURSOR_BACK * (2 * count) + CLEAR_TO_EOL)

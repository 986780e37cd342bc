"""
Raw mode for the controlling terminal, scoped to a `with` block.

Entering the block turns off canonical mode and local echo on stdin (the
editor echoes by itself). Leaving it puts the saved settings back, whatever
way the block is left: normal return, exception, Ctrl-C, or SIGTERM.

When stdin is not a terminal (pipe, file, test double) nothing is changed and
the game reads whatever the stream hands it.
"""

import errno
import logging
import signal
import sys
import termios
import threading
from typing import Any, List, Optional, TextIO

logger = logging.getLogger(__name__)

class RawTerminal:
    def __init__(self, stream: TextIO, output: Optional[TextIO] = None) -> None:
        self.stream = stream
        self.output = output if output is not None else sys.stdout
        self.active = False
        self.interactive = False  # tcgetattr worked, even if raw mode did not
        self._saved: Optional[List[Any]] = None
        self._fd: Optional[int] = None
        self._old_sigterm: Any = None

    def __enter__(self) -> "RawTerminal":
        if not self.stream.isatty():
            return self

        try:
            self._fd = self.stream.fileno()
            attrs = termios.tcgetattr(self._fd)
        except termios.error as exc:
            if not exc.args or exc.args[0] != errno.ENOTTY:
                logger.error("tcgetattr failed: %s", exc)
            return self

        self.interactive = True
        self._saved = list(attrs)
        attrs[3] &= ~(termios.ICANON | termios.ECHO)  # index 3 = lflag
        try:
            termios.tcsetattr(self._fd, termios.TCSANOW, attrs)
        except termios.error as exc:
            logger.error("could not switch terminal to raw mode: %s", exc)
            self._saved = None
            return self

        self.active = True
        self._install_sigterm()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        """Put the saved terminal settings back (safe to call twice)."""
        if self._saved is not None:
            try:
                termios.tcsetattr(self._fd, termios.TCSANOW, self._saved)
            except termios.error as exc:
                logger.error("could not restore terminal settings: %s", exc)
            self._saved = None
        self.active = False
        self._remove_sigterm()

    # --- SIGTERM -> SystemExit, so the with-block unwinds and restores ---

    def _install_sigterm(self) -> None:
        if threading.current_thread() is not threading.main_thread():
            return
        self._old_sigterm = signal.signal(signal.SIGTERM, _raise_exit)

    def _remove_sigterm(self) -> None:
        if self._old_sigterm is not None:
            signal.signal(signal.SIGTERM, self._old_sigterm)
            self._old_sigterm = None

    # --- character I/O used by the editor and the game loop ---

    def read_char(self) -> str:
        return self.stream.read(1)

    def write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()


def _raise_exit(signum, frame):
    raise SystemExit(128 + signum)

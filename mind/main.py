'''
mind: guess the secret four-digit code.

Usage:
  mind [-c CHANCES] [-C COLOR] [--seed N] [--full-range]

After each guess every digit gets a tag:
  G  right digit, right place
  Y  digit is somewhere else in the code
  R  digit is not in the code

Example for the secret 2 3 4 0:
   1. 0 3 5 3  Y G R Y
   2. 1 2 4 6  R Y G R
   3. 2 3 4 0  G G G G

Keys while typing a guess: digits, Backspace, Ctrl-U (clear), Enter.
'''

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .config import load_settings
from .editor import InputEditor
from .game import GameLoop
from .secret import SecretGenerator
from .terminal import RawTerminal
from .theme import resolve_theme

logger = logging.getLogger(__name__)

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mind",
        description="A game that might be similar to Mastermind.",
    )
    # kept as text so a bad value falls back to the default instead of aborting
    parser.add_argument("-c", "--chances", default=None, help="number of guesses (default 10)")
    parser.add_argument("-C", "--color", default=None, help="auto, mono, dark, light or grey (default auto)")
    parser.add_argument("--seed", default=None, help="seed for the secret (default: current time)")
    parser.add_argument("--full-range", action="store_true", default=None,
                        help="use digits 0-9 for the secret instead of 0-8")
    return parser

def configure_logging() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    settings = load_settings(
        chances=args.chances,
        color=args.color,
        seed=args.seed,
        full_range=args.full_range,
    )
    logger.debug("settings: %s", settings)

    try:
        with RawTerminal(stdin, stdout) as term:
            theme = resolve_theme(settings.color_mode, term.interactive)
            secret = SecretGenerator(seed=settings.seed, full_range=settings.full_range).generate()

            editor = InputEditor(term.read_char, term.write)
            game = GameLoop(editor, theme, term.write)

            try:
                outcome = game.play(secret, settings.chances)
            except EOFError:
                # nothing left to read: show the answer and leave quietly
                term.write("\n")
                game.reveal(secret)
                return 0

            if outcome.status != "won":
                game.reveal(secret)
    except KeyboardInterrupt:
        stdout.write("\n")
        stdout.flush()
        return 130

    return 0

def run() -> None:
    sys.exit(main())

if __name__ == "__main__":
    run()

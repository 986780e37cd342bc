"""
How feedback tags look on screen.

mono  -> plain R / Y / G (pipes, dumb terminals)
dark  -> normal-intensity red / yellow / green
light -> bold red / yellow / green (default on a terminal)
grey  -> shades of grey for colour-blind players
"""

import logging
from dataclasses import dataclass
from typing import Dict

from .types import FeedbackTag

logger = logging.getLogger(__name__)

RESET = "\033[m"

@dataclass(frozen=True)
class ColorTheme:
    name: str
    red: str
    yellow: str
    green: str

    def render(self, tag: FeedbackTag) -> str:
        if tag is FeedbackTag.GREEN:
            return self.green
        if tag is FeedbackTag.YELLOW:
            return self.yellow
        return self.red


def _ansi(code: str, letter: str) -> str:
    return "\033[" + code + "m" + letter + RESET


MONO = ColorTheme("mono", red="R", yellow="Y", green="G")
DARK = ColorTheme("dark", red=_ansi("0;31", "R"), yellow=_ansi("0;33", "Y"), green=_ansi("0;32", "G"))
LIGHT = ColorTheme("light", red=_ansi("1;31", "R"), yellow=_ansi("1;33", "Y"), green=_ansi("1;32", "G"))
GREY = ColorTheme("grey", red=_ansi("1;30", "R"), yellow=_ansi("0;37", "Y"), green=_ansi("1;37", "G"))

THEMES: Dict[str, ColorTheme] = {theme.name: theme for theme in (MONO, DARK, LIGHT, GREY)}


def resolve_theme(mode: str, interactive: bool) -> ColorTheme:
    """
    "auto" picks LIGHT on a real terminal and MONO otherwise.
    Unknown names fall back to MONO with a warning instead of failing.
    """
    if mode == "auto":
        return LIGHT if interactive else MONO

    theme = THEMES.get(mode)
    if theme is None:
        logger.warning("invalid color mode, falling back to mono")
        return MONO
    return theme

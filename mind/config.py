"""
Single place to:
- Read game defaults from env (MIND_CHANCES, MIND_COLOR, MIND_SEED)
- Merge them with command-line values
- Validate everything into one Settings object

Bad values never stop the game: chances falls back to 10 and an unknown
colour name is kept as-is so the theme layer can warn and use mono.
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .types import ColorMode

logger = logging.getLogger(__name__)

DEFAULT_CHANCES = 10

# first letter of the -C value picks the mode, so "Dark", "d" and "dark" all work
COLOR_MODES: Dict[str, ColorMode] = {
    "a": "auto",
    "m": "mono",
    "d": "dark",
    "l": "light",
    "g": "grey",
}

class Settings(BaseModel):
    chances: int = Field(DEFAULT_CHANCES, description="How many guesses the player gets")
    color_mode: str = Field("auto", description="auto | mono | dark | light | grey")
    seed: Optional[int] = Field(None, description="Fixed seed for the secret (None = wall clock)")
    full_range: bool = Field(False, description="Draw secret digits from 0..9 instead of 0..8")

    @field_validator("chances", mode="before")
    @classmethod
    def fallback_chances(cls, value: Any) -> int:
        """
        Anything that is not a positive whole number means "use the default".
        """
        try:
            chances = int(value)
        except (TypeError, ValueError):
            return DEFAULT_CHANCES
        if chances <= 0:
            return DEFAULT_CHANCES
        return chances

    @field_validator("color_mode", mode="before")
    @classmethod
    def normalize_color(cls, value: Any) -> str:
        text = str(value or "").strip().lower()
        if not text:
            return "auto"
        return COLOR_MODES.get(text[0], text)

    @field_validator("seed", mode="before")
    @classmethod
    def parse_seed(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning("ignoring non-numeric seed %r", value)
            return None


def load_settings(
    chances: Optional[str] = None,
    color: Optional[str] = None,
    seed: Any = None,
    full_range: Optional[bool] = None,
) -> Settings:
    # dev convenience: pick up a local .env if there is one
    load_dotenv()

    values: dict = {}

    env_chances = os.getenv("MIND_CHANCES")
    env_color = os.getenv("MIND_COLOR")
    env_seed = os.getenv("MIND_SEED")

    if chances is not None:
        values["chances"] = chances
    elif env_chances is not None:
        values["chances"] = env_chances

    if color is not None:
        values["color_mode"] = color
    elif env_color is not None:
        values["color_mode"] = env_color

    if seed is not None:
        values["seed"] = seed
    elif env_seed:
        values["seed"] = env_seed

    if full_range is not None:
        values["full_range"] = full_range

    return Settings(**values)

"""
Secret code generation.

The random source is seeded exactly once, when the generator is built:
either from the seed you pass in (tests, replays) or from the wall clock.

Digit range: by default every draw is '0' + randrange(9), so the secret only
ever uses 0..8. That matches how the game has always behaved (9^4 codes).
Pass full_range=True to draw from the whole 0..9 alphabet (10^4 codes).
"""

import logging
import random
import time
from typing import Optional

from .types import CODE_LENGTH, Code

logger = logging.getLogger(__name__)

LEGACY_RANGE = 9   # '0'..'8'
FULL_RANGE = 10    # '0'..'9'

class SecretGenerator:
    def __init__(self, seed: Optional[int] = None, full_range: bool = False,
                 length: int = CODE_LENGTH) -> None:
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self.length = length
        self.span = FULL_RANGE if full_range else LEGACY_RANGE
        self._rng = random.Random(seed)
        logger.debug("secret generator seeded with %d (span %d)", seed, self.span)

    def generate(self) -> Code:
        digits = []
        k = 0
        while k < self.length:
            digits.append(chr(ord("0") + self._rng.randrange(self.span)))
            k += 1
        return "".join(digits)

"""
Source of randomness for secrets and feedback shuffling.
A seed gives a reproducible game (tests, demos); without one we use the OS
entropy pool through SystemRandom.
"""

from random import Random, SystemRandom
from typing import Optional

from .schemas import Code


def make_rng(seed: Optional[int] = None) -> Random:
    if seed is None:
        return SystemRandom()
    return Random(seed)


def new_secret(rng: Random) -> Code:
    return Code.random(rng)

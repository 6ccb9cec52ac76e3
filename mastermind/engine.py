"""
Pure game logic (no terminal, no clock).
Each guess is scored peg by peg:
- EXACT: right colour in the right position
- PARTIAL: the colour appears anywhere in the secret
- NONE: the colour is not in the secret at all

The partial pass looks at the whole secret and never uses up a colour that
already scored, so a guess that repeats a colour can collect more PARTIAL
markers than classic Mastermind would give. Secrets never repeat a colour.

The markers are shuffled before they are returned, so only the counts tell
the player anything.
"""

from random import Random
from typing import List

from .schemas import Code, Feedback
from .types import Marker


def mark_guess(guess: Code, secret: Code) -> List[Marker]:
    """
    Positional markers, before the shuffle.
    Example:
      secret = [Red, Orange, Yellow, Blue]
      guess  = [Red, Blue, Green, Green]
      -> [EXACT, PARTIAL, NONE, NONE]
    """
    markers = [Marker.NONE] * len(guess)

    # 1. Exact position matches
    i = 0
    while i < len(guess):
        if guess[i] == secret[i]:
            markers[i] = Marker.EXACT
        i += 1

    # 2. Anything left that appears somewhere in the secret
    i = 0
    while i < len(guess):
        if markers[i] == Marker.NONE and guess[i] in secret:
            markers[i] = Marker.PARTIAL
        i += 1

    return markers


def score_guess(guess: Code, secret: Code, rng: Random) -> Feedback:
    markers = mark_guess(guess, secret)
    # shuffle so the order gives nothing away across repeated games
    rng.shuffle(markers)
    return Feedback(markers=tuple(markers))


def is_win(feedback: Feedback) -> bool:
    """Win = every marker is EXACT."""
    return feedback.is_win

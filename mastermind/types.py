"""
Labels for clarity.
"""

from enum import Enum
from typing import Dict, List, Literal

from .errors import ParseError

CODE_LENGTH = 4  # pegs per code
MAX_ATTEMPTS = 6  # guesses per game

GameStatus = Literal["awaiting_guess", "won", "exhausted"]


class Colour(Enum):
    """The six peg colours. The value is the one-letter code the player types."""

    RED = "R"
    ORANGE = "O"
    YELLOW = "Y"
    BLUE = "B"
    PURPLE = "P"
    GREEN = "G"

    @classmethod
    def parse(cls, code: str) -> "Colour":
        colour = _BY_CODE.get(code)
        if colour is None:
            raise ParseError(code)
        return colour

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.name.title()


class Marker(Enum):
    """Feedback pegs: black = right colour, right place; white = colour is in the secret."""

    EXACT = "Black"
    PARTIAL = "White"
    NONE = "Empty"

    def __str__(self) -> str:
        return self.value


COLOURS: List[Colour] = list(Colour)
_BY_CODE: Dict[str, Colour] = {colour.value: colour for colour in COLOURS}

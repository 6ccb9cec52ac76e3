"""
Explicit validation & Pydantic models
- Code is the shape shared by the secret and every guess: exactly 4 colours, immutable.
- Feedback is what the scorer hands back after a guess: exactly 4 markers, order meaningless.
- GameResult is what a finished game reports to the terminal front end.
"""

from random import Random
from typing import Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .errors import ContractViolation
from .types import CODE_LENGTH, COLOURS, Colour, GameStatus, Marker


# 1. Secret or guess
class Code(BaseModel):
    model_config = ConfigDict(frozen=True)

    pegs: Tuple[Colour, ...] = Field(
        ..., min_length=CODE_LENGTH, max_length=CODE_LENGTH,
        description="The colours, left to right",
    )

    @classmethod
    def of(cls, colours: Sequence[Colour]) -> "Code":
        """
        Build a code from colours the caller already checked.
        A wrong length here is a programming error: whoever read the
        player's input should have rejected it before getting this far.
        """
        if len(colours) != CODE_LENGTH:
            raise ContractViolation(
                f"Code needs exactly {CODE_LENGTH} colours, got {len(colours)}."
            )
        return cls(pegs=tuple(colours))

    @classmethod
    def random(cls, rng: Random) -> "Code":
        """Draw 4 distinct colours without replacement."""
        return cls(pegs=tuple(rng.sample(COLOURS, CODE_LENGTH)))

    @property
    def codes(self) -> str:
        # e.g. "RGBY"
        return "".join(colour.code for colour in self.pegs)

    def __iter__(self):
        # colours, not pydantic's (field, value) pairs
        return iter(self.pegs)

    def __len__(self) -> int:
        return len(self.pegs)

    def __getitem__(self, index: int) -> Colour:
        return self.pegs[index]

    def __contains__(self, colour: object) -> bool:
        return colour in self.pegs

    def __str__(self) -> str:
        return ", ".join(str(colour) for colour in self.pegs)


# 2. Feedback for one guess
class Feedback(BaseModel):
    model_config = ConfigDict(frozen=True)

    markers: Tuple[Marker, ...] = Field(
        ..., min_length=CODE_LENGTH, max_length=CODE_LENGTH,
        description="One marker per peg, in shuffled order",
    )

    def count(self, marker: Marker) -> int:
        return self.markers.count(marker)

    @property
    def exact(self) -> int:
        return self.count(Marker.EXACT)

    @property
    def partial(self) -> int:
        return self.count(Marker.PARTIAL)

    @property
    def none(self) -> int:
        return self.count(Marker.NONE)

    @property
    def is_win(self) -> bool:
        return self.exact == CODE_LENGTH

    def __str__(self) -> str:
        return " ".join(str(marker) for marker in self.markers)


# 3. Outcome of one game
class GameResult(BaseModel):
    status: GameStatus = Field(..., description="'won' or 'exhausted' once the loop stops")
    attempts_used: int = Field(..., ge=0, description="How many guesses were scored")
    elapsed_seconds: float = Field(..., ge=0, description="Wall-clock time from start to the end of the loop")

    @computed_field
    @property
    def won(self) -> bool:
        return self.status == "won"

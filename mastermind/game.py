"""
One game of Mastermind, start to finish.
The session only knows about the secret and the attempt counter; guesses come
from a Prompter and feedback goes to a Presenter, both handed in by the caller.
"""

import logging
from dataclasses import dataclass, field
from random import Random
from time import perf_counter
from typing import Callable, Optional

from .engine import is_win, score_guess
from .errors import GameOver
from .interfaces import Presenter, Prompter
from .schemas import Code, Feedback, GameResult
from .types import MAX_ATTEMPTS, GameStatus

logger = logging.getLogger(__name__)

PROMPT = "Your answer: "


@dataclass
class GameSession:
    secret: Code
    rng: Random
    max_attempts: int = MAX_ATTEMPTS
    clock: Callable[[], float] = perf_counter
    attempt: int = 0
    status: GameStatus = "awaiting_guess"
    started_at: Optional[float] = None
    finished_at: Optional[float] = field(default=None, init=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("A game needs at least one attempt.")
        if self.started_at is None:
            self.started_at = self.clock()

    @property
    def is_over(self) -> bool:
        return self.status != "awaiting_guess"

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - self.attempt

    def guess(self, attempt: Code) -> Feedback:
        if self.is_over:
            raise GameOver(f"Game {self.status}. No more guesses allowed.")

        feedback = score_guess(attempt, self.secret, self.rng)
        self.attempt += 1
        logger.debug(
            "attempt %d/%d: exact=%d partial=%d none=%d",
            self.attempt, self.max_attempts,
            feedback.exact, feedback.partial, feedback.none,
        )

        if is_win(feedback):
            self._finish("won")
        elif self.attempt >= self.max_attempts:
            self._finish("exhausted")
        return feedback

    def elapsed(self) -> float:
        end = self.finished_at if self.finished_at is not None else self.clock()
        return end - self.started_at

    def result(self) -> GameResult:
        return GameResult(
            status=self.status,
            attempts_used=self.attempt,
            elapsed_seconds=self.elapsed(),
        )

    def stop(self) -> None:
        """Freeze the elapsed time."""
        if self.finished_at is None:
            self.finished_at = self.clock()

    def _finish(self, status: GameStatus) -> None:
        self.status = status
        logger.info("game %s after %d attempt(s)", status, self.attempt)


def play(
    secret: Code,
    prompter: Prompter,
    presenter: Presenter,
    rng: Random,
    max_attempts: int = MAX_ATTEMPTS,
    clock: Callable[[], float] = perf_counter,
    started_at: Optional[float] = None,
) -> GameResult:
    """
    Run the turn loop until the code is cracked or the attempts run out.
    Whatever the prompter raises (bad input, closed stdin) ends the game and
    propagates to the caller untouched.
    The clock runs from `started_at` (now, if not given) until after the last
    feedback has been presented.
    """
    session = GameSession(
        secret=secret, rng=rng, max_attempts=max_attempts, clock=clock, started_at=started_at,
    )
    logger.debug("secret is %s", secret.codes)

    while not session.is_over:
        attempt = prompter.get_guess(PROMPT)
        feedback = session.guess(attempt)
        presenter.present(feedback)

    session.stop()
    return session.result()

"""
Terminal Mastermind

Guess the hidden 4-colour code in 6 tries. Colours are typed as one letter
each, no separators:
  R = Red, O = Orange, Y = Yellow, B = Blue, P = Purple, G = Green
After every guess you get 4 pegs in random order:
  Black = right colour, right place
  White = colour is in the code
  Empty = colour is not in the code

Configuration comes from MASTERMIND_* environment variables (see config.py).
"""

import logging
from random import Random
from time import perf_counter
from typing import Callable, Optional

from .config import Settings, load_settings
from .errors import InvalidInput
from .game import play
from .interfaces import Presenter, Prompter
from .log import setup_logger
from .random_client import make_rng, new_secret
from .schemas import GameResult
from .terminal import TerminalPresenter, TerminalPrompter

logger = logging.getLogger(__name__)


def run_game(
    prompter: Prompter,
    presenter: Presenter,
    rng: Random,
    settings: Settings,
    write: Callable[[str], None] = print,
    clock: Callable[[], float] = perf_counter,
) -> GameResult:
    secret = new_secret(rng)
    started_at = clock()
    logger.info("new game, %d attempts", settings.max_attempts)

    # demo behaviour; switch off with MASTERMIND_SHOW_SECRET=false
    if settings.show_secret:
        write(f"solution: {secret}")

    result = play(
        secret, prompter, presenter, rng,
        max_attempts=settings.max_attempts, clock=clock, started_at=started_at,
    )

    if result.won:
        write("You won!")

    write(f"Time needed: {int(result.elapsed_seconds)} seconds")
    return result


def main(settings: Optional[Settings] = None) -> int:
    settings = settings or load_settings()
    setup_logger("mastermind", settings.log_level)

    rng = make_rng(settings.seed)
    prompter = TerminalPrompter(retry=settings.retry_invalid_input)
    presenter = TerminalPresenter()

    try:
        run_game(prompter, presenter, rng, settings)
    except InvalidInput as exc:
        logger.info("game aborted on input %r: %s", exc.text, exc.reason)
        print(f"Invalid input: {exc.reason}")
        return 1
    return 0

"""
- Seeded rng so shuffles and secrets are repeatable
- In-memory Prompter/Presenter doubles so the game loop never touches a terminal
- A fake clock so elapsed time is predictable
"""
import logging
import pytest
from random import Random
from typing import Iterable, List

from mastermind.interfaces import Presenter, Prompter
from mastermind.schemas import Code, Feedback
from mastermind.terminal import parse_guess


class ScriptedPrompter(Prompter):
    """Hands out queued guesses; an Exception in the queue is raised instead."""

    def __init__(self, guesses: Iterable):
        self.guesses = list(guesses)
        self.prompts: List[str] = []

    def get_guess(self, prompt: str) -> Code:
        self.prompts.append(prompt)
        if not self.guesses:
            raise AssertionError("prompter asked for more guesses than scripted")
        nxt = self.guesses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


class RecordingPresenter(Presenter):
    def __init__(self):
        self.shown: List[Feedback] = []

    def present(self, feedback: Feedback) -> None:
        self.shown.append(feedback)


class FakeClock:
    """Each call moves time forward by `step` seconds."""

    def __init__(self, start: float = 100.0, step: float = 1.5):
        self.now = start
        self.step = step

    def __call__(self) -> float:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture
def rng() -> Random:
    return Random(1234)


@pytest.fixture
def secret() -> Code:
    # The fixed secret used by the scenarios: Red, Orange, Yellow, Blue
    return parse_guess("ROYB")


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_prompter():
    return ScriptedPrompter


@pytest.fixture(autouse=True)
def _reset_logging():
    """main() installs a stderr handler bound to pytest's capture; drop it after each test."""
    yield
    logging.getLogger("mastermind").handlers = []

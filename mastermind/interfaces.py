from abc import ABC, abstractmethod

from .schemas import Code, Feedback


class Prompter(ABC):
    """Where guesses come from."""

    @abstractmethod
    def get_guess(self, prompt: str) -> Code:
        """Show the prompt and return a 4-peg guess, or raise if none can be read."""
        pass


class Presenter(ABC):
    """Where feedback goes."""

    @abstractmethod
    def present(self, feedback: Feedback) -> None:
        pass

"""
Terminal-backed Prompter and Presenter.
Input and output are plain callables (input/print by default) so tests can
feed lines and capture output without touching the real terminal.
"""

import logging
from typing import Callable, List, Optional

from .errors import InvalidInput, ParseError
from .interfaces import Presenter, Prompter
from .schemas import Code, Feedback
from .types import CODE_LENGTH, Colour

logger = logging.getLogger(__name__)


def parse_guess(text: str) -> Code:
    """
    Turn a line like "RGBY" into a Code.
    Raises InvalidInput for an unknown colour letter or the wrong number of letters.
    """
    line = text.rstrip()
    colours: List[Colour] = []
    for ch in line:
        try:
            colours.append(Colour.parse(ch))
        except ParseError as exc:
            raise InvalidInput(text, f"{exc} Use {', '.join(c.code for c in Colour)}.") from exc

    if len(colours) != CODE_LENGTH:
        raise InvalidInput(
            text, f"A guess needs exactly {CODE_LENGTH} colours, got {len(colours)}."
        )
    return Code.of(colours)


class TerminalPrompter(Prompter):
    def __init__(
        self,
        read: Optional[Callable[[], str]] = None,
        write: Callable[[str], None] = print,
        retry: bool = False,
    ) -> None:
        self.read = read or input
        self.write = write
        self.retry = retry

    def get_guess(self, prompt: str) -> Code:
        while True:
            self.write(prompt)
            try:
                line = self.read()
            except EOFError:
                # nothing left to re-prompt from
                raise InvalidInput("", "No more input.") from None

            try:
                guess = parse_guess(line)
            except InvalidInput as exc:
                if not self.retry:
                    raise
                logger.debug("rejected guess %r: %s", line, exc.reason)
                self.write(f"Invalid input: {exc.reason} Try again.")
                continue

            self.write(f"INPUT {guess}")
            return guess


class TerminalPresenter(Presenter):
    def __init__(self, write: Callable[[str], None] = print) -> None:
        self.write = write

    def present(self, feedback: Feedback) -> None:
        self.write(str(feedback))

"""
Everything the game can raise on purpose.

- ParseError: a single character is not one of the six colour codes
- InvalidInput: a line typed by the player cannot become a guess
- ContractViolation: a Code was built with the wrong number of pegs (a bug, not bad input)
- GameOver: a guess was submitted to a session that already finished
"""


class MastermindError(Exception):
    """Base class for all game errors."""


class ParseError(MastermindError, ValueError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown colour code {code!r}.")


class InvalidInput(MastermindError, ValueError):
    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(reason)


class ContractViolation(MastermindError, AssertionError):
    pass


class GameOver(MastermindError):
    pass

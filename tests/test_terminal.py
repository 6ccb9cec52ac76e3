"""
Testing the terminal Prompter/Presenter with fake read/write callables.
"""

import pytest

from mastermind.errors import InvalidInput
from mastermind.schemas import Feedback
from mastermind.terminal import TerminalPresenter, TerminalPrompter, parse_guess
from mastermind.types import Colour, Marker


def lines(*texts):
    """read() replacement that returns each text once, then hits end of input."""
    queue = list(texts)

    def read():
        if not queue:
            raise EOFError
        return queue.pop(0)
    return read


def test_parse_guess_reads_four_codes():
    guess = parse_guess("RGBY\n")
    assert guess.pegs == (Colour.RED, Colour.GREEN, Colour.BLUE, Colour.YELLOW)


def test_parse_guess_rejects_unknown_code():
    with pytest.raises(InvalidInput) as excinfo:
        parse_guess("RGXY")
    assert "'X'" in excinfo.value.reason
    assert excinfo.value.text == "RGXY"


def test_parse_guess_rejects_wrong_length():
    with pytest.raises(InvalidInput):
        parse_guess("RGB")
    with pytest.raises(InvalidInput):
        parse_guess("RGBYP")
    with pytest.raises(InvalidInput):
        parse_guess("")


def test_prompter_shows_prompt_and_echoes_input():
    out = []
    prompter = TerminalPrompter(read=lines("ROYB"), write=out.append)

    guess = prompter.get_guess("Your answer: ")

    assert guess.codes == "ROYB"
    assert out == ["Your answer: ", "INPUT Red, Orange, Yellow, Blue"]


def test_prompter_without_retry_fails_on_bad_input():
    out = []
    prompter = TerminalPrompter(read=lines("ROYX", "ROYB"), write=out.append)

    with pytest.raises(InvalidInput):
        prompter.get_guess("Your answer: ")
    # never asked twice
    assert out == ["Your answer: "]


def test_prompter_with_retry_asks_again():
    out = []
    prompter = TerminalPrompter(read=lines("ROYX", "RO", "ROYB"), write=out.append, retry=True)

    guess = prompter.get_guess("Your answer: ")

    assert guess.codes == "ROYB"
    assert out.count("Your answer: ") == 3
    assert sum(1 for line in out if line.startswith("Invalid input:")) == 2


def test_end_of_input_is_fatal_even_with_retry():
    prompter = TerminalPrompter(read=lines(), write=lambda _: None, retry=True)

    with pytest.raises(InvalidInput) as excinfo:
        prompter.get_guess("Your answer: ")
    assert excinfo.value.reason == "No more input."


def test_presenter_prints_markers_in_given_order():
    out = []
    presenter = TerminalPresenter(write=out.append)

    presenter.present(Feedback(markers=(Marker.NONE, Marker.EXACT, Marker.PARTIAL, Marker.EXACT)))

    assert out == ["Empty Black White Black"]

import random

import pytest

from input_reader import (
    RETRY_EOF_FALLBACK,
    is_non_negative_integer,
    make_reader,
    parse_seed,
    read_non_negative_integer,
)

class ScriptedInput:
    """Returns canned lines, then raises EOFError like input() does."""
    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

@pytest.mark.parametrize("text", ["0", "15", "  +15", "+7", "\t42", "123456789012345678901234567890"])
def test_accepts_non_negative_integers(text):
    assert is_non_negative_integer(text)

@pytest.mark.parametrize("text", ["", "   ", "-5", "abc", "1.5", "12 ", "+", "1e3", "٣"])
def test_rejects_everything_else(text):
    assert not is_non_negative_integer(text)

def test_parses_signed_padded_value():
    read = ScriptedInput("  +15")
    assert read_non_negative_integer("n: ", 0, 100, read_line=read, emit=print) == 15
    assert read.prompts == ["n: "]

def test_reprompts_after_invalid_input():
    errors = []
    read = ScriptedInput("abc", "-5", "8")
    assert read_non_negative_integer("n: ", 0, 100, read_line=read, emit=errors.append) == 8
    assert read.prompts == ["n: ", "n: ", "n: "]
    assert len(errors) == 2
    assert '"abc" is not a positive integer' in errors[0]
    assert '"-5" is not a positive integer' in errors[1]

def test_value_outside_bounds_is_accepted():
    read = ScriptedInput("500")
    assert read_non_negative_integer("n: ", 0, 100, read_line=read, emit=print) == 500

def test_end_of_input_on_first_read_falls_back_to_random():
    value = read_non_negative_integer(
        "n: ", 30, 40, read_line=ScriptedInput(), emit=print, rng=random.Random(3)
    )
    assert 30 <= value <= 40

def test_end_of_input_during_retry_falls_back_to_fixed_value():
    read = ScriptedInput("oops")
    value = read_non_negative_integer("n: ", 30, 40, read_line=read, emit=lambda s: None)
    assert value == RETRY_EOF_FALLBACK == 0

def test_make_reader_binds_collaborators():
    errors = []
    reader = make_reader(read_line=ScriptedInput("x", "3"), emit=errors.append)
    assert reader("n: ", 0, 10) == 3
    assert len(errors) == 1

@pytest.mark.parametrize("text,expected", [("57", 57), ("+4", 4), ("-5", -5), ("0", 0)])
def test_parse_seed_integers(text, expected):
    assert parse_seed(text) == expected

@pytest.mark.parametrize("text", [None, "", "abc", " 5", "5.0", "1_000"])
def test_parse_seed_rejects_non_integers(text):
    assert parse_seed(text) is None

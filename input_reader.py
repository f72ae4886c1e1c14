from __future__ import annotations
import random
import re
from typing import Callable, Optional

from models import GuessStrategy
from prompts import INVALID_INPUT_MESSAGE

NON_NEGATIVE_INTEGER = re.compile(r"\s*[+]?\d+", re.ASCII)
SIGNED_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)

# End-of-input inside the retry loop falls back to this fixed value, while
# end-of-input on the first read falls back to a random number in bounds.
# Both fallbacks are kept as-is; do not merge them.
RETRY_EOF_FALLBACK = 0

def is_non_negative_integer(text: str) -> bool:
    return NON_NEGATIVE_INTEGER.fullmatch(text) is not None

def parse_seed(text: Optional[str]) -> Optional[int]:
    """Integer value of a command-line target, or None if it is not one."""
    if text is None or SIGNED_INTEGER.fullmatch(text) is None:
        return None
    return int(text)

def read_non_negative_integer(
    prompt: str,
    low: int,
    high: int,
    *,
    read_line: Optional[Callable[[str], str]] = None,
    emit: Callable[[str], None] = print,
    rng: random.Random | None = None,
) -> int:
    """
    Prompt until the user types a non-negative integer and return it.

    The value is not checked against [low, high]; the bounds are only used
    for the random fallback when input ends before anything was typed.
    """
    read_line = read_line or input
    try:
        text = read_line(prompt)
    except EOFError:
        return (rng or random).randint(low, high)

    while not is_non_negative_integer(text):
        emit(INVALID_INPUT_MESSAGE.format(text=text))
        try:
            text = read_line(prompt)
        except EOFError:
            return RETRY_EOF_FALLBACK
    return int(text)

def make_reader(
    read_line: Optional[Callable[[str], str]] = None,
    emit: Callable[[str], None] = print,
    rng: random.Random | None = None,
) -> GuessStrategy:
    def reader(prompt: str, low: int, high: int) -> int:
        return read_non_negative_integer(prompt, low, high, read_line=read_line, emit=emit, rng=rng)
    return reader

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List

# (prompt, low, high) -> guess
GuessStrategy = Callable[[str, int, int], int]

class GuessOutcome(Enum):
    TOO_HIGH = "too_high"
    TOO_LOW = "too_low"
    CORRECT = "correct"

class ParticipantKind(Enum):
    INTERACTIVE = "interactive"
    AUTOMATED = "automated"

@dataclass(frozen=True)
class Bounds:
    low: int
    high: int

    @property
    def is_exhausted(self) -> bool:
        return self.low > self.high

    def narrow(self, guess: int, outcome: GuessOutcome) -> Bounds:
        if outcome is GuessOutcome.TOO_HIGH:
            return Bounds(self.low, guess - 1)
        if outcome is GuessOutcome.TOO_LOW:
            return Bounds(guess + 1, self.high)
        return self

@dataclass(frozen=True)
class Participant:
    target: int
    kind: ParticipantKind
    guess: GuessStrategy = field(repr=False, compare=False)

@dataclass
class GuessRecord:
    guess: int
    outcome: GuessOutcome
    # Bounds in effect when the guess was made
    low: int
    high: int

@dataclass
class RoundReport:
    round_index: int
    holder_kind: ParticipantKind
    guesser_kind: ParticipantKind
    target: int
    guesses: List[GuessRecord] = field(default_factory=list)
    solved: bool = False

    @property
    def attempts(self) -> int:
        return len(self.guesses)

@dataclass
class SessionState:
    computer: Participant
    human: Participant
    reports: List[RoundReport] = field(default_factory=list)

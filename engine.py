from __future__ import annotations
import logging
import random
import time
from typing import Callable, List, Optional

from config import GameConfig
from input_reader import make_reader, parse_seed
from models import (
    Bounds,
    GuessOutcome,
    GuessRecord,
    GuessStrategy,
    Participant,
    ParticipantKind,
    RoundReport,
    SessionState,
)
from prompts import (
    TARGET_PROMPT,
    describe_outcome,
    exhausted_line,
    guessing_prompt,
    thinking_line,
)

logger = logging.getLogger(__name__)

Emit = Callable[[str], None]

def classify(proposed: int, target: int) -> GuessOutcome:
    if proposed == target:
        return GuessOutcome.CORRECT
    if proposed > target:
        return GuessOutcome.TOO_HIGH
    return GuessOutcome.TOO_LOW

# ---------- Guess strategies ----------
def interactive_guesser(reader: GuessStrategy) -> GuessStrategy:
    def guess(prompt: str, low: int, high: int) -> int:
        return reader(prompt, low, high)
    return guess

def automated_guesser(
    rng: random.Random,
    delay: float = 0.0,
    emit: Emit = print,
    sleep: Callable[[float], None] = time.sleep,
) -> GuessStrategy:
    def guess(prompt: str, low: int, high: int) -> int:
        value = rng.randint(low, high)
        emit(f"{prompt}{value}")
        if delay > 0:
            sleep(delay)
        return value
    return guess

def midpoint_guesser(emit: Emit = print) -> GuessStrategy:
    """Always splits the current bounds in half; used by the auto-demo."""
    def guess(prompt: str, low: int, high: int) -> int:
        value = (low + high) // 2
        emit(f"{prompt}{value}")
        return value
    return guess

class GuessingGameEngine:
    """
    Runs a two-round guessing session.
    - Round 1: the computer holds a number, the human guesses it.
    - Round 2: roles swap, the computer guesses the human's number.
    Each guess is classified and the search bounds shrink until the number is
    found or the bounds cross.
    """
    def __init__(
        self,
        config: Optional[GameConfig] = None,
        reader: Optional[GuessStrategy] = None,
        rng: Optional[random.Random] = None,
        emit: Emit = print,
        sleep: Callable[[float], None] = time.sleep,
        human_strategy: Optional[GuessStrategy] = None,
    ):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.emit = emit
        self.sleep = sleep
        self.reader = reader or make_reader(emit=emit, rng=self.rng)
        self.human_strategy = human_strategy
        self._state: Optional[SessionState] = None

    @property
    def state(self) -> Optional[SessionState]:
        return self._state

    # ---------- Session lifecycle ----------
    def setup(self, seed_value: Optional[str] = None) -> SessionState:
        lower, upper = self.config.lower_bound, self.config.upper_bound

        human_target = parse_seed(seed_value)
        if human_target is None:
            human_target = self.reader(TARGET_PROMPT, lower, upper)

        computer = Participant(
            target=self.rng.randint(lower, upper),
            kind=ParticipantKind.AUTOMATED,
            guess=automated_guesser(self.rng, self.config.think_delay, self.emit, self.sleep),
        )
        human = Participant(
            target=human_target,
            kind=ParticipantKind.INTERACTIVE,
            guess=self.human_strategy or interactive_guesser(self.reader),
        )
        self._state = SessionState(computer=computer, human=human)
        logger.debug("Session set up: computer target=%s, human target=%s", computer.target, human.target)
        return self._state

    def run(self) -> List[RoundReport]:
        state = self._require_state()
        state.reports.append(self.play_round(state.computer, state.human, round_index=1))
        state.reports.append(self.play_round(state.human, state.computer, round_index=2))
        return state.reports

    # ---------- Round handling ----------
    def play_round(self, holder: Participant, guesser: Participant, round_index: int = 1) -> RoundReport:
        bounds = Bounds(self.config.lower_bound, self.config.upper_bound)
        report = RoundReport(
            round_index=round_index,
            holder_kind=holder.kind,
            guesser_kind=guesser.kind,
            target=holder.target,
        )
        logger.debug("Round %d started: holder=%s target=%s", round_index, holder.kind.value, holder.target)
        self.emit(thinking_line(holder.kind, bounds.low, bounds.high))

        prompt = guessing_prompt(guesser.kind)
        while not bounds.is_exhausted:
            proposed = guesser.guess(prompt, bounds.low, bounds.high)
            outcome = classify(proposed, holder.target)
            report.guesses.append(GuessRecord(guess=proposed, outcome=outcome, low=bounds.low, high=bounds.high))
            self.emit(describe_outcome(proposed, outcome))
            if outcome is GuessOutcome.CORRECT:
                report.solved = True
                logger.debug("Round %d solved in %d guesses", round_index, report.attempts)
                return report
            bounds = bounds.narrow(proposed, outcome)

        logger.debug("Round %d exhausted after %d guesses", round_index, report.attempts)
        self.emit(exhausted_line(self.config.lower_bound, self.config.upper_bound))
        return report

    # ---------- helpers ----------
    def _require_state(self) -> SessionState:
        if self._state is None:
            raise ValueError("Session is not set up; call setup() first.")
        return self._state

from __future__ import annotations
import argparse
import logging
import random
import sys
from typing import List, Optional

from pydantic import ValidationError

from config import GameConfig, load_config
from engine import GuessingGameEngine, midpoint_guesser
from input_reader import parse_seed
from models import ParticipantKind, RoundReport
from prompts import GOODBYE_MESSAGE

logger = logging.getLogger(__name__)

# -----------------------------
# Pretty printers
# -----------------------------
def print_summary(reports: List[RoundReport]) -> None:
    print("\n===== SUMMARY =====")
    for rep in reports:
        who = "You" if rep.guesser_kind is ParticipantKind.INTERACTIVE else "I"
        result = "found" if rep.solved else "did not find"
        print(f"Round {rep.round_index}: {who} {result} {rep.target} after {rep.attempts} guess(es)")
    print("=" * 19)

# -----------------------------
# Play loops
# -----------------------------
def interactive_play(config: GameConfig, target: Optional[str]) -> List[RoundReport]:
    engine = GuessingGameEngine(config=config)
    engine.setup(target)
    return engine.run()

def auto_demo_play(config: GameConfig, target: Optional[str]) -> List[RoundReport]:
    """
    Plays both rounds without reading the console: the human seat bisects
    the range and, unless one was given, holds a random number.
    """
    print("\n🤖 Running auto-demo...")
    rng = random.Random()
    if parse_seed(target) is None:
        target = str(rng.randint(config.lower_bound, config.upper_bound))
    engine = GuessingGameEngine(config=config, rng=rng, human_strategy=midpoint_guesser())
    engine.setup(target)
    return engine.run()

# -----------------------------
# CLI
# -----------------------------
def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Guessing game: you and the computer take turns guessing each other's number")
    p.add_argument("target", nargs="?", default=None, help="Number you think of (skips the prompt if it is an integer)")
    p.add_argument("--lower", type=int, default=None, help="Lower bound of the range (default 0)")
    p.add_argument("--upper", type=int, default=None, help="Upper bound of the range (default 100)")
    p.add_argument("--think-delay", type=float, default=None, help="Seconds the computer pauses after each guess")
    p.add_argument("--auto-demo", action="store_true", help="Let the computer play both seats")
    p.add_argument("--verbose", action="store_true", help="Log debug details to stderr")
    return p.parse_args(argv)

def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(lower_bound=args.lower, upper_bound=args.upper, think_delay=args.think_delay)
    except ValidationError as e:
        print(f"❌ Invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(2)
    logger.debug("Using config: %s", config.model_dump())

    try:
        if args.auto_demo:
            reports = auto_demo_play(config, args.target)
        else:
            reports = interactive_play(config, args.target)
    except KeyboardInterrupt:
        print(GOODBYE_MESSAGE)
        sys.exit(130)

    print_summary(reports)

if __name__ == "__main__":
    main()

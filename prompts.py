from __future__ import annotations

from models import GuessOutcome, ParticipantKind

TARGET_PROMPT = "Enter a number you think of:"

INVALID_INPUT_MESSAGE = (
    "The input data is incorrect.\n"
    "\"{text}\" is not a positive integer. Please try again."
)

GOODBYE_MESSAGE = "\nGame interrupted. Bye!"

def thinking_line(holder: ParticipantKind, low: int, high: int) -> str:
    who = "You are" if holder is ParticipantKind.INTERACTIVE else "I'm"
    return f"{who} thinking of a number between {low} and {high} inclusively."

def guessing_prompt(guesser: ParticipantKind) -> str:
    return ("You're" if guesser is ParticipantKind.INTERACTIVE else "I'm") + " guessing: "

def describe_outcome(guess: int, outcome: GuessOutcome) -> str:
    if outcome is GuessOutcome.CORRECT:
        return "Your guess is correct. Congratulations!"
    if outcome is GuessOutcome.TOO_HIGH:
        return f"{guess} is greater than the actual number"
    return f"{guess} is less than the actual number"

def exhausted_line(low: int, high: int) -> str:
    return (
        f"You are thinking of a number that is out of the range from {low} to {high} "
        "\nPlease start a new game."
    )

"""
Validated prompts on top of an interaction channel.

Every question the game asks goes through one of these helpers. They keep
asking until the answer is legal, so bad input never ends a game.
"""

import logging
from typing import Callable, Optional, Sequence, TypeVar

from wealth_wars.channel import InteractionChannel
from wealth_wars.exceptions import InputParseError, InputRangeError, ValidationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

YES_ANSWERS = {"Y", "YES"}
NO_ANSWERS = {"N", "NO"}


def parse_int(text: str) -> int:
    """Parse a whole number, ignoring surrounding whitespace."""
    try:
        return int(text.strip())
    except ValueError:
        raise InputParseError(f"'{text.strip()}' is not a number.") from None


def parse_bounded_int(text: str, low: int, high: Optional[int] = None) -> int:
    """Parse a whole number and check it lies in [low, high]. No upper bound when high is None."""
    value = parse_int(text)
    if value < low or (high is not None and value > high):
        raise InputRangeError(value, low, high)
    return value


def parse_yes_no(text: str) -> bool:
    """Parse Y/N (any case, full words accepted)."""
    answer = text.strip().upper()
    if answer in YES_ANSWERS:
        return True
    if answer in NO_ANSWERS:
        return False
    raise ValidationError("Please answer Y or N.")


def ask(channel: InteractionChannel, prompt: str, parse: Callable[[str], T]) -> T:
    """
    Read lines until `parse` accepts one.

    A ValidationError raised by `parse` is shown to the player and the prompt
    is repeated.
    """
    while True:
        text = channel.read_line(prompt)
        try:
            return parse(text)
        except ValidationError as e:
            logger.debug("Rejected input %r for prompt %r: %s", text, prompt, e)
            channel.write_line(str(e))


def ask_int(channel: InteractionChannel, prompt: str, low: int, high: Optional[int] = None) -> int:
    """Ask for a whole number in [low, high]."""
    return ask(channel, prompt, lambda text: parse_bounded_int(text, low, high))


def ask_yes_no(channel: InteractionChannel, prompt: str) -> bool:
    """Ask a Y/N question."""
    return ask(channel, prompt, parse_yes_no)


def ask_non_empty(channel: InteractionChannel, prompt: str) -> str:
    """Ask for text that is not blank; surrounding whitespace is removed."""

    def parse(text: str) -> str:
        if not text.strip():
            raise ValidationError("Please enter a name.")
        return text.strip()

    return ask(channel, prompt, parse)


def ask_choice(
    channel: InteractionChannel,
    header: str,
    options: Sequence[T],
    label: Callable[[T], str],
) -> T:
    """
    Show a numbered menu and return the chosen option.

    Args:
        channel: Where to ask
        header: Line written above the menu
        options: Non-empty list of things to choose from
        label: Turns an option into its menu text

    Returns:
        The selected option
    """
    if not options:
        raise ValueError("ask_choice needs at least one option")

    channel.write_line(header)
    for i, option in enumerate(options, start=1):
        channel.write_line(f"{i}. {label(option)}")

    index = ask_int(channel, "", 1, len(options))
    return options[index - 1]

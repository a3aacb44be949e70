"""Interaction channels: where the game reads answers and writes narration."""

from abc import ABC, abstractmethod


class InteractionChannel(ABC):
    """
    Abstract base class for the game's input/output.

    The engine never touches stdin/stdout directly; everything goes through
    one of these so that a game can be driven from a terminal or from a script.
    """

    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """
        Show `prompt` and return one line of input without the newline.

        Args:
            prompt: Text written before waiting for input.

        Returns:
            The line entered.
        """

    @abstractmethod
    def read_key(self, prompt: str) -> str:
        """
        Show `prompt` and return a single key.

        Returns:
            One character, or "" when the user just pressed Enter.
        """

    @abstractmethod
    def write_line(self, message: str) -> None:
        """Write one line of narration."""


class ConsoleChannel(InteractionChannel):
    """Channel backed by the terminal."""

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def read_key(self, prompt: str) -> str:
        # Line-buffered terminals deliver keys on Enter, so take the first one
        return input(prompt + "\n")[:1]

    def write_line(self, message: str) -> None:
        print(message)

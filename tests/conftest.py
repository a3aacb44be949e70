"""Shared test fixtures for Wealth Wars tests."""

from collections import deque
from typing import Iterable, List, Optional

import pytest

from wealth_wars import GameConfig, Player, create_game
from wealth_wars.channel import InteractionChannel
from wealth_wars.dice import Dice
from wealth_wars.settings import get_settings


class ScriptedChannel(InteractionChannel):
    """Replays canned answers and records everything the game writes."""

    def __init__(self, lines: Iterable[str] = (), keys: Optional[Iterable[str]] = None):
        self.lines = deque(lines)
        self.keys = deque(keys) if keys is not None else None
        self.prompts: List[str] = []
        self.output: List[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.lines:
            raise AssertionError(f"Unexpected prompt: {prompt!r}")
        return self.lines.popleft()

    def read_key(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.keys is None:
            return " "
        if not self.keys:
            raise AssertionError(f"Unexpected key prompt: {prompt!r}")
        return self.keys.popleft()

    def write_line(self, message: str) -> None:
        self.output.append(message)


class ScriptedDice(Dice):
    """Dice that return predetermined rolls and event amounts."""

    def __init__(self, rolls: Iterable[int] = (), amounts: Iterable[int] = ()):
        super().__init__(seed=0)
        self.rolls = deque(rolls)
        self.amounts = deque(amounts)
        self.amount_requests: List[tuple] = []

    def roll(self) -> int:
        total = self.rolls.popleft()
        self.last_roll = (total // 2, total - total // 2)
        return total

    def random_amount(self, low: int, high: int) -> int:
        self.amount_requests.append((low, high))
        if low > high:
            raise ValueError("low cannot exceed high")
        return self.amounts.popleft() if self.amounts else low


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached process-wide; start every test from a clean slate."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def make_game(game_config):
    """
    Factory for games driven by a scripted channel and scripted dice.

    Usage: make_game(["Alice", "Bob"], lines=["Y"], rolls=[1, 1])
    """

    def _make(names=("Alice", "Bob"), lines=(), keys=None, rolls=(), amounts=(), config=None, dice=None):
        channel = ScriptedChannel(lines, keys)
        if dice is None:
            dice = ScriptedDice(rolls, amounts)
        players = [Player(name) for name in names]
        return create_game(config or game_config, players, channel, dice)

    return _make


@pytest.fixture
def basic_game(make_game):
    """Basic game with two players and no scripted input."""
    return make_game()


@pytest.fixture
def scripted_channel():
    """Factory for scripted channels: scripted_channel(lines, keys)."""
    return ScriptedChannel

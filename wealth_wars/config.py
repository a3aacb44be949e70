"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for a Wealth Wars game."""

    starting_cash: int = 1500
    pass_start_bonus: int = 200
    tax_rate_percent: int = 10

    # Fortune and Crisis magnitudes, inclusive
    event_min: int = 100
    event_max: int = 500

    seed: Optional[int] = None
    max_turns: Optional[int] = None

    def __post_init__(self) -> None:
        if self.starting_cash <= 0:
            raise ValueError("starting_cash must be positive")
        if self.pass_start_bonus < 0:
            raise ValueError("pass_start_bonus cannot be negative")
        if not 0 <= self.tax_rate_percent <= 100:
            raise ValueError("tax_rate_percent must be between 0 and 100")
        if self.event_min > self.event_max:
            raise ValueError("event_min cannot exceed event_max")
        if self.max_turns is not None and self.max_turns <= 0:
            raise ValueError("max_turns must be positive when set")

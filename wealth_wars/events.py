"""
Game event logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    TURN_START = "turn_start"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    PASS_START = "pass_start"
    LAND = "land"

    PURCHASE = "purchase"
    PURCHASE_DECLINED = "purchase_declined"
    PURCHASE_FAILED = "purchase_failed"

    RENT_PAYMENT = "rent_payment"
    TAX_PAYMENT = "tax_payment"
    FORTUNE = "fortune"
    CRISIS = "crisis"

    SEIZURE = "seizure"
    NO_SEIZURE_TARGET = "no_seizure_target"

    PROPERTY_FORFEIT = "property_forfeit"
    BANKRUPTCY = "bankruptcy"
    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)
    turn_number: int = 0

    def __repr__(self) -> str:
        player_str = self.player if self.player is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Append-only log of everything that happened in a game."""

    def __init__(self):
        self.events: List[GameEvent] = []
        self.turn_number = 0  # stamped on every event logged from now on

    def log(self, event_type: EventType, player: Optional[str] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, player, details, self.turn_number))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def get_recent_events(self, count: int = 10) -> List[GameEvent]:
        """Get the most recent N events."""
        return self.events[-count:]

    def of_type(self, event_type: EventType) -> List[GameEvent]:
        """Get every event of one type, oldest first."""
        return [e for e in self.events if e.event_type == event_type]

"""
JSONL logger for Wealth Wars game events.

Copies the engine's internal event log to a JSONL file, one event per line.
"""

import json
from datetime import datetime
from typing import Any, Optional

from wealth_wars.event_mapper import map_events
from wealth_wars.game import GameState


class GameLogger:
    """Logger that writes game events to a JSONL file."""

    def __init__(self, log_file: Optional[str] = None):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = f"wealth_wars_{timestamp}.jsonl"

        self.log_file = log_file
        self.event_count = 0
        self._engine_last_idx = 0  # last flushed index from engine's internal EventLog

        # Create/clear log file
        with open(self.log_file, "w"):
            pass

    def log_event(self, event_type: str, **kwargs: Any) -> None:
        """
        Log a game event to JSONL file.

        Args:
            event_type: Type of event (e.g., "game_start", "dice_roll", "purchase")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(event) + "\n")

        self.event_count += 1

    def flush_engine_events(self, game: GameState) -> int:
        """Flush new internal engine events to JSONL.

        Returns the number of events written.
        """
        events = game.event_log.events
        if self._engine_last_idx >= len(events):
            return 0

        new_events = events[self._engine_last_idx :]
        mapped = map_events(game.board, new_events, start=self._engine_last_idx)

        wrote = 0
        for m in mapped:
            if m.get("event_type") == "game_end":
                m["final_standings"] = [
                    {
                        "player_name": p.name,
                        "cash": p.cash,
                        "net_worth": p.net_worth(),
                        "is_bankrupt": p.is_bankrupt,
                    }
                    for p in game.seating
                ]

            etype = m.pop("event_type")
            self.log_event(etype, **m)
            wrote += 1

        self._engine_last_idx = len(events)
        return wrote

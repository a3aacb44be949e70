"""
Mapping from internal EventLog objects to canonical public JSON events.

The engine emits GameEvent objects whose details are free-form keyword
arguments. This module produces flat, JSONL-friendly dicts with consistent
event_type strings and payload keys.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from wealth_wars.board import Board
from wealth_wars.events import EventType, GameEvent


def _space_name(board: Board, position: Optional[int]) -> Optional[str]:
    if position is None:
        return None
    try:
        return board.space_at(position).name
    except IndexError:
        return None


def map_event(board: Board, event: GameEvent) -> Dict[str, Any]:
    """
    Map a single GameEvent to a canonical JSON dict.

    Args:
        board: Board instance (for resolving space names)
        event: internal event object

    Returns:
        dict with keys: event_type (str), turn_number, player (optional), and event-specific fields
    """
    d = event.details
    base: Dict[str, Any] = {"event_type": event.event_type.value, "turn_number": event.turn_number}
    if event.player is not None:
        base["player"] = event.player

    if event.event_type == EventType.DICE_ROLL:
        base.update(die1=d.get("die1"), die2=d.get("die2"), total=d.get("total"))
        return base

    if event.event_type == EventType.MOVE:
        to_pos = d.get("to")
        base.update(
            from_position=d.get("from"),
            to_position=to_pos,
            spaces=d.get("spaces"),
            space_name=_space_name(board, to_pos),
        )
        return base

    if event.event_type == EventType.LAND:
        position = d.get("position")
        base.update(position=position, space_name=d.get("space") or _space_name(board, position))
        return base

    if event.event_type in (EventType.PASS_START, EventType.TAX_PAYMENT, EventType.FORTUNE, EventType.CRISIS):
        base.update(amount=d.get("amount"), cash_after=d.get("new_balance"))
        return base

    if event.event_type == EventType.PURCHASE:
        base.update(
            property_name=d.get("property"),
            price=d.get("price"),
            cash_after=d.get("new_balance"),
        )
        return base

    if event.event_type == EventType.PURCHASE_FAILED:
        base.update(property_name=d.get("property"), price=d.get("price"), cash=d.get("cash"))
        return base

    if event.event_type == EventType.RENT_PAYMENT:
        base.update(
            payer=event.player,
            owner=d.get("owner"),
            property_name=d.get("property"),
            amount=d.get("amount"),
            payer_cash_after=d.get("payer_balance"),
            owner_cash_after=d.get("owner_balance"),
        )
        return base

    if event.event_type == EventType.SEIZURE:
        base.update(target=d.get("target"), property_name=d.get("property"))
        return base

    if event.event_type == EventType.TURN_START:
        return base

    if event.event_type == EventType.GAME_START:
        players = d.get("players") or []
        base.update(
            player_names=players,
            num_players=len(players),
            starting_cash=d.get("starting_cash"),
            seed=d.get("seed"),
        )
        return base

    if event.event_type == EventType.BANKRUPTCY:
        base.update(cash=d.get("cash"), forfeited_properties=d.get("properties", []))
        return base

    if event.event_type == EventType.GAME_END:
        base.update(
            winner=event.player,
            turns=d.get("turns"),
            by_default=d.get("by_default"),
        )
        return base

    # Default: echo raw fields
    base.update(d)
    return base


def map_events(board: Board, events: Iterable[GameEvent], start: int = 0) -> List[Dict[str, Any]]:
    """Map a sequence of GameEvent objects, numbering them from `start`."""
    mapped: List[Dict[str, Any]] = []
    for idx, ev in enumerate(events, start=start):
        mev = map_event(board, ev)
        mev["seq"] = idx
        mapped.append(mev)
    return mapped

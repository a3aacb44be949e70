"""
Wealth Wars Rules Engine

A console board game of property buying, rent and random economic events.
"""

from .game import GameState, create_game, collect_players
from .player import Player, PlayerState
from .board import Board
from .config import GameConfig
from .channel import ConsoleChannel, InteractionChannel
from .dice import Dice

__all__ = [
    "GameState",
    "create_game",
    "collect_players",
    "Player",
    "PlayerState",
    "Board",
    "GameConfig",
    "ConsoleChannel",
    "InteractionChannel",
    "Dice",
]

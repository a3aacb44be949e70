#!/usr/bin/env python3
"""
Console entry point for Wealth Wars.

Runs one game in the terminal. Every flag is optional; defaults come from
WEALTH_WARS_* environment variables (see wealth_wars.settings).
"""

import argparse
import dataclasses
import logging
import sys
from typing import List, Optional

from game_logger import GameLogger
from wealth_wars.channel import ConsoleChannel, InteractionChannel
from wealth_wars.game import GameState, collect_players, create_game
from wealth_wars.settings import get_settings

logger = logging.getLogger(__name__)


def play_game(
    channel: InteractionChannel,
    seed: Optional[int] = None,
    max_turns: Optional[int] = None,
    log_file: Optional[str] = None,
) -> GameState:
    """
    Play a complete game of Wealth Wars.

    Args:
        channel: Where prompts are read and narration is written
        seed: Random seed for reproducibility
        max_turns: Maximum number of turns (None = until one player is left)
        log_file: Path to JSONL event log (None = no event log)
    """
    settings = get_settings()
    config = settings.to_game_config()
    overrides = {"seed": seed, "max_turns": max_turns}
    config = dataclasses.replace(config, **{k: v for k, v in overrides.items() if v is not None})

    channel.write_line("Welcome to Wealth Wars!")
    players = collect_players(channel)
    game = create_game(config, players, channel)

    event_logger = GameLogger(log_file) if log_file is not None else None
    try:
        while not game.is_game_over():
            game.play_turn()
            if event_logger:
                event_logger.flush_engine_events(game)
        game.end_game()
    finally:
        if event_logger:
            event_logger.flush_engine_events(game)
            logger.info("Game logged to %s", event_logger.log_file)

    return game


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Play Wealth Wars in the terminal")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument(
        "--max-turns",
        type=int,
        default=settings.max_turns,
        help="End the game after this many turns; richest player wins",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=settings.event_log_file,
        help="Write game events to this JSONL file",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Python logging level",
    )

    args = parser.parse_args(argv)
    if args.max_turns is not None and args.max_turns <= 0:
        parser.error("--max-turns must be positive")

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        play_game(
            ConsoleChannel(),
            seed=args.seed,
            max_turns=args.max_turns,
            log_file=args.log_file,
        )
    except KeyboardInterrupt:
        print("\nGame aborted.")
        return 130
    except EOFError:
        print("\nInput closed, game aborted.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

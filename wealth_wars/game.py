"""
Main game engine and state management.
"""

import logging
from typing import List, Optional

from wealth_wars.board import Board
from wealth_wars.channel import InteractionChannel
from wealth_wars.config import GameConfig
from wealth_wars.dice import Dice
from wealth_wars.events import EventLog, EventType
from wealth_wars.exceptions import InvalidSetupError
from wealth_wars.landing import LandingResolver
from wealth_wars.player import Player, PlayerState
from wealth_wars.prompts import ask_int, ask_non_empty

logger = logging.getLogger(__name__)

CONTINUE_KEYS = {" ", ""}


class GameState:
    """
    Represents the complete state of a Wealth Wars game.
    This is the main interface for the game engine.

    `players` holds the active players in turn order. Bankrupt players are
    removed from it but stay in `seating` for the final standings.
    """

    def __init__(
        self,
        config: GameConfig,
        players: List[Player],
        channel: InteractionChannel,
        dice: Optional[Dice] = None,
    ):
        if not players:
            raise InvalidSetupError("A game needs at least one player")

        self.config = config
        self.channel = channel
        self.board = Board()
        if self.board.space_count == 0:
            raise InvalidSetupError("The board has no spaces")
        self.event_log = EventLog()
        self.dice = dice if dice is not None else Dice(config.seed)
        self.resolver = LandingResolver(config, self.dice, channel, self.event_log)

        self.seating: List[PlayerState] = [
            PlayerState(player.name, config.starting_cash) for player in players
        ]
        self.players: List[PlayerState] = list(self.seating)

        self.current_player_index = 0
        self.turn_number = 0
        self.game_over = False
        self.winner: Optional[PlayerState] = None

        self.event_log.log(
            EventType.GAME_START,
            players=[p.name for p in self.seating],
            starting_cash=config.starting_cash,
            seed=config.seed,
        )

    def get_current_player(self) -> PlayerState:
        """Get the player whose turn it is."""
        return self.players[self.current_player_index]

    def get_active_players(self) -> List[PlayerState]:
        """Get all non-bankrupt players in turn order."""
        return list(self.players)

    def is_game_over(self) -> bool:
        """The game ends when at most one player is left or the turn limit is hit."""
        if len(self.players) <= 1:
            return True
        return self.config.max_turns is not None and self.turn_number >= self.config.max_turns

    def roll_dice(self) -> int:
        """Roll for the current player and log the result."""
        roll = self.dice.roll()
        die1, die2 = self.dice.last_roll
        self.event_log.log(
            EventType.DICE_ROLL,
            player=self.get_current_player().name,
            die1=die1,
            die2=die2,
            total=roll,
        )
        return roll

    def move_player(self, player: PlayerState, spaces: int) -> int:
        """
        Move a player forward by the specified number of spaces.
        Returns the new position.
        """
        old_position = player.position
        passed_start = player.move(spaces, self.board.space_count, self.config.pass_start_bonus)

        if passed_start:
            self.channel.write_line(
                f"{player.name} passed Start and collected ${self.config.pass_start_bonus}"
            )
            self.event_log.log(
                EventType.PASS_START,
                player=player.name,
                amount=self.config.pass_start_bonus,
                new_balance=player.cash,
            )

        self.event_log.log(
            EventType.MOVE,
            player=player.name,
            **{"from": old_position, "to": player.position, "spaces": spaces},
        )
        return player.position

    def play_turn(self) -> None:
        """Play one full turn for the current player."""
        player = self.get_current_player()
        self.event_log.turn_number = self.turn_number
        self.event_log.log(EventType.TURN_START, player=player.name, turn=self.turn_number)
        self.channel.write_line(f"{player.name}'s turn")

        roll = self.roll_dice()
        self.channel.write_line(f"{player.name} rolled a {roll}")

        self.move_player(player, roll)
        self.board.process_landing(player, self.get_active_players(), self.resolver)

        # Decided before any removal so bankruptcy cannot skip or repeat a turn
        next_player = self._player_after(player)

        if player.cash < 0:
            self.declare_bankruptcy(player)
        else:
            self.channel.write_line(f"{player.name} has ${player.cash} remaining.")

        self.wait_for_next_turn()

        self.turn_number += 1
        if next_player in self.players:
            self.current_player_index = self.players.index(next_player)
        else:
            self.current_player_index = 0

    def _player_after(self, player: PlayerState) -> PlayerState:
        index = self.players.index(player)
        return self.players[(index + 1) % len(self.players)]

    def declare_bankruptcy(self, player: PlayerState) -> None:
        """
        Remove a player whose cash went negative.

        Every property they hold goes back to the unowned pool so no space
        keeps pointing at an inactive player.
        """
        self.channel.write_line(f"{player.name} is bankrupt!")

        forfeited = [p.name for p in player.properties]
        for prop in list(player.properties):
            prop.release()
            self.event_log.log(EventType.PROPERTY_FORFEIT, player=player.name, property=prop.name)

        player.is_bankrupt = True
        self.players.remove(player)
        logger.info("%s went bankrupt with $%d, forfeiting %s", player.name, player.cash, forfeited)
        self.event_log.log(
            EventType.BANKRUPTCY,
            player=player.name,
            cash=player.cash,
            properties=forfeited,
        )

    def wait_for_next_turn(self) -> None:
        """Block until the continue key is pressed."""
        prompt = "Press the spacebar to proceed to the next player's turn..."
        while self.channel.read_key(prompt) not in CONTINUE_KEYS:
            pass

    def determine_winner(self) -> Optional[PlayerState]:
        """
        Pick the winner among the active players.

        A lone survivor wins outright. Otherwise the richest player wins and
        ties go to whoever comes first in turn order.
        """
        if len(self.players) == 1:
            return self.players[0]
        winner: Optional[PlayerState] = None
        for player in self.players:
            if winner is None or player.cash > winner.cash:
                winner = player
        return winner

    def run(self) -> Optional[PlayerState]:
        """Play turns until the game ends, then announce and return the winner."""
        while not self.is_game_over():
            self.play_turn()
        return self.end_game()

    def end_game(self) -> Optional[PlayerState]:
        """Record the result and announce it."""
        self.game_over = True
        self.winner = self.determine_winner()

        if self.winner is None:
            self.channel.write_line("No players remain.")
        elif len(self.players) == 1:
            self.channel.write_line(f"{self.winner.name} wins by default!")
        else:
            self.channel.write_line(f"{self.winner.name} wins with ${self.winner.cash}!")

        self.event_log.turn_number = self.turn_number
        self.event_log.log(
            EventType.GAME_END,
            player=self.winner.name if self.winner else None,
            turns=self.turn_number,
            by_default=len(self.players) == 1,
        )
        self.print_standings()
        return self.winner

    def print_standings(self) -> None:
        """Write one line per seat, bankrupt players included."""
        self.channel.write_line("Final standings:")
        for player in self.seating:
            if player.is_bankrupt:
                status = "BANKRUPT"
            else:
                status = f"${player.cash} cash, {len(player.properties)} properties"
            self.channel.write_line(f"  {player.name}: {status}")


def collect_players(channel: InteractionChannel) -> List[Player]:
    """Ask how many players there are and what they are called."""
    count = ask_int(channel, "Enter number of players: ", 1)
    return [
        Player(ask_non_empty(channel, f"Enter name for Player {i + 1}: "))
        for i in range(count)
    ]


def create_game(
    config: GameConfig,
    players: List[Player],
    channel: InteractionChannel,
    dice: Optional[Dice] = None,
) -> GameState:
    """Create a new game with the given configuration and players."""
    return GameState(config, players, channel, dice)


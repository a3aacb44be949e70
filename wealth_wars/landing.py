"""
What happens when a player lands on a space.

LandingResolver holds one handler per SpaceType and dispatches on the tag of
the space. The handler table must cover every SpaceType; this is checked when
the resolver is built.
"""

import logging
from typing import Callable, Dict, List, Optional, cast

from wealth_wars.channel import InteractionChannel
from wealth_wars.config import GameConfig
from wealth_wars.dice import Dice
from wealth_wars.events import EventLog, EventType
from wealth_wars.player import PlayerState
from wealth_wars.prompts import ask_choice, ask_yes_no
from wealth_wars.spaces import PropertySpace, Space, SpaceType

logger = logging.getLogger(__name__)

Handler = Callable[[Space, PlayerState, List[PlayerState]], None]


def tax_due(cash: int, rate_percent: int) -> int:
    """Tax on `cash`, truncated toward zero."""
    if cash < 0:
        return -((-cash * rate_percent) // 100)
    return (cash * rate_percent) // 100


class LandingResolver:
    """Applies landing effects for one game."""

    def __init__(
        self,
        config: GameConfig,
        dice: Dice,
        channel: InteractionChannel,
        event_log: EventLog,
    ):
        self.config = config
        self.dice = dice
        self.channel = channel
        self.event_log = event_log

        self.handlers: Dict[SpaceType, Handler] = {
            SpaceType.START: self._land_on_start,
            SpaceType.PROPERTY: self._land_on_property,
            SpaceType.TAX: self._land_on_tax,
            SpaceType.FORTUNE: self._land_on_fortune,
            SpaceType.CRISIS: self._land_on_crisis,
            SpaceType.TRADING_POST: self._land_on_trading_post,
        }
        missing = set(SpaceType) - set(self.handlers)
        if missing:
            raise RuntimeError(f"No landing handler for {sorted(t.value for t in missing)}")

    def resolve(self, space: Space, player: PlayerState, active_players: List[PlayerState]) -> None:
        """Run the landing effect of `space` for `player`."""
        self.event_log.log(
            EventType.LAND,
            player=player.name,
            space=space.name,
            position=space.position,
        )
        self.handlers[space.space_type](space, player, active_players)

    def _land_on_start(self, space: Space, player: PlayerState, active_players: List[PlayerState]) -> None:
        pass

    # === PROPERTY ===

    def _land_on_property(self, space: Space, player: PlayerState, active_players: List[PlayerState]) -> None:
        prop = cast(PropertySpace, space)
        if not prop.is_owned():
            self.offer_purchase(prop, player)
        elif not player.owns(prop):
            self.pay_rent(prop, player)

    def offer_purchase(self, prop: PropertySpace, player: PlayerState) -> bool:
        """
        Ask the player whether to buy an unowned property.

        Returns:
            True if the property was bought
        """
        wants_it = ask_yes_no(
            self.channel,
            f"{player.name} landed on {prop.name}. It costs ${prop.cost}. Buy it? (Y/N)\n",
        )
        if not wants_it:
            self.event_log.log(EventType.PURCHASE_DECLINED, player=player.name, property=prop.name)
            return False

        if player.cash < prop.cost:
            self.channel.write_line("Not enough money to buy this property.")
            self.event_log.log(
                EventType.PURCHASE_FAILED,
                player=player.name,
                property=prop.name,
                price=prop.cost,
                cash=player.cash,
            )
            return False

        player.cash -= prop.cost
        prop.assign_owner(player)
        self.channel.write_line(f"{player.name} bought {prop.name}")
        logger.info("%s bought %s for $%d", player.name, prop.name, prop.cost)
        self.event_log.log(
            EventType.PURCHASE,
            player=player.name,
            property=prop.name,
            price=prop.cost,
            new_balance=player.cash,
        )
        return True

    def pay_rent(self, prop: PropertySpace, player: PlayerState) -> None:
        """Move the rent from the lander to the owner. The lander may go negative."""
        owner = prop.owner
        self.channel.write_line(
            f"{player.name} landed on {prop.name} owned by {owner.name}. Paying rent of ${prop.rent}"
        )
        player.cash -= prop.rent
        owner.cash += prop.rent
        self.event_log.log(
            EventType.RENT_PAYMENT,
            player=player.name,
            owner=owner.name,
            property=prop.name,
            amount=prop.rent,
            payer_balance=player.cash,
            owner_balance=owner.cash,
        )

    # === BANK EVENTS ===

    def _land_on_tax(self, space: Space, player: PlayerState, active_players: List[PlayerState]) -> None:
        tax = tax_due(player.cash, self.config.tax_rate_percent)
        self.channel.write_line(f"{player.name} landed on Tax. Paying ${tax}.")
        player.cash -= tax
        self.event_log.log(EventType.TAX_PAYMENT, player=player.name, amount=tax, new_balance=player.cash)

    def _land_on_fortune(self, space: Space, player: PlayerState, active_players: List[PlayerState]) -> None:
        amount = self.dice.random_amount(self.config.event_min, self.config.event_max)
        self.channel.write_line(f"{player.name} landed on Fortune and gains ${amount}")
        player.cash += amount
        self.event_log.log(EventType.FORTUNE, player=player.name, amount=amount, new_balance=player.cash)

    def _land_on_crisis(self, space: Space, player: PlayerState, active_players: List[PlayerState]) -> None:
        amount = self.dice.random_amount(self.config.event_min, self.config.event_max)
        self.channel.write_line(f"{player.name} landed on Crisis and loses ${amount}")
        player.cash -= amount
        self.event_log.log(EventType.CRISIS, player=player.name, amount=amount, new_balance=player.cash)

    # === TRADING POST ===

    def _land_on_trading_post(
        self, space: Space, player: PlayerState, active_players: List[PlayerState]
    ) -> None:
        self.channel.write_line(f"{player.name} landed on Trading Post.")
        target = self.choose_seizure_target(player, active_players)
        if target is None:
            return
        prop = ask_choice(
            self.channel,
            f"{target.name}'s properties:",
            list(target.properties),
            lambda p: p.name,
        )
        self.seize(player, target, prop)

    def choose_seizure_target(
        self, player: PlayerState, active_players: List[PlayerState]
    ) -> Optional[PlayerState]:
        """Ask which other property owner to take from, or None if nobody owns anything."""
        candidates = [p for p in active_players if p is not player and p.properties]
        if not candidates:
            self.channel.write_line("No available players to trade with.")
            self.event_log.log(EventType.NO_SEIZURE_TARGET, player=player.name)
            return None
        return ask_choice(self.channel, "Choose a player to trade with:", candidates, lambda p: p.name)

    def seize(self, player: PlayerState, target: PlayerState, prop: PropertySpace) -> None:
        """Transfer `prop` from `target` to `player`. No money changes hands."""
        prop.assign_owner(player)
        self.channel.write_line(f"{player.name} took {prop.name} from {target.name}")
        logger.info("%s seized %s from %s", player.name, prop.name, target.name)
        self.event_log.log(
            EventType.SEIZURE,
            player=player.name,
            target=target.name,
            property=prop.name,
        )

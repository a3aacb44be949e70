"""
Board space definitions and types.

Spaces are plain data tagged with a SpaceType. What happens when a player
lands on one is decided in a single place, see wealth_wars.landing.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from wealth_wars.exceptions import OwnershipError

if TYPE_CHECKING:
    from wealth_wars.player import PlayerState


class SpaceType(Enum):
    """Types of spaces on the board."""

    START = "start"
    PROPERTY = "property"
    TAX = "tax"
    FORTUNE = "fortune"
    CRISIS = "crisis"
    TRADING_POST = "trading_post"


@dataclass
class Space:
    """Base class for a board space."""

    name: str
    position: int
    space_type: SpaceType

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', position={self.position})"


@dataclass
class StartSpace(Space):
    """The Start space. Passing it pays the bonus; landing does nothing."""

    def __init__(self, position: int = 0):
        super().__init__("Start", position, SpaceType.START)


@dataclass
class PropertySpace(Space):
    """A property that can be bought and charges rent to other players."""

    cost: int
    rent: int
    owner: Optional["PlayerState"] = field(default=None, compare=False, repr=False)

    def __init__(self, name: str, position: int, cost: int, rent: int):
        if cost <= 0 or rent <= 0:
            raise ValueError(f"{name}: cost and rent must be positive")
        super().__init__(name, position, SpaceType.PROPERTY)
        self.cost = cost
        self.rent = rent
        self.owner = None

    def is_owned(self) -> bool:
        """Check if property is owned by any player."""
        return self.owner is not None

    def assign_owner(self, player: "PlayerState") -> None:
        """
        Make `player` the owner, taking the property away from the previous
        owner if there is one.

        Both sides of the relationship are updated together: the owner field
        and the player's holdings.
        """
        if self.owner is player:
            return
        if self.owner is not None:
            self.release()
        self.owner = player
        player.properties.append(self)

    def release(self) -> None:
        """Return the property to the unowned pool."""
        if self.owner is None:
            return
        if self not in self.owner.properties:
            raise OwnershipError(
                f"{self.name} lists {self.owner.name} as owner but is not in their holdings"
            )
        self.owner.properties.remove(self)
        self.owner = None


@dataclass
class TaxSpace(Space):
    """Charges a percentage of the lander's cash."""

    def __init__(self, position: int):
        super().__init__("Tax", position, SpaceType.TAX)


@dataclass
class FortuneSpace(Space):
    """Pays the lander a random amount."""

    def __init__(self, position: int):
        super().__init__("Fortune", position, SpaceType.FORTUNE)


@dataclass
class CrisisSpace(Space):
    """Charges the lander a random amount."""

    def __init__(self, position: int):
        super().__init__("Crisis", position, SpaceType.CRISIS)


@dataclass
class TradingPostSpace(Space):
    """Lets the lander seize a property from another player."""

    def __init__(self, position: int):
        super().__init__("Trading Post", position, SpaceType.TRADING_POST)

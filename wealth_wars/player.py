"""
Player state and management.
"""

from typing import List

from wealth_wars.spaces import PropertySpace


class PlayerState:
    """Represents the complete state of a player in the game."""

    def __init__(self, name: str, starting_cash: int):
        self.name = name
        self.cash = starting_cash
        self.position = 0
        self.is_bankrupt = False
        # Only PropertySpace.assign_owner/release should touch this list
        self.properties: List[PropertySpace] = []

    def move(self, roll: int, space_count: int, bonus: int = 200) -> bool:
        """
        Advance by `roll` spaces on a board of `space_count` spaces.

        Wrapping past (or onto) position 0 credits `bonus`.

        Returns:
            True if the player passed Start
        """
        if space_count <= 0:
            raise ValueError("space_count must be positive")
        if roll < 0:
            raise ValueError("roll cannot be negative")

        passed_start = self.position + roll >= space_count
        self.position = (self.position + roll) % space_count
        if passed_start:
            self.cash += bonus
        return passed_start

    def owns(self, prop: PropertySpace) -> bool:
        """Check if the player holds this property."""
        return prop.owner is self

    def net_worth(self) -> int:
        """Cash plus the purchase cost of every owned property."""
        return self.cash + sum(p.cost for p in self.properties)

    def __repr__(self) -> str:
        return (
            f"PlayerState(name='{self.name}', cash={self.cash}, "
            f"position={self.position}, bankrupt={self.is_bankrupt})"
        )


class Player:
    """
    Convenience wrapper for player information.
    Used to describe seats before a game is created.
    """

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return f"Player(name='{self.name}')"

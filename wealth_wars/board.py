from typing import TYPE_CHECKING, List

from wealth_wars.spaces import (
    Space,
    StartSpace,
    PropertySpace,
    TaxSpace,
    FortuneSpace,
    CrisisSpace,
    TradingPostSpace,
)

if TYPE_CHECKING:
    from wealth_wars.landing import LandingResolver
    from wealth_wars.player import PlayerState


class Board:
    """The Wealth Wars board with 13 spaces."""

    def __init__(self):
        self.spaces: List[Space] = self._create_standard_board()

    def _create_standard_board(self) -> List[Space]:
        """Create the fixed 13-space board."""
        return [
            StartSpace(0),
            PropertySpace("Residential Area 1", 1, 100, 10),
            PropertySpace("Residential Area 2", 2, 120, 12),
            TaxSpace(3),
            PropertySpace("Commercial Hub 1", 4, 200, 20),
            FortuneSpace(5),
            PropertySpace("Commercial Hub 2", 6, 220, 22),
            CrisisSpace(7),
            PropertySpace("Industrial Zone 1", 8, 300, 30),
            PropertySpace("Industrial Zone 2", 9, 320, 32),
            TradingPostSpace(10),
            PropertySpace("Luxury Estates 1", 11, 400, 40),
            PropertySpace("Luxury Estates 2", 12, 450, 45),
        ]

    @property
    def space_count(self) -> int:
        """Number of spaces on the board."""
        return len(self.spaces)

    def __len__(self) -> int:
        return len(self.spaces)

    def space_at(self, index: int) -> Space:
        """Get the space at the given position."""
        if not 0 <= index < len(self.spaces):
            raise IndexError(f"Board has no space at position {index}")
        return self.spaces[index]

    def process_landing(
        self,
        player: "PlayerState",
        active_players: List["PlayerState"],
        resolver: "LandingResolver",
    ) -> None:
        """Apply the effect of the space the player is standing on."""
        resolver.resolve(self.space_at(player.position), player, active_players)

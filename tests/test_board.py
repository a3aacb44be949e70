"""
Tests for the board layout and landing dispatch.
"""

import pytest

from wealth_wars.board import Board
from wealth_wars.spaces import PropertySpace, SpaceType


EXPECTED_LAYOUT = [
    ("Start", SpaceType.START, None, None),
    ("Residential Area 1", SpaceType.PROPERTY, 100, 10),
    ("Residential Area 2", SpaceType.PROPERTY, 120, 12),
    ("Tax", SpaceType.TAX, None, None),
    ("Commercial Hub 1", SpaceType.PROPERTY, 200, 20),
    ("Fortune", SpaceType.FORTUNE, None, None),
    ("Commercial Hub 2", SpaceType.PROPERTY, 220, 22),
    ("Crisis", SpaceType.CRISIS, None, None),
    ("Industrial Zone 1", SpaceType.PROPERTY, 300, 30),
    ("Industrial Zone 2", SpaceType.PROPERTY, 320, 32),
    ("Trading Post", SpaceType.TRADING_POST, None, None),
    ("Luxury Estates 1", SpaceType.PROPERTY, 400, 40),
    ("Luxury Estates 2", SpaceType.PROPERTY, 450, 45),
]


def test_board_has_thirteen_spaces():
    board = Board()
    assert board.space_count == 13
    assert len(board) == 13


def test_board_layout():
    """Names, kinds, costs and rents match the fixed layout."""
    board = Board()
    for position, (name, space_type, cost, rent) in enumerate(EXPECTED_LAYOUT):
        space = board.space_at(position)
        assert space.name == name
        assert space.space_type == space_type
        assert space.position == position
        if space_type == SpaceType.PROPERTY:
            assert isinstance(space, PropertySpace)
            assert space.cost == cost
            assert space.rent == rent
            assert space.owner is None


@pytest.mark.parametrize("index", [-1, 13, 100])
def test_space_at_out_of_range(index):
    board = Board()
    with pytest.raises(IndexError):
        board.space_at(index)


def test_boards_do_not_share_ownership(basic_game):
    """Each game builds its own board."""
    alice = basic_game.players[0]
    basic_game.board.space_at(1).assign_owner(alice)
    assert Board().space_at(1).owner is None


def test_process_landing_on_start_does_nothing(basic_game):
    alice = basic_game.players[0]
    basic_game.board.process_landing(alice, basic_game.get_active_players(), basic_game.resolver)
    assert alice.cash == 1500
    assert basic_game.channel.output == []


def test_process_landing_uses_player_position(make_game):
    """The space under the player decides the effect."""
    game = make_game(amounts=[300])
    alice = game.players[0]
    alice.position = 5  # Fortune
    game.board.process_landing(alice, game.get_active_players(), game.resolver)
    assert alice.cash == 1800

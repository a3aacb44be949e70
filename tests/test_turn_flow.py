"""
Tests for turn flow, bankruptcy and game end.
"""

import pytest

from wealth_wars import GameConfig, Player, collect_players, create_game
from wealth_wars.events import EventType
from wealth_wars.exceptions import InvalidSetupError


def test_new_game_state(basic_game):
    alice, bob = basic_game.players
    assert [p.name for p in basic_game.players] == ["Alice", "Bob"]
    for player in (alice, bob):
        assert player.cash == 1500
        assert player.position == 0
        assert player.properties == []
    assert basic_game.get_current_player() is alice
    assert basic_game.turn_number == 0


def test_game_needs_a_player(make_game):
    with pytest.raises(InvalidSetupError):
        make_game(names=[])


def test_basic_turn_flow(make_game):
    """A turn narrates, moves, resolves the landing and passes to the next player."""
    game = make_game(rolls=[3])
    game.play_turn()

    alice = game.players[0]
    assert alice.position == 3
    assert alice.cash == 1350
    assert game.channel.output == [
        "Alice's turn",
        "Alice rolled a 3",
        "Alice landed on Tax. Paying $150.",
        "Alice has $1350 remaining.",
    ]
    assert game.channel.prompts[-1] == "Press the spacebar to proceed to the next player's turn..."
    assert game.get_current_player().name == "Bob"
    assert game.turn_number == 1


def test_turn_order_wraps(make_game):
    game = make_game(rolls=[5, 5, 5], amounts=[100, 100, 100])
    names = []
    for _ in range(3):
        names.append(game.get_current_player().name)
        game.play_turn()
    assert names == ["Alice", "Bob", "Alice"]


def test_passing_start_pays_bonus(make_game):
    game = make_game(rolls=[3])
    alice = game.players[0]
    alice.position = 10
    game.play_turn()
    assert alice.position == 0
    assert alice.cash == 1700
    assert "Alice passed Start and collected $200" in game.channel.output
    assert game.event_log.of_type(EventType.PASS_START)


def test_continue_gate_waits_for_space(make_game):
    game = make_game(rolls=[5], amounts=[100], keys=["x", "q", " "])
    game.play_turn()
    assert game.channel.keys is not None and len(game.channel.keys) == 0
    key_prompts = [p for p in game.channel.prompts if p.startswith("Press the spacebar")]
    assert len(key_prompts) == 3


def test_enter_also_continues(make_game):
    game = make_game(rolls=[5], amounts=[100], keys=[""])
    game.play_turn()
    assert game.get_current_player().name == "Bob"


def test_purchase_then_rent_end_to_end(make_game):
    """Alice buys Residential Area 1; Bob lands there and pays her $10."""
    game = make_game(lines=["Y"], rolls=[1, 1])
    alice, bob = game.players

    game.play_turn()
    assert game.board.space_at(1).owner is alice
    assert alice.cash == 1400

    game.play_turn()
    assert bob.cash == 1490
    assert alice.cash == 1410
    assert "Bob landed on Residential Area 1 owned by Alice. Paying rent of $10" in game.channel.output


class TestBankruptcy:
    """Tests for removing bankrupt players."""

    def test_bankrupt_player_is_removed_and_game_ends(self, make_game):
        game = make_game(rolls=[1])
        alice, bob = game.players
        game.board.space_at(1).assign_owner(alice)
        bob.cash = 5
        game.current_player_index = 1

        winner = game.run()

        assert winner is alice
        assert game.players == [alice]
        assert bob.is_bankrupt
        assert "Bob is bankrupt!" in game.channel.output
        assert "Alice wins by default!" in game.channel.output
        assert not any("wins with" in line for line in game.channel.output)
        assert game.game_over

    def test_bankruptcy_only_after_landing(self, make_game):
        """Cash below zero before the landing is not checked; the landing result is."""
        game = make_game(rolls=[5], amounts=[300])
        alice = game.players[0]
        alice.cash = -100  # Fortune will lift her back above zero
        game.play_turn()
        assert alice.cash == 200
        assert alice in game.players
        assert not alice.is_bankrupt

    def test_zero_cash_is_not_bankrupt(self, make_game):
        game = make_game(rolls=[7], amounts=[100])
        alice = game.players[0]
        alice.cash = 100
        game.play_turn()
        assert alice.cash == 0
        assert alice in game.players

    def test_bankrupt_properties_return_to_bank(self, make_game):
        game = make_game(["Alice", "Bob", "Charlie"], rolls=[7], amounts=[500])
        alice, bob, charlie = game.players
        for pos in (1, 2, 4):
            game.board.space_at(pos).assign_owner(alice)
        alice.cash = 100

        game.play_turn()

        assert alice.is_bankrupt
        assert alice.properties == []
        for pos in (1, 2, 4):
            assert game.board.space_at(pos).owner is None
        forfeits = game.event_log.of_type(EventType.PROPERTY_FORFEIT)
        assert [e.details["property"] for e in forfeits] == [
            "Residential Area 1",
            "Residential Area 2",
            "Commercial Hub 1",
        ]

    @pytest.mark.parametrize(
        "bankrupt_index, expected_next",
        [(0, "Bob"), (1, "Charlie"), (2, "Alice")],
    )
    def test_next_player_after_bankruptcy(self, make_game, bankrupt_index, expected_next):
        """The player after the bankrupt one moves next; nobody is skipped or repeated."""
        game = make_game(["Alice", "Bob", "Charlie"], rolls=[7], amounts=[500])
        game.current_player_index = bankrupt_index
        game.players[bankrupt_index].cash = 100

        game.play_turn()

        assert len(game.players) == 2
        assert game.get_current_player().name == expected_next

    def test_remaining_players_keep_alternating(self, make_game):
        game = make_game(["Alice", "Bob", "Charlie"], rolls=[7, 5, 5, 5], amounts=[500, 100, 100, 100])
        game.players[0].cash = 100
        order = []
        for _ in range(4):
            order.append(game.get_current_player().name)
            game.play_turn()
        assert order == ["Alice", "Bob", "Charlie", "Bob"]


class TestWinner:
    """Tests for winner selection."""

    def test_single_player_wins_by_default(self, make_game):
        game = make_game(["Solo"])
        winner = game.run()
        assert winner.name == "Solo"
        assert "Solo wins by default!" in game.channel.output
        assert game.turn_number == 0

    def test_richest_player_wins_at_turn_limit(self, make_game):
        config = GameConfig(seed=42, max_turns=2)
        game = make_game(["Alice", "Bob", "Charlie"], rolls=[5, 7], amounts=[400, 100], config=config)

        winner = game.run()

        assert game.turn_number == 2
        assert winner.name == "Alice"
        assert "Alice wins with $1900!" in game.channel.output

    def test_ties_go_to_earliest_player(self, basic_game):
        alice, bob = basic_game.players
        alice.cash = 1000
        bob.cash = 1000
        assert basic_game.determine_winner() is alice

        basic_game.players.reverse()
        assert basic_game.determine_winner() is bob

    def test_richer_later_player_wins(self, make_game):
        game = make_game(["Alice", "Bob", "Charlie"])
        game.players[2].cash = 2000
        assert game.determine_winner().name == "Charlie"

    def test_no_players_left(self, basic_game):
        basic_game.players.clear()
        assert basic_game.end_game() is None
        assert "No players remain." in basic_game.channel.output

    def test_final_standings_include_bankrupt_players(self, make_game):
        game = make_game(rolls=[1])
        alice, bob = game.players
        game.board.space_at(1).assign_owner(alice)
        bob.cash = 5
        game.current_player_index = 1
        game.run()

        output = game.channel.output
        assert output[-3:] == [
            "Final standings:",
            "  Alice: $1510 cash, 1 properties",
            "  Bob: BANKRUPT",
        ]
        end = game.event_log.of_type(EventType.GAME_END)[0]
        assert end.player == "Alice"
        assert end.details["by_default"] is True


class TestSetup:
    """Tests for collecting players from the channel."""

    def test_collect_players(self, scripted_channel):
        channel = scripted_channel(["3", "Alice", "Bob", "Charlie"])
        players = collect_players(channel)
        assert [p.name for p in players] == ["Alice", "Bob", "Charlie"]
        assert channel.prompts == [
            "Enter number of players: ",
            "Enter name for Player 1: ",
            "Enter name for Player 2: ",
            "Enter name for Player 3: ",
        ]

    def test_bad_setup_input_reprompts(self, scripted_channel):
        channel = scripted_channel(["two", "0", "2", "  Alice ", "   ", "Bob"])
        players = collect_players(channel)
        assert [p.name for p in players] == ["Alice", "Bob"]
        assert channel.output == [
            "'two' is not a number.",
            "Please enter a number of at least 1.",
            "Please enter a name.",
        ]

    def test_create_game_uses_config(self, scripted_channel):
        config = GameConfig(starting_cash=800)
        game = create_game(config, [Player("Alice"), Player("Bob")], scripted_channel())
        assert all(p.cash == 800 for p in game.players)

"""
Tests for the player implementations (input sources).
"""

import asyncio
import io
import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, UP, DOWN, LEFT, RIGHT, VALID_MOVES  # noqa: E402
from players import Player, RandomPlayer, ScriptedPlayer, ConsolePlayer, parse_move  # noqa: E402


def make_state(snake_positions, width=10, height=10):
    return GameState(
        turn_number=0,
        snake_positions=snake_positions,
        apple=None,
        score=0,
        target_length=len(snake_positions),
        running=True,
        width=width,
        height=height,
    )


class TestPlayerBase:

    def test_base_player_not_implemented(self):
        with pytest.raises(NotImplementedError):
            asyncio.run(Player().get_move(make_state([(5, 5)])))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_move(self):
        player = RandomPlayer(random.Random(0))
        move = asyncio.run(player.get_move(make_state([(5, 5)])))
        assert move in VALID_MOVES

    def test_random_player_avoids_self_collision(self):
        """Only the free neighbour is picked."""
        player = RandomPlayer(random.Random(0))
        state = make_state([(5, 5), (4, 5), (5, 4), (5, 6)])

        for _ in range(20):
            assert asyncio.run(player.get_move(state)) == RIGHT

    def test_random_player_looks_across_edges(self):
        """Neighbours are computed on the wrapped board."""
        player = RandomPlayer(random.Random(0))
        state = make_state([(0, 0), (2, 0), (0, 2), (1, 0)], width=3, height=3)

        for _ in range(20):
            assert asyncio.run(player.get_move(state)) == DOWN

    def test_random_player_trapped_still_moves(self):
        """With no safe move it still answers with some direction."""
        player = RandomPlayer(random.Random(0))
        state = make_state([(1, 1), (0, 1), (2, 1), (1, 0), (1, 2)], width=3, height=3)
        assert asyncio.run(player.get_move(state)) in VALID_MOVES


class TestScriptedPlayer:

    def test_replays_moves_in_order(self):
        player = ScriptedPlayer([UP, LEFT])
        state = make_state([(5, 5)])

        assert asyncio.run(player.get_move(state)) == UP
        assert asyncio.run(player.get_move(state)) == LEFT
        assert player.seen_states == [state, state]

    def test_exhausted_script_never_answers(self):
        player = ScriptedPlayer([])
        with pytest.raises(asyncio.TimeoutError):
            asyncio.run(asyncio.wait_for(player.get_move(make_state([(5, 5)])), timeout=0.01))


class TestConsolePlayer:

    @pytest.mark.parametrize("text,expected", [
        ("w", UP), ("a", LEFT), ("s", DOWN), ("d", RIGHT),
        ("UP\n", UP), ("  left ", LEFT), ("Down", DOWN), ("right", RIGHT),
        ("x", None), ("", None),
    ])
    def test_parse_move(self, text, expected):
        assert parse_move(text) == expected

    def test_reads_first_valid_line(self, capsys):
        """Unrecognised lines are skipped."""
        player = ConsolePlayer(stream=io.StringIO("hello\n\nd\nw\n"))

        async def read_two():
            state = make_state([(5, 5)])
            return await player.get_move(state), await player.get_move(state)

        assert asyncio.run(read_two()) == (RIGHT, UP)
        assert "Move" in capsys.readouterr().out

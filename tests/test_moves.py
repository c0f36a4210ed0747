"""Tests for move generation and path notation."""

import logging

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from iotcs.core.geometry import Direction, Pos
from iotcs.core.moves import (
    MoveGenerator, IllegalMoveError, format_path, parse_path,
    get_successors, get_legal_moves, is_legal_move, replay,
)
from iotcs.core.objects import Object
from iotcs.core.state import IotCS

N, S, W, E = Direction.NORTH, Direction.SOUTH, Direction.WEST, Direction.EAST


class TestNotation:
    def test_format(self):
        assert format_path([N, S, W, E]) == "↑↓←→"
        assert format_path([]) == ""

    def test_parse_arrows(self):
        assert parse_path("↑↓←→") == [N, S, W, E]

    def test_parse_letters(self):
        assert parse_path("n, e s w") == [N, E, S, W]

    def test_roundtrip(self):
        path = [E, E, S, W, N]
        assert parse_path(format_path(path)) == path

    def test_parse_invalid(self):
        with pytest.raises(ValueError):
            parse_path("NQ")


class TestMoveGenerator:
    def test_legal_moves(self, sample_farm):
        state = IotCS.new(sample_farm)
        assert MoveGenerator.get_legal_moves(state) == [S, E]
        assert get_legal_moves(state) == [S, E]

    def test_legal_moves_do_not_mutate(self, sample_farm):
        state = IotCS.new(sample_farm)
        get_legal_moves(state)
        assert state.ufo_pos == Pos(0, 0)
        assert state.cattle == []

    def test_move_mask(self, sample_farm):
        state = IotCS.new(sample_farm)
        assert MoveGenerator.get_move_mask(state) == [False, True, False, True]

    def test_successors_match_next(self, sample_farm):
        state = IotCS.new(sample_farm)
        assert get_successors(state) == state.next()

    def test_is_legal_move(self, barn_farm):
        state = IotCS.new(barn_farm)
        assert is_legal_move(state, N)
        assert not is_legal_move(state, E)  # bull before the cow
        assert state.ufo_pos == Pos(4, 4)


class TestReplay:
    def test_replay(self, barn_farm):
        state = IotCS.new(barn_farm)
        final = replay(state, parse_path("←→→"))
        assert final.ufo_pos == Pos(4, 6)
        assert final.cattle == [Object.AZURE_COW, Object.RED_BULL]
        assert final.is_goal()
        # Input state untouched
        assert state.ufo_pos == Pos(4, 4)

    def test_replay_illegal(self, barn_farm, caplog):
        state = IotCS.new(barn_farm)
        with caplog.at_level(logging.DEBUG, logger="iotcs.core.moves"):
            with pytest.raises(IllegalMoveError) as exc:
                replay(state, [W, E, N])
        assert exc.value.index == 2
        assert exc.value.direction is N
        assert "step 2" in caplog.text
        assert state.cattle == []

    def test_illegal_move_is_value_error(self, barn_farm):
        with pytest.raises(ValueError):
            replay(IotCS.new(barn_farm), [E])

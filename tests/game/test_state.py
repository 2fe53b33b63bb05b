"""Tests for ReplayEngine."""

import pytest

from goreplay.core.board import Board
from goreplay.core.enums import Stone
from goreplay.core.move import Move
from goreplay.core.notation import parse_sgf
from goreplay.game.config import ReplayConfig
from goreplay.game.state import ReplayEngine


def _board_after(size: int, moves: list[Move]) -> Board:
    board = Board(size)
    for move in moves:
        if move.position is not None:
            column, row = move.position
            board.set(row, column, move.color)
    return board


class TestReplayEngineSetup:
    def test_starts_at_empty_board(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        assert engine.current_move == 0
        assert engine.move_count == 5
        assert engine.board.stone_count() == 0
        assert engine.is_at_start
        assert engine.last_move is None

    def test_looping_default_enabled(self) -> None:
        assert ReplayEngine(19, []).is_looping_enabled()

    def test_looping_keyword(self) -> None:
        assert not ReplayEngine(19, [], looping=False).is_looping_enabled()

    def test_moves_snapshot_at_construction(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        two_moves.append(Move(Stone.BLACK, (0, 0)))
        assert engine.move_count == 2

    def test_from_record(self) -> None:
        record = parse_sgf("(;SZ[9]PB[Shusaku];B[cc];W[gg])")
        engine = ReplayEngine.from_record(record)
        assert engine.board.size == 9
        assert engine.move_count == 2
        assert engine.get_property("PB") == "Shusaku"

    def test_from_record_uses_config(self) -> None:
        record = parse_sgf("(;B[cc])")
        engine = ReplayEngine.from_record(
            record, ReplayConfig(default_board_size=13, looping=False)
        )
        assert engine.board.size == 13
        assert not engine.is_looping_enabled()


class TestReplayEngineAdvance:
    def test_advance_places_stone(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        assert engine.advance()
        assert engine.current_move == 1
        assert engine.board.get(3, 3) == Stone.BLACK
        assert engine.last_move == two_moves[0]

    def test_position_is_column_row(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        engine.jump_to_end()
        # W[pd] is column 15, row 3
        assert engine.board.get(3, 15) == Stone.WHITE
        assert engine.board.get(15, 3) is None

    def test_pass_touches_no_cell(self) -> None:
        engine = ReplayEngine(19, [Move(Stone.BLACK, None)])
        assert engine.advance()
        assert engine.current_move == 1
        assert engine.board.stone_count() == 0

    def test_wrap_when_looping(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        assert engine.advance()
        assert engine.advance()
        assert engine.current_move == 2
        assert engine.advance()
        assert engine.current_move == 0
        assert engine.board.get(3, 3) is None
        assert engine.board.get(3, 15) is None

    def test_stuck_without_looping(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        engine.set_looping(False)
        engine.advance()
        engine.advance()
        assert not engine.advance()
        assert engine.current_move == 2
        assert engine.board.get(3, 3) == Stone.BLACK
        assert engine.board.get(3, 15) == Stone.WHITE

    def test_empty_record_wraps_in_place(self) -> None:
        engine = ReplayEngine(19, [])
        assert engine.advance()
        assert engine.current_move == 0
        engine.set_looping(False)
        assert not engine.advance()

    def test_later_move_overwrites(self) -> None:
        engine = ReplayEngine(
            9, [Move(Stone.BLACK, (1, 1)), Move(Stone.WHITE, (1, 1))]
        )
        engine.jump_to_end()
        assert engine.board.get(1, 1) == Stone.WHITE

    def test_off_board_move_ignored(self) -> None:
        engine = ReplayEngine(9, [Move(Stone.BLACK, (15, 3))])
        assert engine.advance()
        assert engine.current_move == 1
        assert engine.board.stone_count() == 0


class TestReplayEngineRetreat:
    def test_retreat_at_start(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        assert not engine.retreat()
        assert engine.current_move == 0

    def test_retreat_removes_last_stone(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        engine.advance()
        engine.advance()
        assert engine.retreat()
        assert engine.current_move == 1
        assert engine.board.get(3, 3) == Stone.BLACK
        assert engine.board.get(3, 15) is None

    def test_retreat_restores_overwritten_stone(self) -> None:
        engine = ReplayEngine(
            9, [Move(Stone.BLACK, (1, 1)), Move(Stone.WHITE, (1, 1))]
        )
        engine.jump_to_end()
        engine.retreat()
        assert engine.board.get(1, 1) == Stone.BLACK

    def test_advance_then_retreat_is_identity(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        for _ in range(len(sample_moves)):
            before = engine.board.copy()
            cursor = engine.current_move
            engine.advance()
            engine.retreat()
            assert engine.board == before
            assert engine.current_move == cursor
            engine.advance()


class TestReplayEngineJumps:
    def test_jump_to_end(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        engine.jump_to_end()
        assert engine.current_move == 5
        assert engine.is_at_end
        assert engine.board == _board_after(19, sample_moves)

    def test_jump_to_end_never_wraps(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        engine.jump_to_end()
        engine.jump_to_end()
        assert engine.current_move == 5

    def test_jump_to_start(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves, looping=False)
        engine.jump_to_end()
        engine.jump_to_start()
        assert engine.current_move == 0
        assert engine.board.stone_count() == 0

    def test_jump_to_index(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        assert engine.jump_to(3)
        assert engine.current_move == 3
        assert engine.board == _board_after(19, sample_moves[:3])

    def test_jump_to_same_index(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        assert not engine.jump_to(0)

    @pytest.mark.parametrize("index,expected", [(-3, 0), (99, 5)])
    def test_jump_to_clamps(
        self, sample_moves: list[Move], index: int, expected: int
    ) -> None:
        engine = ReplayEngine(19, sample_moves)
        engine.jump_to(2)
        engine.jump_to(index)
        assert engine.current_move == expected

    def test_board_identity_is_stable(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        board = engine.board
        engine.jump_to_end()
        engine.retreat()
        engine.jump_to_start()
        assert engine.board is board


class TestReplayEngineConsistency:
    def test_forward_matches_backward(self, sample_moves: list[Move]) -> None:
        total = len(sample_moves)
        for k in range(total + 1):
            forward = ReplayEngine(19, sample_moves)
            for _ in range(k):
                forward.advance()

            backward = ReplayEngine(19, sample_moves)
            backward.jump_to_end()
            for _ in range(total - k):
                backward.retreat()

            assert forward.current_move == backward.current_move == k
            assert forward.board == backward.board

    def test_board_matches_prefix_at_every_cursor(
        self, sample_moves: list[Move]
    ) -> None:
        engine = ReplayEngine(19, sample_moves, looping=False)
        for k in range(1, len(sample_moves) + 1):
            engine.advance()
            assert engine.board == _board_after(19, sample_moves[:k])

    def test_moves_never_mutated(self, sample_moves: list[Move]) -> None:
        engine = ReplayEngine(19, sample_moves)
        original = engine.moves
        engine.jump_to_end()
        engine.advance()
        engine.retreat()
        assert engine.moves == tuple(sample_moves)
        assert engine.moves is original


class TestReplayEngineLooping:
    def test_toggle(self) -> None:
        engine = ReplayEngine(19, [])
        engine.toggle_looping()
        assert not engine.is_looping_enabled()
        engine.toggle_looping()
        assert engine.is_looping_enabled()

    def test_set_looping(self) -> None:
        engine = ReplayEngine(19, [])
        engine.set_looping(False)
        assert not engine.is_looping_enabled()


class TestReplayEngineProperties:
    def test_get_property_first_value(self) -> None:
        engine = ReplayEngine(19, [], {"AB": ["aa", "bb"]})
        assert engine.get_property("AB") == "aa"

    def test_missing_property(self) -> None:
        assert ReplayEngine(19, []).get_property("PB") is None

    def test_empty_value_list(self) -> None:
        assert ReplayEngine(19, [], {"PB": []}).get_property("PB") is None


class TestReplayEngineViews:
    def test_view_reflects_current_board(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        engine.advance()
        view = engine.view()
        assert view.get(3, 3) == Stone.BLACK

    def test_view_rotation(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        engine.jump_to_end()
        # board (3, 15) under a half turn appears at view (15, 3)
        assert engine.view(2).get(15, 3) == Stone.WHITE

    def test_fresh_view_each_call(self) -> None:
        engine = ReplayEngine(19, [])
        assert engine.view() is not engine.view()


class TestReplayEngineEvents:
    def test_position_events(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        seen: list[tuple[int, int]] = []
        engine.events.on_position_changed.append(lambda c, t: seen.append((c, t)))
        engine.advance()
        engine.advance()
        engine.advance()  # wrap
        engine.retreat()  # no-op at start
        assert seen == [(1, 2), (2, 2), (0, 2)]

    def test_wrap_event(self, two_moves: list[Move]) -> None:
        engine = ReplayEngine(19, two_moves)
        wraps: list[bool] = []
        engine.events.on_wrapped.append(lambda: wraps.append(True))
        engine.jump_to_end()
        assert wraps == []
        engine.advance()
        assert wraps == [True]

    def test_looping_event_only_on_change(self) -> None:
        engine = ReplayEngine(19, [])
        seen: list[bool] = []
        engine.events.on_looping_changed.append(seen.append)
        engine.set_looping(True)
        engine.toggle_looping()
        assert seen == [False]

"""Tests for the Game session wrapper."""

import pytest

from qchess.core.enums import Color, MoveFlag
from qchess.core.errors import FenError, IllegalMoveError, MoveParseError
from qchess.core.move import Move
from qchess.core.notation import STARTING_FEN
from qchess.core.types import D5, D7, E2, E4
from qchess.game import Game

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


class TestGameSetup:
    def test_default_is_starting_position(self) -> None:
        game = Game()
        assert game.fen == STARTING_FEN
        assert game.start_fen == STARTING_FEN
        assert game.ply_count == 0

    def test_from_fen(self) -> None:
        game = Game.from_fen(AFTER_E4)
        assert game.position.side_to_move == Color.BLACK
        assert game.start_fen == AFTER_E4

    def test_from_bad_fen(self) -> None:
        with pytest.raises(FenError):
            Game.from_fen("not a fen")

    def test_setup_resets(self) -> None:
        game = Game()
        game.apply_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        assert game.ply_count == 1
        game.setup()
        assert game.ply_count == 0
        assert game.fen == STARTING_FEN

    def test_setup_custom_fen(self) -> None:
        game = Game()
        game.setup(AFTER_E4)
        assert game.fen == AFTER_E4

    def test_setup_empty_string_raises(self) -> None:
        game = Game()
        game.apply_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        with pytest.raises(FenError):
            game.setup("")
        assert game.ply_count == 1


class TestGameHistory:
    def test_apply_and_undo(self) -> None:
        game = Game()
        game.apply_move(Move(E2, E4, MoveFlag.DOUBLE_PAWN))
        game.apply_move(Move(D7, D5, MoveFlag.DOUBLE_PAWN))
        assert game.ply_count == 2
        assert [str(m) for m in game.moves] == ["e2e4", "d7d5"]

        delta = game.undo_move()
        assert delta is not None
        assert delta.move == Move(D7, D5, MoveFlag.DOUBLE_PAWN)
        assert game.fen == AFTER_E4

        game.undo_move()
        assert game.fen == STARTING_FEN

    def test_undo_empty_returns_none(self) -> None:
        game = Game()
        assert game.undo_move() is None
        assert game.fen == STARTING_FEN

    def test_history_is_snapshot(self) -> None:
        game = Game()
        game.push_uci("e2e4")
        history = game.history
        game.push_uci("e7e5")
        assert len(history) == 1
        assert len(game.history) == 2

    def test_push_uci_classifies(self) -> None:
        game = Game()
        delta = game.push_uci("e2e4")
        assert delta.move.flag == MoveFlag.DOUBLE_PAWN
        assert game.fen == AFTER_E4

    def test_push_uci_en_passant_sequence(self) -> None:
        game = Game()
        for text in ("e2e4", "a7a6", "e4e5", "d7d5", "e5d6"):
            game.push_uci(text)
        assert game.history[-1].move.flag == MoveFlag.EN_PASSANT
        assert game.position.board[D5] is None
        while game.undo_move() is not None:
            pass
        assert game.fen == STARTING_FEN

    def test_bad_move_text(self) -> None:
        game = Game()
        with pytest.raises(MoveParseError):
            game.push_uci("e2")
        assert game.ply_count == 0

    def test_illegal_move_not_recorded(self) -> None:
        game = Game()
        with pytest.raises(IllegalMoveError):
            game.push_uci("e7e5")
        assert game.ply_count == 0
        assert game.fen == STARTING_FEN

    def test_pseudo_legal_moves(self) -> None:
        assert len(Game().pseudo_legal_moves()) == 20

    def test_repr(self) -> None:
        assert repr(Game()) == f"Game({STARTING_FEN!r}, ply=0)"

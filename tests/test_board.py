"""Tests for python-chess position checks."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from chess_pgn.board import board_diagram, validate_fen

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


class TestValidateFen:

    @pytest.mark.parametrize("fen", [
        START_FEN,
        "8/8/8/8/8/8/8/K6k w - - 0 1",
        "r1bqkbnr/pppp1ppp/2n5/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R w KQkq - 2 3",
    ])
    def test_legal_positions(self, fen):
        assert validate_fen(fen) == (True, None)

    def test_unparseable(self):
        valid, error = validate_fen("not a fen")
        assert valid is False
        assert error.startswith("Invalid FEN format")

    def test_missing_white_king(self):
        assert validate_fen("8/8/8/8/8/8/8/7k w - - 0 1") == (False, "Invalid position: White king is missing")

    def test_missing_black_king(self):
        assert validate_fen("8/8/8/8/8/8/8/K7 w - - 0 1") == (False, "Invalid position: Black king is missing")

    def test_too_many_kings(self):
        valid, error = validate_fen("k7/8/8/8/8/8/8/KK6 w - - 0 1")
        assert valid is False
        assert "too many kings" in error

    def test_pawn_on_back_rank(self):
        valid, error = validate_fen("P6k/8/8/8/8/8/8/K7 w - - 0 1")
        assert valid is False
        assert "pawns" in error

    def test_side_not_to_move_in_check(self):
        # black king attacked by the rook while white is to move
        valid, error = validate_fen("k7/8/8/8/8/8/8/R5K1 w - - 0 1")
        assert valid is False
        assert "in check" in error


class TestBoardDiagram:

    def test_white_at_bottom(self):
        rows = board_diagram(START_FEN).splitlines()
        assert len(rows) == 8
        assert rows[0] == "r n b q k b n r"
        assert rows[-1] == "R N B Q K B N R"

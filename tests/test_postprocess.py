"""Tests for PGN cleanup of model replies."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from chess_pgn.postprocess import clean_pgn, looks_like_refusal


class TestCleanPgn:

    def test_plaintext_marker_removed(self):
        assert clean_pgn("plaintext\nThe board is empty.") == "The board is empty."

    def test_plaintext_marker_case_insensitive(self):
        assert clean_pgn("PlainText   The board is empty.") == "The board is empty."

    def test_plaintext_marker_and_moves_removed(self):
        text = 'plaintext\n1. e4 e5\n[FEN "8/8/8 w - -"]'
        assert clean_pgn(text) == '[FEN "8/8/8 w - -"]'

    def test_move_sequences_removed(self):
        assert clean_pgn("1. e4 e5 2. Nf3 Nc6 White is better.") == "White is better."

    def test_captures_checks_and_castling_removed(self):
        text = "Position notes\n12. Bxf7+ Kxf7 13. O-O O-O-O"
        assert clean_pgn(text) == "Position notes"

    def test_promotion_removed(self):
        assert clean_pgn("Notes 40. a8=Q+ Kh7") == "Notes"

    def test_code_fence_unwrapped(self):
        assert clean_pgn("```plaintext\nWhite to move\n```") == "White to move"

    def test_single_move_is_kept(self):
        assert clean_pgn("After 1. e4 the game began") == "After 1. e4 the game began"

    def test_prose_unchanged(self):
        prose = "I can see a chessboard, but I cannot read the pieces clearly."
        assert clean_pgn(prose) == prose

    def test_empty(self):
        assert clean_pgn("") == ""
        assert clean_pgn(None) == ""


class TestIdempotence:

    @pytest.mark.parametrize("text", [
        "plaintext plaintext\n1. e4 e5",
        "1. e4 2. d4 d5 e5",
        "```\nplaintext\n1. d4 d5\nnotes\n```",
        'plaintext\n1. e4 e5\n[FEN "8/8/8 w - -"]',
        "Line one   \n\n\n\nLine two",
        "Nothing to clean here.",
    ])
    def test_cleaning_twice_changes_nothing(self, text):
        once = clean_pgn(text)
        assert clean_pgn(once) == once


class TestLooksLikeRefusal:

    def test_refusal(self):
        assert looks_like_refusal("I'm sorry, I can't identify the position.") is True

    def test_fen_is_not_refusal(self):
        assert looks_like_refusal("8/8/8/8/8/8/8/K6k w - - 0 1") is False

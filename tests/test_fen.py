"""Tests for the FEN matchers."""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from chess_pgn.fen import is_fen, match_direct_fen, match_tagged_fen

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


class TestDirectFen:
    """Tests for the direct FEN grammar match."""

    def test_whole_text_is_fen(self):
        assert match_direct_fen(START_FEN) == START_FEN

    def test_surrounding_whitespace_is_trimmed(self):
        assert match_direct_fen(f"\n  {START_FEN}  \n") == START_FEN

    def test_fen_inside_prose_returns_only_the_fen(self):
        text = f"Here is the position: {E4_FEN}. Let me know if you need anything else."
        assert match_direct_fen(text) == E4_FEN

    def test_counters_are_optional(self):
        assert match_direct_fen("8/8/8/8/8/8/8/K6k w - -") == "8/8/8/8/8/8/8/K6k w - -"

    def test_first_match_wins(self):
        text = f"Either {E4_FEN} or maybe {START_FEN}"
        assert match_direct_fen(text) == E4_FEN

    def test_partial_castling_rights(self):
        fen = "r3k2r/8/8/8/8/8/8/R3K2R b Kq - 3 20"
        assert match_direct_fen(fen) == fen

    def test_seven_ranks_do_not_match(self):
        assert match_direct_fen("8/8/8/8/8/8/K6k w - - 0 1") is None

    def test_invalid_side_to_move(self):
        assert match_direct_fen("8/8/8/8/8/8/8/K6k x - - 0 1") is None

    def test_prose_without_fen(self):
        assert match_direct_fen("I see a chessboard with several pieces.") is None

    def test_empty_text(self):
        assert match_direct_fen("") is None
        assert match_direct_fen(None) is None


class TestTaggedFen:
    """Tests for the [FEN ...] tag match."""

    def test_quoted_tag(self):
        text = f'[Event "?"]\n[FEN "{START_FEN}"]\n\n1. e4 e5 *'
        assert match_tagged_fen(text) == START_FEN

    def test_unquoted_tag(self):
        assert match_tagged_fen(f"[FEN {START_FEN}]") == START_FEN

    def test_tag_content_is_returned_even_if_unusual(self):
        assert match_tagged_fen('[FEN "8/8/8 w - -"]') == "8/8/8 w - -"

    def test_no_tag(self):
        assert match_tagged_fen('[Event "Casual"]\n*') is None

    def test_space_before_closing_bracket(self):
        assert match_tagged_fen(f'[FEN "{START_FEN}" ]') == START_FEN

    def test_empty_tag(self):
        assert match_tagged_fen('[FEN ""]') is None


class TestIsFen:

    def test_valid(self):
        assert is_fen(START_FEN) is True

    def test_extra_text_is_not_a_fen(self):
        assert is_fen(f"FEN: {START_FEN}") is False

    def test_empty(self):
        assert is_fen("") is False

"""Tests for the position extraction pipeline."""

import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from chess_pgn.extraction import (
    build_minimal_pgn,
    extract_fen,
    extract_position,
    match_fenced_block,
    match_pgn_block,
)

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"

VALID_FENS = [
    START_FEN,
    E4_FEN,
    "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4",
    "8/P7/8/8/8/8/8/K6k w - - 0 1",
    "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1",
    "8/8/8/8/8/8/8/K6k b - -",
]


class TestRoundTrip:

    @pytest.mark.parametrize("fen", VALID_FENS)
    def test_wrapped_fen_comes_back_unchanged(self, fen):
        assert extract_fen(build_minimal_pgn(fen)) == fen
        assert extract_position(build_minimal_pgn(fen)).fen == fen


class TestFenFound:
    """When a FEN is found, everything else is discarded."""

    def test_start_position_builds_minimal_pgn(self):
        position = extract_position(START_FEN)
        assert position.fen == START_FEN
        assert position.strategy == "direct_fen"
        assert position.pgn == (
            '[SetUp "1"]\n'
            '[FEN "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"]\n'
            '\n'
            '*'
        )

    def test_tagged_fen_ignores_move_text(self):
        text = f'[Event "Casual"]\n[SetUp "1"]\n[FEN "{E4_FEN}"]\n\n1... e5 2. Nf3 Nc6 *'
        assert extract_position(text).fen == E4_FEN

    def test_tag_only_matcher_used_for_unusual_content(self):
        position = extract_position('[FEN "8/8/8 w - -"]\n\n*')
        assert position.fen == "8/8/8 w - -"
        assert position.strategy == "tagged_fen"

    def test_fen_inside_prose(self):
        text = f"The position in the image is:\n\n{E4_FEN}\n\nWhite has just played e4."
        position = extract_position(text)
        assert position.fen == E4_FEN
        assert "White has just played" not in position.pgn

    def test_fen_wins_over_fenced_block(self):
        position = extract_position(f"```\n{START_FEN}\n```")
        assert position.fen == START_FEN
        assert position.strategy == "direct_fen"

    def test_plaintext_marker_and_moves_are_dropped(self):
        text = f'plaintext\n1. e4 e5\n[FEN "{E4_FEN}"]'
        position = extract_position(text)
        assert position.fen == E4_FEN
        assert "plaintext" not in position.pgn
        assert "1. e4" not in position.pgn

    def test_first_fen_wins(self):
        assert extract_fen(f"{E4_FEN}\n{START_FEN}") == E4_FEN


class TestNoFen:

    def test_pgn_block_is_captured_up_to_result(self):
        text = (
            "Sure! Here is the game:\n"
            '[Event "Club game"]\n[Site "?"]\n[Result "1-0"]\n\n1-0\n'
            "Hope this helps."
        )
        position = extract_position(text)
        assert position.fen is None
        assert position.strategy == "pgn_block"
        assert position.pgn == '[Event "Club game"]\n[Site "?"]\n[Result "1-0"]\n\n1-0'

    def test_pgn_block_moves_are_stripped(self):
        text = '[Event "Casual"]\n[Site "?"]\n\n1. e4 e5 2. Nf3 Nc6 *'
        position = extract_position(text)
        assert position.strategy == "pgn_block"
        assert position.pgn.startswith('[Event "Casual"]')
        assert "e4" not in position.pgn
        assert "Nf3" not in position.pgn
        assert position.pgn.endswith("*")

    def test_fenced_block_without_fen(self):
        position = extract_position("Result:\n```pgn\n  white king on g1, black king on g8  \n```\nDone.")
        assert position.fen is None
        assert position.strategy == "fenced_block"
        assert position.pgn == "white king on g1, black king on g8"

    def test_prose_falls_back_to_raw_text(self):
        prose = "The image shows a chessboard but the pieces are too blurry to identify."
        position = extract_position(f"  {prose}\n")
        assert position.fen is None
        assert position.strategy == "raw_text"
        assert position.pgn == prose

    def test_empty_reply(self):
        position = extract_position("")
        assert position.pgn == ""
        assert position.is_empty

    def test_none_reply_does_not_raise(self):
        assert extract_position(None).is_empty


class TestMatchers:

    def test_pgn_block_requires_header_marker(self):
        assert match_pgn_block("1. e4 e5 *") is None

    def test_pgn_block_requires_result_token(self):
        assert match_pgn_block('[Event "Casual"]\n1. e4') is None

    def test_fenced_block_without_fence(self):
        assert match_fenced_block("no code here") is None

    def test_empty_fenced_block(self):
        assert match_fenced_block("```\n\n```") is None

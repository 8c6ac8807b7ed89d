# -*- coding: utf-8 -*-
"""python-chess helpers for positions read from an image."""

from typing import Optional, Tuple

import chess


def validate_fen(fen: str) -> Tuple[bool, Optional[str]]:
    """Check that a FEN parses and describes a playable position.

    Returns:
        (is_valid, error_message). error_message is None when valid.
    """
    try:
        board = chess.Board(fen)
    except ValueError as e:
        return False, f"Invalid FEN format: {e}"

    if board.king(chess.WHITE) is None:
        return False, "Invalid position: White king is missing"
    if board.king(chess.BLACK) is None:
        return False, "Invalid position: Black king is missing"

    status = board.status()
    if status & chess.STATUS_TOO_MANY_KINGS:
        return False, "Invalid position: too many kings"
    if status & chess.STATUS_PAWNS_ON_BACKRANK:
        return False, "Invalid position: pawns on the first or last rank"
    if status & chess.STATUS_OPPOSITE_CHECK:
        return False, "Invalid position: the side not to move is in check"

    return True, None


def board_diagram(fen: str) -> str:
    """ASCII diagram of the position, White at the bottom."""
    return str(chess.Board(fen))

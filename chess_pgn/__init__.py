# -*- coding: utf-8 -*-
"""Chess position parsing and analysis-site hand-off."""

from .errors import (
    ErrorKind, ChessAnalysisError, ConfigurationError, ProviderError, QuotaExceeded,
    ExtractionFailed, InvalidImageError, LinkConstructionError, MANUAL_COPY_HINT,
)
from .fen import is_fen, match_direct_fen, match_tagged_fen
from .extraction import ExtractedPosition, build_minimal_pgn, extract_fen, extract_position
from .postprocess import clean_pgn
from .board import validate_fen, board_diagram
from .lichess import AnalysisLink, build_analysis_link, encode_fen_for_url, open_analysis
from .navigators import Navigator, BrowserNavigator

__all__ = [
    "ErrorKind", "ChessAnalysisError", "ConfigurationError", "ProviderError", "QuotaExceeded",
    "ExtractionFailed", "InvalidImageError", "LinkConstructionError", "MANUAL_COPY_HINT",
    "is_fen", "match_direct_fen", "match_tagged_fen",
    "ExtractedPosition", "build_minimal_pgn", "extract_fen", "extract_position",
    "clean_pgn",
    "validate_fen", "board_diagram",
    "AnalysisLink", "build_analysis_link", "encode_fen_for_url", "open_analysis",
    "Navigator", "BrowserNavigator",
]

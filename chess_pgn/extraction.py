# -*- coding: utf-8 -*-
"""Turn free-form model output into a FEN and/or a PGN.

Matchers are tried in a fixed order and the first one that returns a value
wins. The two FEN matchers always run before any PGN matcher; when a FEN is
found every other piece of the reply is discarded and a minimal PGN is built
around it. Otherwise the best PGN candidate is cleaned with
:func:`chess_pgn.postprocess.clean_pgn`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

import regex as re

from .fen import match_direct_fen, match_tagged_fen
from .postprocess import clean_pgn, looks_like_refusal

log = logging.getLogger(__name__)

Matcher = Callable[[str], Optional[str]]

PGN_HEADER_MARKERS = ("[Event", "[Site")
PGN_BLOCK_RE = re.compile(
    r"\[\s*(?:Event|Site)\b[^\]]*\](?:\s*\[[^\]]*\])*.*?(?:1-0|0-1|1/2-1/2|\*)(?=\s|$)",
    re.DOTALL,
)
FENCED_BLOCK_RE = re.compile(r"```(?:pgn)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)


@dataclass(frozen=True)
class ExtractedPosition:
    pgn: str
    fen: Optional[str] = None
    strategy: str = "raw_text"

    @property
    def is_empty(self) -> bool:
        return not self.pgn


def build_minimal_pgn(fen: str) -> str:
    """Wrap a FEN in the smallest PGN that analysis sites accept."""
    return f'[SetUp "1"]\n[FEN "{fen}"]\n\n*'


def match_pgn_block(text: str) -> Optional[str]:
    if not any(marker in text for marker in PGN_HEADER_MARKERS):
        return None
    m = PGN_BLOCK_RE.search(text)
    return m.group(0).strip() if m else None


def match_fenced_block(text: str) -> Optional[str]:
    if "```" not in text:
        return None
    m = FENCED_BLOCK_RE.search(text)
    if m and m.group(1).strip():
        return m.group(1).strip()
    return None


def match_raw_text(text: str) -> Optional[str]:
    return text.strip()


FEN_MATCHERS: List[Tuple[str, Matcher]] = [
    ("direct_fen", match_direct_fen),
    ("tagged_fen", match_tagged_fen),
]

PGN_MATCHERS: List[Tuple[str, Matcher]] = [
    ("pgn_block", match_pgn_block),
    ("fenced_block", match_fenced_block),
    ("raw_text", match_raw_text),
]


def extract_fen(text: str) -> Optional[str]:
    """Run only the FEN matchers. Used by the link builder as well."""
    text = text or ""
    for _, matcher in FEN_MATCHERS:
        fen = matcher(text)
        if fen:
            return fen
    return None


def extract_position(text: str) -> ExtractedPosition:
    text = text or ""

    for name, matcher in FEN_MATCHERS:
        fen = matcher(text)
        if fen:
            log.debug(f"[extract] FEN found by {name}: {fen}")
            return ExtractedPosition(pgn=build_minimal_pgn(fen), fen=fen, strategy=name)

    for name, matcher in PGN_MATCHERS:
        candidate = matcher(text)
        if candidate is None:
            continue
        if name == "raw_text" and looks_like_refusal(candidate):
            log.warning(f"[extract] Model reply looks like a refusal: {candidate[:120]}")
        pgn = clean_pgn(candidate)
        log.debug(f"[extract] No FEN, using {name} candidate ({len(pgn)} chars after cleanup)")
        return ExtractedPosition(pgn=pgn, strategy=name)

    return ExtractedPosition(pgn="")

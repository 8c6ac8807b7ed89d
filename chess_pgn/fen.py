# -*- coding: utf-8 -*-
"""FEN grammar and the two FEN matchers (direct text, PGN tag)."""

from typing import Optional

import regex as re

FEN_RE = re.compile(r"""
    (?<![\w/])
    (?:[rnbqkpRNBQKP1-8]+/){7}[rnbqkpRNBQKP1-8]+
    [ \t]+[wb]
    [ \t]+(?:[KQkq]{1,4}|-)
    [ \t]+(?:[a-h][1-8]|-)
    (?:[ \t]+\d+[ \t]+\d+)?
""", re.X)

TAGGED_FEN_RE = re.compile(r'\[FEN\s+"([^"]+)"\s*\]')
UNQUOTED_FEN_RE = re.compile(r'\[FEN\s+([^\]"]+)\]')


def is_fen(candidate: str) -> bool:
    """True when the whole (trimmed) string follows the FEN grammar."""
    return bool(candidate) and FEN_RE.fullmatch(candidate.strip()) is not None


def match_direct_fen(text: str) -> Optional[str]:
    """Return the FEN when the text is one, or the first FEN found inside it."""
    stripped = (text or "").strip()
    if not stripped:
        return None
    if FEN_RE.fullmatch(stripped):
        return stripped
    m = FEN_RE.search(stripped)
    return m.group(0) if m else None


def match_tagged_fen(text: str) -> Optional[str]:
    """Return the content of a `[FEN "..."]` tag, quoted or not."""
    if not text:
        return None
    m = TAGGED_FEN_RE.search(text)
    if m and m.group(1).strip():
        return m.group(1).strip()
    m = UNQUOTED_FEN_RE.search(text)
    if m and m.group(1).strip():
        return m.group(1).strip()
    return None

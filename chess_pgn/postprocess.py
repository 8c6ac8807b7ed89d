# -*- coding: utf-8 -*-
"""Post-processing of raw model replies that did not contain a FEN."""

import logging
import re

log = logging.getLogger(__name__)

_REFUSAL_PATTERNS = [
    r"\bsorry\b",
    r"\bi can't\b",
    r"\bi cannot\b",
    r"\bi'm unable\b",
    r"\bi am unable\b",
    r"\bunable to (?:identify|determine|read|see)\b",
]

_PLAINTEXT_MARKER_RE = re.compile(r"^plaintext\s*", re.IGNORECASE)
_CODE_FENCE_RE = re.compile(r"^```[ \t]*(?:plaintext|pgn|text)?[ \t]*\n?(.*?)```$", re.IGNORECASE | re.DOTALL)

_MOVE = r"(?:O-O(?:-O)?|[KQRBNP]?[a-h]?[1-8]?x?[a-h][1-8](?:=[QRBN])?)[+#]?"
MOVE_SEQUENCE_RE = re.compile(rf"\b\d+\.\s*{_MOVE}\s+{_MOVE}")


def looks_like_refusal(text: str) -> bool:
    low = (text or "").lower()
    return any(re.search(p, low) for p in _REFUSAL_PATTERNS)


def _strip_plaintext_marker(text: str) -> str:
    return _PLAINTEXT_MARKER_RE.sub("", text)


def _unwrap_code_fence(text: str) -> str:
    m = _CODE_FENCE_RE.match(text)
    return m.group(1) if m else text


def _strip_move_sequences(text: str) -> str:
    before = text
    text = MOVE_SEQUENCE_RE.sub("", text)
    if before != text:
        log.debug("[postprocess] Removed move sequences from model reply")
    return text


def _cleanup_spacing(text: str) -> str:
    text = re.sub(r"[ \t]+\n", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def clean_pgn(text: str) -> str:
    """Strip provider artifacts and hallucinated moves from a PGN candidate.

    The passes are repeated until the text stops changing, so calling this
    on already-cleaned text is a no-op.
    """
    cleaned = (text or "").strip()
    previous = None
    while cleaned != previous:
        previous = cleaned
        cleaned = _strip_plaintext_marker(cleaned)
        cleaned = _unwrap_code_fence(cleaned)
        cleaned = _strip_move_sequences(cleaned)
        cleaned = _cleanup_spacing(cleaned)
    return cleaned

# -*- coding: utf-8 -*-
"""Build the hand-off to the analysis site (Lichess by default)."""

from __future__ import annotations

import logging
import re
from typing import Dict, Literal, Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from . import config
from .errors import LinkConstructionError
from .extraction import extract_fen
from .navigators import Navigator

log = logging.getLogger(__name__)


class AnalysisLink(BaseModel):
    """Either a direct analysis URL (GET) or a form import (POST)."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST"]
    url: str
    fields: Dict[str, str] = Field(default_factory=dict)
    fen: Optional[str] = None


def encode_fen_for_url(fen: str) -> str:
    # the analysis route takes underscores in place of spaces
    return quote(re.sub(r"\s+", "_", fen.strip()), safe="/_-")


def build_analysis_link(pgn: str, site_url: Optional[str] = None) -> AnalysisLink:
    if not pgn or not pgn.strip():
        raise LinkConstructionError("PGN is empty, nothing to send to the analysis site.")

    site = (site_url or config.ANALYSIS_SITE_URL).rstrip("/")
    fen = extract_fen(pgn)
    if fen:
        url = f"{site}{config.ANALYSIS_PATH}{encode_fen_for_url(fen)}"
        return AnalysisLink(method="GET", url=url, fen=fen)

    return AnalysisLink(method="POST", url=f"{site}{config.IMPORT_PATH}", fields={"pgn": pgn})


async def open_analysis(pgn: str, navigator: Navigator, site_url: Optional[str] = None) -> AnalysisLink:
    """Build the link and hand it to the navigator. One attempt, no retry."""
    link = build_analysis_link(pgn, site_url)
    if link.method == "GET":
        log.info(f"Opening analysis URL: {link.url}")
        await navigator.open_url(link.url)
    else:
        log.info(f"No FEN found in PGN, submitting PGN via form to {link.url}")
        await navigator.submit_form(link.url, link.fields)
    return link

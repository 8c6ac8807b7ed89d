# -*- coding: utf-8 -*-
"""Provider configuration and the normalized analysis result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict

from chess_pgn.errors import ErrorKind


@dataclass(frozen=True)
class ProviderConfig:
    """Which vision provider to call and the credential for it."""

    provider: str
    api_key: str = field(repr=False)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    success: bool
    pgn: Optional[str] = None
    fen: Optional[str] = None
    error: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    provider: Optional[str] = None
    warning: Optional[str] = None

    @classmethod
    def ok(cls, pgn: str, *, fen: Optional[str] = None, provider: Optional[str] = None,
           warning: Optional[str] = None) -> "AnalysisResult":
        return cls(success=True, pgn=pgn, fen=fen, provider=provider, warning=warning)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, *, provider: Optional[str] = None) -> "AnalysisResult":
        return cls(success=False, error=message, error_kind=kind, provider=provider)

    @property
    def is_quota_error(self) -> bool:
        return self.error_kind == ErrorKind.QUOTA_EXCEEDED

# -*- coding: utf-8 -*-
"""Error taxonomy shared by the dispatcher, extractor and link builder."""

from enum import Enum


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration_error"
    PROVIDER = "provider_error"
    QUOTA_EXCEEDED = "quota_exceeded"
    EXTRACTION_FAILED = "extraction_failed"
    LINK_CONSTRUCTION = "link_construction_error"
    INVALID_IMAGE = "invalid_image"


class ChessAnalysisError(Exception):
    """Base class; `kind` tells callers how to render the failure."""

    kind = ErrorKind.PROVIDER


class ConfigurationError(ChessAnalysisError):
    kind = ErrorKind.CONFIGURATION


class ProviderError(ChessAnalysisError):
    kind = ErrorKind.PROVIDER


class QuotaExceeded(ProviderError):
    kind = ErrorKind.QUOTA_EXCEEDED


class ExtractionFailed(ChessAnalysisError):
    kind = ErrorKind.EXTRACTION_FAILED


class InvalidImageError(ChessAnalysisError):
    kind = ErrorKind.INVALID_IMAGE


class LinkConstructionError(ChessAnalysisError):
    kind = ErrorKind.LINK_CONSTRUCTION


QUOTA_EXCEEDED_MESSAGE = (
    "You've exceeded your API quota. Please check your plan and billing "
    "details with the provider, or try again later."
)
EXTRACTION_FAILED_MESSAGE = "Could not extract a valid position from the response."
MANUAL_COPY_HINT = (
    "Could not open the analysis board automatically. "
    "Copy the PGN below and paste it into the analysis site manually."
)

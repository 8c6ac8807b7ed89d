# -*- coding: utf-8 -*-
"""Base abstract class for vision providers."""

from abc import ABC, abstractmethod
from typing import Any, Dict, FrozenSet, Optional, Tuple

from chess_pgn import config
from chess_pgn.errors import ErrorKind, QUOTA_EXCEEDED_MESSAGE

from .images import ImagePayload

QUOTA_MARKERS = ("quota", "exceeded")


class VisionProvider(ABC):
    """One vision API: how to build the request, read the reply, classify errors.

    Instances are created per request and keep no state between requests.
    """

    name: str = ""
    display_name: str = ""
    quota_markers: Tuple[str, ...] = QUOTA_MARKERS
    quota_error_types: FrozenSet[str] = frozenset({"insufficient_quota"})

    def __init__(self, model: Optional[str] = None, temperature: Optional[float] = None,
                 max_tokens: Optional[int] = None):
        self.model = model or self.default_model()
        self.temperature = config.VISION_TEMPERATURE if temperature is None else float(temperature)
        self.max_tokens = config.VISION_MAX_TOKENS if max_tokens is None else int(max_tokens)

    @abstractmethod
    def default_model(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def create_client(self, api_key: str) -> Any:
        raise NotImplementedError

    @abstractmethod
    def build_request(self, image: ImagePayload) -> Dict[str, Any]:
        """Keyword arguments for the SDK call made by `send`."""
        raise NotImplementedError

    @abstractmethod
    async def send(self, client: Any, request: Dict[str, Any]) -> Any:
        raise NotImplementedError

    @abstractmethod
    def parse_response(self, response: Any) -> str:
        """Raw text of the model reply."""
        raise NotImplementedError

    def error_details(self, exc: Exception) -> Tuple[Optional[str], Optional[str]]:
        """(message, type) from the provider's error payload, when it has one."""
        body = getattr(exc, "body", None)
        if isinstance(body, dict):
            error = body.get("error", body)
            if isinstance(error, dict):
                message = error.get("message")
                error_type = error.get("type") or error.get("code")
                return (
                    message if isinstance(message, str) else None,
                    error_type if isinstance(error_type, str) else None,
                )
        return None, None

    def is_quota_error(self, message: Optional[str], error_type: Optional[str]) -> bool:
        if error_type and error_type.lower() in self.quota_error_types:
            return True
        low = (message or "").lower()
        return any(marker in low for marker in self.quota_markers)

    def classify_error(self, exc: Exception) -> Tuple[ErrorKind, str]:
        message, error_type = self.error_details(exc)
        if self.is_quota_error(message or str(exc), error_type):
            return ErrorKind.QUOTA_EXCEEDED, QUOTA_EXCEEDED_MESSAGE
        return ErrorKind.PROVIDER, message or f"Failed to analyze image with {self.display_name}"

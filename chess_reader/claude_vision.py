# -*- coding: utf-8 -*-
"""Vision provider using Claude (Anthropic)."""

import logging
from typing import Any, Dict

from anthropic import AsyncAnthropic

from chess_pgn import config

from .base import QUOTA_MARKERS, VisionProvider
from .images import ImagePayload
from .prompts import FEN_PROMPT, SYSTEM_PROMPT

log = logging.getLogger(__name__)


class ClaudeVisionProvider(VisionProvider):
    name = "anthropic"
    display_name = "Claude"
    quota_markers = QUOTA_MARKERS + ("credit balance",)
    quota_error_types = frozenset({"insufficient_quota", "billing_error"})

    def default_model(self) -> str:
        return config.CLAUDE_VISION_MODEL

    def create_client(self, api_key: str) -> AsyncAnthropic:
        return AsyncAnthropic(api_key=api_key, max_retries=config.VISION_MAX_RETRIES)

    def build_request(self, image: ImagePayload) -> Dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "system": SYSTEM_PROMPT,
            "messages": [{
                "role": "user",
                "content": [
                    {"type": "text", "text": FEN_PROMPT},
                    {"type": "image", "source": {"type": "base64", "media_type": image.media_type, "data": image.data}},
                ],
            }],
        }

    async def send(self, client: AsyncAnthropic, request: Dict[str, Any]) -> Any:
        log.info(f"[Claude] Sending image to {self.model}")
        return await client.messages.create(**request)

    def parse_response(self, message: Any) -> str:
        text = ""
        for block in getattr(message, "content", []):
            if getattr(block, "type", None) == "text":
                text += block.text
        return text

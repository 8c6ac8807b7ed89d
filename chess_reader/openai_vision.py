# -*- coding: utf-8 -*-
"""OpenAI-compatible vision providers (OpenAI, DeepSeek)."""

import logging
from typing import Any, Dict, Optional

from openai import AsyncOpenAI

from chess_pgn import config

from .base import VisionProvider
from .images import ImagePayload
from .prompts import FEN_PROMPT, SYSTEM_PROMPT

log = logging.getLogger(__name__)


class OpenAIVisionProvider(VisionProvider):
    """GPT-4o chat completions with an inline data-URL image."""

    name = "openai"
    display_name = "OpenAI"
    system_prompt: Optional[str] = SYSTEM_PROMPT

    def default_model(self) -> str:
        return config.OPENAI_VISION_MODEL

    def base_url(self) -> Optional[str]:
        return None

    def create_client(self, api_key: str) -> AsyncOpenAI:
        return AsyncOpenAI(api_key=api_key, base_url=self.base_url(), max_retries=config.VISION_MAX_RETRIES)

    def build_request(self, image: ImagePayload) -> Dict[str, Any]:
        messages = []
        if self.system_prompt:
            messages.append({"role": "system", "content": self.system_prompt})
        messages.append({
            "role": "user",
            "content": [
                {"type": "text", "text": FEN_PROMPT},
                {"type": "image_url", "image_url": {"url": image.data_url}},
            ],
        })
        return {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

    async def send(self, client: AsyncOpenAI, request: Dict[str, Any]) -> Any:
        log.info(f"[{self.display_name}] Sending image to {self.model}")
        return await client.chat.completions.create(**request)

    def parse_response(self, response: Any) -> str:
        return response.choices[0].message.content or ""


class DeepSeekVisionProvider(OpenAIVisionProvider):
    """DeepSeek exposes the same chat-completions API under its own base URL."""

    name = "deepseek"
    display_name = "DeepSeek"
    system_prompt = None

    def default_model(self) -> str:
        return config.DEEPSEEK_VISION_MODEL

    def base_url(self) -> Optional[str]:
        return config.DEEPSEEK_BASE_URL

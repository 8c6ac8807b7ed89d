# -*- coding: utf-8 -*-
"""Pick a vision provider, send the image, normalize the outcome.

Nothing raised by a provider SDK leaves this module: every failure becomes an
:class:`AnalysisResult` with an :class:`ErrorKind`.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Mapping, Optional, Type

from chess_pgn import config
from chess_pgn.board import validate_fen
from chess_pgn.errors import (
    ConfigurationError,
    ErrorKind,
    EXTRACTION_FAILED_MESSAGE,
    InvalidImageError,
)
from chess_pgn.extraction import extract_position

from .base import VisionProvider
from .claude_vision import ClaudeVisionProvider
from .images import ImageInput, encode_image
from .openai_vision import DeepSeekVisionProvider, OpenAIVisionProvider
from .results import AnalysisResult, ProviderConfig
from .storage import KeyValueStore, load_provider_config

log = logging.getLogger(__name__)

PROVIDERS: Dict[str, Type[VisionProvider]] = {
    cls.name: cls for cls in (DeepSeekVisionProvider, OpenAIVisionProvider, ClaudeVisionProvider)
}

# Order matters: the first key found picks the provider.
PROVIDER_KEY_ENVS = [
    ("deepseek", config.DEEPSEEK_KEY_ENV),
    ("openai", config.OPENAI_KEY_ENV),
    ("anthropic", config.ANTHROPIC_KEY_ENV),
]


def _unsupported(name: str) -> ConfigurationError:
    return ConfigurationError(
        f"Unsupported vision provider: {name!r}. Choose one of: {', '.join(sorted(PROVIDERS))}."
    )


def get_provider(name: str) -> VisionProvider:
    cls = PROVIDERS.get((name or "").strip().lower())
    if cls is None:
        raise _unsupported(name)
    return cls()


def configured_providers(env: Optional[Mapping[str, str]] = None) -> List[str]:
    env = os.environ if env is None else env
    return [name for name, env_name in PROVIDER_KEY_ENVS if (env.get(env_name) or "").strip()]


def resolve_provider_config(
    store: Optional[KeyValueStore] = None,
    env: Optional[Mapping[str, str]] = None,
    preferred: Optional[str] = None,
) -> ProviderConfig:
    """Stored settings first, then a preferred provider, then the first key found.

    An explicit `preferred` argument skips the store.
    """
    env = os.environ if env is None else env

    if store is not None and not preferred:
        stored = load_provider_config(store)
        if stored is not None:
            return stored

    preferred = (preferred or config.VISION_PROVIDER or "").strip().lower()
    if preferred:
        env_name = dict(PROVIDER_KEY_ENVS).get(preferred)
        if env_name is None:
            raise _unsupported(preferred)
        api_key = (env.get(env_name) or "").strip()
        if not api_key:
            raise ConfigurationError(f"{env_name} is not set for provider {preferred!r}.")
        return ProviderConfig(provider=preferred, api_key=api_key)

    for name, env_name in PROVIDER_KEY_ENVS:
        api_key = (env.get(env_name) or "").strip()
        if api_key:
            return ProviderConfig(provider=name, api_key=api_key)

    raise ConfigurationError(
        "No API configuration found. Set DEEPSEEK_API_KEY, OPENAI_API_KEY or ANTHROPIC_API_KEY."
    )


def provider_for(provider_config: ProviderConfig) -> VisionProvider:
    if not provider_config.api_key or not provider_config.api_key.strip():
        raise ConfigurationError(f"API key for provider {provider_config.provider!r} is empty.")
    return get_provider(provider_config.provider)


def result_from_text(text: str, provider: Optional[str] = None) -> AnalysisResult:
    """Run the extractor over a model reply and wrap the outcome."""
    position = extract_position(text)

    if position.fen:
        valid, problem = validate_fen(position.fen)
        if not valid:
            log.warning(f"Extracted FEN is not a legal position: {problem}")
        return AnalysisResult.ok(position.pgn, fen=position.fen, provider=provider,
                                 warning=None if valid else problem)

    if position.is_empty:
        return AnalysisResult.failure(ErrorKind.EXTRACTION_FAILED, EXTRACTION_FAILED_MESSAGE, provider=provider)

    return AnalysisResult.ok(position.pgn, provider=provider)


async def analyze_chess_image(
    image: ImageInput,
    provider_config: Optional[ProviderConfig] = None,
    *,
    store: Optional[KeyValueStore] = None,
    preferred: Optional[str] = None,
    client: Any = None,
) -> AnalysisResult:
    """Analyze a chessboard image and return the position as PGN.

    Args:
        image: bytes, a path, base64 text, a data URL or an ImagePayload.
        provider_config: provider + credential. Resolved from `store` and the
            environment when omitted.
        store: settings store consulted when `provider_config` is None.
        preferred: provider to resolve from the environment, bypassing `store`.
        client: pre-built SDK client; one is created (and closed) otherwise.
    """
    try:
        if provider_config is None:
            provider_config = resolve_provider_config(store, preferred=preferred)
        provider = provider_for(provider_config)
    except ConfigurationError as e:
        log.error(f"Vision configuration error: {e}")
        return AnalysisResult.failure(e.kind, str(e), provider=getattr(provider_config, "provider", None))

    try:
        payload = await encode_image(image)
    except InvalidImageError as e:
        log.warning(f"Rejected image: {e}")
        return AnalysisResult.failure(e.kind, str(e), provider=provider.name)

    request = provider.build_request(payload)
    owns_client = client is None

    try:
        if owns_client:
            client = provider.create_client(provider_config.api_key)
        response = await provider.send(client, request)
        text = provider.parse_response(response)
    except Exception as exc:
        kind, message = provider.classify_error(exc)
        log.warning(f"[{provider.display_name}] API call failed ({kind.value}): {exc}")
        return AnalysisResult.failure(kind, message, provider=provider.name)
    finally:
        if owns_client and client is not None:
            await client.close()

    if config.VISION_LOG_RESPONSES:
        log.info(f"[{provider.display_name}] RAW RESPONSE: {text[:200]}")

    return result_from_text(text, provider=provider.name)

# -*- coding: utf-8 -*-
"""
Chessboard Reader Module
"""

from .base import VisionProvider
from .openai_vision import OpenAIVisionProvider, DeepSeekVisionProvider
from .claude_vision import ClaudeVisionProvider
from .images import ImagePayload, encode_image
from .results import AnalysisResult, ProviderConfig
from .storage import KeyValueStore, MemoryStore, JsonFileStore, load_provider_config, save_provider_config
from .dispatcher import PROVIDERS, analyze_chess_image, resolve_provider_config, configured_providers

__all__ = [
    "VisionProvider", "OpenAIVisionProvider", "DeepSeekVisionProvider", "ClaudeVisionProvider",
    "ImagePayload", "encode_image",
    "AnalysisResult", "ProviderConfig",
    "KeyValueStore", "MemoryStore", "JsonFileStore", "load_provider_config", "save_provider_config",
    "PROVIDERS", "analyze_chess_image", "resolve_provider_config", "configured_providers",
]

# -*- coding: utf-8 -*-
"""Configuration constants for chess image analysis."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

log = logging.getLogger("chess_pgn")

# Provider credentials (environment variable names, checked in this order)
DEEPSEEK_KEY_ENV = "DEEPSEEK_API_KEY"
OPENAI_KEY_ENV = "OPENAI_API_KEY"
ANTHROPIC_KEY_ENV = "ANTHROPIC_API_KEY"

# Explicit provider selection, empty means "first key found"
VISION_PROVIDER = os.getenv("CHESS_VISION_PROVIDER", "").strip().lower()

# Vision API configuration
OPENAI_VISION_MODEL = os.getenv("OPENAI_VISION_MODEL", "gpt-4o")
DEEPSEEK_VISION_MODEL = os.getenv("DEEPSEEK_VISION_MODEL", "deepseek-vision")
DEEPSEEK_BASE_URL = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com/v1")
CLAUDE_VISION_MODEL = os.getenv("CLAUDE_VISION_MODEL", "claude-haiku-4-5")
VISION_TEMPERATURE = float(os.getenv("CHESS_VISION_TEMPERATURE", "0.1"))
VISION_MAX_TOKENS = int(os.getenv("CHESS_VISION_MAX_TOKENS", "1000"))
VISION_MAX_RETRIES = int(os.getenv("CHESS_VISION_MAX_RETRIES", "0"))
VISION_LOG_RESPONSES = os.getenv("CHESS_VISION_LOG_RESPONSES", "true").lower() not in {"0", "false", "no"}

# Analysis site
ANALYSIS_SITE_URL = os.getenv("CHESS_ANALYSIS_SITE", "https://lichess.org").rstrip("/")
ANALYSIS_PATH = "/analysis/"
IMPORT_PATH = os.getenv("CHESS_IMPORT_PATH", "/paste")
FORM_CLEANUP_DELAY = float(os.getenv("CHESS_FORM_CLEANUP_DELAY", "5.0"))

# Local provider settings store
CONFIG_STORE_PATH = os.getenv("CHESS_CONFIG_PATH", ".chess_config.json")

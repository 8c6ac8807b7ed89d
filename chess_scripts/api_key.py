# -*- coding: utf-8 -*-
"""Vision provider API key configuration."""

import os
from pathlib import Path

from chess_pgn import config
from chess_reader import JsonFileStore, ProviderConfig, save_provider_config
from chess_reader.dispatcher import PROVIDER_KEY_ENVS

from .common import print_header

ENV_FILE = Path(".env")

KEY_PAGES = {
    "deepseek": "https://platform.deepseek.com/api_keys",
    "openai": "https://platform.openai.com/api-keys",
    "anthropic": "https://console.anthropic.com/settings/keys",
}


def env_name_for(provider: str) -> str:
    env_name = dict(PROVIDER_KEY_ENVS).get(provider)
    if env_name is None:
        raise SystemExit(f"Unknown provider: {provider}")
    return env_name


def try_load_from_env_file(env_name: str, env_file: Path = ENV_FILE) -> str | None:
    """Try to load an API key from the .env file."""
    if not env_file.exists():
        return None
    for line in env_file.read_text(encoding="utf-8").splitlines():
        if line.strip().startswith(f"{env_name}="):
            key = line.split("=", 1)[1].strip().strip('"\'')
            return key or None
    return None


def write_env_key(env_name: str, api_key: str, env_file: Path = ENV_FILE) -> None:
    """Set `env_name` in the .env file, keeping the other lines."""
    lines = []
    if env_file.exists():
        lines = [
            line for line in env_file.read_text(encoding="utf-8").splitlines()
            if not line.strip().startswith(f"{env_name}=")
        ]
    lines.append(f"{env_name}={api_key}")
    env_file.write_text("\n".join(lines) + "\n", encoding="utf-8")


def setup_api_key(provider: str = "openai", interactive: bool = True, remember: bool = False) -> bool:
    """Configure a provider key from environment, .env file, or user input."""
    print_header(f"Setting Up {provider} API Key")
    env_name = env_name_for(provider)

    api_key = os.getenv(env_name)
    if api_key:
        print("API key found in environment")
    else:
        api_key = try_load_from_env_file(env_name)
        if api_key:
            os.environ[env_name] = api_key
            print("API key loaded from .env")

    if not api_key and interactive:
        print(f"\n{env_name} not found.")
        print(f"Get one at: {KEY_PAGES[provider]}")
        choice = input("\nEnter key now? (y/N): ").strip().lower()
        if choice == "y":
            api_key = input("API key: ").strip()
            if api_key:
                write_env_key(env_name, api_key)
                os.environ[env_name] = api_key
                print("API key saved to .env")

    if not api_key:
        print(f"{env_name} not set. You can create .env with {env_name}=...")
        return False

    if remember:
        save_provider_config(JsonFileStore(config.CONFIG_STORE_PATH), ProviderConfig(provider, api_key))
        print(f"Provider '{provider}' saved to {config.CONFIG_STORE_PATH}")
    return True

# -*- coding: utf-8 -*-
"""Key-value store capability for persisted provider settings."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .results import ProviderConfig

log = logging.getLogger(__name__)

PROVIDER_KEY = "provider"
API_KEY_KEY = "api_key"


class KeyValueStore(ABC):
    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """Flat JSON object on disk; rewritten on every `set`."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            log.warning(f"Ignoring unreadable settings file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _stored_text(store: KeyValueStore, key: str) -> str:
    value = store.get(key)
    if value is not None and not isinstance(value, str):
        log.warning(f"Ignoring non-text setting {key!r} ({type(value).__name__})")
        return ""
    return (value or "").strip()


def load_provider_config(store: KeyValueStore) -> Optional[ProviderConfig]:
    provider = _stored_text(store, PROVIDER_KEY).lower()
    api_key = _stored_text(store, API_KEY_KEY)
    if not provider or not api_key:
        return None
    return ProviderConfig(provider=provider, api_key=api_key)


def save_provider_config(store: KeyValueStore, provider_config: ProviderConfig) -> None:
    store.set(PROVIDER_KEY, provider_config.provider)
    store.set(API_KEY_KEY, provider_config.api_key)

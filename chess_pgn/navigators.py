# -*- coding: utf-8 -*-
"""Navigator capability: how an analysis link is actually opened."""

from __future__ import annotations

import asyncio
import html
import logging
import os
import tempfile
import webbrowser
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Dict, Optional

from .config import FORM_CLEANUP_DELAY
from .errors import LinkConstructionError

log = logging.getLogger(__name__)


class Navigator(ABC):
    """Opens URLs and submits forms in a new browsing context."""

    @abstractmethod
    async def open_url(self, url: str) -> None:
        raise NotImplementedError

    @abstractmethod
    async def submit_form(self, action: str, fields: Dict[str, str]) -> None:
        """POST `fields` to `action` in a new browsing context."""
        raise NotImplementedError


def render_autosubmit_form(action: str, fields: Dict[str, str]) -> str:
    inputs = "\n".join(
        f'<input type="hidden" name="{html.escape(name, quote=True)}" value="{html.escape(value, quote=True)}">'
        for name, value in fields.items()
    )
    return (
        "<!DOCTYPE html>\n"
        "<html><head><meta charset=\"utf-8\"><title>Opening analysis...</title></head>\n"
        "<body onload=\"document.forms[0].submit()\">\n"
        f"<form method=\"POST\" action=\"{html.escape(action, quote=True)}\">\n"
        f"{inputs}\n"
        "<noscript><button type=\"submit\">Open analysis</button></noscript>\n"
        "</form>\n"
        "</body></html>\n"
    )


class BrowserNavigator(Navigator):
    """Navigator backed by the local web browser.

    Form submissions go through a temporary self-submitting HTML page that is
    removed once the browser had time to load it.
    """

    def __init__(
        self,
        cleanup_delay: Optional[float] = None,
        opener: Callable[[str], bool] = webbrowser.open_new_tab,
    ):
        self.cleanup_delay = FORM_CLEANUP_DELAY if cleanup_delay is None else float(cleanup_delay)
        self._opener = opener

    async def open_url(self, url: str) -> None:
        opened = await asyncio.to_thread(self._opener, url)
        if not opened:
            raise LinkConstructionError(f"No browser available to open {url}")

    async def submit_form(self, action: str, fields: Dict[str, str]) -> None:
        fd, path = tempfile.mkstemp(prefix="chess_form_", suffix=".html")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(render_autosubmit_form(action, fields))
            log.debug(f"Submitting form to {action} via {path}")
            await self.open_url(Path(path).as_uri())
            if self.cleanup_delay > 0:
                await asyncio.sleep(self.cleanup_delay)
        finally:
            try:
                os.remove(path)
            except OSError as e:
                log.debug(f"Could not remove form page {path}: {e}")

#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Interface messages
==================
A minimal message store for the reference host: English defaults shipped in
``library_skin/i18n/en.json``, optionally overridden per site.

``{{SITENAME}}`` is substituted; ``$1``, ``$2``… are positional parameters.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from library_skin.core.html import escape


_I18N_DIR = Path(__file__).resolve().parent.parent / "i18n"


# -----------------------------------------------------------------------------

@lru_cache
def load_messages(lang: str = "en") -> dict[str, str]:
    path = _I18N_DIR / f"{lang}.json"
    return json.loads(path.read_text(encoding="utf-8"))


# -----------------------------------------------------------------------------

class Message:

    def __init__(self, key: str, raw: str | None, site_name: str = "", params: tuple = ()):
        self.key = key
        self._raw = raw
        self._site_name = site_name
        self._params = params

    def params(self, *params) -> "Message":
        return Message(self.key, self._raw, self._site_name, self._params + params)

    def exists(self) -> bool:
        return self._raw is not None

    def is_disabled(self) -> bool:
        """Missing, empty, or a lone dash."""
        return self._raw is None or self._raw.strip() in ("", "-")

    def text(self) -> str:
        if self._raw is None:
            return f"⧼{self.key}⧽"
        text = self._raw.replace("{{SITENAME}}", self._site_name)
        for i, param in enumerate(self._params, start=1):
            text = text.replace(f"${i}", str(param))
        return text

    def escaped(self) -> str:
        return escape(self.text())

    def __str__(self) -> str:
        return self.escaped()

    def __repr__(self) -> str:
        return f"Message({self.key!r})"


# -----------------------------------------------------------------------------

class MessageCatalog:

    def __init__(self, site_name: str, overrides: Mapping[str, str] | None = None,
                 lang: str = "en"):
        self.site_name = site_name
        self._messages = {**load_messages(lang), **(overrides or {})}

    def msg(self, key: str, *params) -> Message:
        return Message(key, self._messages.get(key), self.site_name, params)


# -----------------------------------------------------------------------------

#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Small HTML helpers
==================
- ``ClassList``: ordered, duplicate-free set of CSS class tokens
- ``expand_attributes`` / ``element``: attribute and tag serialisation
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import html as _html
from typing import Any, Iterable, Mapping


# -----------------------------------------------------------------------------

class ClassList:
    """CSS class tokens in insertion order.

    Tokens are only joined into a string at the boundary (``str()``), so
    adding a class that is already present never produces a duplicate.
    """

    def __init__(self, classes: str | Iterable[str] | None = None):
        self._tokens: list[str] = []
        if classes:
            self.add(*self._split(classes))

    @staticmethod
    def _split(classes: str | Iterable[str]) -> list[str]:
        if isinstance(classes, str):
            return classes.split()
        tokens: list[str] = []
        for c in classes:
            tokens.extend(str(c).split())
        return tokens

    def add(self, *tokens: str) -> "ClassList":
        for token in tokens:
            if token and token not in self._tokens:
                self._tokens.append(token)
        return self

    def prepend(self, *tokens: str) -> "ClassList":
        fresh = [t for t in tokens if t and t not in self._tokens]
        self._tokens[:0] = fresh
        return self

    def contains_substring(self, needle: str) -> bool:
        """Case-insensitive substring test over the joined class string."""
        return needle.lower() in str(self).lower()

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self):
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)

    def __str__(self) -> str:
        return " ".join(self._tokens)

    def __repr__(self) -> str:
        return f"ClassList({str(self)!r})"


# -----------------------------------------------------------------------------

def with_class(item: Mapping[str, Any], *tokens: str) -> dict[str, Any]:
    """Return a copy of a navigation item with *tokens* put in front of its class."""
    updated = dict(item)
    updated["class"] = str(ClassList(item.get("class") or "").prepend(*tokens))
    return updated


# -----------------------------------------------------------------------------

def escape(value: Any) -> str:
    return _html.escape(str(value), quote=True)


# -----------------------------------------------------------------------------

def expand_attributes(attribs: Mapping[str, Any] | None) -> str:
    """Serialise attributes as ` name="value"` pairs.

    ``None`` and ``False`` drop the attribute, ``True`` renders it bare.
    """
    if not attribs:
        return ""
    parts = []
    for name, value in attribs.items():
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        if isinstance(value, ClassList):
            value = str(value)
            if not value:
                continue
        parts.append(f' {name}="{escape(value)}"')
    return "".join(parts)


# -----------------------------------------------------------------------------

def element(tag: str, attribs: Mapping[str, Any] | None = None, text: str = "") -> str:
    """Element with escaped text content."""
    return raw_element(tag, attribs, escape(text))


def raw_element(tag: str, attribs: Mapping[str, Any] | None = None, contents: str = "") -> str:
    """Element whose contents are already HTML."""
    return f"<{tag}{expand_attributes(attribs)}>{contents}</{tag}>"


# -----------------------------------------------------------------------------

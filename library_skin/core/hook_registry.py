#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Hook registry
=============
A table of named extension points.  Handlers run synchronously, in the order
they were registered.

- ``run``      — call every handler, return their results
- ``run_html`` — concatenate the HTML fragments returned by handlers
- ``apply``    — thread a value through handlers that return an updated copy
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, Mapping

log = logging.getLogger(__name__)

Handler = Callable[..., Any]


# -----------------------------------------------------------------------------

class HookRegistry:

    def __init__(self, deprecated: Mapping[str, str] | None = None):
        self._handlers: dict[str, list[Handler]] = defaultdict(list)
        self._deprecated: dict[str, str] = dict(deprecated or {})

    def register(self, name: str, handler: Handler) -> None:
        self._handlers[name].append(handler)

    def handlers(self, name: str) -> list[Handler]:
        return list(self._handlers.get(name, ()))

    def has_handlers(self, name: str) -> bool:
        return bool(self._handlers.get(name))

    def _warn_if_deprecated(self, name: str) -> None:
        since = self._deprecated.get(name)
        if since and self.has_handlers(name):
            log.warning("Use of %s hook (deprecated in %s)", name, since)

    # ── Dispatch ──────────────────────────────────────────────────────────

    def run(self, name: str, *args: Any, **kwargs: Any) -> list[Any]:
        self._warn_if_deprecated(name)
        results = []
        for handler in self.handlers(name):
            log.debug("Running %s handler %s", name, getattr(handler, "__name__", handler))
            results.append(handler(*args, **kwargs))
        return results

    def run_html(self, name: str, *args: Any, **kwargs: Any) -> str:
        """Run *name* and join the non-empty string results."""
        return "".join(r for r in self.run(name, *args, **kwargs) if isinstance(r, str) and r)

    def apply(self, name: str, value: Any, *args: Any, **kwargs: Any) -> Any:
        """Pass *value* through each handler as ``handler(*args, value, **kwargs)``.

        A handler returning ``None`` leaves the value as it was.
        """
        self._warn_if_deprecated(name)
        for handler in self.handlers(name):
            result = handler(*args, value, **kwargs)
            if result is not None:
                value = result
        return value


# -----------------------------------------------------------------------------

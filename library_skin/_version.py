#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""Package version: the installed distribution's, else the source checkout's."""
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

DIST_NAME = "library-skin"

_PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


# -----------------------------------------------------------------------------

def _version_from_pyproject(path: Path = _PYPROJECT) -> str:
    if not path.is_file():
        return "0.0.0"
    match = re.search(r'^version\s*=\s*"([^"]+)"', path.read_text(encoding="utf-8"), re.MULTILINE)
    return match.group(1) if match else "0.0.0"


def get_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return _version_from_pyproject()


__version__: str = get_version()


# -----------------------------------------------------------------------------

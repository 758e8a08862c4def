#!/usr/bin/env python
#
#
# -----------------------------------------------------------------------------
"""
Template parser
===============
Expands a skin data document against ``library_skin/templates/<name>.html``.

Template keys contain dashes (``html-title``, ``data-sidebar``), so templates
read them by subscript from the root ``data`` variable.  ``html-`` values are
already escaped by the host and are marked ``|safe`` in the templates;
everything else is autoescaped.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


# -----------------------------------------------------------------------------

class TemplateParser:

    def __init__(self, template_dir: Path | str = TEMPLATE_DIR):
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def process_template(self, name: str, data: Mapping[str, Any]) -> str:
        """Render template *name* (no folder, no extension) with *data*."""
        template = self.env.get_template(f"{name}.html")
        return template.render(data=data)


# -----------------------------------------------------------------------------

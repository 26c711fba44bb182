# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from typing import Any, Sequence
from flask import render_template
from jinja2 import TemplateError
from .errors import RenderError

BASE_TEMPLATE = "base.html"

def render(template_names: Sequence[str], data: Any) -> str:
    """Render ``data`` through a (layout, page) pair of templates.

    The page template extends whatever name it receives as ``layout``, so the
    caller decides which base layout wraps it. Must run inside an app context.
    """
    if len(template_names) != 2:
        raise ValueError(f"Expected a (layout, page) template pair, got {template_names!r}")
    layout, page = template_names
    try:
        return render_template(page, layout=layout, data=data)
    except TemplateError as e:
        raise RenderError(f"Failed to render {page} with {layout}: {e}") from e

def render_page(page: str, data: Any) -> str:
    return render((BASE_TEMPLATE, page), data)

# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import markdown
from markupsafe import Markup
from .errors import RenderError

MARKDOWN_EXTENSIONS = ["fenced_code", "codehilite", "tables"]

def render_markdown(text: str, style: str = "dracula") -> Markup:
    """Convert a Markdown body to HTML, highlighting fenced code with Pygments.

    Styles are inlined (``noclasses``) so pages need no extra stylesheet for
    the highlighting theme.
    """
    # A Markdown instance keeps state between conversions, so build one per document
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs={
            "codehilite": {
                "pygments_style": style,
                "noclasses": True,
                "guess_lang": False,
            }
        },
    )
    try:
        return Markup(md.convert(text))
    except Exception as e:
        raise RenderError(f"Failed to render Markdown: {e}") from e

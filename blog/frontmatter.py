# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Front matter extraction.

Posts may begin with a YAML block delimited by ``---`` lines::

    ---
    title: Hello World
    date: 2024-05-01 09:30:00
    ---

Only ``title`` and ``date`` are read. Anything that goes wrong while parsing
the block is swallowed: a post with broken front matter is
still published, with the title and date derived from the file itself.
"""

from datetime import date, datetime, time, timezone
from logging import getLogger
from typing import NamedTuple, Optional, Tuple

import frontmatter

logger = getLogger(__name__)

class FrontMatter(NamedTuple):
    title: str = ""
    date: Optional[datetime] = None

EMPTY = FrontMatter()

# 0001-01-01T00:00:00Z, the unset value for dates written by other tools
ZERO_DATE = datetime(1, 1, 1, tzinfo=timezone.utc)

def _coerce_date(value) -> Optional[datetime]:
    """Turn whatever YAML produced for ``date`` into an aware datetime, or None."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, (int, float)):
        if value == 0:
            return None
        try:
            return datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug("Ignoring out of range front matter timestamp %r", value)
            return None
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            logger.debug("Ignoring unparseable front matter date %r", value)
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    if parsed == ZERO_DATE:
        return None
    return parsed

def _coerce_title(value) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return ""
    return str(value).strip()

def extract(raw: bytes) -> Tuple[FrontMatter, str]:
    """Split ``raw`` into its front matter and the Markdown body.

    Never raises. Without a (valid) front matter block the whole document is
    returned as the body together with an empty ``FrontMatter``.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Document is not valid UTF-8, skipping front matter")
        return EMPTY, raw.decode("utf-8", errors="replace")

    try:
        metadata, body = frontmatter.parse(text)
    except Exception as e:
        logger.debug(f"Malformed front matter, falling back to file metadata: {e}")
        return EMPTY, text

    if not metadata:
        return EMPTY, body

    return FrontMatter(
        title=_coerce_title(metadata.get("title")),
        date=_coerce_date(metadata.get("date")),
    ), body

# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from datetime import datetime, timezone
from logging import getLogger
from pathlib import Path
from string import capwords
from typing import Iterable, List
from markupsafe import Markup
from .errors import ContentError, PostNotFound
from .frontmatter import extract
from .markup import render_markdown
from .models.post import Post

logger = getLogger(__name__)

MARKDOWN_SUFFIX = ".md"

def slug_for(path: Path) -> str:
    """The URL key of a post: its filename without the Markdown extension."""
    name = path.name
    if name.endswith(MARKDOWN_SUFFIX):
        return name[:-len(MARKDOWN_SUFFIX)]
    return path.stem

def clean_title(filename: str) -> str:
    """Build a display title from a filename, e.g. ``my-first_post.md`` -> ``My First Post``."""
    title = filename[:-len(MARKDOWN_SUFFIX)] if filename.endswith(MARKDOWN_SUFFIX) else Path(filename).stem
    title = title.replace("-", " ").replace("_", " ")
    return capwords(title)

def load_post(path: Path, style: str = "dracula") -> Post:
    """Read one Markdown file and turn it into a Post.

    Front matter problems never fail the load. Filesystem errors (read or stat)
    and rendering errors do.
    """
    path = Path(path)
    raw = path.read_bytes()
    meta, body = extract(raw)

    slug = slug_for(path)
    title = meta.title or clean_title(path.name)

    date = meta.date
    if date is None:
        date = datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)

    content = render_markdown(body, style=style)
    logger.debug(f"Loaded post {slug!r} ({len(raw)} bytes, dated {date.isoformat()})")
    return Post(title=title, date=date, slug=slug, content=content)

def list_sources(directory: Path, pattern: str = "*" + MARKDOWN_SUFFIX) -> List[Path]:
    """Markdown files in ``directory`` matching ``pattern``, ordered by filename.

    A missing directory simply has no posts.
    """
    try:
        matches = Path(directory).glob(pattern)
        return sorted((p for p in matches if p.is_file() and is_safe_slug(slug_for(p))), key=lambda p: p.name)
    except (ValueError, NotImplementedError) as e:
        raise ContentError(f"Invalid glob pattern {pattern!r}: {e}") from e

def load_posts(directory: Path, pattern: str = "*" + MARKDOWN_SUFFIX, style: str = "dracula") -> List[Post]:
    """Load every post in ``directory``, newest first.

    The first post that fails to load aborts the whole collection. Posts that
    share a date keep filename order, since ``sorted`` is stable.
    """
    posts = [load_post(path, style=style) for path in list_sources(directory, pattern)]
    return sorted(posts, key=lambda post: post.date, reverse=True)

def is_safe_slug(slug: str) -> bool:
    """Slugs name a file inside a content directory, never a path out of it."""
    return slug not in ("", ".", "..") and "/" not in slug and "\\" not in slug and "\0" not in slug

def find_post(slug: str, directories: Iterable[Path], style: str = "dracula") -> Post:
    """Load the post named ``slug`` from the first directory that has it.

    Raises PostNotFound when no directory holds ``<slug>.md``.
    """
    if not is_safe_slug(slug):
        raise PostNotFound(slug)

    for directory in directories:
        candidate = Path(directory) / f"{slug}{MARKDOWN_SUFFIX}"
        if candidate.is_file():
            return load_post(candidate, style=style)
        logger.debug(f"Post {slug!r} not in {directory}")

    raise PostNotFound(slug)

def load_page(path: Path, style: str = "dracula") -> Markup:
    """Render a standalone Markdown page (about, contact) without building a Post."""
    _, body = extract(Path(path).read_bytes())
    return render_markdown(body, style=style)

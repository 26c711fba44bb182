# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from pathlib import Path
from typing import Dict, List
from flask import Blueprint, abort, current_app
from ..content import find_post, list_sources, load_page, load_posts, slug_for
from ..errors import PostNotFound
from ..rendering import render_page

pages_bp = Blueprint('pages', __name__)

# Every page that exists regardless of content, and where the static
# generator writes it. Posts are added per slug on top of these.
STATIC_PAGES: Dict[str, str] = {
    "pages.home": "index.html",
    "pages.about": "about.html",
    "pages.contact": "contact.html",
    "pages.thoughts": "thoughts.html",
}
POST_PAGE = "post/{slug}/index.html"

def content_path(key: str) -> Path:
    """Resolve a configured content directory against CONTENT_ROOT."""
    return Path(current_app.config["CONTENT_ROOT"]) / current_app.config[key]

def post_directories() -> List[Path]:
    """Directories searched for a post, in lookup order."""
    return [content_path("POSTS_DIR"), content_path("THOUGHTS_DIR")]

def all_slugs() -> List[str]:
    """Every slug that has a post page, primary directory first, without duplicates."""
    pattern = current_app.config["POST_PATTERN"]
    slugs: List[str] = []
    for directory in post_directories():
        for path in list_sources(directory, pattern):
            slug = slug_for(path)
            if slug not in slugs:
                slugs.append(slug)
    return slugs

def _style() -> str:
    return current_app.config["HIGHLIGHT_STYLE"]

def _nav_page(name: str, title: str) -> str:
    content = load_page(content_path("NAV_DIR") / f"{name}.md", style=_style())
    return render_page("page.html", {"title": title, "content": content})

@pages_bp.route("/")
def home():
    """Post listing for the primary content directory."""
    posts = load_posts(content_path("POSTS_DIR"), current_app.config["POST_PATTERN"], style=_style())
    return render_page("home.html", {"title": current_app.config["SITE_TITLE"], "posts": posts})

@pages_bp.route("/about")
def about():
    return _nav_page("about", "About Me")

@pages_bp.route("/contact")
def contact():
    return _nav_page("contact", "Contact Me")

@pages_bp.route("/thoughts")
def thoughts():
    """Secondary section: optional intro page followed by its own post listing."""
    intro_path = content_path("NAV_DIR") / "thoughts.md"
    intro = load_page(intro_path, style=_style()) if intro_path.is_file() else None
    posts = load_posts(content_path("THOUGHTS_DIR"), current_app.config["POST_PATTERN"], style=_style())
    return render_page("thoughts.html", {"title": "Thoughts", "intro": intro, "posts": posts})

@pages_bp.route("/post/<slug>")
def post(slug: str):
    try:
        found = find_post(slug, post_directories(), style=_style())
    except PostNotFound as e:
        abort(404, description=str(e))
    return render_page("post.html", found)

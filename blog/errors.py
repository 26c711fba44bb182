# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

class BlogError(Exception):
    """Base class for every error raised by the blog engine."""

class ContentError(BlogError):
    """The content directories could not be enumerated."""

class RenderError(BlogError):
    """Markdown conversion or template rendering failed."""

class PostNotFound(BlogError, LookupError):
    """No Markdown file exists for the requested slug."""

    def __init__(self, slug: str):
        super().__init__(f"No post with slug {slug!r}")
        self.slug = slug

class GenerationError(BlogError):
    """A page could not be produced while generating the static site."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"{url} returned HTTP {status_code}")
        self.url = url
        self.status_code = status_code

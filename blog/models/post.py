# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT
from datetime import datetime
from markupsafe import Markup

class Post:
    """A single rendered blog post."""
    title: str
    date: datetime # always timezone-aware
    slug: str
    content: Markup # rendered HTML, templates must not escape it again

    def __init__(self, title: str, date: datetime, slug: str, content: Markup):
        self.title = title
        self.date = date
        self.slug = slug
        self.content = content

    def __repr__(self):
        content_bytes = len(str(self.content).encode('utf-8'))
        return f"<Post slug=\"{self.slug}\" title=\"{self.title}\" date=\"{self.date.isoformat()}\", contentBytes={content_bytes}>"

#!/usr/bin/env python3
"""
Unit tests for front matter extraction, post loading and post collections.
"""

import os
import tempfile
import unittest
from datetime import datetime, timezone
from pathlib import Path
from unittest.mock import patch

from blog.content import clean_title, find_post, load_post, load_posts, slug_for
from blog.errors import ContentError, PostNotFound, RenderError
from blog.frontmatter import EMPTY, extract
from blog.markup import render_markdown

MTIME = 1700000000

def write_post(directory: Path, name: str, text: str, mtime: float = MTIME) -> Path:
    """Write a Markdown file with a fixed modification time."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(text, encoding="utf-8")
    os.utime(path, (mtime, mtime))
    return path

def dated(title: str, date: str, body: str = "Body text.") -> str:
    return f"---\ntitle: {title}\ndate: {date}\n---\n{body}\n"

class TestExtract(unittest.TestCase):
    """Test cases for the front matter extractor."""

    def test_title_and_date(self):
        meta, body = extract(b"---\ntitle: Hello World\ndate: 2024-03-01 10:30:00\n---\n# Heading\n")
        self.assertEqual(meta.title, "Hello World")
        self.assertEqual(meta.date, datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc))
        self.assertEqual(body.strip(), "# Heading")

    def test_bare_date_is_midnight_utc(self):
        meta, _ = extract(b"---\ndate: 2024-03-01\n---\nbody")
        self.assertEqual(meta.date, datetime(2024, 3, 1, tzinfo=timezone.utc))
        self.assertEqual(meta.title, "")

    def test_date_with_offset_is_kept(self):
        meta, _ = extract(b"---\ndate: '2024-03-01T10:30:00+02:00'\n---\nbody")
        self.assertEqual(meta.date, datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc))

    def test_no_front_matter(self):
        meta, body = extract(b"# Just a heading\n\nSome text.")
        self.assertEqual(meta, EMPTY)
        self.assertIn("Some text.", body)

    def test_malformed_yaml_returns_whole_document(self):
        raw = b"---\ntitle: [unclosed\n---\nBody"
        meta, body = extract(raw)
        self.assertEqual(meta, EMPTY)
        self.assertEqual(body, raw.decode("utf-8"))

    def test_unterminated_block(self):
        meta, body = extract(b"---\ntitle: Never closed\n\nBody")
        self.assertEqual(meta, EMPTY)
        self.assertIn("Body", body)

    def test_non_mapping_front_matter(self):
        meta, body = extract(b"---\n- a\n- list\n---\nBody")
        self.assertEqual(meta, EMPTY)

    def test_unparseable_date_is_dropped(self):
        meta, _ = extract(b"---\ntitle: Kept\ndate: sometime last spring\n---\nBody")
        self.assertEqual(meta.title, "Kept")
        self.assertIsNone(meta.date)

    def test_out_of_range_timestamp_is_dropped(self):
        for raw in (b"---\ntitle: Far Future\ndate: 1.0e+300\n---\nbody", b"---\ntitle: Far Future\ndate: 99999999999999999\n---\nbody"):
            meta, body = extract(raw)
            self.assertEqual(meta.title, "Far Future")
            self.assertIsNone(meta.date)
            self.assertEqual(body, "body")

    def test_zero_date_is_unset(self):
        for raw in (b"---\ndate: 0001-01-01 00:00:00\n---\nbody", b"---\ndate: 0001-01-01\n---\nbody", b"---\ndate: '0001-01-01T00:00:00Z'\n---\nbody"):
            meta, _ = extract(raw)
            self.assertIsNone(meta.date)

    def test_invalid_utf8_does_not_raise(self):
        meta, body = extract(b"---\ntitle: x\n---\n\xff\xfe body")
        self.assertEqual(meta, EMPTY)
        self.assertIn("body", body)

class TestHelpers(unittest.TestCase):

    def test_clean_title(self):
        self.assertEqual(clean_title("my-first_post.md"), "My First Post")
        self.assertEqual(clean_title("hello-world.md"), "Hello World")
        self.assertEqual(clean_title("don't-panic.md"), "Don't Panic")

    def test_slug_for(self):
        self.assertEqual(slug_for(Path("posts/hello-world.md")), "hello-world")
        self.assertEqual(slug_for(Path("posts/v1.2-notes.md")), "v1.2-notes")

    def test_render_markdown_highlights_code(self):
        html = render_markdown("```python\nprint('hi')\n```\n")
        self.assertIn("codehilite", html)
        self.assertIn("style=", html)

    def test_render_markdown_unknown_style(self):
        with self.assertRaises(RenderError):
            render_markdown("```python\nx = 1\n```\n", style="no-such-style")

class ContentTestCase(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)
        self.posts = self.root / "posts"
        self.thoughts = self.root / "thoughts"

    def tearDown(self):
        self._tmp.cleanup()

class TestLoadPost(ContentTestCase):
    """Test cases for loading a single post."""

    def test_front_matter_values_are_used(self):
        path = write_post(self.posts, "whatever.md", dated("Real Title", "2023-12-24 18:00:00", "Merry *Christmas*"))
        post = load_post(path)
        self.assertEqual(post.title, "Real Title")
        self.assertEqual(post.date, datetime(2023, 12, 24, 18, 0, tzinfo=timezone.utc))
        self.assertEqual(post.slug, "whatever")
        self.assertIn("<em>Christmas</em>", post.content)
        self.assertNotIn("Real Title", post.content)
        self.assertNotIn("date:", post.content)

    def test_without_front_matter(self):
        path = write_post(self.posts, "my-first_post.md", "Hello there.")
        post = load_post(path)
        self.assertEqual(post.title, "My First Post")
        self.assertEqual(post.date, datetime.fromtimestamp(MTIME, tz=timezone.utc))
        self.assertEqual(post.slug, "my-first_post")

    def test_malformed_front_matter_falls_back(self):
        path = write_post(self.posts, "broken-meta.md", "---\ntitle: [oops\ndate: 2020-01-01\n---\nText")
        post = load_post(path)
        self.assertEqual(post.title, "Broken Meta")
        self.assertEqual(post.date, datetime.fromtimestamp(MTIME, tz=timezone.utc))

    def test_empty_title_falls_back_to_filename(self):
        path = write_post(self.posts, "from-name.md", "---\ntitle: ''\ndate: 2022-02-02\n---\nText")
        post = load_post(path)
        self.assertEqual(post.title, "From Name")
        self.assertEqual(post.date, datetime(2022, 2, 2, tzinfo=timezone.utc))

    def test_missing_file_is_an_error(self):
        with self.assertRaises(FileNotFoundError):
            load_post(self.posts / "nope.md")

    def test_stat_failure_is_an_error(self):
        path = write_post(self.posts, "no-stat.md", "No front matter, so the date needs a stat.")
        with patch.object(Path, "stat", side_effect=PermissionError("denied")):
            with self.assertRaises(PermissionError):
                load_post(path)

    def test_render_failure_is_an_error(self):
        path = write_post(self.posts, "bad.md", "text")
        with patch("blog.content.render_markdown", side_effect=RenderError("boom")):
            with self.assertRaises(RenderError):
                load_post(path)

class TestLoadPosts(ContentTestCase):
    """Test cases for building a sorted post collection."""

    def test_sorted_newest_first(self):
        write_post(self.posts, "old.md", dated("Old", "2021-01-01"))
        write_post(self.posts, "new.md", dated("New", "2023-01-01"))
        write_post(self.posts, "middle.md", dated("Middle", "2022-01-01"))

        posts = load_posts(self.posts)
        self.assertEqual([p.slug for p in posts], ["new", "middle", "old"])
        dates = [p.date for p in posts]
        self.assertTrue(all(a > b for a, b in zip(dates, dates[1:])))

    def test_every_slug_once(self):
        names = [f"post-{i}" for i in range(6)]
        for i, name in enumerate(names):
            write_post(self.posts, f"{name}.md", "text", mtime=MTIME + i * 60)
        write_post(self.posts, "notes.txt", "not markdown")

        posts = load_posts(self.posts)
        self.assertEqual(len(posts), len(names))
        self.assertEqual(sorted(p.slug for p in posts), sorted(names))

    def test_equal_dates_keep_filename_order(self):
        for name in ("charlie.md", "alpha.md", "bravo.md"):
            write_post(self.posts, name, dated(name, "2024-01-01"))
        write_post(self.posts, "zulu.md", dated("Zulu", "2025-01-01"))

        posts = load_posts(self.posts)
        self.assertEqual([p.slug for p in posts], ["zulu", "alpha", "bravo", "charlie"])

    def test_missing_directory_has_no_posts(self):
        self.assertEqual(load_posts(self.root / "does-not-exist"), [])

    def test_one_bad_post_aborts_everything(self):
        write_post(self.posts, "fine.md", "fine")
        write_post(self.posts, "explodes.md", "EXPLODE")

        def fake_render(text, style="dracula"):
            if "EXPLODE" in text:
                raise RenderError("cannot render")
            return render_markdown(text, style=style)

        with patch("blog.content.render_markdown", side_effect=fake_render):
            with self.assertRaises(RenderError):
                load_posts(self.posts)

    def test_invalid_pattern(self):
        with self.assertRaises(ContentError):
            load_posts(self.posts, pattern="")

class TestFindPost(ContentTestCase):
    """Test cases for slug lookup across the content directories."""

    def test_primary_directory(self):
        write_post(self.posts, "hello-world.md", "primary")
        post = find_post("hello-world", [self.posts, self.thoughts])
        self.assertIn("primary", post.content)

    def test_falls_back_to_secondary(self):
        write_post(self.posts, "other.md", "other")
        write_post(self.thoughts, "musing.md", "secondary")
        post = find_post("musing", [self.posts, self.thoughts])
        self.assertEqual(post.slug, "musing")
        self.assertIn("secondary", post.content)

    def test_primary_wins(self):
        write_post(self.posts, "both.md", "from primary")
        write_post(self.thoughts, "both.md", "from secondary")
        post = find_post("both", [self.posts, self.thoughts])
        self.assertIn("from primary", post.content)

    def test_not_found(self):
        with self.assertRaises(PostNotFound) as ctx:
            find_post("ghost", [self.posts, self.thoughts])
        self.assertEqual(ctx.exception.slug, "ghost")
        self.assertIsInstance(ctx.exception, LookupError)

    def test_dot_prefixed_slug(self):
        write_post(self.posts, ".draft.md", "draft body")
        self.assertEqual([p.slug for p in load_posts(self.posts)], [".draft"])
        post = find_post(".draft", [self.posts, self.thoughts])
        self.assertIn("draft body", post.content)

    def test_unsafe_slugs_are_not_found(self):
        write_post(self.root, "secret.md", "outside the content directories")
        for slug in ("../secret", "..", ".", ""):
            with self.assertRaises(PostNotFound):
                find_post(slug, [self.posts, self.thoughts])

if __name__ == '__main__':
    unittest.main()

# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Static site generation.

Each page is requested through Flask's test client, which plays the part of
an in-memory response sink, so the exact same view code serves both the live
site and the generated one. The body of every 200 response is written to a
path that a static host maps back to the live URL:

    /                -> index.html
    /about           -> about.html
    /post/<slug>     -> post/<slug>/index.html

Generation stops at the first page that does not come back 200. Files written
before that point are left in place.
"""

import shutil
from logging import getLogger
from pathlib import Path
from typing import List, Optional, Tuple
from flask import Flask, url_for
from flask.testing import FlaskClient
from .bp.pages import POST_PAGE, STATIC_PAGES, all_slugs
from .errors import GenerationError

logger = getLogger(__name__)

def plan_pages(app: Flask) -> List[Tuple[str, str]]:
    """(url, output path) for every page of the site, fixed pages first."""
    with app.test_request_context():
        pages = [(url_for(endpoint), filename) for endpoint, filename in STATIC_PAGES.items()]
        for slug in all_slugs():
            pages.append((url_for("pages.post", slug=slug), POST_PAGE.format(slug=slug)))
    return pages

def generate_page(client: FlaskClient, url: str, destination: Path) -> Path:
    """Render ``url`` in memory and write the body to ``destination``."""
    response = client.get(url)
    if response.status_code != 200:
        raise GenerationError(url, response.status_code)

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(response.get_data())
    logger.info(f"Wrote {url} -> {destination}")
    return destination

def generate_static_site(app: Flask, output_dir: Optional[Path] = None, clean: bool = False) -> List[Path]:
    """Write the whole site under ``output_dir`` (defaults to OUTPUT_DIR).

    With ``clean`` the output directory is removed first, dropping pages of
    posts that no longer exist.
    """
    output = Path(output_dir if output_dir is not None else app.config["OUTPUT_DIR"])
    if clean and output.exists():
        logger.info(f"Removing previous output in {output}")
        shutil.rmtree(output)
    output.mkdir(parents=True, exist_ok=True)

    client = app.test_client()
    written = [generate_page(client, url, output / relative) for url, relative in plan_pages(app)]
    logger.info(f"Generated {len(written)} pages in {output}")
    return written

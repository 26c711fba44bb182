# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

from flask import Flask, request, g
import logging
import time
import traceback
from os import getenv
from typing import Any, Mapping, Optional
from .config import Config
from .utility import configure_logging
from .version import __version__

# Configure logging
level = (logging.DEBUG if getenv("FLASK_ENV") == "development" or getenv("DEBUG_LOGGING") != None else logging.INFO)
configure_logging(level)
logger = logging.getLogger("blog")

from .bp.pages import pages_bp

def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the blog application. ``overrides`` replaces values from Config."""
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    app.debug = bool(app.config.get("DEBUG"))

    @app.context_processor
    def inject_site():
        return {"site_title": app.config["SITE_TITLE"], "version": __version__}

    @app.before_request
    def start_timer():
        g.request_start_time = time.time()

    @app.after_request
    def log_request(response):
        """Log the request and response details."""
        started = g.get("request_start_time", time.time())
        logging.getLogger('blog.request').info(
            '%s %s %s %s',
            request.method,
            request.path,
            response.status_code,
            f"{(time.time() - started):.3f}s",
        )
        return response

    @app.errorhandler(500)
    def handle_internal_error(error):
        """Log the failure and answer with a plain 500 page."""
        cause = getattr(error, "original_exception", None) or error
        tb_str = "".join(traceback.format_exception(type(cause), cause, cause.__traceback__))
        logger.error(f"Internal server error on {request.path}: {cause}\nTraceback:\n{tb_str}")
        return "An internal server error occurred.", 500, {"Content-Type": "text/plain; charset=utf-8"}

    @app.errorhandler(404)
    def handle_not_found(error):
        logger.warning(f"404 error: {request.path} not found")
        message = "Post not found" if request.path.startswith("/post/") else "Page not found"
        return message, 404, {"Content-Type": "text/plain; charset=utf-8"}

    app.register_blueprint(pages_bp)
    return app

app = create_app()
logger.info("Markdown blog version %s ready", __version__)

# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    # Content locations, relative paths resolve against CONTENT_ROOT
    CONTENT_ROOT = os.getenv("BLOG_CONTENT_ROOT", ".")
    POSTS_DIR = os.getenv("BLOG_POSTS_DIR", "posts")
    THOUGHTS_DIR = os.getenv("BLOG_THOUGHTS_DIR", "thoughts")
    NAV_DIR = os.getenv("BLOG_NAV_DIR", "nav")
    POST_PATTERN = "*.md"

    # Static generation
    OUTPUT_DIR = os.getenv("BLOG_OUTPUT_DIR", "public")

    # Presentation
    SITE_TITLE = os.getenv("BLOG_SITE_TITLE", "My Blog")
    HIGHLIGHT_STYLE = os.getenv("BLOG_HIGHLIGHT_STYLE", "dracula")

    # Live server
    HOST = os.getenv("BLOG_HOST", "0.0.0.0")
    PORT = int(os.getenv("BLOG_PORT", "8090"))

    # Debug mode
    DEBUG = os.getenv("FLASK_ENV") == "development" or os.getenv("FLASK_DEBUG", "false").lower() == "true"

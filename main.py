# Copyright (c) 2025 Damien Boisvert (AlphaGameDeveloper)
# 
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

# Entry point for both ways of publishing the blog: the live Flask server
# (default) or the static site generator (--generate).

import argparse
import logging
import sys
from datetime import datetime
from blog import app
from blog.errors import BlogError
from blog.generator import generate_static_site

logger = logging.getLogger("blog.main")

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog = "blog",
        description = "Serve the Markdown blog, or render it to a static site.",
        epilog = f"Copyright (c) {datetime.now().year} Damien Boisvert (AlphaGameDeveloper). This software is released under the MIT License. https://opensource.org/licenses/MIT"
    )
    parser.add_argument("--generate", action="store_true", help="Write the static site and exit instead of serving.")
    parser.add_argument("--output", type=str, default=None, help=f"Output directory for --generate (default: {app.config['OUTPUT_DIR']})")
    parser.add_argument("--clean", action="store_true", help="Remove the output directory before generating.")
    parser.add_argument("--port", type=int, default=app.config["PORT"], help=f"Port for the live server (default: {app.config['PORT']})")
    args = parser.parse_args(argv)

    if args.generate:
        try:
            generate_static_site(app, args.output, clean=args.clean)
        except (BlogError, OSError) as e:
            logger.critical(f"Static site generation failed: {e}")
            return 1
        print("Static site generated successfully!")
        return 0

    logger.info(f"Server is running on {app.config['HOST']}:{args.port}")
    app.run(app.config["HOST"], args.port, debug=app.debug)
    return 0

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3

"""
Run the word autocomplete API server.

Startup happens in two phases: the corpus is read and indexed first, and
only once that succeeds does the server start accepting requests.
"""

import argparse
import sys
import os
from typing import List, Optional

import uvicorn

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from src.app.api import create_app
from src.app.autocomplete import WordAutocomplete
from src.app.config import get_config
from src.app.logger import get_logger

logger = get_logger(__name__)

# Parent of every application module logger
APP_LOGGER = "src.app"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve ranked word completions for a text corpus.")
    parser.add_argument("corpus", nargs="?", default=None,
                        help="Path to the corpus text file (default: AC_CORPUS_PATH)")
    parser.add_argument("--host", default=None, help="Bind address (default: AC_HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: AC_PORT or 9000)")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    corpus_path = args.corpus or get_config("AC_CORPUS_PATH", "")
    if not corpus_path:
        logger.error("No corpus given. Pass a file path as the first argument or set AC_CORPUS_PATH.")
        print("Please include a corpus file path as the 1st command line argument", file=sys.stderr)
        sys.exit(1)

    host = args.host or get_config("AC_HOST", "0.0.0.0")
    port = args.port or int(get_config("AC_PORT", "9000"))

    get_logger(APP_LOGGER)

    # Phase 1: build the index, fail fast
    logger.info(f"Corpus file path: {corpus_path}")
    service = WordAutocomplete(corpus_path)
    try:
        service.load_corpus()
    except OSError as e:
        logger.error(f"Failed to load corpus: {e}")
        print(f"Failed to load corpus: {e}", file=sys.stderr)
        sys.exit(1)

    # Phase 2: serve
    app = create_app(service)
    print("Starting word autocomplete server...")
    print(f"  GET  /autocomplete?term=<prefix>   ({service.get_stats()['distinct_words']:,} words indexed)")
    print()
    print("Example curl command:")
    print(f"  curl 'http://localhost:{port}/autocomplete?term=th'")
    print()

    logger.info(f"Starting server on {host}:{port}")
    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=get_config("AC_LOG_LEVEL", "INFO").lower()
    )
    logger.info("Server stopped")


if __name__ == "__main__":
    main()

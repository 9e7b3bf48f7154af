"""Command that serves the to-do API."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from todoapi.app import create_app
from todoapi.container import Container

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080


def main(argv: Sequence[str] | None = None) -> int:
    """Build the services from the environment and serve the API."""
    parser = argparse.ArgumentParser(prog="todoapi", description="Serve the to-do API.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    container = Container.from_environment()
    app = create_app(container)
    app.run(host=args.host, port=args.port)
    return 0
"""Run the mock API over HTTP, either in a background thread or as a CLI."""
from __future__ import annotations

import argparse
import logging
import sys
import threading
import time
from typing import List, Optional

import requests
from werkzeug.serving import make_server

from . import catalog
from .app import create_mock_api_app
from .config import MockApiSettings
from .errors import ConfigError, SeedError
from .seed import load_seed_file
from .service import MockPizzaService

logger = logging.getLogger(__name__)

USER_SETS = {
    "storefront": catalog.storefront_users,
    "profile": catalog.profile_users,
}


class MockApiServer:
    """Wrapper for running the mock API in a background thread.

    Port 0 picks a free port; read it back from `port` after `start()`.
    """

    def __init__(self, host: str = '127.0.0.1', port: int = 0, service: Optional[MockPizzaService] = None):
        self.host = host
        self.port = port
        self.service = service or MockPizzaService()
        self.app = create_mock_api_app(self.service)
        self.server = None
        self.thread = None

    def start(self, ready_timeout: float = 5.0) -> "MockApiServer":
        self.server = make_server(self.host, self.port, self.app, threaded=True)
        self.port = self.server.server_port
        self.thread = threading.Thread(target=self.server.serve_forever, daemon=True)
        self.thread.start()

        deadline = time.monotonic() + ready_timeout
        while time.monotonic() < deadline:
            try:
                requests.get(f"{self.base_url}/health", timeout=0.5)
                break
            except requests.RequestException:
                time.sleep(0.1)
        else:
            logger.warning("Mock API at %s did not answer within %.1fs", self.base_url, ready_timeout)
        logger.info("Mock API listening on %s", self.base_url)
        return self

    def stop(self) -> None:
        if self.server:
            self.server.shutdown()
            self.server = None
            if self.thread:
                self.thread.join(timeout=5)
                self.thread = None

    def __enter__(self) -> "MockApiServer":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def url(self) -> str:
        """Base URL of the API routes."""
        return f"{self.base_url}/api"


def build_parser(settings: MockApiSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Serve a mock JWT Pizza backend")
    parser.add_argument("--host", default=settings.host,
                        help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.port,
                        help="Port to listen on")
    parser.add_argument("--users", choices=sorted(USER_SETS), default="storefront",
                        help="Built-in fixture users to seed")
    parser.add_argument("--seed",
                        help="YAML file with users to seed instead of a built-in set")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        settings = MockApiSettings.from_env()
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1
    logging.getLogger().setLevel(getattr(logging, settings.log_level, logging.INFO))
    args = build_parser(settings).parse_args(argv)

    try:
        users = load_seed_file(args.seed) if args.seed else USER_SETS[args.users]()
    except SeedError as exc:
        logger.error("Failed to load seed users: %s", exc)
        return 1

    app = create_mock_api_app(MockPizzaService(users, settings))
    logger.info("Starting mock JWT Pizza API on %s:%s", args.host, args.port)
    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())

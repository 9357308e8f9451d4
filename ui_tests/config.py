"""Shared configuration for the storefront UI scenarios.

The scenarios drive a running JWT Pizza storefront (e.g. `npm run dev`)
whose API calls are intercepted by the mock. Set UI_BASE_URL to the
storefront's address; without it the scenarios are skipped.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urljoin

from jwt_pizza_mock.config import read_env_files

_FILE_VALUES = read_env_files(Path(__file__).resolve().parents[1])


def _env(key: str, fallback: str = "") -> str:
    return os.getenv(key) or _FILE_VALUES.get(key) or fallback


@dataclass
class UiTestConfig:
    """Where the storefront lives and how to drive the browser."""

    base_url: str
    playwright_headless: bool = True
    timeout_ms: int = 10000
    browser_type: str = "chromium"

    @classmethod
    def from_env(cls) -> "UiTestConfig":
        headless_str = _env("PLAYWRIGHT_HEADLESS", "true")
        return cls(
            base_url=_env("UI_BASE_URL"),
            playwright_headless=headless_str.lower() in {"true", "1"},
            timeout_ms=int(_env("UI_TIMEOUT_MS", "10000")),
            browser_type=_env("PLAYWRIGHT_BROWSER", "chromium"),
        )

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    def url(self, path: str) -> str:
        """Return an absolute URL for the provided path."""
        return urljoin(self.base_url.rstrip("/") + "/", path.lstrip("/"))


settings = UiTestConfig.from_env()

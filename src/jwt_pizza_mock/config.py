"""Runtime settings for the mock API.

Resolution order for every key: environment variable, then `.env`, then
`.env.defaults`, then the dataclass default below. Both files are read
from one directory (the working directory unless one is given).

Keys with the `JWT_PIZZA_MOCK_` prefix are checked against the known
settings so a typo in `.env` fails loudly instead of being ignored.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

from .errors import ConfigError

DEFAULT_AUTH_TOKEN = "abcdef"
DEFAULT_ORDER_JWT = "eyJpYXQ"

ENV_PREFIX = "JWT_PIZZA_MOCK_"
ENV_FILES = (".env.defaults", ".env")


def _port(value: str) -> int:
    port = int(value)
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range: {port}")
    return port


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise ValueError(f"must be positive: {number}")
    return number


# environment key -> (field, converter)
ENV_KEYS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "JWT_PIZZA_MOCK_HOST": ("host", str),
    "JWT_PIZZA_MOCK_PORT": ("port", _port),
    "JWT_PIZZA_MOCK_AUTH_TOKEN": ("auth_token", str),
    "JWT_PIZZA_MOCK_ORDER_JWT": ("order_jwt", str),
    "JWT_PIZZA_MOCK_FIRST_USER_ID": ("first_user_id", _positive_int),
    "LOG_LEVEL": ("log_level", str.upper),
}


def read_env_files(directory: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    """Return `.env.defaults` overlaid with `.env` from `directory`.

    Missing files are skipped. A non-blank, non-comment line without `=`
    raises ConfigError naming the file and line.
    """
    base = Path(directory) if directory is not None else Path.cwd()
    values: Dict[str, str] = {}
    for name in ENV_FILES:
        path = base / name
        if not path.is_file():
            continue
        for lineno, raw in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue
            key, sep, value = line.partition("=")
            if not sep:
                raise ConfigError(f"{path}:{lineno}: expected KEY=value")
            value = value.strip()
            if len(value) >= 2 and value[0] in ('"', "'") and value[-1] == value[0]:
                value = value[1:-1]
            values[key.strip()] = value
    return values


@dataclass
class MockApiSettings:
    """Knobs for one mock instance."""

    host: str = "127.0.0.1"
    port: int = 3000
    auth_token: str = DEFAULT_AUTH_TOKEN
    order_jwt: str = DEFAULT_ORDER_JWT
    first_user_id: int = 100
    log_level: str = "INFO"

    @classmethod
    def from_env(
        cls,
        directory: Optional[Union[str, Path]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "MockApiSettings":
        file_values = read_env_files(directory)
        unknown = sorted(key for key in file_values if key.startswith(ENV_PREFIX) and key not in ENV_KEYS)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}")

        environ = os.environ if environ is None else environ
        overrides: Dict[str, Any] = {}
        for key, (name, convert) in ENV_KEYS.items():
            raw = environ.get(key) or file_values.get(key)
            if not raw:
                continue
            try:
                overrides[name] = convert(raw)
            except ValueError as exc:
                raise ConfigError(f"Invalid value for {key}: {raw!r}") from exc
        return cls(**overrides)

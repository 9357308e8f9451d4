"""Load fixture users from a YAML seed file.

Example::

    users:
      - id: "3"
        name: Kai Chen
        email: d@jwt.com
        password: a
        roles: [diner]
      - id: "4"
        name: Fran Chise
        email: f@jwt.com
        password: g
        roles:
          - role: franchisee
            objectId: 3
"""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List

import yaml

from .errors import SeedError
from .models import Role, RoleAssignment, User

logger = logging.getLogger(__name__)

MAX_SEED_FILE_SIZE = 1024 * 1024
REQUIRED_FIELDS = ("id", "name", "email", "password")


def _parse_role(entry: Any) -> RoleAssignment:
    try:
        if isinstance(entry, str):
            return RoleAssignment(Role(entry))
        if isinstance(entry, dict):
            return RoleAssignment.from_dict(entry)
    except (KeyError, ValueError) as exc:
        raise SeedError(f"Invalid role entry {entry!r}: {exc}") from exc
    raise SeedError(f"Invalid role entry {entry!r}")


def parse_users(data: Any) -> List[User]:
    """Build users from an already-parsed seed document."""
    if not isinstance(data, dict):
        raise SeedError("Invalid seed file: root must be a mapping")
    entries = data.get("users", [])
    if not isinstance(entries, list):
        raise SeedError("Invalid seed file: users must be a list")

    users: List[User] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SeedError(f"Invalid seed file: users[{index}] must be a mapping")
        missing = [key for key in REQUIRED_FIELDS if entry.get(key) in (None, "")]
        if missing:
            raise SeedError(f"Invalid seed file: users[{index}] missing {', '.join(missing)}")
        roles = [_parse_role(role) for role in entry.get("roles") or ["diner"]]
        users.append(User(
            id=str(entry["id"]),
            name=str(entry["name"]),
            email=str(entry["email"]),
            password=str(entry["password"]),
            roles=roles,
        ))
    return users


def load_seed_file(path: str) -> List[User]:
    """Read users from a YAML file.

    Raises:
        SeedError: if the file is missing, too large, not YAML or malformed.
    """
    try:
        file_size = os.path.getsize(path)
    except OSError as exc:
        raise SeedError(f"Cannot read seed file {path}: {exc}") from exc
    if file_size > MAX_SEED_FILE_SIZE:
        raise SeedError(f"Seed file too large: {file_size} bytes")

    try:
        with open(path, "r", encoding="utf-8") as handle:
            data: Dict[str, Any] = yaml.safe_load(handle)
    except yaml.YAMLError as exc:
        raise SeedError(f"Seed file {path} is not valid YAML: {exc}") from exc

    users = parse_users(data)
    logger.info("Loaded %d seed users from %s", len(users), path)
    return users

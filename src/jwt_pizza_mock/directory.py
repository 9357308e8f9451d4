"""
In-memory user directory.

Records are kept in insertion order (the order the admin user list shows
them) and indexed by email for login lookups.
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from .models import Role, RoleAssignment, User, UserPatch

logger = logging.getLogger(__name__)


def normalize_name_filter(raw: Optional[str]) -> str:
    """Turn a `?name=` value like `*min*` into a lower-case search term."""
    if raw is None:
        return ""
    return raw.replace("*", "").strip().lower()


class UserDirectory:
    """All known users of one mock instance."""

    def __init__(self, users: Iterable[User] = (), first_id: int = 100):
        self._users: Dict[str, User] = {}
        self._by_email: Dict[str, str] = {}
        self._next_id = first_id
        for user in users:
            self.add(user)

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self):
        return iter(list(self._users.values()))

    def add(self, user: User) -> User:
        """Store a record, replacing any earlier one with the same id.

        The email index points at the earliest stored record for that
        address, so registering a duplicate never shadows a seeded user.
        """
        previous = self._users.get(user.id)
        self._users[user.id] = user
        if previous is not None and previous.email != user.email:
            self._reindex(previous.email)
        self._reindex(user.email)
        if user.id.isdigit() and int(user.id) >= self._next_id:
            self._next_id = int(user.id) + 1
        return user

    def _reindex(self, email: str) -> None:
        owner = next((user.id for user in self._users.values() if user.email == email), None)
        if owner is None:
            self._by_email.pop(email, None)
        else:
            self._by_email[email] = owner

    def get(self, user_id: str) -> Optional[User]:
        return self._users.get(str(user_id))

    def find_by_email(self, email: Optional[str]) -> Optional[User]:
        if not email:
            return None
        user_id = self._by_email.get(email)
        return self._users.get(user_id) if user_id is not None else None

    def next_id(self) -> str:
        user_id = str(self._next_id)
        self._next_id += 1
        return user_id

    def register(self, name: str, email: str, password: str) -> User:
        """Create a diner. Duplicate emails are accepted but never win logins."""
        user = User(
            id=self.next_id(),
            name=name,
            email=email,
            password=password,
            roles=[RoleAssignment(Role.DINER)],
        )
        logger.debug("Registered user %s <%s>", user.id, email)
        return self.add(user)

    def list_users(self, name_filter: Optional[str] = None) -> List[User]:
        term = normalize_name_filter(name_filter)
        users = list(self._users.values())
        if not term:
            return users
        return [user for user in users if term in (user.name or "").lower()]

    def update(self, patch: UserPatch) -> Optional[User]:
        """Apply a patch to the user it names. Returns None for unknown ids."""
        user = self._users.get(str(patch.id))
        if user is None:
            return None
        old_email = user.email
        patch.apply(user)
        if user.email != old_email:
            self._reindex(old_email)
            self._reindex(user.email)
        return user

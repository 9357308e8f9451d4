"""The single logged-in-user slot of one mock instance."""
from __future__ import annotations

import logging
from typing import Optional

from .models import User

logger = logging.getLogger(__name__)


class Session:
    """Who is logged in, as seen by `GET /api/user/me`.

    Owned by a `MockPizzaService` and handed to its handlers; two services
    never share a session.
    """

    def __init__(self) -> None:
        self._user: Optional[User] = None

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def login(self, user: User) -> None:
        logger.debug("Session opened for user %s", user.id)
        self._user = user

    def clear(self) -> None:
        if self._user is not None:
            logger.debug("Session closed for user %s", self._user.id)
        self._user = None

    def refresh(self, user: User) -> None:
        """Swap in an updated record if it is the logged-in user."""
        if self._user is not None and self._user.id == user.id:
            self._user = user

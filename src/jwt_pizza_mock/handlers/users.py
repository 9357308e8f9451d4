"""Current user, user list and profile updates (`/api/user`)."""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from ..config import MockApiSettings
from ..directory import UserDirectory
from ..models import User, UserPatch
from ..routes import MockRequest, MockResponse, RouteTable
from ..session import Session

logger = logging.getLogger(__name__)


class UserHandlers:
    def __init__(self, directory: UserDirectory, session: Session, settings: MockApiSettings):
        self.directory = directory
        self.session = session
        self.settings = settings

    def register_routes(self, table: RouteTable) -> None:
        table.add("GET", "/api/user/me", self.handle_current_user, name="current_user")
        table.add("GET", "/api/user", self.handle_list_users, name="list_users")
        table.add("PUT", "/api/user/*", self.handle_update_user, name="update_user")

    def current_user(self) -> Optional[User]:
        return self.session.user

    def list_users(self, name_filter: Optional[str] = None) -> Dict[str, Any]:
        users: List[User] = self.directory.list_users(name_filter)
        return {"users": [user.to_dict() for user in users], "more": False}

    def update_user(self, patch: UserPatch) -> Dict[str, Any]:
        """Apply a partial update and hand back the record with a new token.

        Unknown ids are not an error: the patch is echoed back as the user.
        """
        user = self.directory.update(patch)
        if user is None:
            logger.debug("Update for unknown user %s echoed back", patch.id)
            return {"user": patch.to_dict(), "token": self.settings.auth_token}
        self.session.refresh(user)
        return {"user": user.to_dict(), "token": self.settings.auth_token}

    def handle_current_user(self, request: MockRequest) -> MockResponse:
        user = self.current_user()
        return MockResponse.json(user.to_dict() if user is not None else None)

    def handle_list_users(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.list_users(request.query_value("name")))

    def handle_update_user(self, request: MockRequest) -> MockResponse:
        path_id = request.params[0] if request.params else None
        patch = UserPatch.from_json(request.json(), fallback_id=path_id)
        return MockResponse.json(self.update_user(patch))

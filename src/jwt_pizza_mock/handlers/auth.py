"""Login, registration and logout (`/api/auth`)."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..config import MockApiSettings
from ..directory import UserDirectory
from ..errors import UnauthorizedError
from ..routes import MockRequest, MockResponse, RouteTable
from ..session import Session

logger = logging.getLogger(__name__)

LOGOUT_MESSAGE = "logout successful"


class AuthHandlers:
    def __init__(self, directory: UserDirectory, session: Session, settings: MockApiSettings):
        self.directory = directory
        self.session = session
        self.settings = settings

    def register_routes(self, table: RouteTable) -> None:
        table.add("PUT", "/api/auth", self.handle_login, name="login")
        table.add("POST", "/api/auth", self.handle_register, name="register")
        table.add("DELETE", "/api/auth", self.handle_logout, name="logout")

    # ---- operations -------------------------------------------------------------
    def login(self, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        """Open a session for the user with these credentials.

        Raises:
            UnauthorizedError: unknown email or wrong password. The session
                is left as it was.
        """
        user = self.directory.find_by_email(email)
        if user is None or user.password != password:
            logger.info("Rejected login for %s", email)
            raise UnauthorizedError()
        self.session.login(user)
        return {"user": user.to_dict(), "token": self.settings.auth_token}

    def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        user = self.directory.register(name, email, password)
        # The storefront shows the new user's initials straight away.
        self.session.login(user)
        return {"user": user.to_dict(), "token": self.settings.auth_token}

    def logout(self) -> Dict[str, Any]:
        self.session.clear()
        return {"message": LOGOUT_MESSAGE}

    # ---- route adapters ---------------------------------------------------------
    def handle_login(self, request: MockRequest) -> MockResponse:
        body = request.json()
        return MockResponse.json(self.login(body.get("email"), body.get("password")))

    def handle_register(self, request: MockRequest) -> MockResponse:
        body = request.json()
        return MockResponse.json(self.register(body.get("name"), body.get("email"), body.get("password")))

    def handle_logout(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.logout())

"""
Mock JWT Pizza backend.

`MockPizzaService` owns the state of one test (user directory and session)
and answers the storefront's API calls:

- /api/auth: login (PUT), register (POST), logout (DELETE)
- /api/user/me, /api/user, /api/user/{id}: current user, list, update
- /api/order/menu, /api/order: menu, order history, place order
- /api/franchise[/...]: franchises, stores

The same instance backs the Playwright route adapter and the Flask app, so
a scenario sees identical behaviour whichever way the browser reaches it.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional
from urllib.parse import parse_qsl, urlsplit

from . import catalog
from .config import MockApiSettings
from .directory import UserDirectory
from .errors import MockApiError
from .handlers import AuthHandlers, CommerceHandlers, UserHandlers
from .models import User
from .routes import MockRequest, MockResponse, RouteTable
from .session import Session

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"


def split_url(url: str) -> tuple[str, Dict[str, str]]:
    """Return the `/api/...` path and query params of a URL or bare path.

    Anything before `/api/` (scheme, host, a proxy prefix) is dropped, as
    is a trailing slash.
    """
    parts = urlsplit(url)
    path = parts.path or "/"
    index = path.find(API_PREFIX)
    if index > 0:
        path = path[index:]
    if len(path) > 1 and path.endswith("/"):
        path = path.rstrip("/")
    return path, dict(parse_qsl(parts.query, keep_blank_values=True))


class MockPizzaService:
    """In-memory stand-in for the JWT Pizza service."""

    def __init__(self, users: Optional[Iterable[User]] = None, settings: Optional[MockApiSettings] = None):
        self.settings = settings or MockApiSettings.from_env()
        self._seed = list(users) if users is not None else catalog.storefront_users()
        self.reset()

    @classmethod
    def storefront(cls, settings: Optional[MockApiSettings] = None) -> "MockPizzaService":
        """Service seeded for the ordering and dashboard scenarios."""
        return cls(catalog.storefront_users(), settings)

    @classmethod
    def profile(cls, settings: Optional[MockApiSettings] = None) -> "MockPizzaService":
        """Service seeded for the profile editing scenarios."""
        return cls(catalog.profile_users(), settings)

    def reset(self) -> None:
        """Drop every change made since construction."""
        users = [
            User(user.id, user.name, user.email, user.password, list(user.roles))
            for user in self._seed
        ]
        self.directory = UserDirectory(users, first_id=self.settings.first_user_id)
        self.session = Session()
        self.auth = AuthHandlers(self.directory, self.session, self.settings)
        self.users = UserHandlers(self.directory, self.session, self.settings)
        self.commerce = CommerceHandlers(self.settings)

        self.routes = RouteTable()
        self.auth.register_routes(self.routes)
        self.users.register_routes(self.routes)
        self.commerce.register_routes(self.routes)

    def handle(self, method: str, url: str, body: Any = None) -> Optional[MockResponse]:
        """Answer one request.

        Returns:
            The response, or None when no route matches and the caller
            should let the request through.
        """
        path, query = split_url(url)
        request = MockRequest(method=method.upper(), path=path, query=query, body=body)
        found = self.routes.match(request.method, path, request)
        if found is None:
            logger.debug("No mock route for %s %s", request.method, path)
            return None

        request.params = found.params
        logger.debug("%s %s -> %s", request.method, path, found.route.name)
        try:
            return found.route.handler(request)
        except MockApiError as exc:
            return MockResponse.json(exc.to_body(), status=exc.status)

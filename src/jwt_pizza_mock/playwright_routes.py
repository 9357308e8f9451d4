"""
Playwright route interception backed by a `MockPizzaService`.

Usage:
    service = MockPizzaService.storefront()
    await install_mock_routes(page, service)
    await page.goto("http://localhost:5173/")

Requests the service does not answer are passed on with `route.fallback()`,
so other handlers (or the network) still see them.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Union

from playwright.async_api import BrowserContext, Page, Route

from .service import MockPizzaService

logger = logging.getLogger(__name__)

DEFAULT_API_GLOB = "**/api/**"

RouteHandler = Callable[[Route], Awaitable[None]]


def _request_body(route: Route) -> Any:
    try:
        return route.request.post_data_json
    except ValueError:
        # Not JSON; handlers treat the body as empty.
        return None


def make_route_handler(service: MockPizzaService) -> RouteHandler:
    """Build the async callback Playwright invokes for each request."""

    async def handle_route(route: Route) -> None:
        request = route.request
        response = service.handle(request.method, request.url, _request_body(route))
        if response is None:
            await route.fallback()
            return
        if response.body is None:
            await route.fulfill(status=response.status, body="", content_type="application/json")
            return
        await route.fulfill(status=response.status, json=response.body)

    return handle_route


async def install_mock_routes(
    target: Union[Page, BrowserContext],
    service: MockPizzaService,
    url: str = DEFAULT_API_GLOB,
) -> RouteHandler:
    """Route every API call of a page or context through the service.

    Returns the registered handler so callers can `unroute` it.
    """
    handler = make_route_handler(service)
    await target.route(url, handler)
    logger.debug("Mock API routes installed for %s", url)
    return handler

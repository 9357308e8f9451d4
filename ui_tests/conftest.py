import sys
from pathlib import Path

import pytest
import pytest_asyncio

ROOT = Path(__file__).resolve().parents[1]
for path in (ROOT, ROOT / "src"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from jwt_pizza_mock.playwright_routes import install_mock_routes
from jwt_pizza_mock.service import MockPizzaService
from ui_tests.config import settings
from ui_tests.playwright_client import PlaywrightClient


def pytest_collection_modifyitems(config, items):
    """Skip the storefront scenarios when no storefront is configured."""
    if settings.enabled:
        return
    skip = pytest.mark.skip(reason="UI_BASE_URL not set - start the storefront and export its URL")
    ui_dir = Path(__file__).resolve().parent
    for item in items:
        if ui_dir in Path(item.path).resolve().parents:
            item.add_marker(skip)


@pytest_asyncio.fixture()
async def playwright_client():
    """Create a Playwright client pointed at the storefront."""
    async with PlaywrightClient(
        browser_type=settings.browser_type,
        headless=settings.playwright_headless,
        timeout=settings.timeout_ms,
        base_url=settings.base_url,
    ) as client:
        yield client


async def _open_with_mock(client: PlaywrightClient, service: MockPizzaService):
    await install_mock_routes(client.context, service)
    await client.page.goto("/")
    return client.page


@pytest.fixture
def storefront_service():
    """Mock backend for ordering and dashboard scenarios."""
    return MockPizzaService.storefront()


@pytest.fixture
def profile_service():
    """Mock backend for profile editing scenarios."""
    return MockPizzaService.profile()


@pytest_asyncio.fixture()
async def storefront_page(playwright_client, storefront_service):
    """Storefront home page backed by the storefront fixture users."""
    return await _open_with_mock(playwright_client, storefront_service)


@pytest_asyncio.fixture()
async def profile_page(playwright_client, profile_service):
    """Storefront home page backed by the profile fixture users."""
    return await _open_with_mock(playwright_client, profile_service)

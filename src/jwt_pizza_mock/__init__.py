"""
Memory-backed mock of the JWT Pizza backend for browser-driven tests.

Provides:
- MockPizzaService: route table plus per-test state (users, session)
- create_mock_api_app / MockApiServer: the service over real HTTP
- install_mock_routes: the service behind Playwright route interception
"""
from .app import create_mock_api_app
from .config import MockApiSettings
from .errors import ConfigError, MockApiError, SeedError, UnauthorizedError
from .models import Franchise, MenuItem, Order, OrderItem, Role, RoleAssignment, Store, User, UserPatch
from .server import MockApiServer
from .service import MockPizzaService

__all__ = [
    'ConfigError',
    'Franchise',
    'MenuItem',
    'MockApiError',
    'MockApiServer',
    'MockApiSettings',
    'MockPizzaService',
    'Order',
    'OrderItem',
    'Role',
    'RoleAssignment',
    'SeedError',
    'Store',
    'UnauthorizedError',
    'User',
    'UserPatch',
    'create_mock_api_app',
]

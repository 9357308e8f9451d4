"""Menu, franchise, store and order responders.

None of these keep state: creations echo the request with a fixed id, and
listings always return the same canned data.
"""
from __future__ import annotations

from typing import Any, Dict, List

from .. import catalog
from ..config import MockApiSettings
from ..routes import MockRequest, MockResponse, RouteTable

STORE_DELETED_MESSAGE = "store deleted"
FRANCHISE_DELETED_MESSAGE = "franchise deleted"


class CommerceHandlers:
    def __init__(self, settings: MockApiSettings):
        self.settings = settings

    def register_routes(self, table: RouteTable) -> None:
        table.add("GET", "/api/order/menu", self.handle_menu, name="menu")
        table.add("GET", "/api/order", self.handle_order_history, name="order_history")
        table.add("POST", "/api/order", self.handle_create_order, name="create_order")
        table.add("GET", "/api/franchise", self.handle_list_franchises, name="list_franchises")
        table.add("POST", "/api/franchise", self.handle_create_franchise, name="create_franchise")
        table.add("GET", "/api/franchise/*", self.handle_user_franchises, name="user_franchises")
        table.add("DELETE", "/api/franchise/*", self.handle_delete_franchise, name="delete_franchise")
        table.add("POST", "/api/franchise/*/store", self.handle_create_store, name="create_store")
        table.add("DELETE", "/api/franchise/*/store/*", self.handle_delete_store, name="delete_store")

    def _echo(self, key: str, body: Dict[str, Any], assigned_id: int) -> Dict[str, Any]:
        return {key: {**body, "id": assigned_id}, "jwt": self.settings.order_jwt}

    # ---- menu & orders ----------------------------------------------------------
    def menu(self) -> List[Dict[str, Any]]:
        return [item.to_dict() for item in catalog.default_menu()]

    def order_history(self) -> Dict[str, Any]:
        return {
            "dinerId": catalog.HISTORY_DINER_ID,
            "orders": [order.to_dict() for order in catalog.order_history()],
            "page": catalog.HISTORY_PAGE,
        }

    def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:
        return self._echo("order", order, catalog.CREATED_ORDER_ID)

    # ---- franchises & stores ----------------------------------------------------
    def list_franchises(self) -> Dict[str, Any]:
        return {
            "franchises": [franchise.to_dict() for franchise in catalog.default_franchises()],
            "more": False,
        }

    def create_franchise(self, franchise: Dict[str, Any]) -> Dict[str, Any]:
        # The storefront reads the created franchise from "order".
        return self._echo("order", franchise, catalog.CREATED_FRANCHISE_ID)

    def user_franchises(self, user_id: str) -> List[Dict[str, Any]]:
        return [franchise.to_dict() for franchise in catalog.user_franchises()]

    def create_store(self, franchise_id: str, store: Dict[str, Any]) -> Dict[str, Any]:
        return self._echo("store", store, catalog.CREATED_STORE_ID)

    # ---- route adapters ---------------------------------------------------------
    def handle_menu(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.menu())

    def handle_order_history(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.order_history())

    def handle_create_order(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.create_order(request.json()))

    def handle_list_franchises(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.list_franchises())

    def handle_create_franchise(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.create_franchise(request.json()))

    def handle_user_franchises(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.user_franchises(request.params[0]))

    def handle_delete_franchise(self, request: MockRequest) -> MockResponse:
        return MockResponse.json({"message": FRANCHISE_DELETED_MESSAGE})

    def handle_create_store(self, request: MockRequest) -> MockResponse:
        return MockResponse.json(self.create_store(request.params[0], request.json()))

    def handle_delete_store(self, request: MockRequest) -> MockResponse:
        return MockResponse.json({"message": STORE_DELETED_MESSAGE})

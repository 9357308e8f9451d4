"""Canned catalog data and the fixture user sets.

Factories return fresh objects on every call so one test can never leak
mutations into another.
"""
from __future__ import annotations

from typing import List

from .models import Franchise, MenuItem, Order, OrderItem, Role, RoleAssignment, Store, User

# Ids handed out by the create endpoints
CREATED_FRANCHISE_ID = 35
CREATED_STORE_ID = 31
CREATED_ORDER_ID = 23

HISTORY_DINER_ID = 3
HISTORY_PAGE = 1


def default_menu() -> List[MenuItem]:
    return [
        MenuItem(id=1, title="Veggie", image="pizza1.png", price=0.0038, description="A garden of delight"),
        MenuItem(id=2, title="Pepperoni", image="pizza2.png", price=0.0042, description="Spicy treat"),
    ]


def default_franchises() -> List[Franchise]:
    return [
        Franchise(
            id=2,
            name="LotaPizza",
            stores=[
                Store(id=4, name="Lehi"),
                Store(id=5, name="Springville"),
                Store(id=6, name="American Fork"),
            ],
        ),
        Franchise(id=3, name="PizzaCorp", stores=[Store(id=7, name="Spanish Fork")]),
        Franchise(id=4, name="topSpot", stores=[]),
    ]


def user_franchises() -> List[Franchise]:
    """Franchises owned by whichever franchisee asks."""
    return [Franchise(id=3, name="PizzaCorp", stores=[Store(id=7, name="Spanish Fork")])]


def order_history() -> List[Order]:
    return [
        Order(
            id=1,
            franchise_id=2,
            store_id=6,
            date="2025-10-07T20:24:47.000Z",
            items=[OrderItem(id=1, menu_id=1, description="Veggie", price=0.0038)],
        ),
        Order(
            id=2,
            franchise_id=3,
            store_id=7,
            date="2025-10-07T20:27:25.000Z",
            items=[OrderItem(id=2, menu_id=2, description="Pepperoni", price=0.0042)],
        ),
    ]


def storefront_users() -> List[User]:
    """Users for the ordering and dashboard scenarios."""
    return [
        User(id="3", name="Kai Chen", email="d@jwt.com", password="a", roles=[RoleAssignment(Role.DINER)]),
        User(id="2", name="Min Ad", email="a@jwt.com", password="z", roles=[RoleAssignment(Role.ADMIN)]),
        User(id="4", name="Fran Chise", email="f@jwt.com", password="g", roles=[RoleAssignment(Role.FRANCHISEE)]),
    ]


def profile_users() -> List[User]:
    """Users for the profile editing and user list scenarios."""
    return [
        User(id="1", name="Ad Min", email="a@jwt.com", password="a", roles=[RoleAssignment(Role.ADMIN)]),
        User(id="2", name="Di Ner", email="d@jwt.com", password="d", roles=[RoleAssignment(Role.DINER)]),
        User(id="3", name="Fran Chisee", email="f@jwt.com", password="f", roles=[RoleAssignment(Role.FRANCHISEE)]),
    ]

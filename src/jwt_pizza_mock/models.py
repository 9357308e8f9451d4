"""
Data model shared by the mock handlers.

Every record serialises to the exact field names the storefront reads
(camelCase on the wire, snake_case in Python).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class Role(str, Enum):
    DINER = "diner"
    ADMIN = "admin"
    FRANCHISEE = "franchisee"


@dataclass
class RoleAssignment:
    role: Role
    object_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"role": self.role.value}
        if self.object_id is not None:
            data["objectId"] = self.object_id
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoleAssignment":
        object_id = data.get("objectId")
        return cls(
            role=Role(data["role"]),
            object_id=str(object_id) if object_id is not None else None,
        )


@dataclass
class User:
    """A directory entry. Email is the lookup key for login."""

    id: str
    name: str
    email: str
    password: str
    roles: List[RoleAssignment] = field(default_factory=lambda: [RoleAssignment(Role.DINER)])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "roles": [assignment.to_dict() for assignment in self.roles],
        }

    def has_role(self, role: Role) -> bool:
        return any(assignment.role == role for assignment in self.roles)


@dataclass
class UserPatch:
    """Partial update of a user.

    A field left as None is not part of the patch and is never written.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

    @classmethod
    def from_json(cls, body: Dict[str, Any], fallback_id: Optional[str] = None) -> "UserPatch":
        """Build a patch from a request body.

        Empty strings count as omitted, since the profile dialog submits
        blank inputs for fields the user did not touch.
        """
        def present(key: str) -> Optional[str]:
            value = body.get(key)
            if value is None or value == "":
                return None
            return str(value)

        return cls(
            id=present("id") or fallback_id,
            name=present("name"),
            email=present("email"),
            password=present("password"),
        )

    def apply(self, user: User) -> User:
        if self.name is not None:
            user.name = self.name
        if self.email is not None:
            user.email = self.email
        if self.password is not None:
            user.password = self.password
        return user

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "name": self.name, "email": self.email, "password": self.password}
        return {key: value for key, value in data.items() if value is not None}


@dataclass
class Store:
    id: int
    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass
class Franchise:
    id: int
    name: str
    stores: List[Store] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "stores": [store.to_dict() for store in self.stores],
        }


@dataclass
class MenuItem:
    id: int
    title: str
    image: str
    price: float
    description: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "image": self.image,
            "price": self.price,
            "description": self.description,
        }


@dataclass
class OrderItem:
    id: int
    menu_id: int
    description: str
    price: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "menuId": self.menu_id,
            "description": self.description,
            "price": self.price,
        }


@dataclass
class Order:
    id: int
    franchise_id: int
    store_id: int
    date: str
    items: List[OrderItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "franchiseId": self.franchise_id,
            "storeId": self.store_id,
            "date": self.date,
            "items": [item.to_dict() for item in self.items],
        }

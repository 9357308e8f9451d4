"""
Request handlers for the mock API, grouped by resource.

Each group receives the state it needs (directory, session, settings) in
its constructor and registers its own routes on a `RouteTable`.
"""
from .auth import AuthHandlers
from .commerce import CommerceHandlers
from .users import UserHandlers

__all__ = ['AuthHandlers', 'CommerceHandlers', 'UserHandlers']

"""
Route table for the mock API.

Patterns are written the way Playwright globs are:

- `*` matches exactly one path segment (and is captured as a parameter)
- a `*` inside a segment (`user*`) matches any characters within it
- a trailing `**` matches whatever remains of the path

Query strings are never part of a pattern. Routes are kept in an explicit
list ordered most specific first, so `/api/franchise/*/store/*` is checked
before `/api/franchise/*`, and `/api/user/me` before `/api/user/*`, no
matter which was registered first. Equally specific routes keep their
registration order.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple, Union


Specificity = Tuple[int, int, int]


@dataclass
class MockRequest:
    """What a handler sees of an intercepted call."""

    method: str
    path: str
    query: Dict[str, str] = field(default_factory=dict)
    body: Any = None
    params: List[str] = field(default_factory=list)

    def json(self) -> Dict[str, Any]:
        return self.body if isinstance(self.body, dict) else {}

    def query_value(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.query.get(name, default)


@dataclass
class MockResponse:
    status: int = 200
    body: Any = None

    @classmethod
    def json(cls, body: Any, status: int = 200) -> "MockResponse":
        return cls(status=status, body=body)


Handler = Callable[[MockRequest], MockResponse]
Predicate = Callable[[MockRequest], bool]


def _compile_glob(path: str) -> Tuple[Pattern[str], Specificity]:
    segments = path.strip("/").split("/")
    parts: List[str] = []
    literals = wildcards = 0
    trailing = False

    for index, segment in enumerate(segments):
        if segment == "**":
            if index != len(segments) - 1:
                raise ValueError(f"'**' is only allowed as the last segment: {path}")
            trailing = True
            wildcards += 1
        elif segment == "*":
            parts.append("([^/]+)")
            wildcards += 1
        elif "*" in segment:
            parts.append("[^/]*".join(re.escape(piece) for piece in segment.split("*")))
            wildcards += 1
        else:
            parts.append(re.escape(segment))
            literals += 1

    regex = "".join("/" + part for part in parts)
    if trailing:
        regex += "(?:/(.*))?"
    return re.compile(regex), (literals, -wildcards, 0 if trailing else 1)


class RoutePattern:
    """Method plus path matcher."""

    def __init__(self, method: str, path: Union[str, Pattern[str]]):
        self.method = method.upper()
        if isinstance(path, str):
            self.source = path
            self.regex, self.specificity = _compile_glob(path)
        else:
            # Raw regexes cannot be ranked, so they sort after every glob.
            self.source = path.pattern
            self.regex = path
            self.specificity = (-1, 0, 0)

    def match(self, method: str, path: str) -> Optional[List[str]]:
        if method.upper() != self.method:
            return None
        found = self.regex.fullmatch(path)
        if found is None:
            return None
        return [group for group in found.groups() if group is not None]

    def __repr__(self) -> str:
        return f"RoutePattern({self.method} {self.source})"


@dataclass
class Route:
    pattern: RoutePattern
    handler: Handler
    predicate: Optional[Predicate] = None
    name: str = ""


@dataclass
class RouteMatch:
    route: Route
    params: List[str]


class RouteTable:
    """Ordered list of (pattern, predicate, handler) entries."""

    def __init__(self) -> None:
        self._routes: List[Route] = []

    def __len__(self) -> int:
        return len(self._routes)

    def add(
        self,
        method: str,
        path: Union[str, Pattern[str]],
        handler: Handler,
        predicate: Optional[Predicate] = None,
        name: str = "",
    ) -> Route:
        route = Route(RoutePattern(method, path), handler, predicate, name or getattr(handler, "__name__", ""))
        self._routes.append(route)
        # sort() is stable, so ties stay in registration order
        self._routes.sort(key=lambda entry: entry.pattern.specificity, reverse=True)
        return route

    def route(self, method: str, path: Union[str, Pattern[str]], predicate: Optional[Predicate] = None):
        """Decorator form of `add`."""
        def decorator(handler: Handler) -> Handler:
            self.add(method, path, handler, predicate)
            return handler
        return decorator

    def match(self, method: str, path: str, request: Optional[MockRequest] = None) -> Optional[RouteMatch]:
        for route in self._routes:
            params = route.pattern.match(method, path)
            if params is None:
                continue
            if route.predicate is not None:
                candidate = request or MockRequest(method=method, path=path)
                candidate.params = params
                if not route.predicate(candidate):
                    continue
            return RouteMatch(route, params)
        return None

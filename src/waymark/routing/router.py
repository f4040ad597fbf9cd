"""Router — an ordered collection of routes.

Routes are tried in the order they were added; the first match wins.
Named routes can be looked up and used to build paths.
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from waymark.config import RouteConfig
from waymark.errors import ConfigurationError, RouteNotFound
from waymark.routing.nodes import RouteMatch
from waymark.routing.route import Route

logger = logging.getLogger("waymark.routing")


class Router:
    """Ordered route collection.

    Usage::

        router = Router()
        router.add_route({"pattern": "/users", "name": "users"})
        router.add_route({"pattern": "/users/<id>", "name": "user"})
        match = router.find_first("/users/42")   # RouteMatch(route=..., params={"id": "42"})
        router.build("user", {"id": 7})          # "/users/7"
    """

    __slots__ = ("_by_name", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._by_name: dict[str, Route] = {}

    def add_route(self, options: str | Mapping[str, Any] | RouteConfig | Route) -> Route:
        """Add a route, creating it from *options* unless it already is one.

        Raises ``ConfigurationError`` if another route has the same name.
        """
        route = options if isinstance(options, Route) else Route(options)

        name = route.get_name()
        if name is not None:
            if name in self._by_name:
                msg = f"Duplicate route name {name!r}: already used by {self._by_name[name]!r}."
                raise ConfigurationError(msg)
            self._by_name[name] = route

        self._routes.append(route)
        logger.debug("Added %r", route)
        return route

    @property
    def routes(self) -> tuple[Route, ...]:
        """All routes, in matching order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def get_route_by_name(self, name: str) -> Route | None:
        return self._by_name.get(name)

    def find_first(self, match_object: str | Mapping[str, Any] | None) -> RouteMatch | None:
        """Return the first route matching *match_object*, or ``None``."""
        for route in self._routes:
            params = route.match(match_object)
            if params is not None:
                return RouteMatch(route=route, params=params)
        return None

    def find_all(self, match_object: str | Mapping[str, Any] | None) -> list[RouteMatch]:
        """Return every route matching *match_object*, in order."""
        matches: list[RouteMatch] = []
        for route in self._routes:
            params = route.match(match_object)
            if params is not None:
                matches.append(RouteMatch(route=route, params=params))
        return matches

    def build(self, name: str, params: Mapping[str, Any] | None = None) -> str:
        """Build a path with the route named *name*.

        Raises ``RouteNotFound`` if no route has that name.
        """
        route = self._by_name.get(name)
        if route is None:
            raise RouteNotFound(name)
        return route.build(params)

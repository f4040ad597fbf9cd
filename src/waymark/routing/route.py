"""Route — one compiled pattern with its match and build artifacts.

A Route compiles its pattern exactly once, in ``__init__``. Afterwards all
state is read-only, so ``match()`` and ``build()`` are safe to call from any
number of threads without locking.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from waymark.config import RouteConfig
from waymark.query import parse_query, stringify_query
from waymark.routing.compiler import BuildProcedure, compile_build, compile_match
from waymark.routing.nodes import Literal, OptionalGroup, Parameter, PatternNode
from waymark.routing.parser import parse_pattern

logger = logging.getLogger("waymark.routing")

# Reserved names of the two synthetic parameters. Neither is a valid
# <name>, so a template can never declare them.
TRAILING_SLASH_PARAM = "@trailing-slash"
QUERY_STRING_PARAM = "@query-string"

_SLASH = "/"
_SYNTHETIC_CONDITIONS: Mapping[str, str] = MappingProxyType(
    {
        TRAILING_SLASH_PARAM: _SLASH,
        QUERY_STRING_PARAM: ".*",
    }
)


class Route:
    """A compiled route.

    Usage::

        route = Route({"pattern": "/item/<id>", "name": "item"})
        route.match("/item/5?sort=asc")   # {"id": "5", "sort": "asc"}
        route.build({"id": 5, "sort": "asc"})   # "/item/5?sort=asc"

    *options* is a pattern string, a mapping of ``RouteConfig`` fields, or a
    ``RouteConfig``. Invalid options raise ``ConfigurationError``.
    """

    __slots__ = ("_build", "_config", "_nodes", "_params_map", "_positional", "_regex")

    def __init__(self, options: str | Mapping[str, Any] | RouteConfig) -> None:
        config = RouteConfig.from_options(options)
        self._config = config
        self._nodes = self._with_synthetic_nodes(parse_pattern(config.pattern))

        conditions = {**config.conditions, **_SYNTHETIC_CONDITIONS}
        matcher = compile_match(self._nodes, conditions)
        self._regex = matcher.regex
        self._params_map = matcher.params_map
        self._positional = frozenset(matcher.params_map)
        self._build: BuildProcedure = compile_build(self._nodes, config.defaults)

        logger.debug("Compiled route %r -> %s", config.pattern, self._regex.pattern)

    def _with_synthetic_nodes(
        self, nodes: tuple[PatternNode, ...]
    ) -> tuple[PatternNode, ...]:
        """Append the trailing-slash and query-string groups."""
        synthetic: list[PatternNode] = []
        if self._config.trailing_slash_optional:
            synthetic.append(OptionalGroup.of(Parameter(TRAILING_SLASH_PARAM)))
        synthetic.append(OptionalGroup.of(Literal("?"), Parameter(QUERY_STRING_PARAM)))
        return (*nodes, *synthetic)

    # -- Introspection ----------------------------------------------------

    @property
    def config(self) -> RouteConfig:
        return self._config

    @property
    def pattern(self) -> str:
        """The template as written, without synthetic segments."""
        return self._config.pattern

    @property
    def nodes(self) -> tuple[PatternNode, ...]:
        return self._nodes

    @property
    def params_map(self) -> tuple[str, ...]:
        """Parameter name for each capture group, in order."""
        return self._params_map

    def get_data(self) -> Mapping[str, Any]:
        """Return the read-only data bound to this route."""
        return self._config.data

    def get_name(self) -> str | None:
        return self._config.data.get("name")

    def __repr__(self) -> str:
        name = self.get_name()
        if name is None:
            return f"Route({self.pattern!r})"
        return f"Route({self.pattern!r}, name={name!r})"

    # -- Matching ---------------------------------------------------------

    def match(self, match_object: str | Mapping[str, Any] | None) -> dict[str, Any] | None:
        """Match a path, or a mapping with a ``path`` and extra attributes.

        Returns the extracted parameters, or ``None`` when the route does
        not match. Extra attributes (e.g. ``method``) must equal the values
        of the same keys in the route's data, where present.
        """
        if isinstance(match_object, str):
            match_object = {"path": match_object}
        elif not isinstance(match_object, Mapping):
            return None

        data = self._config.data
        for key, value in match_object.items():
            if key != "path" and key in data and data[key] != value:
                return None

        path = match_object.get("path")
        if path is None:
            result: dict[str, Any] = {}
        else:
            result = self._match_path(str(path))
            if result is None:
                return None

        post_match = self._config.post_match
        if post_match is not None:
            filtered = post_match(result)
            if not isinstance(filtered, Mapping):
                logger.debug("post_match rejected %r for route %r", result, self.pattern)
                return None
            result = dict(filtered)

        return result

    def _match_path(self, path: str) -> dict[str, Any] | None:
        found = self._regex.fullmatch(path)
        if found is None:
            return None

        result: dict[str, Any] = {}
        for name, value in zip(self._params_map, found.groups(), strict=True):
            if not value:
                continue
            if name == TRAILING_SLASH_PARAM:
                # "/foo/" plus the optional slash would accept "/foo//"
                if len(path) >= 2 and path[-2] == _SLASH:
                    return None
                continue
            result[name] = value

        query = parse_query(result.pop(QUERY_STRING_PARAM, None))
        for key, value in query.items():
            result.setdefault(key, value)

        for key, value in self._config.defaults.items():
            result.setdefault(key, value)

        return result

    # -- Building ---------------------------------------------------------

    def build(self, params: Mapping[str, Any] | None = None) -> str:
        """Build a path from *params*.

        Parameters not in the pattern are appended as a query string.
        Missing parameters render their default, or nothing.
        """
        pre_build = self._config.pre_build
        if pre_build is not None:
            params = pre_build(params or {})

        positional: dict[str, Any] = {}
        extra: dict[str, Any] = {}
        for key, value in (params or {}).items():
            if value is None:
                continue
            if key in self._positional:
                positional[key] = value
            else:
                extra[key] = value

        query_string = stringify_query(extra)
        if query_string:
            positional[QUERY_STRING_PARAM] = query_string

        return self._build(positional)

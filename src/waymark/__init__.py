"""Waymark — compiled URL patterns that match paths and build them back.

Patterns mix literal text, ``<name>`` parameters and nestable ``( ... )``
optional segments. Each Route compiles its pattern once into an anchored
regex and a build procedure.

Basic usage::

    from waymark import Route

    route = Route({
        "pattern": "/page(/<n>)",
        "conditions": {"n": r"\\d+"},
        "defaults": {"n": "1"},
    })

    route.match("/page/2")     # {"n": "2"}
    route.match("/page")       # {"n": "1"}
    route.build({"n": "1"})    # "/page"

Many routes::

    from waymark import Router

    router = Router()
    router.add_route({"pattern": "/users/<id>", "name": "user"})
    router.find_first("/users/42")
    router.build("user", {"id": 42, "tab": "posts"})   # "/users/42?tab=posts"
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Route",
    "RouteConfig",
    "RouteMatch",
    "RouteNotFound",
    "Router",
    "WaymarkError",
    "parse_query",
    "stringify_query",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "waymark.errors",
    "Route": "waymark.routing.route",
    "RouteConfig": "waymark.config",
    "RouteMatch": "waymark.routing.nodes",
    "RouteNotFound": "waymark.errors",
    "Router": "waymark.routing.router",
    "WaymarkError": "waymark.errors",
    "parse_query": "waymark.query",
    "stringify_query": "waymark.query",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waymark`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)

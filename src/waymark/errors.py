"""Waymark exception hierarchy.

Shared across the config layer, Route, Router, and the CLI so every module
raises and catches the same types.

Matching never raises: a path that does not fit a route is reported as
``None``. Only construction and name lookup fail loudly.
"""


class WaymarkError(Exception):
    """Base for all waymark-specific errors."""


class ConfigurationError(WaymarkError):
    """Raised when route options are invalid.

    Always raised at construction time, never from ``match()`` or ``build()``.
    """


class RouteNotFound(WaymarkError, LookupError):  # noqa: N818 — reads like KeyError
    """No route is registered under the requested name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No route named {name!r}")

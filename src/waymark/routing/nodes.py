"""Pattern tree nodes and RouteMatch, as frozen dataclasses."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from waymark.routing.route import Route


@dataclass(frozen=True, slots=True)
class Literal:
    """Text matched and emitted verbatim: ``/users``."""

    text: str


@dataclass(frozen=True, slots=True)
class Parameter:
    """A named placeholder: ``<id>``."""

    name: str


@dataclass(frozen=True, slots=True)
class OptionalGroup:
    """A ``( ... )`` segment, matched and emitted only conditionally.

    ``dependent_params`` holds the names of the parameters that are direct
    children of this group. Parameters inside a nested group belong to the
    nested group's own set.
    """

    children: tuple["PatternNode", ...]
    dependent_params: frozenset[str] = field(default=frozenset())

    @classmethod
    def of(cls, *children: "PatternNode") -> "OptionalGroup":
        """Create a group, deriving ``dependent_params`` from *children*."""
        return cls(
            children=children,
            dependent_params=frozenset(
                child.name for child in children if isinstance(child, Parameter)
            ),
        )


type PatternNode = Literal | Parameter | OptionalGroup


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup in a Router."""

    route: "Route"
    params: dict[str, Any]

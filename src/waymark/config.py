"""Route configuration.

RouteConfig is a frozen dataclass. Routes read their options from it, never
from the raw mapping or string they were created with.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

from waymark.errors import ConfigurationError

type Condition = str | tuple[str, ...]
type PostMatchFilter = Callable[[dict[str, Any]], Mapping[str, Any] | None]
type PreBuildFilter = Callable[[Mapping[str, Any]], Mapping[str, Any]]

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """Options of a single route. Immutable after creation.

    Only ``pattern`` is required. Override what you need::

        config = RouteConfig(
            pattern="/page(/<n>)",
            name="page",
            conditions={"n": r"\\d+"},
            defaults={"n": "1"},
        )

    Mapping fields are frozen into read-only views, and sequence conditions
    into tuples, when the instance is created.
    """

    pattern: str
    name: str | None = None

    # Matching
    conditions: Mapping[str, Condition] = field(default_factory=dict)
    defaults: Mapping[str, str] = field(default_factory=dict)
    trailing_slash_optional: bool = True

    # Opaque payload returned by Route.get_data(); also gates match()
    data: Mapping[str, Any] = field(default_factory=dict)

    # Hooks
    post_match: PostMatchFilter | None = None
    pre_build: PreBuildFilter | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, str):
            msg = f"Route pattern must be a string, got {type(self.pattern).__name__}."
            raise ConfigurationError(msg)
        if self.name is not None and not isinstance(self.name, str):
            msg = f"Route name must be a string, got {type(self.name).__name__}."
            raise ConfigurationError(msg)
        for hook in ("post_match", "pre_build"):
            value = getattr(self, hook)
            if value is not None and not callable(value):
                msg = f"Route option {hook!r} must be callable, got {value!r}."
                raise ConfigurationError(msg)

        conditions: dict[str, Condition] = {}
        for param, condition in _as_mapping("conditions", self.conditions).items():
            if isinstance(condition, str):
                conditions[param] = condition
            elif isinstance(condition, (list, tuple)) and all(
                isinstance(value, str) for value in condition
            ):
                conditions[param] = tuple(condition)
            else:
                msg = (
                    f"Condition for {param!r} must be a regex string or a list "
                    f"of allowed values, got {condition!r}."
                )
                raise ConfigurationError(msg)

        defaults = {
            param: str(value)
            for param, value in _as_mapping("defaults", self.defaults).items()
        }

        data = dict(_as_mapping("data", self.data))
        if self.name is not None:
            data["name"] = self.name

        object.__setattr__(self, "conditions", MappingProxyType(conditions))
        object.__setattr__(self, "defaults", MappingProxyType(defaults))
        object.__setattr__(self, "data", MappingProxyType(data))

    @classmethod
    def from_options(cls, options: "str | Mapping[str, Any] | RouteConfig") -> "RouteConfig":
        """Coerce *options* into a RouteConfig.

        A bare string is the pattern. A mapping supplies field values by name;
        ``None`` entries fall back to the field default.
        """
        if isinstance(options, RouteConfig):
            return options
        if isinstance(options, str):
            return cls(pattern=options)
        if not isinstance(options, Mapping):
            msg = "You must specify route options as a pattern string or a mapping."
            raise ConfigurationError(msg)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(options) - known)
        if unknown:
            msg = f"Unknown route options: {', '.join(map(repr, unknown))}."
            raise ConfigurationError(msg)
        if not isinstance(options.get("pattern"), str):
            msg = "You must specify the pattern of the route."
            raise ConfigurationError(msg)

        kwargs = {key: value for key, value in options.items() if value is not None}
        return cls(**kwargs)


def _as_mapping(option: str, value: object) -> Mapping[str, Any]:
    if value is None:
        return _EMPTY
    if not isinstance(value, Mapping):
        msg = f"Route option {option!r} must be a mapping, got {type(value).__name__}."
        raise ConfigurationError(msg)
    return value

"""Match and build compilers.

Both walk the same parsed tree. ``compile_match`` emits one anchored regex
plus the name of each capture group in order; ``compile_build`` returns a
function that renders the tree back into a path.
"""

import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from waymark.errors import ConfigurationError
from waymark.routing.nodes import Literal, OptionalGroup, Parameter, PatternNode
from waymark.routing.params import condition_source, escape

type BuildProcedure = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True, slots=True)
class MatchPattern:
    """Compiled matcher.

    ``params_map[i]`` names the value captured by group ``i + 1`` of
    ``regex``. The regex is meant for ``fullmatch``.
    """

    regex: re.Pattern[str]
    params_map: tuple[str, ...]


def compile_match(
    nodes: Sequence[PatternNode],
    conditions: Mapping[str, str | tuple[str, ...]],
) -> MatchPattern:
    """Compile *nodes* into a MatchPattern.

    Raises ``ConfigurationError`` if a condition is not a valid regex, or
    if it adds capture groups of its own.
    """
    params_map: list[str] = []
    source = _match_source(nodes, conditions, params_map)

    try:
        regex = re.compile(source)
    except re.error as exc:
        msg = f"Invalid condition in route regex {source!r}: {exc}"
        raise ConfigurationError(msg) from exc

    if regex.groups != len(params_map):
        msg = (
            f"Route regex {source!r} has {regex.groups} capture groups for "
            f"{len(params_map)} parameters. Use (?:...) inside conditions."
        )
        raise ConfigurationError(msg)

    return MatchPattern(regex=regex, params_map=tuple(params_map))


def _match_source(
    nodes: Sequence[PatternNode],
    conditions: Mapping[str, str | tuple[str, ...]],
    params_map: list[str],
) -> str:
    parts: list[str] = []
    for node in nodes:
        match node:
            case Literal(text):
                parts.append(escape(text))
            case Parameter(name):
                params_map.append(name)
                parts.append(f"({condition_source(conditions.get(name))})")
            case OptionalGroup(children):
                parts.append(f"(?:{_match_source(children, conditions, params_map)})?")
    return "".join(parts)


def compile_build(
    nodes: Sequence[PatternNode],
    defaults: Mapping[str, str],
) -> BuildProcedure:
    """Compile *nodes* into a function rendering a path from params.

    A parameter renders its supplied value, else its default, else ``""``.
    An optional group renders when one of its own parameters is supplied
    with a non-default value, or when a group nested in it renders.
    """
    tree = tuple(nodes)
    defaults = dict(defaults)

    def build(params: Mapping[str, Any]) -> str:
        return _render(tree, params, defaults)

    return build


def _render(
    nodes: Sequence[PatternNode],
    params: Mapping[str, Any],
    defaults: Mapping[str, str],
) -> str:
    parts: list[str] = []
    for node in nodes:
        match node:
            case Literal(text):
                parts.append(text)
            case Parameter(name):
                if name in params:
                    parts.append(str(params[name]))
                else:
                    parts.append(defaults.get(name, ""))
            case OptionalGroup(children):
                if _renders(node, params, defaults):
                    parts.append(_render(children, params, defaults))
    return "".join(parts)


def _renders(
    group: OptionalGroup,
    params: Mapping[str, Any],
    defaults: Mapping[str, str],
) -> bool:
    for name in group.dependent_params:
        if name in params and (name not in defaults or str(params[name]) != defaults[name]):
            return True
    return any(
        _renders(child, params, defaults)
        for child in group.children
        if isinstance(child, OptionalGroup)
    )

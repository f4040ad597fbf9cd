"""Pattern parser.

Turns a route template into a tree of nodes::

    "/users/<id>"        -> (Literal("/users/"), Parameter("id"))
    "/page(/<n>)"        -> (Literal("/page"), OptionalGroup((Literal("/"), Parameter("n")), {"n"}))
    "/a(/b(/<c>))"       -> (Literal("/a"), OptionalGroup((Literal("/b"), OptionalGroup(...)), {}))

Parsing is lenient and never raises: a ``<`` or ``>`` that does not form a
``<name>`` token is literal text, as is a ``)`` with no open group. The
body of a group left unterminated at the end of the template is parsed as
plain tokens of its parent.
"""

import re

from waymark.routing.nodes import Literal, OptionalGroup, Parameter, PatternNode
from waymark.routing.params import (
    GROUP_CLOSE,
    GROUP_OPEN,
    PARAM_CLOSE,
    PARAM_NAME_SOURCE,
    PARAM_OPEN,
    escape,
)

_TOKEN_RE = re.compile(
    f"{escape(PARAM_OPEN)}(?P<name>{PARAM_NAME_SOURCE}){escape(PARAM_CLOSE)}"
    f"|[^{escape(PARAM_OPEN)}{escape(PARAM_CLOSE)}]+"
    f"|[{escape(PARAM_OPEN)}{escape(PARAM_CLOSE)}]"
)


def tokenize(text: str) -> list[PatternNode]:
    """Split group-free *text* into literals and parameters.

    Tried in order at each position: a complete ``<name>``, the longest run
    without angle brackets, a single stray bracket.
    """
    nodes: list[PatternNode] = []
    for match in _TOKEN_RE.finditer(text):
        name = match.group("name")
        if name is not None:
            nodes.append(Parameter(name))
        else:
            nodes.append(Literal(match.group()))
    return nodes


def parse_pattern(pattern: str) -> tuple[PatternNode, ...]:
    """Parse a route template into a tuple of top-level nodes."""
    nodes: list[PatternNode] = []
    buffer: list[str] = []
    in_group = False
    depth = 0  # parentheses opened inside the current group

    for char in pattern:
        if char == GROUP_OPEN:
            if in_group:
                depth += 1
                buffer.append(char)
            else:
                nodes.extend(tokenize("".join(buffer)))
                buffer = []
                in_group = True
        elif char == GROUP_CLOSE and in_group:
            if depth:
                depth -= 1
                buffer.append(char)
            else:
                nodes.append(OptionalGroup.of(*parse_pattern("".join(buffer))))
                buffer = []
                in_group = False
        else:
            buffer.append(char)

    nodes.extend(tokenize("".join(buffer)))
    return tuple(nodes)

"""Parameter charsets and regex escaping.

Constant tables shared by the parser and the match compiler.
"""

import re

# <name>: a letter or underscore, then word characters or hyphens
PARAM_NAME_SOURCE = r"[A-Za-z_][\w\-]*"

# Accepted by a parameter that has no condition
PARAM_VALUE_SOURCE = r"[\w\-.~]+"

PARAM_OPEN = "<"
PARAM_CLOSE = ">"
GROUP_OPEN = "("
GROUP_CLOSE = ")"


def escape(text: str) -> str:
    """Escape regex metacharacters so *text* matches itself literally."""
    return re.escape(text)


def condition_source(condition: str | tuple[str, ...] | None) -> str:
    """Return the regex source a parameter's capture group wraps.

    A string condition is raw regex source and is used as-is. A tuple lists
    the allowed values, which become an escaped alternation. An empty
    condition falls back to the default charset.
    """
    if not condition:
        return PARAM_VALUE_SOURCE
    if isinstance(condition, tuple):
        return "(?:" + "|".join(escape(value) for value in condition) + ")"
    return condition

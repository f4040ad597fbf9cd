"""Query-string codec.

``parse_query`` and ``stringify_query`` convert between ``k=v&k2=v2`` text
and plain dicts. Both are thin wrappers over ``urllib.parse``.
"""

from collections.abc import Mapping
from typing import Any
from urllib.parse import parse_qsl, quote, urlencode


def parse_query(query_string: str | None) -> dict[str, str | list[str]]:
    """Decode *query_string* into a dict.

    Blank values are kept. A key that appears more than once maps to the
    list of its values in order of appearance.
    """
    result: dict[str, str | list[str]] = {}
    if not query_string:
        return result

    for key, value in parse_qsl(query_string, keep_blank_values=True):
        if key not in result:
            result[key] = value
            continue
        existing = result[key]
        if isinstance(existing, list):
            existing.append(value)
        else:
            result[key] = [existing, value]
    return result


def stringify_query(params: Mapping[str, Any]) -> str:
    """Encode *params* as a query string (without the leading ``?``).

    Lists and tuples emit one pair per item. ``None`` values are skipped.
    Spaces are encoded as ``%20``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, str(item)) for item in value if item is not None)
        else:
            pairs.append((key, str(value)))
    return urlencode(pairs, quote_via=quote)

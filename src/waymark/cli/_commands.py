"""``waymark match`` and ``waymark build``.

Each command compiles a single Route from the command-line options and
prints the result to stdout.
"""

import argparse
import json
import sys

from waymark.errors import ConfigurationError
from waymark.routing.route import Route


def parse_pairs(pairs: list[str], option: str) -> dict[str, str]:
    """Split ``NAME=VALUE`` arguments into a dict.

    Exits with status 2 if an argument has no ``=``.
    """
    result: dict[str, str] = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            print(f"Error: {option} expects NAME=VALUE, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        result[name] = value
    return result


def _route_from_args(args: argparse.Namespace, data: dict[str, str] | None = None) -> Route:
    options = {
        "pattern": args.pattern,
        "conditions": parse_pairs(args.condition, "--condition"),
        "defaults": parse_pairs(args.default, "--default"),
        "data": data,
        "trailing_slash_optional": not args.strict_slash,
    }
    try:
        return Route(options)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def run_match(args: argparse.Namespace) -> None:
    """Print the parameters extracted from ``args.path`` as JSON.

    Exits with status 1 if the path does not match.
    """
    route = _route_from_args(args, parse_pairs(args.data, "--data"))

    match_object: dict[str, str] = {"path": args.path}
    match_object.update(parse_pairs(args.attr, "--attr"))

    result = route.match(match_object)
    if result is None:
        print("No match.", file=sys.stderr)
        raise SystemExit(1)

    print(json.dumps(result, sort_keys=True))


def run_build(args: argparse.Namespace) -> None:
    """Print the path built from ``args.params``."""
    route = _route_from_args(args)
    print(route.build(parse_pairs(args.params, "parameter")))

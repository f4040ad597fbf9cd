"""Waymark CLI — try route patterns from a shell.

Entry point registered as ``waymark`` in ``pyproject.toml``::

    [project.scripts]
    waymark = "waymark.cli:main"
"""

import argparse
import logging
import sys


def _add_route_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pattern", help="Route pattern (e.g. '/users/<id>(/<tab>)')")
    parser.add_argument(
        "--condition",
        action="append",
        default=[],
        metavar="NAME=REGEX",
        help="Regex a parameter must match (repeatable)",
    )
    parser.add_argument(
        "--default",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Default value of a parameter (repeatable)",
    )
    parser.add_argument(
        "--strict-slash",
        action="store_true",
        help="Do not accept an optional trailing slash",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waymark`` command."""
    parser = argparse.ArgumentParser(
        prog="waymark",
        description="Waymark — compiled URL patterns that match paths and build them back.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log route compilation")
    subparsers = parser.add_subparsers(dest="command")

    # -- waymark match ----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a path against a pattern")
    _add_route_options(match_parser)
    match_parser.add_argument("path", help="Path to match, with optional ?query")
    match_parser.add_argument(
        "--data",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Static data bound to the route, e.g. method=GET (repeatable)",
    )
    match_parser.add_argument(
        "--attr",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra attribute to match against route data, e.g. method=GET (repeatable)",
    )

    # -- waymark build ----------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a path from a pattern")
    _add_route_options(build_parser)
    build_parser.add_argument(
        "params",
        nargs="*",
        metavar="NAME=VALUE",
        help="Parameter values; names not in the pattern go to the query string",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "match":
        from waymark.cli._commands import run_match

        run_match(args)
    elif args.command == "build":
        from waymark.cli._commands import run_build

        run_build(args)

"""Courier CLI — inspect route templates and mock route tables.

Entry point registered as ``courier`` in ``pyproject.toml``::

    [project.scripts]
    courier = "courier.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``courier`` command."""
    parser = argparse.ArgumentParser(
        prog="courier",
        description="Courier — request pipeline and mock server for HTTP clients.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- courier match ----------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Match a path against a template")
    match_parser.add_argument("template", help="Route template (e.g. /users/:id)")
    match_parser.add_argument("path", help="Concrete path (e.g. /users/42)")
    match_parser.add_argument(
        "--exact",
        action="store_true",
        help="Require the whole path to match",
    )
    match_parser.add_argument(
        "--strict",
        action="store_true",
        help="Do not tolerate a trailing slash",
    )
    match_parser.add_argument(
        "--sensitive",
        action="store_true",
        help="Match case-sensitively",
    )

    # -- courier tokens ---------------------------------------------------
    tokens_parser = subparsers.add_parser("tokens", help="Show how a template is tokenized")
    tokens_parser.add_argument("template", help="Route template (e.g. /users/:id)")

    # -- courier routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List mock routes")
    routes_parser.add_argument(
        "target",
        help="Import string (e.g. myapp.mocks:mock)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "match":
        from courier.cli._match import run_match

        run_match(args)
    elif args.command == "tokens":
        from courier.cli._match import run_tokens

        run_tokens(args)
    elif args.command == "routes":
        from courier.cli._routes import run_routes

        run_routes(args)

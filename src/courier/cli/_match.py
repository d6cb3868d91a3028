"""``courier match`` and ``courier tokens`` — inspect a route template."""

import argparse
import json
import sys
from dataclasses import asdict

from courier.errors import ConfigurationError
from courier.routing.matcher import RoutePattern, match
from courier.routing.tokens import parse


def run_match(args: argparse.Namespace) -> None:
    """Print the match of ``args.path`` against ``args.template`` as JSON.

    Exits 1 when the path does not match.
    """
    pattern = RoutePattern(
        args.template,
        exact=args.exact,
        strict=args.strict,
        sensitive=args.sensitive,
    )
    try:
        result = match(args.path, pattern)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if result is None:
        print(f"No match: {args.path!r} against {args.template!r}", file=sys.stderr)
        raise SystemExit(1)

    print(
        json.dumps(
            {
                "path": result.path,
                "url": result.url,
                "is_exact": result.is_exact,
                "params": {str(k): v for k, v in result.params.items()},
            },
            indent=2,
        )
    )


def run_tokens(args: argparse.Namespace) -> None:
    """Print the tokens of ``args.template`` as a JSON list."""
    tokens = [
        token if isinstance(token, str) else asdict(token) for token in parse(args.template)
    ]
    print(json.dumps(tokens, indent=2))

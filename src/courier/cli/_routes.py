"""``courier routes`` — list a mock dispatcher's routes.

Prints METHOD, PATH and handler in registration (match priority) order.
"""

import argparse
import sys

from courier.cli._resolve import resolve_dispatcher


def run_routes(args: argparse.Namespace) -> None:
    try:
        dispatcher = resolve_dispatcher(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = dispatcher.routes
    if not routes:
        print("No routes registered.")
        return

    base_href = dispatcher.config.base_href
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        if route.name:
            handler_name = f"{handler_name} ({route.name})"
        rows.append((route.method, base_href + route.path, handler_name))

    max_method = max(6, *(len(r[0]) for r in rows))  # "METHOD" header
    max_path = max(4, *(len(r[1]) for r in rows))  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler_name in rows:
        print(fmt.format(method, path, handler_name))

"""``signpost routes``: list named routes.

Resolves an import string to an App, freezes it, and prints every
route name with its methods and path.
"""

import argparse
import sys

from signpost.cli._resolve import resolve_app
from signpost.errors import ConfigurationError


def run_routes(args: argparse.Namespace) -> None:
    """Print the route table of ``args.app``, or one path with ``--name``."""
    try:
        app = resolve_app(args.app)
        router = app.router
        table = app.routes
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.name is not None:
        path = table.get(args.name)
        if path is None:
            print(f"Error: no route named {args.name!r}", file=sys.stderr)
            raise SystemExit(1)
        print(path)
        return

    if not len(table):
        print("No routes registered.")
        return

    methods_by_name: dict[str, set[str]] = {}
    for route in router.routes:
        if route.name:
            methods_by_name.setdefault(route.name, set()).update(route.methods)

    rows = [
        (name, ", ".join(sorted(methods_by_name.get(name, ()))), str(path))
        for name, path in sorted(table.items())
    ]
    width_name = max(4, *(len(r[0]) for r in rows))
    width_methods = max(6, *(len(r[1]) for r in rows))

    fmt = f"{{:<{width_name}}}  {{:<{width_methods}}}  {{}}"
    print(fmt.format("NAME", "METHOD", "PATH"))
    print("-" * min(width_name + width_methods + 4 + max(len(r[2]) for r in rows), 80))
    for row in rows:
        print(fmt.format(*row))

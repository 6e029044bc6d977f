"""Signpost CLI: route table inspection.

Entry point registered as ``signpost`` in ``pyproject.toml``::

    [project.scripts]
    signpost = "signpost.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``signpost`` command."""
    parser = argparse.ArgumentParser(
        prog="signpost",
        description="Signpost: named, composable routes for ASGI apps.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Logging level for route composition messages",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- signpost routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List named routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    routes_parser.add_argument(
        "--name",
        default=None,
        help="Print only the path registered for this route name",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from signpost.cli._routes import run_routes

        run_routes(args)

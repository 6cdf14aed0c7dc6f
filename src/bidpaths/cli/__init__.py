"""Bidpaths CLI — inspect, resolve, validate, and export the path registry.

Entry point registered as ``bidpaths`` in ``pyproject.toml``::

    [project.scripts]
    bidpaths = "bidpaths.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``bidpaths`` command."""
    parser = argparse.ArgumentParser(
        prog="bidpaths",
        description="Bidpaths — named API endpoints and navigation routes.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Backend origin for absolute URLs (overrides BIDPATHS_API_BASE_URL)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- bidpaths list ----------------------------------------------------
    list_parser = subparsers.add_parser("list", help="List registered paths")
    list_parser.add_argument(
        "--namespace",
        choices=("ENDPOINTS", "ROUTES"),
        default=None,
        help="Only list one namespace",
    )
    list_parser.add_argument(
        "--absolute",
        action="store_true",
        help="Show absolute URLs instead of paths",
    )

    # -- bidpaths resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve one path by name")
    resolve_parser.add_argument("namespace", help="ENDPOINTS or ROUTES")
    resolve_parser.add_argument("role", help="Role, e.g. lister")
    resolve_parser.add_argument("key", help="Key, e.g. dashboard")

    # -- bidpaths check ---------------------------------------------------
    subparsers.add_parser("check", help="Validate every path template")

    # -- bidpaths export --------------------------------------------------
    export_parser = subparsers.add_parser("export", help="Print the registry as JSON")
    export_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="JSON indent (defaults to BIDPATHS_JSON_INDENT or 2)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "list":
        from bidpaths.cli._list import run_list

        run_list(args)
    elif args.command == "resolve":
        from bidpaths.cli._resolve import run_resolve

        run_resolve(args)
    elif args.command == "check":
        from bidpaths.cli._check import run_check

        run_check(args)
    elif args.command == "export":
        from bidpaths.cli._export import run_export

        run_export(args)

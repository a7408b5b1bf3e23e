"""Perch CLI — inspect view lookups from the command line.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch — view location and lookup for kida-templated web apps.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch resolve ----------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show where a view resolves")
    resolve_parser.add_argument(
        "name",
        help="View name (e.g. Index) or path (e.g. /Views/Home/Index.cshtml)",
    )
    resolve_parser.add_argument(
        "--templates",
        default="templates",
        help="Template root directory (default: templates)",
    )
    resolve_parser.add_argument("--controller", default="", help="Controller route value")
    resolve_parser.add_argument("--area", default="", help="Area route value")
    resolve_parser.add_argument(
        "--partial",
        action="store_true",
        help="Look up a partial view",
    )
    resolve_parser.add_argument(
        "--extension",
        default=".cshtml",
        help="View file extension (default: .cshtml)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from perch.cli._resolve import run_resolve

        run_resolve(args)

"""Autosub CLI — inspect pattern registries from the command line.

Entry point registered as ``autosub`` in ``pyproject.toml``::

    [project.scripts]
    autosub = "autosub.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``autosub`` command."""
    parser = argparse.ArgumentParser(
        prog="autosub",
        description="autosub — pattern-matched handlers for missing methods.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- autosub patterns -------------------------------------------------
    patterns_parser = subparsers.add_parser("patterns", help="List registered handler patterns")
    patterns_parser.add_argument(
        "target",
        help="Import string (e.g. myapp.models:Things or myapp.handlers:registry)",
    )

    # -- autosub resolve --------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show which handler answers a name")
    resolve_parser.add_argument(
        "target",
        help="Import string (e.g. myapp.models:Things or myapp.handlers:registry)",
    )
    resolve_parser.add_argument("name", help="Method name to resolve (e.g. get_foo)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "patterns":
        from autosub.cli._patterns import run_patterns

        run_patterns(args)
    elif args.command == "resolve":
        from autosub.cli._lookup import run_lookup

        run_lookup(args)

"""``autosub resolve`` — show which handler answers a method name."""

import argparse
import sys

from autosub.cli._resolve import resolve_registries
from autosub.entry import NoMatch


def run_lookup(args: argparse.Namespace) -> None:
    """Resolve ``args.name`` the way dispatch would and print the outcome.

    Registries are asked in dispatch order and the first match wins.
    Exits with status 1 when no handler matches.
    """
    try:
        registries = resolve_registries(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for owner, registry in registries:
        resolved = registry.resolve(args.name)
        if resolved is NoMatch:
            continue

        handler_name = getattr(resolved.handler, "__qualname__", repr(resolved.handler))
        print(f"{args.name} -> {handler_name}")
        print(f"  owner:   {owner}")
        print(f"  pattern: {resolved.entry.pattern.pattern}")
        print(f"  prefix:  {', '.join(repr(p) for p in resolved.prefix)}")
        return

    print(f"No handler matches {args.name!r}", file=sys.stderr)
    raise SystemExit(1)

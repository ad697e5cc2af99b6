"""``autosub patterns`` — list registered handler patterns.

Resolves an import string to its registries and prints every entry in
dispatch precedence: owner by owner along the MRO, then declaration order.
"""

import argparse
import sys

from autosub.cli._resolve import resolve_registries


def run_patterns(args: argparse.Namespace) -> None:
    """Print a table of ORDER, PATTERN, GROUPS, OWNER, and handler."""
    try:
        registries = resolve_registries(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    rows: list[tuple[str, str, str, str, str]] = []
    for owner, registry in registries:
        for entry in registry:
            handler_name = getattr(entry.handler, "__qualname__", repr(entry.handler))
            if entry.name:
                handler_name = f"{handler_name} ({entry.name})"
            rows.append((str(len(rows) + 1), entry.pattern.pattern, str(entry.groups), owner, handler_name))

    if not rows:
        print("No handlers registered.")
        return

    max_order = max(max(len(r[0]) for r in rows), 1)
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header
    max_owner = max(max(len(r[3]) for r in rows), 5)  # "OWNER" header

    fmt = f"{{:>{max_order}}}  {{:<{max_pattern}}}  {{:>6}}  {{:<{max_owner}}}  {{}}"
    print(fmt.format("#", "PATTERN", "GROUPS", "OWNER", "HANDLER"))
    sep_len = max_order + max_pattern + max_owner + 14 + max(len(r[4]) for r in rows)
    print("-" * min(sep_len, 80))
    for row in rows:
        print(fmt.format(*row))

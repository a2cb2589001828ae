"""CLI for conventions: buildconv conventions show."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from buildconv_tooling.cli.parse_common import table_from_arg
from buildconv_tooling.conventions import ROLES, ConventionError


def run_conventions_show(argv: list[str]) -> int:
    """Print the (language, role) -> directory table, as columns or JSON."""
    ap = argparse.ArgumentParser(
        prog="buildconv conventions show", description="Print the convention table"
    )
    ap.add_argument(
        "--conventions",
        type=Path,
        default=None,
        help="Conventions file overriding the built-in table",
    )
    ap.add_argument("--json", action="store_true", help="Print the table as JSON")
    args = ap.parse_args(argv)

    try:
        table = table_from_arg(args.conventions)
    except ConventionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(table.as_dict(), indent=2, sort_keys=True))
        return 0
    width = max([len("language"), *(len(lang) for lang in table)])
    print(f"{'language':<{width}}  " + "  ".join(f"{r.value:<12}" for r in ROLES).rstrip())
    for language in table.languages():
        paths = "  ".join(f"{table.resolve(language, r):<12}" for r in ROLES)
        print(f"{language:<{width}}  {paths}".rstrip())
    return 0


def run_conventions_show_argv(argv: list[str] | None = None) -> None:
    """buildconv conventions show [--conventions <file>] [--json]. argv defaults to sys.argv[3:]."""
    if argv is None:
        argv = sys.argv[3:]
    sys.exit(run_conventions_show(argv))

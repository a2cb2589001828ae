"""`buildconv layout` subcommands: apply, migrate."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from buildconv_tooling.cli.parse_common import configure_logging, table_from_arg
from buildconv_tooling.conventions import ConventionError, resolve_bindings
from buildconv_tooling.migrate import STAGING_DIR, apply_moves, plan_moves
from buildconv_tooling.plugin import configure_project
from buildconv_tooling.project import (
    dump_project_file,
    layout_to_dict,
    load_project_file,
    maven_default_layout,
)


def _base_parser(prog: str, description: str) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=prog, description=description)
    ap.add_argument(
        "--project-file",
        type=Path,
        default=Path("buildconv.yaml"),
        help="Project file (default: buildconv.yaml)",
    )
    ap.add_argument(
        "--conventions",
        type=Path,
        default=None,
        help="Conventions file overriding the built-in table",
    )
    ap.add_argument("--verbose", action="store_true", help="Debug logging")
    return ap


def run_layout_apply(argv: list[str]) -> int:
    """Apply conventions to the project file's languages; print (and optionally write) the bindings."""
    ap = _base_parser("buildconv layout apply", "Apply directory conventions to a project")
    ap.add_argument("--write", action="store_true", help="Save resolved bindings to the project file")
    ap.add_argument("--json", action="store_true", help="Print bindings as JSON")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    try:
        table = table_from_arg(args.conventions)
        project = load_project_file(args.project_file)
        configure_project(project, table)
    except ConventionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    bindings = layout_to_dict(project.layout)
    if args.json:
        print(json.dumps(bindings, indent=2))
    else:
        for language, roles in bindings.items():
            managed = "" if language in project.active_languages else "  (unmanaged)"
            print(f"{language}{managed}")
            for role, path in roles.items():
                print(f"  {role:<9} {path}")
    if args.write:
        dump_project_file(project, args.project_file)
        print(f"✅ Updated {args.project_file}")
    return 0


def run_layout_migrate(argv: list[str]) -> int:
    """Move source folders from the project's current bindings to the convention (or Maven) layout."""
    ap = _base_parser("buildconv layout migrate", "Move source folders between layouts")
    ap.add_argument(
        "--to",
        choices=("convention", "maven"),
        default="convention",
        help="Target layout (default: convention)",
    )
    ap.add_argument("--dry-run", action="store_true", help="Only print planned moves")
    args = ap.parse_args(argv)
    configure_logging(args.verbose)

    try:
        table = table_from_arg(args.conventions)
        project = load_project_file(args.project_file)
        if args.to == "maven":
            target = maven_default_layout(project.active_languages)
            current = dict(project.layout)
            current.update(resolve_bindings(project.active_languages, table))
        else:
            target = resolve_bindings(project.active_languages, table)
            current = project.layout
    except ConventionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    root = project.project_dir
    moves = plan_moves(root, current, target)
    if not moves:
        print("No source folders to move.")
        return 0
    prefix = "[DRY-RUN] " if args.dry_run else ""
    for m in moves:
        print(f"{prefix}{m.describe(root)}")
    done = apply_moves(moves, root, dry_run=args.dry_run)
    verb = "Would move" if args.dry_run else "Moved"
    print(f"{prefix}{verb} {done} of {len(moves)} folder(s).")
    if done < len(moves):
        staging = root / STAGING_DIR
        if not args.dry_run and staging.exists():
            print(f"❌ Unmoved files left in {staging}; project file not updated", file=sys.stderr)
        return 1
    if not args.dry_run:
        project.layout.update(target)
        dump_project_file(project, args.project_file)
    return 0


def run_layout_argv(argv: list[str] | None = None) -> None:
    """Parse layout subcommand from argv and run. argv defaults to sys.argv[2:] when called from main."""
    if argv is None:
        argv = sys.argv[2:] if len(sys.argv) > 2 else []
    if not argv:
        print("buildconv layout: missing subcommand (apply, migrate)", file=sys.stderr)
        sys.exit(1)
    cmd, rest = argv[0], argv[1:]
    if cmd == "apply":
        sys.exit(run_layout_apply(rest))
    if cmd == "migrate":
        sys.exit(run_layout_migrate(rest))
    print(f"Error: Unknown layout subcommand: {cmd}", file=sys.stderr)
    sys.exit(1)

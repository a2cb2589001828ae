"""Main CLI entry point for buildconv."""

import sys

from buildconv_tooling.cli import conventions_cmd, layout_cmd


def _usage() -> None:
    print("Usage: buildconv <command> [args...]", file=sys.stderr)
    print("Commands:", file=sys.stderr)
    print(
        "  conventions show      - Print the (language, role) -> directory table",
        file=sys.stderr,
    )
    print(
        "  layout apply          - Apply conventions to a project file's languages",
        file=sys.stderr,
    )
    print(
        "  layout migrate        - Move source folders to the convention (or Maven) layout",
        file=sys.stderr,
    )


def main() -> None:
    """Main CLI entry point."""
    if len(sys.argv) < 2:
        _usage()
        sys.exit(1)

    command = sys.argv[1]

    if command == "conventions":
        if len(sys.argv) < 3:
            print("Usage: buildconv conventions <subcommand>", file=sys.stderr)
            print("Subcommands:", file=sys.stderr)
            print("  show  - Print the convention table", file=sys.stderr)
            sys.exit(1)
        subcommand = sys.argv[2]
        if subcommand == "show":
            conventions_cmd.run_conventions_show_argv()
        else:
            print(f"Error: Unknown conventions subcommand: {subcommand}", file=sys.stderr)
            sys.exit(1)
    elif command == "layout":
        layout_cmd.run_layout_argv()
    elif command in ("-h", "--help", "help"):
        _usage()
        sys.exit(0)
    else:
        print(f"Error: Unknown command: {command}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

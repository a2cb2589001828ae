"""Shared CLI helpers: convention table from --conventions, logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

from buildconv_tooling.conventions import ConventionTable, default_table, load_conventions_file


def table_from_arg(conventions: Path | None) -> ConventionTable:
    """Convention table from --conventions file, or the built-in defaults."""
    if conventions is None:
        return default_table()
    return load_conventions_file(conventions.resolve())


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

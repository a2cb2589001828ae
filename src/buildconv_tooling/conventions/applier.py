"""Apply the convention table to a project's (language, role) -> directory bindings.

Every path is resolved before the first write, so an unknown language leaves the
layout untouched. Values always come straight from the table, which keeps
repeated application idempotent. No directories are created here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, MutableMapping

from buildconv_tooling.conventions.config import default_table
from buildconv_tooling.conventions.table import ROLES, ConventionTable, Role

log = logging.getLogger(__name__)

ProjectLayout = MutableMapping[tuple[str, Role], str]


def resolve_bindings(
    active_languages: Iterable[str],
    table: ConventionTable | None = None,
) -> dict[tuple[str, Role], str]:
    """Target bindings for every active language and role. Raises UnknownLanguageError."""
    if table is None:
        table = default_table()
    out: dict[tuple[str, Role], str] = {}
    for language in active_languages:
        for role in ROLES:
            out[(language, role)] = table.resolve(language, role)
    return out


def apply_layout(
    active_languages: Iterable[str],
    layout: ProjectLayout,
    table: ConventionTable | None = None,
) -> ProjectLayout:
    """Overwrite bindings of active languages with the convention; leave other languages alone.

    Mutates layout in place and returns it.
    """
    target = resolve_bindings(active_languages, table)
    changed = 0
    for key, path in target.items():
        previous = layout.get(key)
        if previous != path:
            language, role = key
            log.debug("%s %s: %s -> %s", language, role.value, previous, path)
            changed += 1
        layout[key] = path
    log.info(
        "Applied conventions for %d language(s), %d binding(s) changed",
        len({lang for lang, _ in target}),
        changed,
    )
    return layout

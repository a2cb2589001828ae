"""Host entry point: configure a project's directory layout from the convention table."""

from __future__ import annotations

import logging

from buildconv_tooling.conventions import ConventionTable, apply_layout
from buildconv_tooling.project.model import ProjectModel

log = logging.getLogger(__name__)


def configure_project(project: ProjectModel, table: ConventionTable | None = None) -> ProjectModel:
    """Call once after host defaults are set, before tasks are wired.

    Languages are never auto-enabled; only project.active_languages is used.
    Raises UnknownLanguageError with project.layout unmodified.
    """
    if not project.active_languages:
        log.info("%s: no active languages, layout left as is", project.name)
        return project
    log.info(
        "%s: applying directory conventions for %s",
        project.name,
        ", ".join(sorted(map(str, project.active_languages))),
    )
    apply_layout(project.active_languages, project.layout, table)
    return project

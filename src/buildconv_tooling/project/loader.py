"""Project file (YAML) load/dump.

Format::

    name: my-project
    languages: [java, groovy]
    maven_defaults: true        # seed layout with src/main/<lang> etc.
    layout:                     # current bindings, laid over the defaults
      java:
        source: legacy/src
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from buildconv_tooling.conventions.errors import ConventionConfigError
from buildconv_tooling.conventions.table import ROLES, Role
from buildconv_tooling.project.maven import maven_default_layout
from buildconv_tooling.project.model import ProjectModel


def layout_from_dict(data: Mapping[str, Any] | None) -> dict[tuple[str, Role], str]:
    """{language: {role: path}} -> {(language, Role): path}. Raises UnknownRoleError on bad role keys."""
    out: dict[tuple[str, Role], str] = {}
    for language, roles in (data or {}).items():
        if not isinstance(roles, Mapping):
            msg = f"Layout for {language!r} must be a mapping of role -> path"
            raise ConventionConfigError(msg)
        for role, path in roles.items():
            r = Role.coerce(role)
            if not isinstance(path, str) or not path.strip():
                msg = f"Layout path for ({language}, {r.value}) must be a non-empty string, got {path!r}"
                raise ConventionConfigError(msg)
            out[(str(language), r)] = path
    return out


def layout_to_dict(layout: Mapping[tuple[str, Role], str]) -> dict[str, dict[str, str]]:
    """{(language, Role): path} -> {language: {role: path}}, languages sorted, roles in source/test/resource order."""
    out: dict[str, dict[str, str]] = {}
    for language in sorted({lang for lang, _ in layout}):
        out[language] = {r.value: layout[(language, r)] for r in ROLES if (language, r) in layout}
    return out


def load_project_file(path: Path) -> ProjectModel:
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot read project file {path}: {e}"
        raise ConventionConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"Project file {path} must contain a mapping"
        raise ConventionConfigError(msg)
    languages = data.get("languages") or []
    if isinstance(languages, str) or not isinstance(languages, list):
        msg = f"`languages` in {path} must be a list"
        raise ConventionConfigError(msg)
    active = {str(lang) for lang in languages}
    layout: dict[tuple[str, Role], str] = {}
    if data.get("maven_defaults"):
        layout.update(maven_default_layout(active))
    layout.update(layout_from_dict(data.get("layout")))
    return ProjectModel(
        name=str(data.get("name") or path.resolve().parent.name),
        project_dir=path.resolve().parent,
        active_languages=active,
        layout=layout,
    )


def dump_project_file(project: ProjectModel, path: Path) -> None:
    """Write the project back with its current bindings (maven_defaults dropped: the layout is explicit)."""
    data = {
        "name": project.name,
        "languages": sorted(project.active_languages),
        "layout": layout_to_dict(project.layout),
    }
    with path.open("w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)

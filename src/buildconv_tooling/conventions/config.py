"""Default convention layout and conventions-file loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from buildconv_tooling.conventions.errors import ConventionConfigError
from buildconv_tooling.conventions.table import ROLES, ConventionTable
from buildconv_tooling.helpers import derive_language_entries

# Flat top-level roots instead of Maven's src/main/<lang>; override per project via conventions file.
DEFAULT_CONVENTIONS: dict[str, dict[str, str]] = {
    "java": {
        "source": "src",
        "test": "test",
        "resource": "resources",
    },
    "groovy": {
        "source": "groovySrc",
        "test": "groovyTest",
        "resource": "resources",
    },
}

_ROLE_KEYS = {r.value for r in ROLES}


def _check_value(language: Any, role: str, path: Any) -> str:
    if not isinstance(path, str) or not path.strip():
        msg = f"Convention path for ({language}, {role}) must be a non-empty string, got {path!r}"
        raise ConventionConfigError(msg)
    return path


def resolve_conventions(overrides: dict[str, Any] | None) -> dict[str, dict[str, str]]:
    """Return {language: {role: path}} with defaults filled.

    Known languages keep their default for roles the override omits; new languages
    get derived <lang>Src / <lang>Test / resources for omitted roles. Unknown role
    keys are ignored.
    """
    out = {lang: dict(roles) for lang, roles in DEFAULT_CONVENTIONS.items()}
    if overrides is None:
        return out
    for language, roles in overrides.items():
        if roles is None:
            roles = {}
        if not isinstance(roles, dict):
            msg = f"Conventions for {language!r} must be a mapping of role -> path, got {type(roles).__name__}"
            raise ConventionConfigError(msg)
        base = out.get(language)
        if base is None:
            try:
                base = derive_language_entries(str(language))
            except ValueError as e:
                raise ConventionConfigError(str(e)) from e
        for role, path in roles.items():
            if role in _ROLE_KEYS:
                base[role] = _check_value(language, role, path)
        out[str(language)] = base
    return out


def default_table() -> ConventionTable:
    return ConventionTable(DEFAULT_CONVENTIONS)


def build_table(overrides: dict[str, Any] | None = None) -> ConventionTable:
    """ConventionTable from defaults plus overrides."""
    return ConventionTable(resolve_conventions(overrides))


def load_conventions_file(path: Path) -> ConventionTable:
    """Load a YAML file with a top-level `conventions:` mapping and build the table."""
    try:
        with path.open() as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        msg = f"Cannot read conventions file {path}: {e}"
        raise ConventionConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"Conventions file {path} must contain a mapping"
        raise ConventionConfigError(msg)
    overrides = data.get("conventions")
    if overrides is not None and not isinstance(overrides, dict):
        msg = f"`conventions` in {path} must be a mapping of language -> roles"
        raise ConventionConfigError(msg)
    return build_table(overrides)

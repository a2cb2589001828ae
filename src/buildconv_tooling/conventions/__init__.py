"""Directory conventions per (language, role) and applying them to a project layout."""

from buildconv_tooling.conventions.applier import ProjectLayout, apply_layout, resolve_bindings
from buildconv_tooling.conventions.config import (
    DEFAULT_CONVENTIONS,
    build_table,
    default_table,
    load_conventions_file,
    resolve_conventions,
)
from buildconv_tooling.conventions.errors import (
    ConventionConfigError,
    ConventionError,
    UnknownLanguageError,
    UnknownRoleError,
)
from buildconv_tooling.conventions.table import ROLES, ConventionTable, Role

__all__ = [
    "DEFAULT_CONVENTIONS",
    "ROLES",
    "ConventionConfigError",
    "ConventionError",
    "ConventionTable",
    "ProjectLayout",
    "Role",
    "UnknownLanguageError",
    "UnknownRoleError",
    "apply_layout",
    "build_table",
    "default_table",
    "load_conventions_file",
    "resolve_bindings",
    "resolve_conventions",
]

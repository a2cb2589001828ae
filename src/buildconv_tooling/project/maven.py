"""Host-tool default (Maven standard directory) layout."""

from __future__ import annotations

from collections.abc import Iterable

from buildconv_tooling.conventions.table import Role

MAVEN_RESOURCE_DIR = "src/main/resources"


def maven_default_bindings(language: str) -> dict[Role, str]:
    """src/main/<lang>, src/test/<lang>, src/main/resources."""
    return {
        Role.SOURCE: f"src/main/{language}",
        Role.TEST: f"src/test/{language}",
        Role.RESOURCE: MAVEN_RESOURCE_DIR,
    }


def maven_default_layout(languages: Iterable[str]) -> dict[tuple[str, Role], str]:
    out: dict[tuple[str, Role], str] = {}
    for language in sorted(set(languages)):
        for role, path in maven_default_bindings(language).items():
            out[(language, role)] = path
    return out

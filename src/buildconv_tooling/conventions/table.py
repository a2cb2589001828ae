"""Convention table: (language, role) -> relative directory name."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Any

from buildconv_tooling.conventions.errors import (
    ConventionConfigError,
    UnknownLanguageError,
    UnknownRoleError,
)
from buildconv_tooling.helpers import derive_language_entries


class Role(str, Enum):
    SOURCE = "source"
    TEST = "test"
    RESOURCE = "resource"

    @classmethod
    def coerce(cls, value: Any) -> Role:
        """Accept a Role or its name/value string ("source", "TEST"); raise UnknownRoleError otherwise."""
        if isinstance(value, Role):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownRoleError(value)


ROLES: tuple[Role, ...] = tuple(Role)


def _check_path(language: str, role: Role, path: Any) -> str:
    if not isinstance(path, str) or not path.strip():
        msg = f"Convention path for ({language}, {role.value}) must be a non-empty string, got {path!r}"
        raise ConventionConfigError(msg)
    if PurePosixPath(path).is_absolute():
        msg = f"Convention path for ({language}, {role.value}) must be relative: {path}"
        raise ConventionConfigError(msg)
    return path.strip()


class ConventionTable:
    """Read-only mapping from (language, role) to a relative directory.

    Every language carries exactly one path per role; construction fails on
    partial entries so that resolve() is total over languages x roles.
    """

    def __init__(self, entries: Mapping[str, Mapping[Any, str]]):
        table: dict[str, Mapping[Role, str]] = {}
        for language, roles in entries.items():
            if not isinstance(language, str) or not language:
                msg = f"Language identifier must be a non-empty string, got {language!r}"
                raise ConventionConfigError(msg)
            paths = {Role.coerce(r): p for r, p in roles.items()}
            missing = [r.value for r in ROLES if r not in paths]
            if missing:
                msg = f"Language {language!r} is missing roles: {', '.join(missing)}"
                raise ConventionConfigError(msg)
            table[language] = MappingProxyType(
                {r: _check_path(language, r, paths[r]) for r in ROLES}
            )
        self._table = MappingProxyType(table)

    def __contains__(self, language: object) -> bool:
        return language in self._table

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConventionTable):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        return f"ConventionTable({self.as_dict()!r})"

    def languages(self) -> list[str]:
        return sorted(self._table)

    def resolve(self, language: str, role: Role | str) -> str:
        """Relative directory for (language, role). Pure lookup."""
        r = Role.coerce(role)
        try:
            entries = self._table[language]
        except (KeyError, TypeError):
            raise UnknownLanguageError(language, list(self._table)) from None
        return entries[r]

    def entries_for(self, language: str) -> dict[Role, str]:
        return {r: self.resolve(language, r) for r in ROLES}

    def with_language(
        self, language: str, entries: Mapping[Any, str] | None = None
    ) -> ConventionTable:
        """New table with language added or replaced. Without entries, derive <lang>Src / <lang>Test / resources."""
        if entries is None:
            try:
                entries = derive_language_entries(language)
            except ValueError as e:
                raise ConventionConfigError(str(e)) from e
        merged: dict[str, Mapping[Any, str]] = {k: dict(v) for k, v in self._table.items()}
        merged[language] = entries
        return ConventionTable(merged)

    def as_dict(self) -> dict[str, dict[str, str]]:
        """Plain {language: {role: path}} copy (role keys as strings)."""
        return {
            lang: {r.value: p for r, p in roles.items()} for lang, roles in self._table.items()
        }

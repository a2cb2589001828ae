"""Errors raised while resolving or applying directory conventions."""

from __future__ import annotations

from typing import Any


class ConventionError(ValueError):
    """Base class for convention lookup and configuration failures."""


class UnknownLanguageError(ConventionError):
    """Language has no entry in the convention table."""

    def __init__(self, language: Any, known: list[str] | None = None):
        self.language = language
        self.known = sorted(known) if known else []
        msg = f"Unknown language {language!r}"
        if self.known:
            msg += f" (known: {', '.join(self.known)})"
        super().__init__(msg)


class UnknownRoleError(ConventionError):
    """Role is not one of source, test, resource."""

    def __init__(self, role: Any):
        self.role = role
        super().__init__(f"Unknown role {role!r} (expected source, test or resource)")


class ConventionConfigError(ConventionError):
    """Convention or project file is malformed."""

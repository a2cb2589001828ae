"""In-memory project model: active languages and current directory bindings."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from buildconv_tooling.conventions.table import ROLES, Role


@dataclass
class ProjectModel:
    """What a host build tool exposes to the convention plugin."""

    name: str
    project_dir: Path = field(default_factory=Path.cwd)
    active_languages: set[str] = field(default_factory=set)
    layout: dict[tuple[str, Role], str] = field(default_factory=dict)

    def enable_language(self, language: str) -> None:
        self.active_languages.add(language)

    def bindings_for(self, language: str) -> dict[Role, str]:
        """Bound directories for one language (roles without a binding are omitted)."""
        return {r: self.layout[(language, r)] for r in ROLES if (language, r) in self.layout}

    def bound_languages(self) -> list[str]:
        return sorted({lang for lang, _ in self.layout} | self.active_languages)

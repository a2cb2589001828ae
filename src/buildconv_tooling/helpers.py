"""Shared helpers for buildconv_tooling (case conversion, derived convention names).

Used by conventions, project, and cli modules.
"""

from __future__ import annotations

# --- Text ---


def to_kebab_cased(any_cased: str) -> str:
    """Split on upper-case letters and digits, join lower-cased parts with '-' (e.g. GroovyDsl -> groovy-dsl)."""
    parts: list[str] = []
    part = ""
    for ch in any_cased:
        if ch.isupper() or ch.isdigit():
            if part:
                parts.append(part.lower())
            part = ch
        elif ch in "-_ ":
            if part:
                parts.append(part.lower())
            part = ""
        else:
            part += ch
    if part:
        parts.append(part.lower())
    return "-".join(parts)


def to_pascal_cased(any_cased: str) -> str:
    """Convert kebab-case to PascalCase (e.g. my-lang -> MyLang)."""
    return "".join(word[:1].upper() + word[1:] for word in any_cased.split("-"))


def to_camel_cased(any_cased: str) -> str:
    """Convert kebab-case to camelCase (e.g. my-lang -> myLang)."""
    pascal = to_pascal_cased(any_cased)
    return pascal[:1].lower() + pascal[1:]


# --- Naming ---

SHARED_RESOURCE_DIR = "resources"


def derive_language_entries(language: str) -> dict[str, str]:
    """Default flat layout for a secondary language: <lang>Src, <lang>Test, shared resources."""
    stem = to_camel_cased(to_kebab_cased(language))
    if not stem:
        msg = f"Cannot derive a directory name from language {language!r}"
        raise ValueError(msg)
    return {
        "source": f"{stem}Src",
        "test": f"{stem}Test",
        "resource": SHARED_RESOURCE_DIR,
    }

"""Pytest fixtures for buildconv tooling tests."""

from pathlib import Path

import pytest


@pytest.fixture
def write_project_file(tmp_path: Path):
    """Write a project YAML into tmp_path and return its path."""

    def _write(text: str, name: str = "buildconv.yaml") -> Path:
        p = tmp_path / name
        p.write_text(text)
        return p

    return _write


@pytest.fixture
def maven_tree(tmp_path: Path) -> Path:
    """Maven-style java + groovy tree with one file per folder. Returns project dir."""
    for rel in (
        "src/main/java/Foo.java",
        "src/test/java/FooTest.java",
        "src/main/resources/app.properties",
        "src/main/groovy/Bar.groovy",
        "src/test/groovy/BarTest.groovy",
    ):
        f = tmp_path / rel
        f.parent.mkdir(parents=True, exist_ok=True)
        f.write_text(rel)
    return tmp_path

"""Tests for buildconv_tooling.project.loader."""

import pytest
import yaml


class TestLoadProjectFile:
    def test_languages_and_explicit_layout(self, write_project_file) -> None:
        from buildconv_tooling.conventions import Role
        from buildconv_tooling.project import load_project_file

        p = write_project_file(
            "name: demo\nlanguages: [java, groovy]\nlayout:\n  java:\n    source: legacy/src\n"
        )
        project = load_project_file(p)
        assert project.name == "demo"
        assert project.active_languages == {"java", "groovy"}
        assert project.layout == {("java", Role.SOURCE): "legacy/src"}
        assert project.project_dir == p.resolve().parent

    def test_maven_defaults_then_explicit(self, write_project_file) -> None:
        from buildconv_tooling.conventions import Role
        from buildconv_tooling.project import load_project_file

        p = write_project_file(
            "languages: [java]\nmaven_defaults: true\nlayout:\n  java:\n    test: tests\n"
        )
        project = load_project_file(p)
        assert project.layout[("java", Role.SOURCE)] == "src/main/java"
        assert project.layout[("java", Role.TEST)] == "tests"
        assert project.name == p.resolve().parent.name

    def test_languages_must_be_list(self, write_project_file) -> None:
        from buildconv_tooling.conventions import ConventionConfigError
        from buildconv_tooling.project import load_project_file

        p = write_project_file("languages: java\n")
        with pytest.raises(ConventionConfigError, match="must be a list"):
            load_project_file(p)

    def test_bad_role_in_layout(self, write_project_file) -> None:
        from buildconv_tooling.conventions import UnknownRoleError
        from buildconv_tooling.project import load_project_file

        p = write_project_file("languages: [java]\nlayout:\n  java:\n    docs: doc\n")
        with pytest.raises(UnknownRoleError):
            load_project_file(p)

    def test_missing_file(self, tmp_path) -> None:
        from buildconv_tooling.conventions import ConventionConfigError
        from buildconv_tooling.project import load_project_file

        with pytest.raises(ConventionConfigError):
            load_project_file(tmp_path / "missing.yaml")


class TestDumpProjectFile:
    def test_writes_configured_layout(self, write_project_file) -> None:
        from buildconv_tooling.plugin import configure_project
        from buildconv_tooling.project import dump_project_file, load_project_file

        p = write_project_file("name: demo\nlanguages: [groovy]\nmaven_defaults: true\n")
        project = configure_project(load_project_file(p))
        dump_project_file(project, p)
        data = yaml.safe_load(p.read_text())
        assert data == {
            "name": "demo",
            "languages": ["groovy"],
            "layout": {
                "groovy": {"source": "groovySrc", "test": "groovyTest", "resource": "resources"}
            },
        }

    def test_reload_is_stable(self, write_project_file) -> None:
        from buildconv_tooling.plugin import configure_project
        from buildconv_tooling.project import dump_project_file, load_project_file

        p = write_project_file("name: demo\nlanguages: [java]\n")
        project = configure_project(load_project_file(p))
        dump_project_file(project, p)
        again = configure_project(load_project_file(p))
        assert again.layout == project.layout


class TestLayoutToDict:
    def test_role_order(self) -> None:
        from buildconv_tooling.conventions import Role
        from buildconv_tooling.project import layout_to_dict

        got = layout_to_dict(
            {("java", Role.RESOURCE): "resources", ("java", Role.SOURCE): "src"}
        )
        assert list(got["java"]) == ["source", "resource"]


class TestLayoutFromDict:
    def test_null_path_rejected(self, write_project_file) -> None:
        from buildconv_tooling.conventions import ConventionConfigError
        from buildconv_tooling.project import load_project_file

        p = write_project_file("languages: [java]\nlayout:\n  java:\n    source:\n")
        with pytest.raises(ConventionConfigError, match="non-empty string"):
            load_project_file(p)

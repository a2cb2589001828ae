"""Tests for buildconv_tooling.migrate.tree."""

from pathlib import Path


def _layouts():
    from buildconv_tooling.conventions import resolve_bindings
    from buildconv_tooling.project import maven_default_layout

    languages = {"java", "groovy"}
    return maven_default_layout(languages), resolve_bindings(languages)


class TestPlanMoves:
    def test_maven_to_convention(self, maven_tree: Path) -> None:
        from buildconv_tooling.migrate import plan_moves

        maven, convention = _layouts()
        moves = plan_moves(maven_tree, maven, convention)
        got = sorted(m.describe(maven_tree) for m in moves)
        assert got == [
            "groovy resource: src/main/resources -> resources",
            "groovy source: src/main/groovy -> groovySrc",
            "groovy test: src/test/groovy -> groovyTest",
            "java source: src/main/java -> src",
            "java test: src/test/java -> test",
        ]

    def test_missing_source_dirs_skipped(self, tmp_path: Path) -> None:
        from buildconv_tooling.migrate import plan_moves

        maven, convention = _layouts()
        assert plan_moves(tmp_path, maven, convention) == []

    def test_identical_layouts_plan_nothing(self, maven_tree: Path) -> None:
        from buildconv_tooling.migrate import plan_moves

        maven, _ = _layouts()
        assert plan_moves(maven_tree, maven, maven) == []


class TestApplyMoves:
    def test_maven_to_convention_and_back(self, maven_tree: Path) -> None:
        from buildconv_tooling.migrate import STAGING_DIR, apply_moves, plan_moves

        maven, convention = _layouts()
        moves = plan_moves(maven_tree, maven, convention)
        assert apply_moves(moves, maven_tree) == 5
        assert (maven_tree / "src" / "Foo.java").is_file()
        assert (maven_tree / "test" / "FooTest.java").is_file()
        assert (maven_tree / "resources" / "app.properties").is_file()
        assert (maven_tree / "groovySrc" / "Bar.groovy").is_file()
        assert (maven_tree / "groovyTest" / "BarTest.groovy").is_file()
        assert not (maven_tree / "src" / "main").exists()
        assert not (maven_tree / STAGING_DIR).exists()

        back = plan_moves(maven_tree, convention, maven)
        assert apply_moves(back, maven_tree) == 5
        assert (maven_tree / "src" / "main" / "java" / "Foo.java").is_file()
        assert (maven_tree / "src" / "test" / "java" / "FooTest.java").is_file()
        assert (maven_tree / "src" / "main" / "resources" / "app.properties").is_file()
        assert not (maven_tree / "groovySrc").exists()

    def test_dry_run_moves_nothing(self, maven_tree: Path) -> None:
        from buildconv_tooling.migrate import apply_moves, plan_moves

        maven, convention = _layouts()
        moves = plan_moves(maven_tree, maven, convention)
        assert apply_moves(moves, maven_tree, dry_run=True) == 5
        assert (maven_tree / "src" / "main" / "java" / "Foo.java").is_file()
        assert not (maven_tree / "groovySrc").exists()

    def test_non_empty_destination_skipped(self, maven_tree: Path) -> None:
        from buildconv_tooling.migrate import apply_moves, plan_moves

        (maven_tree / "test").mkdir()
        (maven_tree / "test" / "keep.txt").write_text("x")
        maven, convention = _layouts()
        moves = plan_moves(maven_tree, maven, convention)
        assert apply_moves(moves, maven_tree) == 4
        assert (maven_tree / "src" / "test" / "java" / "FooTest.java").is_file()
        assert not (maven_tree / "test" / "FooTest.java").exists()

    def test_no_moves(self, tmp_path: Path) -> None:
        from buildconv_tooling.migrate import apply_moves

        assert apply_moves([], tmp_path) == 0


class TestMergeCollision:
    def test_colliding_child_stays_staged(self, tmp_path: Path) -> None:
        from buildconv_tooling.conventions import Role
        from buildconv_tooling.migrate import STAGING_DIR, apply_moves, plan_moves

        (tmp_path / "src" / "main" / "java" / "us").mkdir(parents=True)
        (tmp_path / "src" / "main" / "java" / "us" / "Foo.java").write_text("new")
        (tmp_path / "src" / "us").mkdir()
        (tmp_path / "src" / "us" / "Old.java").write_text("old")
        moves = plan_moves(
            tmp_path,
            {("java", Role.SOURCE): "src/main/java"},
            {("java", Role.SOURCE): "src"},
        )
        assert len(moves) == 1
        assert apply_moves(moves, tmp_path) == 0
        assert (tmp_path / "src" / "us" / "Old.java").read_text() == "old"
        assert not (tmp_path / "src" / "us" / "Foo.java").exists()
        stranded = list((tmp_path / STAGING_DIR).rglob("Foo.java"))
        assert len(stranded) == 1

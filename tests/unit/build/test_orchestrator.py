"""Tests for build orchestration across units."""

import sys
from pathlib import Path

import pytest

from copper.build import BuildOrchestrator, CompileError, NoUnitsError, UnitNotFoundError
from copper.config import ProjectCompiler, ProjectConfig, ProjectLanguage, UnitType
from copper.toolchain import ToolchainNotSupportedError


class TestBuildOrchestrator:
    """Test suite for BuildOrchestrator."""

    @pytest.fixture(autouse=True)
    def posix_platform(self, monkeypatch):
        monkeypatch.setattr(sys, "platform", "linux")

    @pytest.fixture
    def two_unit_project(self, c_project, tmp_path):
        """Add a second unit 'tool' to the C project."""
        tools = tmp_path / "tools"
        tools.mkdir()
        (tools / "tool.c").write_text("int main(void) { return 0; }\n")
        c_project.add_unit("tool", UnitType.BINARY, Path("tools"))
        return c_project

    def test_build_all_units(self, two_unit_project, fake_compiler, tmp_path):
        result = BuildOrchestrator().build(two_unit_project)

        assert [unit.name for unit in result.units] == ["app", "tool"]
        assert result.artifacts == [tmp_path / "build" / "bin" / "app", tmp_path / "build" / "bin" / "tool"]
        # app: 2 compiles + link, tool: 1 compile + link
        assert len(fake_compiler.calls) == 5
        assert result.build_time >= 0

    def test_build_selected_units_in_order(self, two_unit_project, fake_compiler):
        result = BuildOrchestrator().build(two_unit_project, ["tool", "app"])

        assert [unit.name for unit in result.units] == ["tool", "app"]

    def test_empty_selection_builds_all(self, two_unit_project, fake_compiler):
        result = BuildOrchestrator().build(two_unit_project, [])

        assert len(result.units) == 2

    def test_unknown_unit(self, two_unit_project, fake_compiler):
        with pytest.raises(UnitNotFoundError) as exc_info:
            BuildOrchestrator().build(two_unit_project, ["missing"])

        assert exc_info.value.unit_name == "missing"
        assert "app, tool" in str(exc_info.value)
        assert fake_compiler.calls == []

    def test_unknown_unit_is_checked_lazily(self, two_unit_project, fake_compiler, tmp_path):
        with pytest.raises(UnitNotFoundError):
            BuildOrchestrator().build(two_unit_project, ["app", "missing", "tool"])

        assert (tmp_path / "build" / "bin" / "app").exists()
        assert not (tmp_path / "build" / "bin" / "tool").exists()

    def test_no_units(self, tmp_path, fake_compiler):
        project = ProjectConfig(
            name="empty",
            language=ProjectLanguage.C,
            compiler=ProjectCompiler.GCC,
            project_location=tmp_path,
        )

        with pytest.raises(NoUnitsError) as exc_info:
            BuildOrchestrator().build(project)

        assert exc_info.value.project_name == "empty"

    def test_failure_stops_remaining_units(self, two_unit_project, fake_compiler, tmp_path):
        fake_compiler.fail_on = "main.c"

        with pytest.raises(CompileError) as exc_info:
            BuildOrchestrator().build(two_unit_project)

        assert exc_info.value.unit_name == "app"
        assert not any("tool.c" in arg for call in fake_compiler.calls for arg in call)

    def test_unsupported_toolchain(self, c_project, fake_compiler):
        c_project.compiler = ProjectCompiler.MSVC

        with pytest.raises(ToolchainNotSupportedError):
            BuildOrchestrator().build(c_project)

        assert fake_compiler.calls == []

    def test_build_location(self, c_project, fake_compiler, tmp_path):
        c_project.save()

        result = BuildOrchestrator().build_location(tmp_path)

        assert result.artifacts == [tmp_path / "build" / "bin" / "app"]

    def test_repeated_builds_use_same_paths(self, c_project, fake_compiler):
        orchestrator = BuildOrchestrator()

        first = orchestrator.build(c_project)
        calls_after_first = list(fake_compiler.calls)
        second = orchestrator.build(c_project)

        assert first.artifacts == second.artifacts
        assert fake_compiler.calls[len(calls_after_first):] == calls_after_first

    def test_verbose_progress(self, two_unit_project, fake_compiler, capsys):
        BuildOrchestrator(verbose=True).build(two_unit_project)

        out = capsys.readouterr().out
        assert "[1/2] Building unit 'app' (binary)..." in out
        assert "[2/2] Building unit 'tool' (binary)..." in out

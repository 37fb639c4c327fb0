"""Shared fixtures for build tests."""

import subprocess
from pathlib import Path
from typing import List, Optional
from unittest.mock import patch

import pytest

from copper.config import ProjectCompiler, ProjectConfig, ProjectLanguage, UnitType


class FakeCompiler:
    """Stands in for compiler processes run by CompilerCommand.

    Every invocation is recorded. Successful invocations create their -o
    output file, like a real compiler would.
    """

    def __init__(self):
        self.calls: List[List[str]] = []
        self.fail_on: Optional[str] = None
        self.failure_output = "error: expected ';' before '}' token\n"

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))

        if self.fail_on is not None and any(arg.endswith(self.fail_on) for arg in cmd):
            return subprocess.CompletedProcess(cmd, 1, stdout=self.failure_output)

        if "-o" in cmd:
            Path(cmd[cmd.index("-o") + 1]).write_text("")
        return subprocess.CompletedProcess(cmd, 0, stdout="")

    @property
    def compile_calls(self) -> List[List[str]]:
        return [call for call in self.calls if "-c" in call]

    @property
    def link_calls(self) -> List[List[str]]:
        return [call for call in self.calls if "-c" not in call]


@pytest.fixture
def fake_compiler():
    """Patch process execution with a FakeCompiler."""
    fake = FakeCompiler()
    with patch("copper.toolchain.command.subprocess.run", side_effect=fake):
        yield fake


@pytest.fixture
def c_project(tmp_path):
    """Create a C project with a two-file 'app' unit (not saved to disk)."""
    src = tmp_path / "src"
    src.mkdir()
    (src / "main.c").write_text("int helper(void);\nint main(void) { return helper(); }\n")
    (src / "helper.c").write_text("int helper(void) { return 0; }\n")
    (src / "notes.txt").write_text("not a source file\n")
    (tmp_path / "include").mkdir()

    project = ProjectConfig(
        name="demo",
        language=ProjectLanguage.C,
        compiler=ProjectCompiler.GCC,
        global_include_paths=[Path("include")],
        project_location=tmp_path,
    )
    project.add_unit("app", UnitType.BINARY, Path("src"))
    return project

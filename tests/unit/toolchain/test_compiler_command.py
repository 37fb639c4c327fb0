"""
Unit tests for CompilerCommand.

Tests argument validation and process execution of single compiler
invocations.
"""

import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from copper.toolchain import (
    GCC_FLAGS,
    CompilerCommand,
    DirectoryCreationError,
    PathNotFoundError,
    ToolchainError,
)


class TestCompilerCommand:
    """Test suite for CompilerCommand."""

    @pytest.fixture
    def root(self, tmp_path):
        """Create a project root with an include directory and a source."""
        (tmp_path / "include").mkdir()
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "main.c").write_text("int main(void) { return 0; }\n")
        return tmp_path

    @pytest.fixture
    def command(self, root):
        return CompilerCommand("gcc", GCC_FLAGS, root)

    def test_command_line_starts_with_executable(self, command):
        assert command.command_line() == ["gcc"]
        assert command.arguments == []

    def test_add_include_path_relative_to_root(self, command, root):
        command.add_include_path(Path("include"))

        assert command.arguments == ["-I", str(root / "include")]

    def test_add_include_path_absolute(self, command, root):
        command.add_include_path(root / "include")

        assert command.arguments == ["-I", str(root / "include")]

    def test_add_include_path_missing(self, command, root):
        with pytest.raises(PathNotFoundError) as exc_info:
            command.add_include_path(Path("missing"))

        assert exc_info.value.path == root / "missing"
        assert command.arguments == []

    def test_add_input_missing(self, command, root):
        with pytest.raises(PathNotFoundError):
            command.add_input(root / "src" / "other.c")

    def test_set_output_creates_directory(self, command, root):
        output = root / "build" / "obj" / "main.o"

        command.set_output(output)

        assert output.parent.is_dir()
        assert command.arguments == ["-o", str(output)]

    def test_set_output_directory_failure(self, command, root):
        # A file where the output directory should be
        (root / "build").write_text("")

        with pytest.raises(DirectoryCreationError):
            command.set_output(root / "build" / "obj" / "main.o")

    def test_argument_order(self, command, root):
        source = root / "src" / "main.c"
        output = root / "build" / "main.o"

        command.add_include_path(Path("include"))
        command.set_language("c")
        command.add_arguments(["-Wall"])
        command.compile_only()
        command.add_input(source)
        command.set_output(output)

        assert command.command_line() == [
            "gcc",
            "-I",
            str(root / "include"),
            "-x",
            "c",
            "-Wall",
            "-c",
            str(source),
            "-o",
            str(output),
        ]

    def test_execute_success(self, command, root):
        completed = subprocess.CompletedProcess(["gcc"], 0, stdout="")

        with patch("copper.toolchain.command.subprocess.run", return_value=completed) as mock_run:
            result = command.compile_only().execute()

        assert result.success
        assert result.returncode == 0
        assert result.command == ["gcc", "-c"]
        mock_run.assert_called_once()
        assert mock_run.call_args.args[0] == ["gcc", "-c"]
        assert mock_run.call_args.kwargs["cwd"] == root
        assert mock_run.call_args.kwargs["stderr"] == subprocess.STDOUT

    def test_execute_failure_captures_output(self, command):
        completed = subprocess.CompletedProcess(["gcc"], 1, stdout="main.c:1: error: expected ';'\n")

        with patch("copper.toolchain.command.subprocess.run", return_value=completed):
            result = command.execute()

        assert not result.success
        assert result.returncode == 1
        assert "expected ';'" in result.output

    def test_execute_spawn_failure(self, command):
        with patch(
            "copper.toolchain.command.subprocess.run",
            side_effect=FileNotFoundError("No such file or directory: 'gcc'"),
        ):
            with pytest.raises(ToolchainError) as exc_info:
                command.execute()

        assert "gcc" in str(exc_info.value)

    def test_execute_verbose_prints_command(self, command, capsys):
        completed = subprocess.CompletedProcess(["gcc"], 0, stdout=None)

        with patch("copper.toolchain.command.subprocess.run", return_value=completed):
            result = command.compile_only().execute(verbose=True)

        assert result.output == ""
        assert "$ gcc -c" in capsys.readouterr().out

    def test_execute_passes_utf8_replace_decoding(self, command):
        completed = subprocess.CompletedProcess(["gcc"], 0, stdout="")

        with patch("copper.toolchain.command.subprocess.run", return_value=completed) as mock_run:
            command.execute()

        assert mock_run.call_args.kwargs["encoding"] == "utf-8"
        assert mock_run.call_args.kwargs["errors"] == "replace"

    @pytest.mark.skipif(sys.platform == "win32", reason="uses a POSIX shell script as compiler")
    def test_execute_non_utf8_output(self, root):
        compiler = root / "fake-gcc"
        compiler.write_bytes(b"#!/bin/sh\necho 'main.c:1: error: stray \xff in program' 1>&2\nexit 1\n")
        compiler.chmod(0o755)
        command = CompilerCommand(str(compiler), GCC_FLAGS, root)

        result = command.compile_only().execute()

        assert result.returncode == 1
        assert "stray \ufffd in program" in result.output

"""Tests for [[Unit]] table parsing and serialization."""

from pathlib import Path

import pytest

from copper.config import InvalidEnumValueError, ProjectConfigError, UnitConfig, UnitType


class TestUnitConfig:
    """Test suite for UnitConfig."""

    def test_from_dict_minimal(self):
        unit = UnitConfig.from_dict({"name": "app", "type": "binary", "source": "src"})

        assert unit.name == "app"
        assert unit.unit_type is UnitType.BINARY
        assert unit.source == Path("src")
        assert unit.output_directory is None
        assert unit.intermediate_directory is None
        assert unit.include_paths == []
        assert unit.additional_compiler_args is None

    def test_from_dict_full(self):
        unit = UnitConfig.from_dict(
            {
                "name": "app",
                "type": "binary",
                "source": "app/src",
                "output-directory": "out",
                "intermediate-directory": "out/obj",
                "include-paths": ["app/include", "third_party"],
                "additional-compiler-args": "-Wall -O2",
            }
        )

        assert unit.output_directory == Path("out")
        assert unit.intermediate_directory == Path("out/obj")
        assert unit.include_paths == [Path("app/include"), Path("third_party")]
        assert unit.additional_compiler_args == "-Wall -O2"

    def test_from_dict_missing_fields(self):
        with pytest.raises(ProjectConfigError) as exc_info:
            UnitConfig.from_dict({"name": "app"})

        message = str(exc_info.value)
        assert "app" in message
        assert "type" in message
        assert "source" in message

    def test_from_dict_unknown_type(self):
        with pytest.raises(InvalidEnumValueError):
            UnitConfig.from_dict({"name": "app", "type": "module", "source": "src"})

    def test_from_dict_rejects_non_string(self):
        with pytest.raises(ProjectConfigError):
            UnitConfig.from_dict({"name": 42, "type": "binary", "source": "src"})

    def test_from_dict_rejects_bad_include_paths(self):
        with pytest.raises(ProjectConfigError):
            UnitConfig.from_dict(
                {"name": "app", "type": "binary", "source": "src", "include-paths": "include"}
            )

    def test_to_dict_omits_unset_fields(self):
        unit = UnitConfig(name="app", unit_type=UnitType.STATIC_LIBRARY, source=Path("src"))

        assert unit.to_dict() == {"name": "app", "type": "static-library", "source": "src"}

    def test_to_dict_uses_forward_slashes(self):
        unit = UnitConfig(
            name="app",
            unit_type=UnitType.BINARY,
            source=Path("app") / "src",
            include_paths=[Path("app") / "include"],
        )

        data = unit.to_dict()
        assert data["source"] == "app/src"
        assert data["include-paths"] == ["app/include"]

"""Tests for output path validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from threescene.compiler.paths import normalize_output_path, validate_output_path
from threescene.errors import PathError


class TestNormalize:
    @pytest.mark.parametrize(
        ("given", "expected"),
        [
            ("scene", "scene.json"),
            ("out/scene", "out/scene.json"),
            ("scene.json", "scene.json"),
            ("scene.js", "scene.js"),
            ("scene.txt", "scene.txt"),
            ("dir.v2/scene", "dir.v2/scene.json"),
        ],
    )
    def test_extension(self, given: str, expected: str):
        assert normalize_output_path(given) == expected


class TestValidateOutputPath:
    def test_bare_name_gets_json(self, tmp_path: Path):
        target = validate_output_path(str(tmp_path / "scene"))
        assert target == tmp_path / "scene.json"

    def test_js_extension_accepted(self, tmp_path: Path):
        assert validate_output_path(str(tmp_path / "scene.JS")).name == "scene.JS"

    def test_existing_file_accepted(self, tmp_path: Path):
        existing = tmp_path / "old.json"
        existing.write_text("{}", encoding="utf-8")
        assert validate_output_path(str(existing)) == existing

    @pytest.mark.parametrize(
        "name",
        ["a:b:c.json", "out;file.json", "valid<name>.json", 'quote".json', "star*.json"],
    )
    def test_invalid_names_rejected(self, tmp_path: Path, name: str):
        with pytest.raises(PathError, match="invalid"):
            validate_output_path(f"{tmp_path}/{name}")

    def test_two_colons_rejected(self):
        with pytest.raises(PathError):
            validate_output_path("a:b:c.json")

    def test_wrong_extension_rejected(self, tmp_path: Path):
        with pytest.raises(PathError, match=".js or .json"):
            validate_output_path(str(tmp_path / "scene.txt"))

    def test_missing_directory_rejected(self, tmp_path: Path):
        with pytest.raises(PathError, match="does not exist"):
            validate_output_path(str(tmp_path / "nope" / "scene.json"))

    def test_empty_rejected(self):
        with pytest.raises(PathError):
            validate_output_path("  ")

    def test_none_rejected(self):
        with pytest.raises(PathError, match="invalid"):
            validate_output_path(None)

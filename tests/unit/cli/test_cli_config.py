"""Unit tests for md2latex CLI configuration management.

This module tests configuration file discovery, loading in each supported
format, and validation of the resulting options.
"""

import json
from pathlib import Path

import pytest

from md2latex.cli.config import (
    CliConfig,
    build_cli_config,
    discover_config_file,
    find_config_in_parents,
    load_cli_config,
    load_config_file,
)
from md2latex.exceptions import ValidationError


@pytest.mark.unit
@pytest.mark.cli
class TestDiscovery:
    """Tests for locating configuration files."""

    def test_dedicated_file_in_start_dir(self, temp_dir: Path) -> None:
        config = temp_dir / ".md2latex.toml"
        config.write_text("[latex]\n", encoding="utf-8")
        assert find_config_in_parents(temp_dir) == config.resolve()

    def test_found_in_parent_directory(self, temp_dir: Path) -> None:
        config = temp_dir / ".md2latex.json"
        config.write_text("{}", encoding="utf-8")
        nested = temp_dir / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == config.resolve()

    def test_toml_has_priority_over_yaml(self, temp_dir: Path) -> None:
        (temp_dir / ".md2latex.yaml").write_text("{}", encoding="utf-8")
        toml_config = temp_dir / ".md2latex.toml"
        toml_config.write_text("", encoding="utf-8")
        assert find_config_in_parents(temp_dir) == toml_config.resolve()

    def test_pyproject_with_section(self, temp_dir: Path) -> None:
        pyproject = temp_dir / "pyproject.toml"
        pyproject.write_text('[tool.md2latex.latex]\nimage_width = "3cm"\n', encoding="utf-8")
        assert find_config_in_parents(temp_dir) == pyproject.resolve()

    def test_pyproject_without_section_is_ignored(self, temp_dir: Path) -> None:
        (temp_dir / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        found = find_config_in_parents(temp_dir)
        assert found is None or found.parent != temp_dir.resolve()

    def test_environment_variable_wins(self, temp_dir: Path) -> None:
        (temp_dir / ".md2latex.toml").write_text("", encoding="utf-8")
        explicit = temp_dir / "other.yaml"
        result = discover_config_file({"MD2LATEX_CONFIG": str(explicit)}, start_dir=temp_dir)
        assert result == explicit


@pytest.mark.unit
@pytest.mark.cli
class TestLoading:
    """Tests for reading configuration files."""

    def test_toml(self, temp_dir: Path) -> None:
        path = temp_dir / "c.toml"
        path.write_text("[template]\nstrict = false\n", encoding="utf-8")
        assert load_config_file(path) == {"template": {"strict": False}}

    def test_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "c.yml"
        path.write_text("latex:\n  escape_special: true\n", encoding="utf-8")
        assert load_config_file(path) == {"latex": {"escape_special": True}}

    def test_json(self, temp_dir: Path) -> None:
        path = temp_dir / "c.json"
        path.write_text(json.dumps({"markdown": {"parse_math": False}}), encoding="utf-8")
        assert load_config_file(path) == {"markdown": {"parse_math": False}}

    def test_empty_yaml(self, temp_dir: Path) -> None:
        path = temp_dir / "c.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_pyproject_section(self, temp_dir: Path) -> None:
        path = temp_dir / "pyproject.toml"
        path.write_text("[tool.md2latex.template]\nstrict = false\n", encoding="utf-8")
        assert load_config_file(path) == {"template": {"strict": False}}

    def test_missing_file(self, temp_dir: Path) -> None:
        with pytest.raises(ValidationError, match="does not exist"):
            load_config_file(temp_dir / "absent.toml")

    def test_unsupported_extension(self, temp_dir: Path) -> None:
        path = temp_dir / "c.ini"
        path.write_text("[latex]\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Unsupported"):
            load_config_file(path)

    def test_invalid_toml(self, temp_dir: Path) -> None:
        path = temp_dir / "c.toml"
        path.write_text("[latex\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config_file(path)

    def test_non_mapping_root(self, temp_dir: Path) -> None:
        path = temp_dir / "c.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValidationError, match="mapping"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestBuildConfig:
    """Tests for turning configuration mappings into options."""

    def test_empty_config_gives_defaults(self) -> None:
        assert build_cli_config({}) == CliConfig()

    def test_sections_are_applied(self) -> None:
        config = build_cli_config(
            {
                "markdown": {"parse_tables": False},
                "latex": {"image_width": "\\textwidth", "unsupported_image_mode": "skip"},
                "template": {"strict": False},
            }
        )
        assert config.parser_options.parse_tables is False
        assert config.renderer_options.image_width == "\\textwidth"
        assert config.renderer_options.unsupported_image_mode == "skip"
        assert config.template_options.strict is False

    def test_unknown_section(self) -> None:
        with pytest.raises(ValidationError, match="html"):
            build_cli_config({"html": {}})

    def test_unknown_key(self) -> None:
        with pytest.raises(ValidationError, match="document_class"):
            build_cli_config({"latex": {"document_class": "article"}})

    def test_invalid_value(self) -> None:
        with pytest.raises(ValidationError, match="unsupported_image_mode"):
            build_cli_config({"latex": {"unsupported_image_mode": "ignore"}})

    def test_section_must_be_table(self) -> None:
        with pytest.raises(ValidationError, match="table"):
            build_cli_config({"latex": "fast"})

    def test_load_cli_config_without_file(self, temp_dir: Path) -> None:
        assert load_cli_config({}, start_dir=temp_dir) == CliConfig()

#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading for the md2latex CLI.

A configuration file holds up to three tables, one per pipeline stage::

    [markdown]
    parse_math = true

    [latex]
    image_width = "0.5\\linewidth"

    [template]
    strict = false

Each table maps directly onto the fields of the matching options class.
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from md2latex.constants import CONFIG_ENV_VAR
from md2latex.exceptions import ValidationError
from md2latex.options.latex import LatexRendererOptions
from md2latex.options.markdown import MarkdownParserOptions
from md2latex.options.template import TemplateOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = [".md2latex.toml", ".md2latex.yaml", ".md2latex.yml", ".md2latex.json"]

CONFIG_SECTIONS = {
    "markdown": MarkdownParserOptions,
    "latex": LatexRendererOptions,
    "template": TemplateOptions,
}


@dataclass(frozen=True)
class CliConfig:
    """Options assembled from a configuration file."""

    parser_options: MarkdownParserOptions = field(default_factory=MarkdownParserOptions)
    renderer_options: LatexRendererOptions = field(default_factory=LatexRendererOptions)
    template_options: TemplateOptions = field(default_factory=TemplateOptions)


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the [tool.md2latex] section from a pyproject.toml file.

    Returns an empty dict when the section is absent.
    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ValidationError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", parameter_name="config", original_error=e
        ) from e
    except OSError as e:
        raise ValidationError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", parameter_name="config", original_error=e
        ) from e

    config = data.get("tool", {}).get("md2latex", {})
    if not isinstance(config, dict):
        raise ValidationError(
            f"[tool.md2latex] section in {pyproject_path} must be a table, got {type(config).__name__}",
            parameter_name="config",
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by searching parent directories.

    Walks up the directory tree from start_dir to the filesystem root,
    checking each directory for configuration files in priority order:
    1. .md2latex.toml
    2. .md2latex.yaml, .md2latex.yml
    3. .md2latex.json
    4. pyproject.toml (with [tool.md2latex] section)

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ValidationError:
                logger.debug("Skipping unreadable %s", pyproject_path)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file(environ: Optional[Mapping[str, str]] = None, start_dir: Optional[Path] = None) -> Optional[Path]:
    """Locate the configuration file for this run.

    The MD2LATEX_CONFIG environment variable wins; otherwise the current
    directory and its parents are searched.

    Parameters
    ----------
    environ : Mapping, optional
        Environment to read, defaults to ``os.environ``
    start_dir : Path, optional
        Directory the search starts from

    Returns
    -------
    Path or None
        Configuration file, or None when there is none

    """
    env = os.environ if environ is None else environ
    explicit = env.get(CONFIG_ENV_VAR)
    if explicit:
        return Path(explicit)
    return find_config_in_parents(start_dir)


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ValidationError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise ValidationError(f"Configuration file does not exist: {config_path}", parameter_name="config")

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ValidationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", parameter_name="config"
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError, OSError) as e:
        raise ValidationError(
            f"Error reading config file {config_path}: {e}", parameter_name="config", original_error=e
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValidationError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}",
            parameter_name="config",
        )
    return config


def build_cli_config(config: Mapping[str, Any]) -> CliConfig:
    """Turn a loaded configuration mapping into options objects.

    Parameters
    ----------
    config : Mapping
        Loaded configuration with optional markdown, latex and template tables

    Returns
    -------
    CliConfig
        Options for each pipeline stage

    Raises
    ------
    ValidationError
        If the configuration has unknown tables, unknown keys, or invalid values

    """
    unknown = sorted(set(config) - set(CONFIG_SECTIONS))
    if unknown:
        raise ValidationError(f"Unknown configuration section(s): {', '.join(unknown)}", parameter_name="config")

    built: Dict[str, Any] = {}
    for section, options_class in CONFIG_SECTIONS.items():
        table = config.get(section, {})
        if not isinstance(table, dict):
            raise ValidationError(
                f"Configuration section [{section}] must be a table, got {type(table).__name__}",
                parameter_name=section,
                parameter_value=table,
            )
        try:
            built[section] = options_class.from_mapping(table)
        except (TypeError, ValueError) as e:
            raise ValidationError(
                f"Invalid [{section}] configuration: {e}", parameter_name=section, parameter_value=table, original_error=e
            ) from e

    return CliConfig(
        parser_options=built["markdown"],
        renderer_options=built["latex"],
        template_options=built["template"],
    )


def load_cli_config(environ: Optional[Mapping[str, str]] = None, start_dir: Optional[Path] = None) -> CliConfig:
    """Discover, load and validate the configuration for a CLI run.

    Returns default options when no configuration file exists.
    """
    config_path = discover_config_file(environ, start_dir)
    if config_path is None:
        logger.debug("No configuration file found; using defaults")
        return CliConfig()

    logger.debug("Loading configuration from %s", config_path)
    return build_cli_config(load_config_file(config_path))

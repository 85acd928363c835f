#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2latex.

This module centralizes the hardcoded values and default configuration
constants used across md2latex. Constants are organized by category:

1. Type Definitions - Literal types and type aliases
2. Frontmatter - Delimiters for document and code-block metadata
3. Rendering - Defaults for the LaTeX renderer and its directives
4. Templates - Placeholder syntax
5. Dependencies - Package requirements checked at runtime
"""

from __future__ import annotations

import re
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FrontmatterFormat = Literal["yaml", "toml"]
UnsupportedImageMode = Literal["error", "skip"]

# =============================================================================
# Frontmatter
# =============================================================================

YAML_FRONTMATTER_DELIMITER = "---"
TOML_FRONTMATTER_DELIMITER = "+++"

FRONTMATTER_DELIMITERS: dict[str, FrontmatterFormat] = {
    YAML_FRONTMATTER_DELIMITER: "yaml",
    TOML_FRONTMATTER_DELIMITER: "toml",
}

# =============================================================================
# Rendering
# =============================================================================

DEFAULT_LATEX_ESCAPE_SPECIAL = False
DEFAULT_LATEX_IMAGE_WIDTH = r"0.25\linewidth"
DEFAULT_LATEX_UNSUPPORTED_IMAGE_MODE: UnsupportedImageMode = "error"
DEFAULT_LATEX_BLOCK_SEPARATOR = ""

# Code fence language tags that act as directives
FIGURE_DIRECTIVE = "figure"
CSV_DIRECTIVE = "csv"
PLAIN_DIRECTIVE = ""

# Image extensions (lowercase, without the dot)
SUPPRESSED_IMAGE_EXTENSIONS = frozenset({"bib", "csv"})
FIGURE_IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg"})

# Candidate delimiters for \verb, tried in order
VERB_DELIMITERS = "|!+@#=/:;~"

# =============================================================================
# Templates
# =============================================================================

TEMPLATE_PLACEHOLDER_PATTERN = re.compile(r"%(\w+)%")
TEMPLATE_BODY_FIELD = "body"
DEFAULT_TEMPLATE_STRICT = True

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_YAML = [("pyyaml", "yaml", ">=6.0")]

# =============================================================================
# Configuration and environment
# =============================================================================

CONFIG_ENV_VAR = "MD2LATEX_CONFIG"
LOG_LEVEL_ENV_VAR = "MD2LATEX_LOG_LEVEL"
LOG_FILE_ENV_VAR = "MD2LATEX_LOG_FILE"
DEFAULT_LOG_LEVEL = "WARNING"

#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the frozen options dataclasses."""

from dataclasses import FrozenInstanceError

import pytest

from md2latex.ast import DirectiveMetadata
from md2latex.options import LatexRendererOptions, MarkdownParserOptions, TemplateOptions


@pytest.mark.unit
class TestLatexRendererOptions:
    """Tests for LatexRendererOptions."""

    def test_defaults(self) -> None:
        options = LatexRendererOptions()
        assert options.escape_special is False
        assert options.image_width == "0.25\\linewidth"
        assert options.unsupported_image_mode == "error"
        assert options.block_separator == ""

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            LatexRendererOptions().image_width = "1cm"  # type: ignore[misc]

    def test_create_updated(self) -> None:
        original = LatexRendererOptions()
        updated = original.create_updated(image_width="\\textwidth")
        assert updated.image_width == "\\textwidth"
        assert original.image_width == "0.25\\linewidth"

    def test_create_updated_validates(self) -> None:
        with pytest.raises(ValueError):
            LatexRendererOptions().create_updated(unsupported_image_mode="drop")

    def test_from_mapping(self) -> None:
        options = LatexRendererOptions.from_mapping({"escape_special": True, "block_separator": "\n"})
        assert options.escape_special is True
        assert options.block_separator == "\n"

    def test_from_mapping_rejects_unknown_keys(self) -> None:
        with pytest.raises(ValueError, match="include_preamble"):
            LatexRendererOptions.from_mapping({"include_preamble": True})


@pytest.mark.unit
class TestOtherOptions:
    """Tests for the parser and template options."""

    def test_parser_defaults(self) -> None:
        options = MarkdownParserOptions()
        assert options.parse_frontmatter
        assert options.parse_math
        assert options.parse_tables
        assert options.parse_footnotes
        assert options.parse_strikethrough
        assert options.parse_task_lists

    def test_template_default_is_strict(self) -> None:
        assert TemplateOptions().strict is True

    def test_template_from_mapping(self) -> None:
        assert TemplateOptions.from_mapping({"strict": False}).strict is False


@pytest.mark.unit
class TestDirectiveMetadata:
    """Tests for directive metadata built from decoded YAML."""

    def test_from_none(self) -> None:
        assert DirectiveMetadata.from_mapping(None) == DirectiveMetadata()

    def test_null_values_are_absent(self) -> None:
        directive = DirectiveMetadata.from_mapping({"label": None, "caption": "C"})
        assert directive.label is None
        assert directive.caption == "C"

    def test_extra_keys(self) -> None:
        directive = DirectiveMetadata.from_mapping({"alignment": "ll", "placement": "h"})
        assert directive.alignment == "ll"
        assert directive.extra == {"placement": "h"}

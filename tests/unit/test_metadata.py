#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for frontmatter extraction."""

import datetime

import pytest

from md2latex.ast import Document, FrontMatter, Heading, Paragraph, Text
from md2latex.exceptions import FrontmatterError, MissingFrontmatterError
from md2latex.metadata import decode_frontmatter, extract_frontmatter


@pytest.mark.unit
class TestDecodeFrontmatter:
    """Tests for decoding a single frontmatter node."""

    def test_yaml(self) -> None:
        data = decode_frontmatter(FrontMatter(content="title: X\ntags:\n  - a\n  - b\n"))
        assert data == {"title": "X", "tags": ["a", "b"]}

    def test_yaml_dates_are_decoded(self) -> None:
        data = decode_frontmatter(FrontMatter(content="date: 2024-05-01\n"))
        assert data["date"] == datetime.date(2024, 5, 1)

    def test_toml(self) -> None:
        data = decode_frontmatter(FrontMatter(content='title = "X"\nyear = 2024\n', format="toml"))
        assert data == {"title": "X", "year": 2024}

    @pytest.mark.parametrize("content", ["", "   \n", "# only a comment\n"])
    def test_empty_block(self, content: str) -> None:
        assert decode_frontmatter(FrontMatter(content=content)) == {}

    def test_invalid_yaml(self) -> None:
        with pytest.raises(FrontmatterError) as exc_info:
            decode_frontmatter(FrontMatter(content="title: [unclosed\n"))
        assert exc_info.value.original_error is not None

    def test_invalid_toml(self) -> None:
        with pytest.raises(FrontmatterError):
            decode_frontmatter(FrontMatter(content="title = \n", format="toml"))

    @pytest.mark.parametrize("content", ["- a\n- b\n", "just a string\n", "42\n"])
    def test_non_mapping(self, content: str) -> None:
        with pytest.raises(FrontmatterError, match="mapping"):
            decode_frontmatter(FrontMatter(content=content))


@pytest.mark.unit
class TestExtractFrontmatter:
    """Tests for splitting a document into body and metadata."""

    def test_returns_body_and_mapping(self) -> None:
        heading = Heading(level=1, content=[Text(content="Hello")])
        doc = Document(children=[FrontMatter(content="title: X\n"), heading])

        body, metadata = extract_frontmatter(doc)

        assert metadata == {"title": "X"}
        assert body.children == [heading]

    def test_input_document_is_not_mutated(self) -> None:
        doc = Document(children=[FrontMatter(content="title: X\n"), Paragraph(content=[Text(content="y")])])
        extract_frontmatter(doc)
        assert len(doc.children) == 2
        assert isinstance(doc.children[0], FrontMatter)

    def test_missing_frontmatter(self) -> None:
        doc = Document(children=[Heading(level=1, content=[Text(content="No metadata")])])
        with pytest.raises(MissingFrontmatterError, match="missing frontmatter") as exc_info:
            extract_frontmatter(doc)
        assert exc_info.value.found == "Heading"

    def test_empty_document(self) -> None:
        with pytest.raises(MissingFrontmatterError, match="missing frontmatter"):
            extract_frontmatter(Document())

    def test_missing_frontmatter_is_a_frontmatter_error(self) -> None:
        with pytest.raises(FrontmatterError):
            extract_frontmatter(Document(children=[Paragraph()]))

    def test_only_frontmatter(self) -> None:
        body, metadata = extract_frontmatter(Document(children=[FrontMatter(content="a: 1\n")]))
        assert body.children == []
        assert metadata == {"a": 1}

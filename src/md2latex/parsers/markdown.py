#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown documents to the md2latex AST
using the mistune parser. The leading frontmatter block is kept in the tree as
a FrontMatter node (decoding it is left to :mod:`md2latex.metadata`), and
fenced code blocks have their own YAML frontmatter decoded into
DirectiveMetadata.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Callable, Literal, Optional, Union

from md2latex.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    DirectiveMetadata,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    FrontMatter,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    MathBlock,
    MathInline,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2latex.constants import DEPS_MARKDOWN, DEPS_YAML, FRONTMATTER_DELIMITERS, YAML_FRONTMATTER_DELIMITER
from md2latex.exceptions import InvalidOptionsError, ParsingError
from md2latex.options.markdown import MarkdownParserOptions
from md2latex.utils.decorators import requires_dependencies
from md2latex.utils.io_utils import read_text_file

logger = logging.getLogger(__name__)


def split_frontmatter(content: str, delimiters: dict[str, Any] | None = None) -> tuple[str, str, str] | None:
    """Split a leading delimited block off a piece of text.

    The opening delimiter must be the very first line and the block ends at
    the next line consisting only of the same delimiter.

    Parameters
    ----------
    content : str
        Text that may start with a frontmatter block
    delimiters : dict, optional
        Mapping of delimiter to format name, defaults to both YAML (---)
        and TOML (+++)

    Returns
    -------
    tuple[str, str, str] or None
        (format, block_content, remaining_content), or None when the text
        does not start with a complete block

    """
    delimiters = FRONTMATTER_DELIMITERS if delimiters is None else delimiters
    lines = content.splitlines(keepends=True)
    if not lines:
        return None

    opening = lines[0].rstrip("\r\n")
    if opening not in delimiters:
        return None

    for i in range(1, len(lines)):
        if lines[i].rstrip() == opening:
            block_content = "".join(lines[1:i])
            remaining_content = "".join(lines[i + 1 :])
            return delimiters[opening], block_content, remaining_content

    return None


def _plain_text(tokens: list[dict[str, Any]]) -> str:
    """Concatenate the raw text of inline tokens and all their descendants."""
    parts = []
    for token in tokens:
        if not isinstance(token, dict):
            continue
        if token.get("type") == "softbreak":
            parts.append("\n")
        elif "children" in token:
            parts.append(_plain_text(token["children"]))
        else:
            parts.append(str(token.get("raw", "")))
    return "".join(parts)


class MarkdownToAstConverter:
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("---\\ntitle: Notes\\n---\\n# Hello\\n")
        >>> type(doc.children[0]).__name__
        'FrontMatter'

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                converter_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    @requires_dependencies("markdown", DEPS_MARKDOWN + DEPS_YAML)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Markdown input into an AST Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Markdown input to parse. A ``str`` is always treated as markdown
            text; pass a ``Path`` to read a file.

        Returns
        -------
        Document
            AST document node. When the input starts with a frontmatter
            block, the first child is a FrontMatter node.

        Raises
        ------
        ParsingError
            If the markdown contains a construct the converter does not know,
            or a code block carries invalid directive metadata

        """
        import mistune

        markdown_content = self._load_text_content(input_data)
        if markdown_content.startswith("\ufeff"):
            markdown_content = markdown_content[1:]

        children: list[Node] = []

        if self.options.parse_frontmatter:
            split = split_frontmatter(markdown_content)
            if split is not None:
                fm_format, fm_content, markdown_content = split
                children.append(FrontMatter(content=fm_content, format=fm_format))
                logger.debug("Found %s frontmatter (%d characters)", fm_format, len(fm_content))

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        if self.options.parse_math:
            plugins.append("math")

        # renderer=None makes mistune return its token stream
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        if not isinstance(tokens, list):
            raise ParsingError("mistune did not return a token stream", parsing_stage="tokens")

        children.extend(self._process_tokens(tokens))
        logger.debug("Parsed markdown into %d top-level nodes", len(children))
        return Document(children=children)

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        """Load markdown text from the supported input types."""
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, bytes):
            return input_data.decode("utf-8")
        if isinstance(input_data, Path):
            return read_text_file(input_data)

        data = input_data.read()
        return data.decode("utf-8") if isinstance(data, bytes) else data

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s); None for blank lines

        Raises
        ------
        ParsingError
            If the token type is not recognized

        """
        token_type = token.get("type", "")

        if token_type == "blank_line":
            return None
        elif token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))
        elif token_type == "block_math":
            return MathBlock(content=token.get("raw", ""))
        elif token_type == "footnotes":
            return self._process_footnotes(token)

        raise ParsingError(f"Unsupported markdown block element: {token_type!r}", parsing_stage="tokens")

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token.

        Parameters
        ----------
        token : dict
            Heading token with 'attrs' (level) and 'children'

        Returns
        -------
        Heading
            Heading AST node

        """
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        content = self._process_inline_tokens(token.get("children", []))
        return Heading(level=level, content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        The first word of the info string is the language. A YAML block at
        the top of the code is decoded into the block's directive metadata
        and removed from its content.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node

        Raises
        ------
        ParsingError
            If the directive block is not valid YAML or not a mapping

        """
        code_content = token.get("raw", "")
        if code_content.endswith("\n"):
            code_content = code_content[:-1]

        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        metadata: dict[str, Any] = {}
        language = None
        if info_string and info_string.strip():
            info_string = info_string.strip()
            metadata["info_string"] = info_string
            parts = info_string.split(maxsplit=1)
            language = parts[0]
            if len(parts) > 1:
                metadata["info_attrs"] = parts[1]

        directive = DirectiveMetadata()
        split = split_frontmatter(code_content, {YAML_FRONTMATTER_DELIMITER: "yaml"})
        if split is not None:
            _, directive_text, code_content = split
            directive = DirectiveMetadata.from_mapping(self._load_directive_yaml(directive_text, language))

        return CodeBlock(content=code_content, language=language, directive=directive, metadata=metadata)

    @staticmethod
    def _load_directive_yaml(text: str, language: Optional[str]) -> dict[str, Any]:
        """Decode the YAML block at the top of a code fence."""
        import yaml

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ParsingError(
                f"Invalid directive metadata in {language or 'plain'} code block: {e}",
                parsing_stage="code_frontmatter",
                original_error=e,
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ParsingError(
                f"Directive metadata in {language or 'plain'} code block must be a mapping, "
                f"got {type(data).__name__}",
                parsing_stage="code_frontmatter",
            )
        return data

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        items = [self._process_list_item(child) for child in token.get("children", []) if isinstance(child, dict)]

        return List(
            ordered=attrs.get("ordered", False),
            items=items,
            start=attrs.get("start", 1),
            tight=attrs.get("tight", True),
        )

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list item token, including task list items."""
        token_type = token.get("type", "")
        if token_type not in ("list_item", "task_list_item"):
            raise ParsingError(f"Unexpected list child: {token_type!r}", parsing_stage="tokens")

        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs", {})
        if token_type == "task_list_item" and isinstance(attrs, dict):
            task_status = "checked" if attrs.get("checked") else "unchecked"

        return ListItem(children=self._process_tokens(token.get("children", [])), task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Parameters
        ----------
        token : dict
            Table token with 'children' (table_head and table_body)

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                # Header cells are direct children of table_head
                header = TableRow(cells=self._process_table_cells(part.get("children", [])), is_header=True)
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(cells=self._process_table_cells(row_token.get("children", []))))

        return Table(header=header, rows=rows)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[TableCell]:
        cells = []
        for cell_token in cell_tokens:
            attrs = cell_token.get("attrs", {})
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    alignment=attrs.get("align") if isinstance(attrs, dict) else None,
                )
            )
        return cells

    def _process_footnotes(self, token: dict[str, Any]) -> list[Node]:
        """Process the footnotes section mistune appends after the body."""
        definitions: list[Node] = []
        for item in token.get("children", []):
            attrs = item.get("attrs", {})
            identifier = str(attrs.get("key", "")) if isinstance(attrs, dict) else ""
            definitions.append(
                FootnoteDefinition(identifier=identifier, content=self._process_tokens(item.get("children", [])))
            )
        return definitions

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        if not isinstance(tokens, list):
            return []
        return [self._process_inline_token(token) for token in tokens]

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(content=token.get("raw", ""))

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        """Handle softbreak token; the newline stays part of the text."""
        return Text(content="\n")

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle hard linebreak token."""
        return LineBreak()

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        content = self._process_inline_tokens(token.get("children", []))
        return Link(url=attrs.get("url", ""), content=content, title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        # Alt text is in children, not attrs
        alt_text = _plain_text(token.get("children", []))
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(content=token.get("raw", ""))

    def _handle_inline_math_token(self, token: dict[str, Any]) -> MathInline:
        """Handle inline_math token."""
        return MathInline(content=token.get("raw", ""))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        return FootnoteReference(identifier=str(token.get("raw", "")))

    def _process_inline_token(self, token: dict[str, Any]) -> Node:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node
            Inline AST node

        Raises
        ------
        ParsingError
            If the token type is not recognized

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": self._handle_text_token,
            "softbreak": self._handle_softbreak_token,
            "linebreak": self._handle_linebreak_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "inline_html": self._handle_inline_html_token,
            "inline_math": self._handle_inline_math_token,
            "emphasis": self._handle_emphasis_token,
            "strong": self._handle_strong_token,
            "strikethrough": self._handle_strikethrough_token,
            "footnote_ref": self._handle_footnote_ref_token,
        }

        handler = handler_map.get(token_type)
        if handler is None:
            raise ParsingError(f"Unsupported markdown inline element: {token_type!r}", parsing_stage="tokens")
        return handler(token)


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2latex.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("---\\ntitle: T\\n---\\n# Hello\\n\\nWorld")
    >>> len(doc.children)
    3

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)

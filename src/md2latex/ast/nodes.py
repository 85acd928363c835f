#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy used to represent a parsed markdown
document as an Abstract Syntax Tree. Each node represents a structural or
inline element in the document and supports the visitor pattern through its
``accept`` method.

Node Hierarchy
--------------
Block-level nodes:
    - Document, FrontMatter, Heading, Paragraph, CodeBlock
    - List, ListItem, MathBlock, HTMLBlock
    - BlockQuote, ThematicBreak, Table, TableRow, TableCell, FootnoteDefinition

Inline nodes:
    - Text, Link, Image, Code, MathInline, HTMLInline
    - Emphasis, Strong, Strikethrough, LineBreak, FootnoteReference

The nodes in the last row of each group are produced by the parser so that
the tree is a faithful picture of the source, but the LaTeX renderer has no
rule for them and rejects them.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, Optional

from md2latex.constants import FrontmatterFormat


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


@dataclass(frozen=True)
class DirectiveMetadata:
    """Metadata attached to a fenced code block.

    Code blocks used as figure or table directives carry a small YAML block
    at the top of their content. The recognized keys are exposed as optional
    attributes; any other keys are kept in ``extra``.

    Parameters
    ----------
    label : str or None, default = None
        Cross-reference label, emitted as ``fig:<label>`` or ``tab:<label>``
    caption : str or None, default = None
        Caption text
    alignment : str or None, default = None
        ``tabular`` column specification used by the ``csv`` directive
    extra : dict, default = empty dict
        Unrecognized keys

    """

    label: Optional[str] = None
    caption: Optional[str] = None
    alignment: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> DirectiveMetadata:
        """Build directive metadata from a decoded YAML mapping.

        Scalar values of the recognized keys are converted to strings; a key
        whose value is null is treated as absent.

        Parameters
        ----------
        data : Mapping or None
            Decoded code-block frontmatter

        Returns
        -------
        DirectiveMetadata
            Directive metadata with unrecognized keys moved to ``extra``

        """
        if not data:
            return cls()

        def _optional_str(key: str) -> Optional[str]:
            value = data.get(key)
            return None if value is None else str(value)

        extra = {key: value for key, value in data.items() if key not in {"label", "caption", "alignment"}}
        return cls(
            label=_optional_str("label"),
            caption=_optional_str("caption"),
            alignment=_optional_str("alignment"),
            extra=extra,
        )


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document. For a well-formed document the
        first child is a FrontMatter node.
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class FrontMatter(Node):
    """Metadata block at the start of a document.

    The parser keeps the raw, undecoded text of the block. Decoding into a
    mapping is the job of :func:`md2latex.metadata.extract_frontmatter`.

    Parameters
    ----------
    content : str
        Raw text between the delimiters
    format : {"yaml", "toml"}, default "yaml"
        Flavor of the block (``---`` delimiters for YAML, ``+++`` for TOML)
    metadata : dict, default = empty dict
        Node metadata

    """

    content: str
    format: FrontmatterFormat = "yaml"
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this frontmatter block."""
        return visitor.visit_front_matter(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading depth, 1 being the most important
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is at least 1."""
        if self.level < 1:
            raise ValueError(f"Heading level must be >= 1, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class CodeBlock(Node):
    """Fenced or indented code block.

    The language tag selects a directive at render time (``figure``,
    ``csv`` or none). Directive metadata is decoded by the parser from a
    YAML block at the top of the fence and removed from ``content``.

    Parameters
    ----------
    content : str
        Code content without the directive block and without the final
        line ending
    language : str or None, default = None
        First word of the fence info string
    directive : DirectiveMetadata, default = empty DirectiveMetadata
        Label, caption and alignment attached to the block
    metadata : dict, default = empty dict
        Code block metadata (``info_string`` and ``info_attrs`` when present)

    """

    content: str
    language: Optional[str] = None
    directive: DirectiveMetadata = field(default_factory=DirectiveMetadata)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code_block(self)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        For task lists (GFM extension)
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[Literal["checked", "unchecked"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class MathBlock(Node):
    """Display math block, written with ``$$`` delimiters in the source.

    Parameters
    ----------
    content : str
        LaTeX math content (without delimiters)
    metadata : dict, default = empty dict
        Math block metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this math block."""
        return visitor.visit_math_block(self)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block node, preserved as-is."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this HTML block."""
        return visitor.visit_html_block(self)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self)


@dataclass
class TableCell(Node):
    """Table cell with inline content."""

    content: list[Node] = field(default_factory=list)
    alignment: Optional[Literal["left", "center", "right"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self)


@dataclass
class TableRow(Node):
    """Table row containing cells."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self)


@dataclass
class Table(Node):
    """GFM pipe table.

    Native tables are not rendered; tables are written with the ``csv``
    code-block directive instead.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Body rows
    header : TableRow or None, default = None
        Header row
    metadata : dict, default = empty dict
        Table metadata

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition with block content."""

    identifier: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote definition."""
        return visitor.visit_footnote_definition(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination URL
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Image(Node):
    """Image node.

    The extension of ``url`` decides how the image is rendered: pictures
    become figures, bibliography and data attachments are suppressed.

    Parameters
    ----------
    url : str
        Image source URL or path
    alt_text : str, default = ''
        Alternative text, used as the figure caption
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self)


@dataclass
class Code(Node):
    """Inline code span."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline code."""
        return visitor.visit_code(self)


@dataclass
class MathInline(Node):
    """Inline math node, written with ``$`` delimiters in the source.

    Parameters
    ----------
    content : str
        LaTeX math content (without delimiters)
    metadata : dict, default = empty dict
        Math metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline math."""
        return visitor.visit_math_inline(self)


@dataclass
class HTMLInline(Node):
    """Inline raw HTML, preserved as-is."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this inline HTML."""
        return visitor.visit_html_inline(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM extension)."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class LineBreak(Node):
    """Hard line break.

    Soft line breaks are kept as newline characters inside Text nodes.
    """

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class FootnoteReference(Node):
    """Inline reference to a footnote, written ``[^id]`` in the source."""

    identifier: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this footnote reference."""
        return visitor.visit_footnote_reference(self)

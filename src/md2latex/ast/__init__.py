#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/ast/__init__.py
"""Abstract Syntax Tree for parsed markdown documents.

The AST is produced by :mod:`md2latex.parsers.markdown` and consumed by the
LaTeX renderer in :mod:`md2latex.renderers.latex`.

Examples
--------
Build a small document by hand:

    >>> from md2latex.ast import Document, FrontMatter, Heading, Text
    >>> doc = Document(children=[
    ...     FrontMatter(content="title: Notes"),
    ...     Heading(level=1, content=[Text(content="Intro")]),
    ... ])

"""

from md2latex.ast.nodes import (
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
from md2latex.ast.visitors import NodeVisitor

__all__ = [
    # Base
    "Node",
    "NodeVisitor",
    "DirectiveMetadata",
    # Block nodes
    "Document",
    "FrontMatter",
    "Heading",
    "Paragraph",
    "CodeBlock",
    "List",
    "ListItem",
    "MathBlock",
    "HTMLBlock",
    "BlockQuote",
    "ThematicBreak",
    "Table",
    "TableRow",
    "TableCell",
    "FootnoteDefinition",
    # Inline nodes
    "Text",
    "Link",
    "Image",
    "Code",
    "MathInline",
    "HTMLInline",
    "Emphasis",
    "Strong",
    "Strikethrough",
    "LineBreak",
    "FootnoteReference",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/renderers/latex.py
r"""LaTeX rendering from AST.

This module provides the LatexRenderer class which converts the body of a
document into a LaTeX fragment meant to be placed inside a template. Only a
closed set of node kinds has a rendering rule; anything else aborts the
conversion with UnknownNodeTypeError.

"""

from __future__ import annotations

import logging
from typing import Any

from md2latex.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
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
from md2latex.constants import VERB_DELIMITERS
from md2latex.exceptions import RenderingError, UnknownNodeTypeError
from md2latex.options.latex import LatexRendererOptions
from md2latex.renderers.base import BaseRenderer, InlineContentMixin
from md2latex.renderers.directives import resolve_code, resolve_image

logger = logging.getLogger(__name__)


class LatexRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    r"""Render AST nodes to a LaTeX fragment.

    Parameters
    ----------
    options : LatexRendererOptions or None, default = None
        LaTeX rendering options

    Examples
    --------
    Basic usage:

        >>> from md2latex.ast import Document, Heading, Text
        >>> from md2latex.renderers.latex import LatexRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> LatexRenderer().render_to_string(doc)
        '\\section{Title}'

    """

    # LaTeX special characters, escaped only when escape_special is set
    SPECIAL_CHARS = {
        "\\": r"\textbackslash{}",
        "{": r"\{",
        "}": r"\}",
        "$": r"\$",
        "%": r"\%",
        "&": r"\&",
        "#": r"\#",
        "_": r"\_",
        "~": r"\textasciitilde{}",
        "^": r"\textasciicircum{}",
    }

    def __init__(self, options: LatexRendererOptions | None = None):
        """Initialize the LaTeX renderer with options."""
        BaseRenderer._validate_options_type(options, LatexRendererOptions, "latex")
        options = options or LatexRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: LatexRendererOptions = options
        self._output: list[str] = []

    def render_to_string(self, node: Any) -> str:
        """Render a node, usually a body Document, to LaTeX.

        Parameters
        ----------
        node : Node
            The node to render

        Returns
        -------
        str
            LaTeX text

        Raises
        ------
        UnknownNodeTypeError
            If the tree contains a node kind without a rendering rule, or
            ``node`` is not a node at all
        RenderingError
            If a directive or inline element cannot be rendered

        """
        self._output = []

        if not isinstance(node, Node):
            raise UnknownNodeTypeError(type(node).__name__)

        node.accept(self)
        return "".join(self._output)

    def _escape(self, text: str) -> str:
        """Escape special LaTeX characters when enabled."""
        if not self.options.escape_special:
            return text
        return "".join(self.SPECIAL_CHARS.get(char, char) for char in text)

    def _render_children(self, children: list[Node]) -> None:
        for child in children:
            if not isinstance(child, Node):
                raise UnknownNodeTypeError(type(child).__name__)
            child.accept(self)

    def _reject(self, node: Node) -> None:
        raise UnknownNodeTypeError(type(node).__name__)

    @staticmethod
    def _verb_delimiter(content: str) -> str:
        for delimiter in VERB_DELIMITERS:
            if delimiter not in content:
                return delimiter
        raise RenderingError(
            f"cannot render inline code {content!r}: every \\verb delimiter occurs in it",
            rendering_stage="inline_code",
        )

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node.

        Top-level blocks are joined with ``block_separator``.

        Parameters
        ----------
        node : Document
            Document to render

        """
        separator = self.options.block_separator
        for i, child in enumerate(node.children):
            if i > 0 and separator:
                self._output.append(separator)
            self._render_children([child])

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node as its concatenated content."""
        self._render_children(node.content)

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node as its concatenated children."""
        self._render_children(node.children)

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node.

        Only two sectioning levels are produced: level 1 is a section and
        every deeper level is a subsection.

        Parameters
        ----------
        node : Heading
            Heading to render

        """
        command = "section" if node.level == 1 else "subsection"
        content = self._render_inline_content(node.content)
        self._output.append(f"\\{command}{{{content}}}")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        env_name = "enumerate" if node.ordered else "itemize"

        self._output.append(f"\\begin{{{env_name}}}")
        for item in node.items:
            content = self._render_inline_content([item])
            self._output.append(f"\\item{{{content}}}\n")
        self._output.append(f"\\end{{{env_name}}}")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node through the code directives."""
        self._output.append(resolve_code(node.language, node.content, node.directive))

    def visit_math_block(self, node: MathBlock) -> None:
        """Render a MathBlock node as display math."""
        self._output.append(f"\\[ {node.content} \\]")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Drop raw HTML; it has no LaTeX counterpart."""
        logger.debug("Dropping HTML block: %.50s", node.content)

    def visit_front_matter(self, node: FrontMatter) -> None:
        """Reject frontmatter, which must be extracted before rendering."""
        self._reject(node)

    def visit_block_quote(self, node: BlockQuote) -> None:
        self._reject(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        self._reject(node)

    def visit_table(self, node: Table) -> None:
        self._reject(node)

    def visit_table_row(self, node: TableRow) -> None:
        self._reject(node)

    def visit_table_cell(self, node: TableCell) -> None:
        self._reject(node)

    def visit_footnote_definition(self, node: FootnoteDefinition) -> None:
        self._reject(node)

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def visit_text(self, node: Text) -> None:
        """Render a Text node, unchanged unless escaping is enabled."""
        self._output.append(self._escape(node.content))

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.content)
        self._output.append(f"\\href{{{node.url}}}{{{content}}}")

    def visit_image(self, node: Image) -> None:
        """Render an Image node through the image directives."""
        self._output.append(resolve_image(node.url, node.alt_text, self.options))

    def visit_code(self, node: Code) -> None:
        """Render a Code node.

        The ``\\verb`` delimiter is ``|`` unless the code contains one, in
        which case the first free character of VERB_DELIMITERS is used.

        Parameters
        ----------
        node : Code
            Code to render

        Raises
        ------
        RenderingError
            If no delimiter is free

        """
        delimiter = self._verb_delimiter(node.content)
        self._output.append(f"\\verb{delimiter}{node.content}{delimiter}")

    def visit_math_inline(self, node: MathInline) -> None:
        """Render a MathInline node."""
        self._output.append(f"${node.content}$")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Drop inline HTML."""
        pass

    def visit_emphasis(self, node: Emphasis) -> None:
        self._reject(node)

    def visit_strong(self, node: Strong) -> None:
        self._reject(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        self._reject(node)

    def visit_line_break(self, node: LineBreak) -> None:
        self._reject(node)

    def visit_footnote_reference(self, node: FootnoteReference) -> None:
        self._reject(node)

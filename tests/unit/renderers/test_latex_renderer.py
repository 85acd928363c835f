#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_latex_renderer.py
"""Unit tests for LaTeX rendering from AST.

Tests cover:
- Heading level flattening
- Text passthrough and optional escaping
- Container concatenation
- List rendering (ordered/unordered)
- Math rendering (inline/display)
- Inline code delimiters
- Links, images and code directives
- Raw HTML suppression
- Rejection of unsupported node kinds
- Options validation

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

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
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2latex.exceptions import (
    InvalidOptionsError,
    RenderingError,
    UnknownDirectiveError,
    UnknownNodeTypeError,
    UnsupportedImageError,
)
from md2latex.options.latex import LatexRendererOptions
from md2latex.options.markdown import MarkdownParserOptions
from md2latex.renderers.latex import LatexRenderer


def create_simple_document(content: str) -> Document:
    """Helper to create a simple document with a paragraph.

    Parameters
    ----------
    content : str
        Text content for the paragraph

    Returns
    -------
    Document
        AST Document with single paragraph

    """
    return Document(children=[Paragraph(content=[Text(content=content)])])


def render(node, **options) -> str:
    return LatexRenderer(LatexRendererOptions(**options)).render_to_string(node)


@pytest.mark.unit
class TestHeadings:
    """Tests for heading rendering."""

    def test_level_one_is_section(self) -> None:
        """Test that a level 1 heading becomes a section."""
        doc = Document(children=[Heading(level=1, content=[Text(content="Intro")])])
        assert render(doc) == "\\section{Intro}"

    def test_level_two_is_subsection(self) -> None:
        """Test that a level 2 heading becomes a subsection."""
        doc = Document(children=[Heading(level=2, content=[Text(content="Part")])])
        assert render(doc) == "\\subsection{Part}"

    @pytest.mark.parametrize("level", [3, 4, 5, 6])
    def test_deep_levels_flatten_to_subsection(self, level: int) -> None:
        """Test that levels beyond 2 still render as subsections."""
        heading = Heading(level=level, content=[Text(content="Deep")])
        assert render(heading) == "\\subsection{Deep}"

    def test_heading_with_inline_content(self) -> None:
        """Test heading content made of several inline nodes."""
        heading = Heading(level=1, content=[Text(content="Energy "), MathInline(content="E=mc^2")])
        assert render(heading) == "\\section{Energy $E=mc^2$}"

    @given(level=st.integers(min_value=2, max_value=50), text=st.text(min_size=1, max_size=40))
    def test_any_deeper_level_is_subsection(self, level: int, text: str) -> None:
        """Property: every heading below level 1 renders as a subsection."""
        heading = Heading(level=level, content=[Text(content=text)])
        assert render(heading) == "\\subsection{" + text + "}"


@pytest.mark.unit
class TestText:
    """Tests for text rendering."""

    def test_text_is_unchanged(self) -> None:
        """Test that text passes through, special characters included."""
        assert render(Text(content="50% of a_b & \\emph{x}")) == "50% of a_b & \\emph{x}"

    @given(st.text())
    def test_text_identity(self, text: str) -> None:
        """Property: text renders to itself with default options."""
        assert render(Text(content=text)) == text

    def test_escape_special_characters(self) -> None:
        """Test escaping when escape_special is enabled."""
        result = render(Text(content="50% & $5 #1 a_b {x} ~ ^ \\"), escape_special=True)
        assert result == (
            "50\\% \\& \\$5 \\#1 a\\_b \\{x\\} \\textasciitilde{} \\textasciicircum{} \\textbackslash{}"
        )

    def test_escape_does_not_touch_math(self) -> None:
        """Test that math content is never escaped."""
        assert render(MathInline(content="a_b"), escape_special=True) == "$a_b$"


@pytest.mark.unit
class TestContainers:
    """Tests for document, paragraph and list item concatenation."""

    def test_paragraph_concatenates_children(self) -> None:
        """Test that inline children are joined without separators."""
        para = Paragraph(content=[Text(content="a"), Text(content="\n"), Text(content="b")])
        assert render(para) == "a\nb"

    def test_document_concatenates_blocks(self) -> None:
        """Test that top-level blocks are joined without separators."""
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="T")]),
                Paragraph(content=[Text(content="body")]),
            ]
        )
        assert render(doc) == "\\section{T}body"

    def test_block_separator_between_top_level_blocks(self) -> None:
        """Test the block_separator option."""
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="T")]),
                Paragraph(content=[Text(content="one")]),
                Paragraph(content=[Text(content="two")]),
            ]
        )
        assert render(doc, block_separator="\n\n") == "\\section{T}\n\none\n\ntwo"

    def test_block_separator_not_used_inside_containers(self) -> None:
        """Test that block_separator only applies at document level."""
        item = ListItem(children=[Paragraph(content=[Text(content="a")]), Paragraph(content=[Text(content="b")])])
        assert render(item, block_separator="\n\n") == "ab"

    def test_empty_document(self) -> None:
        """Test that an empty document renders to an empty string."""
        assert render(Document()) == ""


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_unordered_list(self) -> None:
        """Test the exact itemize layout."""
        lst = List(
            ordered=False,
            items=[
                ListItem(children=[Paragraph(content=[Text(content="a")])]),
                ListItem(children=[Paragraph(content=[Text(content="b")])]),
            ],
        )
        assert render(lst) == "\\begin{itemize}\\item{a}\n\\item{b}\n\\end{itemize}"

    def test_ordered_list(self) -> None:
        """Test that ordered lists use enumerate."""
        lst = List(ordered=True, items=[ListItem(children=[Paragraph(content=[Text(content="one")])])])
        assert render(lst) == "\\begin{enumerate}\\item{one}\n\\end{enumerate}"

    def test_empty_list(self) -> None:
        """Test a list without items."""
        assert render(List(ordered=False, items=[])) == "\\begin{itemize}\\end{itemize}"

    def test_nested_list(self) -> None:
        """Test a list nested inside a list item."""
        inner = List(ordered=True, items=[ListItem(children=[Paragraph(content=[Text(content="x")])])])
        outer = List(
            ordered=False,
            items=[ListItem(children=[Paragraph(content=[Text(content="top")]), inner])],
        )
        assert render(outer) == (
            "\\begin{itemize}\\item{top\\begin{enumerate}\\item{x}\n\\end{enumerate}}\n\\end{itemize}"
        )


@pytest.mark.unit
class TestMathAndCode:
    """Tests for math and inline code rendering."""

    def test_inline_math(self) -> None:
        assert render(MathInline(content="x^2")) == "$x^2$"

    def test_block_math(self) -> None:
        """Test display math delimiters."""
        assert render(MathBlock(content="\\int_0^1 f")) == "\\[ \\int_0^1 f \\]"

    def test_inline_code(self) -> None:
        assert render(Code(content="print(1)")) == "\\verb|print(1)|"

    def test_inline_code_with_pipe_uses_other_delimiter(self) -> None:
        """Test that a pipe in the code switches the delimiter."""
        assert render(Code(content="a|b")) == "\\verb!a|b!"

    def test_inline_code_skips_used_delimiters(self) -> None:
        """Test that the first unused delimiter is chosen."""
        assert render(Code(content="a|b!c+d")) == "\\verb@a|b!c+d@"

    def test_inline_code_without_free_delimiter(self) -> None:
        """Test that code containing every delimiter cannot be rendered."""
        with pytest.raises(RenderingError):
            render(Code(content="|!+@#=/:;~"))


@pytest.mark.unit
class TestLinksAndImages:
    """Tests for links and image directives."""

    def test_link(self) -> None:
        link = Link(url="https://example.com", content=[Text(content="site")])
        assert render(link) == "\\href{https://example.com}{site}"

    def test_png_image_with_caption(self) -> None:
        """Test that a picture becomes a figure with its alt text as caption."""
        image = Image(url="img/plot.png", alt_text="A plot")
        assert render(image) == (
            "\\begin{figure}\n\\centering\n\\includegraphics[width=0.25\\linewidth]{img/plot.png}\n"
            "\\caption{A plot}\n\\end{figure}\n"
        )

    def test_bib_image_is_suppressed(self) -> None:
        """Test that bibliography references render to nothing."""
        assert render(Image(url="refs.bib", alt_text="refs")) == ""

    def test_custom_image_width(self) -> None:
        """Test the image_width option."""
        result = render(Image(url="a.jpg"), image_width="\\textwidth")
        assert "\\includegraphics[width=\\textwidth]{a.jpg}" in result

    def test_unsupported_image(self) -> None:
        """Test that unknown image types abort rendering."""
        with pytest.raises(UnsupportedImageError):
            render(Image(url="anim.gif"))

    def test_unsupported_image_skip_mode(self) -> None:
        """Test that skip mode drops unknown image types."""
        assert render(Image(url="anim.gif"), unsupported_image_mode="skip") == ""


@pytest.mark.unit
class TestCodeBlocks:
    """Tests for code block directives dispatched by the renderer."""

    def test_figure_directive(self) -> None:
        block = CodeBlock(
            content="\\includegraphics{a.pdf}",
            language="figure",
            directive=DirectiveMetadata(label="a", caption="Cap"),
        )
        assert render(block) == (
            "\\begin{figure}\n\\includegraphics{a.pdf}\n\\label{fig:a}\n\\caption{Cap}\n\\end{figure}\n"
        )

    def test_csv_directive_ignores_renderer_options(self) -> None:
        """Test that code directives render the same under any renderer options."""
        block = CodeBlock(content="a_b,1", language="csv", directive=DirectiveMetadata(alignment="lr"))
        plain = render(block)
        assert render(block, escape_special=True, image_width="\\textwidth") == plain
        assert "a_b&1" in plain

    def test_plain_code_block_is_dropped(self) -> None:
        """Test that a code block without a language renders to nothing."""
        assert render(CodeBlock(content="print(1)")) == ""

    def test_unknown_language(self) -> None:
        """Test that an unknown language aborts rendering."""
        with pytest.raises(UnknownDirectiveError, match="unknown directive"):
            render(CodeBlock(content="x", language="unknown-lang"))


@pytest.mark.unit
class TestRawMarkup:
    """Tests for HTML suppression."""

    def test_html_block(self) -> None:
        assert render(HTMLBlock(content="<div>x</div>")) == ""

    def test_html_inline(self) -> None:
        para = Paragraph(content=[HTMLInline(content="<b>"), Text(content="bold"), HTMLInline(content="</b>")])
        assert render(para) == "bold"


@pytest.mark.unit
class TestUnsupportedNodes:
    """Tests for node kinds without a LaTeX rule."""

    @pytest.mark.parametrize(
        "node",
        [
            Emphasis(content=[Text(content="x")]),
            Strong(content=[Text(content="x")]),
            Strikethrough(content=[Text(content="x")]),
            LineBreak(),
            ThematicBreak(),
            BlockQuote(children=[]),
            Table(rows=[TableRow(cells=[TableCell(content=[Text(content="x")])])]),
            TableRow(cells=[]),
            TableCell(content=[]),
            FootnoteReference(identifier="1"),
            FootnoteDefinition(identifier="1", content=[]),
            FrontMatter(content="title: x"),
        ],
    )
    def test_unsupported_node_raises(self, node) -> None:
        """Test that each unsupported kind aborts rendering."""
        with pytest.raises(UnknownNodeTypeError, match=type(node).__name__):
            render(node)

    def test_unsupported_node_nested_in_paragraph(self) -> None:
        """Test that an unsupported inline node anywhere aborts rendering."""
        doc = Document(children=[Paragraph(content=[Text(content="a "), Strong(content=[Text(content="b")])])])
        with pytest.raises(UnknownNodeTypeError):
            render(doc)

    def test_non_node_object(self) -> None:
        """Test that objects which are not nodes are rejected."""
        with pytest.raises(UnknownNodeTypeError, match="dict"):
            render({"type": "paragraph"})

    def test_non_node_child(self) -> None:
        """Test that a foreign object inside a container is rejected."""
        with pytest.raises(UnknownNodeTypeError, match="str"):
            render(Paragraph(content=["raw string"]))  # type: ignore[list-item]


@pytest.mark.unit
class TestRendererState:
    """Tests for renderer construction and reuse."""

    def test_output_buffer_reset_between_calls(self) -> None:
        """Test that a renderer can be reused without leaking output."""
        renderer = LatexRenderer()
        assert renderer.render_to_string(create_simple_document("one")) == "one"
        assert renderer.render_to_string(create_simple_document("two")) == "two"

    def test_buffer_reset_after_failure(self) -> None:
        """Test that a failed render does not leak into the next one."""
        renderer = LatexRenderer()
        with pytest.raises(UnknownNodeTypeError):
            renderer.render_to_string(Document(children=[Paragraph(content=[Text(content="x")]), ThematicBreak()]))
        assert renderer.render_to_string(create_simple_document("ok")) == "ok"

    def test_wrong_options_type(self) -> None:
        """Test that another options class is refused."""
        with pytest.raises(InvalidOptionsError):
            LatexRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_invalid_unsupported_image_mode(self) -> None:
        with pytest.raises(ValueError):
            LatexRendererOptions(unsupported_image_mode="ignore")  # type: ignore[arg-type]

    def test_empty_image_width(self) -> None:
        with pytest.raises(ValueError):
            LatexRendererOptions(image_width="  ")

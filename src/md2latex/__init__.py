"""md2latex - Convert markdown documents with frontmatter into LaTeX.

md2latex parses a markdown document whose first block is a YAML (``---``) or
TOML (``+++``) frontmatter block, renders the rest of the document as a LaTeX
fragment, and places that fragment and the frontmatter values into a
user-supplied LaTeX template.

Fenced code blocks act as directives: a ``figure`` fence wraps raw LaTeX in a
figure environment and a ``csv`` fence becomes a table. Picture references
(png, jpg, jpeg) become figures, while references to ``.bib`` and ``.csv``
files are dropped from the output.

Requirements
------------
- Python 3.10+
- mistune 3, PyYAML

Examples
--------
Converting in memory:

    >>> from md2latex import convert
    >>> convert("---\\ntitle: Notes\\n---\\n# Intro\\n", "%title%: %body%")
    'Notes: \\\\section{Intro}'

Converting files:

    >>> from md2latex import convert_file
    >>> latex = convert_file("paper.md", "template.tex")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2latex requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2latex.api import convert, convert_file
from md2latex.exceptions import (
    DependencyError,
    DirectiveError,
    FrontmatterError,
    Md2LatexError,
    MissingFrontmatterError,
    ParsingError,
    RenderingError,
    TemplateError,
    UnknownDirectiveError,
    UnknownNodeTypeError,
    UnresolvedTemplateFieldError,
    UnsupportedImageError,
)
from md2latex.metadata import extract_frontmatter
from md2latex.options import LatexRendererOptions, MarkdownParserOptions, TemplateOptions
from md2latex.parsers.markdown import markdown_to_ast
from md2latex.renderers.latex import LatexRenderer
from md2latex.template import collect_placeholders, render_template

__all__ = [
    "__version__",
    "convert",
    "convert_file",
    "markdown_to_ast",
    "extract_frontmatter",
    "render_template",
    "collect_placeholders",
    "LatexRenderer",
    "LatexRendererOptions",
    "MarkdownParserOptions",
    "TemplateOptions",
    "Md2LatexError",
    "ParsingError",
    "FrontmatterError",
    "MissingFrontmatterError",
    "RenderingError",
    "UnknownNodeTypeError",
    "DirectiveError",
    "UnknownDirectiveError",
    "UnsupportedImageError",
    "TemplateError",
    "UnresolvedTemplateFieldError",
    "DependencyError",
]

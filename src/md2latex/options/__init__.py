#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for the md2latex parser, renderer and template engine."""

from md2latex.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2latex.options.latex import LatexRendererOptions
from md2latex.options.markdown import MarkdownParserOptions
from md2latex.options.template import TemplateOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "LatexRendererOptions",
    "MarkdownParserOptions",
    "TemplateOptions",
]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/renderers/__init__.py
"""Renderers turning the md2latex AST into LaTeX."""

from md2latex.renderers.base import BaseRenderer, InlineContentMixin
from md2latex.renderers.directives import resolve_code, resolve_image
from md2latex.renderers.latex import LatexRenderer

__all__ = ["BaseRenderer", "InlineContentMixin", "LatexRenderer", "resolve_code", "resolve_image"]

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/parsers/__init__.py
"""Parsers producing the md2latex AST."""

from md2latex.parsers.markdown import MarkdownToAstConverter, markdown_to_ast, split_frontmatter

__all__ = ["MarkdownToAstConverter", "markdown_to_ast", "split_frontmatter"]

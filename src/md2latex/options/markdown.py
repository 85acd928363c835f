#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2latex/options/markdown.py
"""Configuration options for Markdown parsing.

This module defines the options that select which markdown extensions the
parser recognizes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2latex.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Extensions are recognized so that their constructs show up in the tree.
    Several of them (tables, footnotes, strikethrough) have no LaTeX rule and
    make rendering fail; turning an extension off makes the parser treat the
    syntax as plain text instead.

    Parameters
    ----------
    parse_frontmatter : bool, default True
        Whether to recognize a leading YAML (---) or TOML (+++) block.
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).

    """

    parse_frontmatter: bool = field(
        default=True,
        metadata={"help": "Parse YAML/TOML frontmatter at document start", "importance": "core"},
    )
    parse_math: bool = field(
        default=True,
        metadata={"help": "Parse inline and block math ($...$ and $$...$$)", "importance": "core"},
    )
    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=True,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )

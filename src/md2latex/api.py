#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/api.py
r"""High-level conversion entry points.

The pipeline runs in four steps, each of which may abort the conversion:

1. parse the markdown into an AST
2. split off and decode the leading frontmatter
3. render the remaining body to LaTeX
4. substitute the body and frontmatter values into the template

Examples
--------
    >>> from md2latex import convert
    >>> convert("---\ntitle: X\n---\nY", "Title: %title%\n%body%")
    'Title: X\nY'

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from md2latex.metadata import extract_frontmatter
from md2latex.options.latex import LatexRendererOptions
from md2latex.options.markdown import MarkdownParserOptions
from md2latex.parsers.markdown import MarkdownToAstConverter
from md2latex.renderers.latex import LatexRenderer
from md2latex.template import render_template
from md2latex.utils.io_utils import read_text_file

logger = logging.getLogger(__name__)


def convert(
    markdown: str,
    template: str,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: LatexRendererOptions | None = None,
    strict_template: bool = True,
) -> str:
    """Convert a markdown document into a filled LaTeX template.

    Parameters
    ----------
    markdown : str
        Markdown text starting with a YAML (---) or TOML (+++) frontmatter block
    template : str
        Template text with ``%identifier%`` placeholders
    parser_options : MarkdownParserOptions, optional
        Markdown parsing options
    renderer_options : LatexRendererOptions, optional
        LaTeX rendering options
    strict_template : bool, default True
        Fail on placeholders missing from the frontmatter

    Returns
    -------
    str
        The filled template

    Raises
    ------
    Md2LatexError
        Any parsing, frontmatter, rendering or template failure. No partial
        output is produced.

    """
    document = MarkdownToAstConverter(parser_options).parse(markdown)
    body_document, metadata = extract_frontmatter(document)

    body = LatexRenderer(renderer_options).render_to_string(body_document)
    logger.debug("Rendered %d body blocks into %d characters", len(body_document.children), len(body))

    return render_template(template, body, metadata, strict=strict_template)


def convert_file(
    input_path: Union[str, Path],
    template_path: Union[str, Path],
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: LatexRendererOptions | None = None,
    strict_template: bool = True,
) -> str:
    """Convert a markdown file using a template file.

    Both files are read as UTF-8.

    Raises
    ------
    FileNotFoundError
        If either file does not exist (``md2latex.exceptions.FileNotFoundError``)
    FileAccessError
        If either file cannot be read

    """
    logger.debug("Converting %s with template %s", input_path, template_path)
    markdown = read_text_file(input_path)
    template = read_text_file(template_path)
    return convert(
        markdown,
        template,
        parser_options=parser_options,
        renderer_options=renderer_options,
        strict_template=strict_template,
    )

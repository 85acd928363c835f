#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/renderers/directives.py
r"""Figure and table directives.

Fenced code blocks and images are not rendered as literal content. A code
fence tagged ``figure`` wraps raw LaTeX in a figure environment, a fence
tagged ``csv`` turns comma separated rows into a tabular, and a picture
reference becomes an ``\includegraphics`` figure. The functions here produce
those environments from the node fields and the directive metadata decoded by
the parser.

"""

from __future__ import annotations

import logging
from typing import Optional

from md2latex.ast.nodes import DirectiveMetadata
from md2latex.constants import (
    CSV_DIRECTIVE,
    FIGURE_DIRECTIVE,
    FIGURE_IMAGE_EXTENSIONS,
    PLAIN_DIRECTIVE,
    SUPPRESSED_IMAGE_EXTENSIONS,
)
from md2latex.exceptions import DirectiveError, UnknownDirectiveError, UnsupportedImageError
from md2latex.options.latex import LatexRendererOptions

logger = logging.getLogger(__name__)


def _label_and_caption(directive: DirectiveMetadata, label_prefix: str) -> str:
    parts = []
    if directive.label:
        parts.append(f"\\label{{{label_prefix}:{directive.label}}}\n")
    if directive.caption:
        parts.append(f"\\caption{{{directive.caption}}}\n")
    return "".join(parts)


def render_figure(content: str, directive: DirectiveMetadata) -> str:
    r"""Wrap raw LaTeX in a figure environment.

    Parameters
    ----------
    content : str
        Figure body, emitted verbatim
    directive : DirectiveMetadata
        Optional label (prefixed ``fig:``) and caption

    Returns
    -------
    str
        ``\begin{figure}`` ... ``\end{figure}`` followed by a newline

    """
    return (
        "\\begin{figure}\n" + content + "\n" + _label_and_caption(directive, "fig") + "\\end{figure}\n"
    )


def render_csv_table(content: str, directive: DirectiveMetadata) -> str:
    r"""Convert comma separated rows into a table environment.

    Ampersands in the data are escaped before commas become column
    separators. A horizontal rule is placed after the first row.

    Parameters
    ----------
    content : str
        Rows separated by newlines
    directive : DirectiveMetadata
        Must carry ``alignment`` (the tabular column spec); label (prefixed
        ``tab:``) and caption are optional

    Returns
    -------
    str
        ``\begin{table}`` ... ``\end{table}``

    Raises
    ------
    DirectiveError
        If no alignment is given

    """
    if not directive.alignment:
        raise DirectiveError("csv directive requires an 'alignment' entry in its metadata", directive=CSV_DIRECTIVE)

    rows = []
    for index, line in enumerate(content.split("\n")):
        row = line.replace("&", "\\&").replace(",", "&")
        if index == 1:
            row = "\\hline\n" + row
        rows.append(row)

    return (
        "\\begin{table}\\centering\\begin{tabular}{"
        + directive.alignment
        + "}"
        + "\\\\".join(rows)
        + "\\end{tabular}"
        + _label_and_caption(directive, "tab")
        + "\\end{table}"
    )


def resolve_code(
    language: Optional[str],
    content: str,
    directive: DirectiveMetadata | None = None,
) -> str:
    """Render a fenced code block according to its language tag.

    Parameters
    ----------
    language : str or None
        Code fence language; None or "" for a fence without one
    content : str
        Code content with its directive metadata already removed
    directive : DirectiveMetadata, optional
        Label, caption and alignment attached to the block

    Returns
    -------
    str
        LaTeX for the block; an untagged block renders as an empty string

    Raises
    ------
    UnknownDirectiveError
        If the language tag is not a known directive
    DirectiveError
        If the directive metadata is incomplete

    """
    directive = directive or DirectiveMetadata()
    tag = language or PLAIN_DIRECTIVE

    if tag == FIGURE_DIRECTIVE:
        return render_figure(content, directive)
    if tag == CSV_DIRECTIVE:
        return render_csv_table(content, directive)
    if tag == PLAIN_DIRECTIVE:
        logger.debug("Dropping code block without a directive (%d characters)", len(content))
        return ""

    raise UnknownDirectiveError(tag)


def image_extension(url: str) -> str:
    """Return the lowercased text after the last dot of a URL.

    A URL without a dot yields the whole URL.
    """
    return url.rsplit(".", 1)[-1].lower()


def resolve_image(url: str, alt_text: str = "", options: LatexRendererOptions | None = None) -> str:
    r"""Render an image reference according to its extension.

    Parameters
    ----------
    url : str
        Image URL, passed verbatim to ``\includegraphics``
    alt_text : str, default ""
        Alternative text, used as the caption when present
    options : LatexRendererOptions, optional
        Supplies ``image_width`` and ``unsupported_image_mode``

    Returns
    -------
    str
        A figure environment for pictures, an empty string for bibliography
        and data attachments

    Raises
    ------
    UnsupportedImageError
        If the extension is unknown and ``unsupported_image_mode`` is "error"

    """
    options = options or LatexRendererOptions()
    extension = image_extension(url)

    if extension in SUPPRESSED_IMAGE_EXTENSIONS:
        return ""

    if extension in FIGURE_IMAGE_EXTENSIONS:
        parts = [
            "\\begin{figure}\n",
            "\\centering\n",
            f"\\includegraphics[width={options.image_width}]{{{url}}}\n",
        ]
        if alt_text:
            parts.append(f"\\caption{{{alt_text}}}\n")
        parts.append("\\end{figure}\n")
        return "".join(parts)

    if options.unsupported_image_mode == "skip":
        logger.warning("Skipping image with unsupported extension %r: %s", extension, url)
        return ""

    raise UnsupportedImageError(url, extension)

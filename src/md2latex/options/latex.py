#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2latex/options/latex.py
"""Configuration options for LaTeX rendering.

This module defines options for the AST-to-LaTeX renderer and its figure,
table and image directives.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import get_args

from md2latex.constants import (
    DEFAULT_LATEX_BLOCK_SEPARATOR,
    DEFAULT_LATEX_ESCAPE_SPECIAL,
    DEFAULT_LATEX_IMAGE_WIDTH,
    DEFAULT_LATEX_UNSUPPORTED_IMAGE_MODE,
    UnsupportedImageMode,
)
from md2latex.options.base import BaseRendererOptions


@dataclass(frozen=True)
class LatexRendererOptions(BaseRendererOptions):
    r"""Configuration options for AST-to-LaTeX rendering.

    Parameters
    ----------
    escape_special : bool, default False
        Whether to escape LaTeX special characters in text. Off by default:
        text is emitted unchanged so that authors can write raw LaTeX
        commands inline.
    image_width : str, default "0.25\\linewidth"
        Width passed to ``\includegraphics`` for figure images.
    unsupported_image_mode : {"error", "skip"}, default "error"
        What to do with an image whose extension is neither a picture
        (png, jpg, jpeg) nor a suppressed attachment (bib, csv):

        - "error": raise UnsupportedImageError
        - "skip": render nothing and log a warning
    block_separator : str, default ""
        Text inserted between top-level blocks of the document. The default
        concatenates blocks directly.

    """

    escape_special: bool = field(
        default=DEFAULT_LATEX_ESCAPE_SPECIAL,
        metadata={"help": "Escape LaTeX special characters in text", "importance": "core"},
    )
    image_width: str = field(
        default=DEFAULT_LATEX_IMAGE_WIDTH,
        metadata={"help": "Width used for \\includegraphics in image figures", "importance": "core"},
    )
    unsupported_image_mode: UnsupportedImageMode = field(
        default=DEFAULT_LATEX_UNSUPPORTED_IMAGE_MODE,
        metadata={
            "help": "How to handle images with unsupported extensions",
            "choices": ["error", "skip"],
            "importance": "advanced",
        },
    )
    block_separator: str = field(
        default=DEFAULT_LATEX_BLOCK_SEPARATOR,
        metadata={"help": "Text inserted between top-level blocks", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.unsupported_image_mode not in get_args(UnsupportedImageMode):
            raise ValueError(
                f"unsupported_image_mode must be one of {get_args(UnsupportedImageMode)}, "
                f"got {self.unsupported_image_mode!r}"
            )
        if not self.image_width.strip():
            raise ValueError("image_width must not be empty")

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from and
the mixin used by text renderers to capture the output of inline content.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2latex.ast.nodes import Node
from md2latex.exceptions import InvalidOptionsError
from md2latex.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, node: Any) -> str:
        """Render an AST node to a string.

        Parameters
        ----------
        node : Node
            Node to render, usually a Document

        Returns
        -------
        str
            Rendered output

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin providing the inline content capture pattern for text renderers.

    The implementing class must have:
    - A `_output` attribute (list[str]) for accumulating output
    - Visitor methods that append to `_output`

    """

    _output: list[str]

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of nodes to text.

        The current output buffer is swapped out while the nodes are
        rendered, then restored.

        Parameters
        ----------
        content : list of Node
            Nodes to render

        Returns
        -------
        str
            Rendered content as a string

        """
        saved_output = self._output
        self._output = []

        try:
            for node in content:
                node.accept(self)
            result = "".join(self._output)
        finally:
            self._output = saved_output

        return result

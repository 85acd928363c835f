#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/cli/__init__.py
"""Command-line interface for md2latex.

Usage::

    md2latex INPUT TEMPLATE

The generated LaTeX is written to stdout. Diagnostics go to stderr, with
their verbosity controlled by the MD2LATEX_LOG_LEVEL environment variable
(MD2LATEX_LOG_FILE additionally tees them to a file). Conversion settings are
read from an optional configuration file, see :mod:`md2latex.cli.config`.

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Mapping, Optional

from md2latex.exceptions import (
    DependencyError,
    FileError,
    Md2LatexError,
    ParsingError,
    RenderingError,
    TemplateError,
    ValidationError,
)

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7
EXIT_TEMPLATE_ERROR = 11


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    if isinstance(exception, TemplateError):
        return EXIT_TEMPLATE_ERROR

    return EXIT_ERROR


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2latex",
        description="Convert a markdown document with frontmatter into LaTeX using a template.",
        epilog=(
            "Environment: MD2LATEX_CONFIG (configuration file), "
            "MD2LATEX_LOG_LEVEL (default WARNING), MD2LATEX_LOG_FILE."
        ),
    )
    parser.add_argument("input", metavar="INPUT", help="Markdown file starting with a frontmatter block")
    parser.add_argument("template", metavar="TEMPLATE", help="LaTeX template with %%identifier%% placeholders")
    return parser


def main(args: list[str] | None = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Execute the md2latex command.

    Parameters
    ----------
    args : list of str, optional
        Command-line arguments, defaults to ``sys.argv[1:]``
    environ : Mapping, optional
        Environment variables, defaults to ``os.environ``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    env = os.environ if environ is None else environ

    # Lazy imports keep --help fast
    from md2latex.api import convert_file
    from md2latex.cli.config import load_cli_config
    from md2latex.logging_utils import configure_logging_from_env

    configure_logging_from_env(env)

    try:
        config = load_cli_config(env)
        result = convert_file(
            parsed_args.input,
            parsed_args.template,
            parser_options=config.parser_options,
            renderer_options=config.renderer_options,
            strict_template=config.template_options.strict,
        )
    except Md2LatexError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    print(result)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())

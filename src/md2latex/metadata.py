#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/metadata.py
"""Frontmatter extraction.

Every document converted by md2latex starts with a metadata block. This
module decodes that block into a plain mapping and separates it from the body
that is handed to the renderer.

"""

from __future__ import annotations

import logging
import sys
from typing import Any

import yaml

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

from md2latex.ast import Document, FrontMatter
from md2latex.exceptions import FrontmatterError, MissingFrontmatterError

logger = logging.getLogger(__name__)


def decode_frontmatter(node: FrontMatter) -> dict[str, Any]:
    """Decode a frontmatter node into a mapping.

    Parameters
    ----------
    node : FrontMatter
        YAML or TOML frontmatter node

    Returns
    -------
    dict
        Decoded key/value pairs; an empty block gives an empty dict

    Raises
    ------
    FrontmatterError
        If the block cannot be decoded or does not hold a mapping

    """
    if not node.content.strip():
        return {}

    if node.format == "toml":
        try:
            return tomllib.loads(node.content)
        except tomllib.TOMLDecodeError as e:
            raise FrontmatterError(f"Invalid TOML frontmatter: {e}", original_error=e) from e

    if node.format != "yaml":
        raise FrontmatterError(f"Unsupported frontmatter format: {node.format!r}")

    try:
        data = yaml.safe_load(node.content)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Invalid YAML frontmatter: {e}", original_error=e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FrontmatterError(f"Frontmatter must be a mapping, got {type(data).__name__}")
    return data


def extract_frontmatter(document: Document) -> tuple[Document, dict[str, Any]]:
    """Split a document into its body and its decoded frontmatter.

    The input document is left untouched.

    Parameters
    ----------
    document : Document
        Parsed document whose first child must be a FrontMatter node

    Returns
    -------
    tuple[Document, dict]
        A new document holding the remaining children, and the metadata
        mapping

    Raises
    ------
    MissingFrontmatterError
        If the document is empty or does not start with frontmatter
    FrontmatterError
        If the frontmatter cannot be decoded

    """
    if not document.children:
        raise MissingFrontmatterError()

    first = document.children[0]
    if not isinstance(first, FrontMatter):
        raise MissingFrontmatterError(type(first).__name__)

    metadata = decode_frontmatter(first)
    logger.debug("Extracted %d frontmatter field(s): %s", len(metadata), ", ".join(map(str, metadata)))

    body = Document(children=list(document.children[1:]), metadata=dict(document.metadata))
    return body, metadata

#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/template.py
"""Placeholder substitution for LaTeX templates.

A template is ordinary LaTeX source containing ``%identifier%`` markers.
``%body%`` receives the rendered document; every other identifier is looked
up in the document's frontmatter. Substitution is a single pass, so text
inserted for one placeholder is never scanned for further placeholders.

"""

from __future__ import annotations

import datetime
import logging
from typing import Any, Mapping

from md2latex.constants import DEFAULT_TEMPLATE_STRICT, TEMPLATE_BODY_FIELD, TEMPLATE_PLACEHOLDER_PATTERN
from md2latex.exceptions import TemplateError, UnresolvedTemplateFieldError

logger = logging.getLogger(__name__)


def collect_placeholders(template: str) -> list[str]:
    """List the placeholder identifiers used in a template.

    Parameters
    ----------
    template : str
        Template text

    Returns
    -------
    list of str
        Identifiers in order of first appearance, without duplicates

    """
    seen: dict[str, None] = {}
    for match in TEMPLATE_PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def format_value(value: Any, field_name: str = "") -> str:
    """Convert a frontmatter value to the text inserted into the template.

    Parameters
    ----------
    value : Any
        Decoded frontmatter value
    field_name : str, optional
        Placeholder name, used in error messages

    Returns
    -------
    str
        Text for the placeholder

    Raises
    ------
    TemplateError
        If the value is a mapping

    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float, datetime.date, datetime.time)):
        return str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(format_value(item, field_name) for item in value)
    if isinstance(value, Mapping):
        raise TemplateError(f"template field {field_name!r} is a mapping and cannot be inserted as text")
    return str(value)


def render_template(
    template: str,
    body: str,
    metadata: Mapping[str, Any],
    strict: bool = DEFAULT_TEMPLATE_STRICT,
) -> str:
    r"""Fill a template with the rendered body and frontmatter values.

    Parameters
    ----------
    template : str
        Template text containing ``%identifier%`` placeholders
    body : str
        Rendered LaTeX body, inserted for ``%body%``
    metadata : Mapping
        Decoded frontmatter
    strict : bool, default True
        When True, a placeholder missing from the metadata raises
        UnresolvedTemplateFieldError. When False, it is left in the output
        as written and a warning is logged.

    Returns
    -------
    str
        The filled template

    Raises
    ------
    UnresolvedTemplateFieldError
        If a placeholder has no value and ``strict`` is True
    TemplateError
        If a value cannot be converted to text

    Examples
    --------
        >>> render_template("Title: %title%\n%body%", "Y", {"title": "X"})
        'Title: X\nY'

    """
    unresolved: list[str] = []

    def _substitute(match: Any) -> str:
        name = match.group(1)
        if name == TEMPLATE_BODY_FIELD:
            return body
        if name not in metadata:
            if strict:
                raise UnresolvedTemplateFieldError(name)
            unresolved.append(name)
            return match.group(0)
        return format_value(metadata[name], name)

    result = TEMPLATE_PLACEHOLDER_PATTERN.sub(_substitute, template)

    for name in dict.fromkeys(unresolved):
        logger.warning("Template field %r is not defined in the frontmatter; left unchanged", name)

    return result

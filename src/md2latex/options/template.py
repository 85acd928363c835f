#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2latex/options/template.py
"""Configuration options for template substitution."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2latex.constants import DEFAULT_TEMPLATE_STRICT
from md2latex.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class TemplateOptions(CloneFrozenMixin):
    """Configuration options for filling a template.

    Parameters
    ----------
    strict : bool, default True
        Raise UnresolvedTemplateFieldError for a placeholder whose identifier
        is missing from the frontmatter. When False the placeholder is left
        in place and a warning is logged.

    """

    strict: bool = field(
        default=DEFAULT_TEMPLATE_STRICT,
        metadata={"help": "Fail on placeholders missing from the frontmatter", "importance": "core"},
    )

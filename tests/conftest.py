"""Pytest configuration and shared fixtures for the md2latex test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Provide a temporary directory for test files.

    Returns
    -------
    Path
        Temporary directory path, removed by pytest after the session.

    """
    return tmp_path


@pytest.fixture
def sample_markdown() -> str:
    """Provide a complete markdown document exercising every supported construct.

    Returns
    -------
    str
        Markdown text with YAML frontmatter.

    """
    return """---
title: Field Notes
author: A. Writer
---
# Introduction

Some text with $x^2$ and a [link](https://example.com).

## Data

- first
- second

```csv
---
alignment: lr
label: data
caption: Measurements
---
name,value
a,1
```

![A plot](plot.png)
![](refs.bib)
"""


@pytest.fixture
def sample_template() -> str:
    """Provide a template using a metadata field and the body.

    Returns
    -------
    str
        Template text.

    """
    return "\\title{%title%}\n\\author{%author%}\n\\begin{document}\n%body%\n\\end{document}"

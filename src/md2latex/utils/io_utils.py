#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2latex/utils/io_utils.py
"""Reading input documents and templates from disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from md2latex.exceptions import FileAccessError, FileNotFoundError

logger = logging.getLogger(__name__)


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a text file, translating OS errors into md2latex exceptions.

    Parameters
    ----------
    path : str or Path
        File to read
    encoding : str, default "utf-8"
        Text encoding of the file

    Returns
    -------
    str
        File contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist or is not a regular file
    FileAccessError
        If the file cannot be read or decoded

    """
    file_path = Path(path)
    if not file_path.is_file():
        raise FileNotFoundError(str(file_path))

    try:
        text = file_path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileAccessError(
            str(file_path), message=f"Cannot decode {file_path} as {encoding}: {e}", original_error=e
        ) from e
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e

    logger.debug("Read %d characters from %s", len(text), file_path)
    return text

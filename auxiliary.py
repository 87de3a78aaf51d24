#!/usr/bin/env python3
"""
Auxiliary utility functions for onomasia

Filename splitting and path display helpers shared by the extractor,
the collision resolver and the runner.
"""

import pathlib
from typing import Optional


def split_extension(filename: str) -> tuple[str, str]:
    """Split a filename at its last dot

    Args:
        filename: File name without any directory part

    Returns:
        (stem, extension) where extension keeps its leading dot and case,
        or is empty when the name has no dot. ".jpg" splits into ("", ".jpg").
    """
    dot = filename.rfind(".")
    if dot == -1:
        return filename, ""
    return filename[:dot], filename[dot:]


def format_path_for_display(path: str, home_path: Optional[str] = None) -> str:
    """Format file path for display by replacing home directory with ~

    Args:
        path: File path to format
        home_path: Home directory path (defaults to platform home)

    Returns:
        Path with home directory replaced by ~ if applicable
    """
    if home_path is None:
        home_path = str(pathlib.Path.home())

    if home_path in ("", "/"):
        return path
    if path == home_path or path.startswith(home_path + "/"):
        return "~" + path[len(home_path):]
    return path

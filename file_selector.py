#!/usr/bin/env python3
"""
File Selection Module

Lists the media files of one directory (non-recursive) that belong to a
media category, in name order so every run processes them identically.
"""

import pathlib
from dataclasses import dataclass, field

from media_categories import MediaCategory


@dataclass
class FileSelection:
    """Directory children split by whether the category accepts them"""

    included: list[pathlib.Path] = field(default_factory=list)
    excluded: list[pathlib.Path] = field(default_factory=list)


def select_files(directory: pathlib.Path, category: MediaCategory) -> FileSelection:
    """Select the immediate children of directory matching the category's extensions

    Returns an empty selection if the directory does not exist.
    """
    selection = FileSelection()
    if not directory.is_dir():
        return selection

    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if path.is_file() and category.matches_extension(path.name):
            selection.included.append(path)
        else:
            selection.excluded.append(path)

    return selection

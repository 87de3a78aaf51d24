#!/usr/bin/env python3
"""Canonical filename rendering"""

from dataclasses import asdict

from media_categories import MediaCategory
from timestamp_extractor import Timestamp


def format_name(timestamp: Timestamp, extension: str, category: MediaCategory) -> str:
    """Render a canonical filename for a timestamp

    Args:
        timestamp: Components to substitute, zero-padded (4 digits for year, 2 otherwise)
        extension: Original extension including its dot; case is preserved
        category: Category providing the name template

    Returns:
        e.g. 'img-2023-06-15-14-22-33.JPG'

    Example:
        >>> format_name(Timestamp(2023, 6, 15, 14, 22, 33), ".mov", VIDEOS)
        'video-2023-06-15-14-22-33.mov'
    """
    return category.name_template.format(**asdict(timestamp)) + extension

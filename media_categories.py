#!/usr/bin/env python3
"""
Media Category Definitions

Immutable descriptions of the two media classes onomasia knows about:
pictures and videos. Each category carries its extensions, the filename
patterns that already encode a capture time, whether EXIF should be
consulted, and the canonical name format.
"""

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MediaCategory:
    """Fixed configuration record for one class of media"""

    name: str
    code: str
    extensions: tuple[str, ...]
    name_patterns: tuple[re.Pattern[str], ...]
    use_metadata: bool
    canonical_pattern: re.Pattern[str]
    name_template: str

    def matches_extension(self, filename: str) -> bool:
        """Check if filename ends with one of the category's extensions (case-insensitive)"""
        lowered = filename.lower()
        return any(lowered.endswith(ext) for ext in self.extensions)

    def is_canonical(self, stem: str) -> bool:
        """Check if a filename stem is already in canonical form"""
        return self.canonical_pattern.fullmatch(stem) is not None


def _canonical_pattern(prefix: str) -> re.Pattern[str]:
    return re.compile(rf"{prefix}-(\d{{4}})-(\d{{2}})-(\d{{2}})-(\d{{2}})-(\d{{2}})-(\d{{2}})(-\d+)?", re.ASCII)


def _name_template(prefix: str) -> str:
    return prefix + "-{year:04d}-{month:02d}-{day:02d}-{hour:02d}-{minute:02d}-{second:02d}"


PICTURES = MediaCategory(
    name="pictures",
    code="p",
    extensions=(".jpg", ".jpeg"),
    name_patterns=(
        # 2023-06-15 14.22.33
        re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{2})\.(\d{2})\.(\d{2})", re.ASCII),
        # 20230615_142233
        re.compile(r"(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})", re.ASCII),
        # 2023-06-15-14-22-33-anything
        re.compile(r"(\d{4})-(\d{2})-(\d{2})-(\d{2})-(\d{2})-(\d{2})-.+", re.ASCII),
        # IMG_20230615_142233, IMG_20230615_142233_1, IMG_20230615_142233~2
        re.compile(r"IMG_(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})(?:_\d+|~\d+)?", re.ASCII),
    ),
    use_metadata=True,
    canonical_pattern=_canonical_pattern("img"),
    name_template=_name_template("img"),
)

VIDEOS = MediaCategory(
    name="videos",
    code="v",
    extensions=(".mov", ".mp4", ".avi"),
    name_patterns=(
        re.compile(r"VID_(\d{4})(\d{2})(\d{2})_(\d{2})(\d{2})(\d{2})(?:_\d+|~\d+)?", re.ASCII),
    ),
    use_metadata=False,
    canonical_pattern=_canonical_pattern("video"),
    name_template=_name_template("video"),
)

CATEGORIES = (PICTURES, VIDEOS)


def category_for_code(code: str) -> Optional[MediaCategory]:
    """Look up a category by its CLI code ('p' or 'v')"""
    for category in CATEGORIES:
        if category.code == code:
            return category
    return None

#!/usr/bin/env python3
"""
Collision Resolution Module

Finds the first free variant of a desired filename by appending a numeric
de-duplication suffix (name.jpg, name-1.jpg, name-2.jpg, ...). What counts
as "taken" is decided by an injected predicate: verify mode checks the
targets already chosen in this run, rename mode checks the filesystem.
"""

import pathlib
from typing import Callable, Iterable, Optional, Protocol

from auxiliary import split_extension
from rename_errors import CollisionLimitExceeded

MAX_SUFFIX_ATTEMPTS = 10_000


class CollisionPredicate(Protocol):
    def is_taken(self, candidate: pathlib.Path) -> bool: ...


class ChosenTargetsPredicate:
    """Treats names already chosen during this run as taken"""

    def __init__(self, chosen: Optional[Iterable[pathlib.Path]] = None):
        self.chosen: set[pathlib.Path] = set(chosen or ())

    def is_taken(self, candidate: pathlib.Path) -> bool:
        return candidate in self.chosen

    def add(self, target: pathlib.Path):
        self.chosen.add(target)

    def __contains__(self, target: pathlib.Path) -> bool:
        return target in self.chosen


class FilesystemPredicate:
    """Treats names that exist on disk as taken"""

    def is_taken(self, candidate: pathlib.Path) -> bool:
        return candidate.exists()


def suffixed_name(filename: str, index: int) -> str:
    """Insert a -N suffix before the extension (no suffix for index 0)"""
    stem, ext = split_extension(filename)
    return f"{stem}-{index}{ext}" if index else filename


def resolve_collision(
    desired_name: str,
    original: pathlib.Path,
    predicate: CollisionPredicate,
    log: Optional[Callable[[str], None]] = None,
    max_attempts: int = MAX_SUFFIX_ATTEMPTS,
) -> pathlib.Path:
    """Return the first acceptable target path for a file

    Args:
        desired_name: Preferred filename, placed next to the original
        original: File being renamed; returned unchanged if a candidate equals it
        predicate: Decides whether a candidate is already taken
        log: Callback notified when a suffix was needed
        max_attempts: Number of candidates to try before giving up

    Raises:
        CollisionLimitExceeded: If every candidate within max_attempts is taken
    """
    for index in range(max_attempts):
        candidate_name = suffixed_name(desired_name, index)
        candidate = original.with_name(candidate_name)

        if candidate == original:
            return original

        if not predicate.is_taken(candidate):
            if index and log:
                log(f"De-duped name: {original} -> {candidate_name}")
            return candidate

    raise CollisionLimitExceeded(original, f"No free name for {desired_name} after {max_attempts} attempts")

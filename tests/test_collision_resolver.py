"""
Tests for de-duplication suffix search and the two collision predicates
"""

import pathlib

import pytest

from collision_resolver import (
    ChosenTargetsPredicate,
    FilesystemPredicate,
    resolve_collision,
    suffixed_name,
)
from rename_errors import CollisionLimitExceeded


class FirstTaken:
    """Reports the first k candidates as taken"""

    def __init__(self, k: int):
        self.k = k
        self.seen: list[pathlib.Path] = []

    def is_taken(self, candidate: pathlib.Path) -> bool:
        self.seen.append(candidate)
        return len(self.seen) <= self.k


class AlwaysTaken:
    def is_taken(self, candidate: pathlib.Path) -> bool:
        return True


class TestSuffixedName:
    """Test suite for suffixed_name"""

    def test_index_zero_is_bare(self):
        assert suffixed_name("img-2023-06-15-14-22-33.jpg", 0) == "img-2023-06-15-14-22-33.jpg"

    def test_suffix_goes_before_extension(self):
        assert suffixed_name("img-2023-06-15-14-22-33.jpg", 3) == "img-2023-06-15-14-22-33-3.jpg"

    def test_no_extension(self):
        assert suffixed_name("video-2023-06-15-14-22-33", 1) == "video-2023-06-15-14-22-33-1"


class TestResolveCollision:
    """Test suite for resolve_collision"""

    ORIGINAL = pathlib.Path("/photos/IMG_20230615_142233.jpg")
    DESIRED = "img-2023-06-15-14-22-33.jpg"

    def test_bare_name_when_nothing_taken(self):
        assert resolve_collision(self.DESIRED, self.ORIGINAL, FirstTaken(0)) == pathlib.Path("/photos/img-2023-06-15-14-22-33.jpg")

    @pytest.mark.parametrize("k", [1, 2, 5])
    def test_first_k_taken_yields_suffix_k(self, k):
        result = resolve_collision(self.DESIRED, self.ORIGINAL, FirstTaken(k))
        assert result == pathlib.Path(f"/photos/img-2023-06-15-14-22-33-{k}.jpg")

    def test_dedup_is_logged(self):
        messages = []
        resolve_collision(self.DESIRED, self.ORIGINAL, FirstTaken(1), log=messages.append)
        assert messages == [f"De-duped name: {self.ORIGINAL} -> img-2023-06-15-14-22-33-1.jpg"]

    def test_no_log_without_suffix(self):
        messages = []
        resolve_collision(self.DESIRED, self.ORIGINAL, FirstTaken(0), log=messages.append)
        assert messages == []

    def test_candidate_equal_to_original_returns_original(self):
        original = pathlib.Path("/photos/img-2023-06-15-14-22-33-1.jpg")
        predicate = FirstTaken(1)
        assert resolve_collision(self.DESIRED, original, predicate) is original
        assert len(predicate.seen) == 1

    def test_attempt_limit(self):
        with pytest.raises(CollisionLimitExceeded):
            resolve_collision(self.DESIRED, self.ORIGINAL, AlwaysTaken(), max_attempts=50)


class TestPredicates:
    """Test suite for the verify and rename predicates"""

    def test_chosen_targets(self):
        predicate = ChosenTargetsPredicate()
        target = pathlib.Path("/photos/img-2023-06-15-14-22-33.jpg")
        assert not predicate.is_taken(target)
        predicate.add(target)
        assert predicate.is_taken(target)
        assert target in predicate

    def test_filesystem(self, make_files, tmp_path):
        (existing,) = make_files("img-2023-06-15-14-22-33.jpg")
        predicate = FilesystemPredicate()
        assert predicate.is_taken(existing)
        assert not predicate.is_taken(tmp_path / "img-2023-06-15-14-22-33-1.jpg")

    def test_filesystem_suffix_search(self, make_files, tmp_path):
        make_files("img-2023-06-15-14-22-33.jpg", "img-2023-06-15-14-22-33-1.jpg")
        (original,) = make_files("IMG_20230615_142233.jpg")
        result = resolve_collision("img-2023-06-15-14-22-33.jpg", original, FilesystemPredicate())
        assert result == tmp_path / "img-2023-06-15-14-22-33-2.jpg"

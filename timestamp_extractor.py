#!/usr/bin/env python3
"""
Timestamp Extraction Module

Determines the capture time of a media file from, in order of preference:
the filename itself (known camera/phone naming conventions), the EXIF
DateTimeOriginal tag (pictures only), and finally the filesystem creation
time. A file already named in canonical form short-circuits the chain.
"""

import datetime
import pathlib
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

# Third-party imports
import exifread
from tzlocal import get_localzone

# Local imports
from auxiliary import split_extension
from media_categories import MediaCategory
from rename_errors import FilesystemAttributeError, MetadataReadError

# "YYYY:MM:DD HH:MM:SS" with one optional trailing character (sub-second markers etc.)
EXIF_DATE_PATTERN = re.compile(r"(\d{4}):(\d{2}):(\d{2}) (\d{2}):(\d{2}):(\d{2}).?", re.ASCII)

EXIF_CAPTURE_TAG = "EXIF DateTimeOriginal"


class Provenance(Enum):
    """Source that supplied a file's timestamp"""

    CANONICAL = "canonical"
    PATTERN = "pattern"
    METADATA = "metadata"
    FILESYSTEM = "filesystem"

    @property
    def marker(self) -> str:
        return _MARKERS[self]


_MARKERS = {
    Provenance.CANONICAL: "====>",
    Provenance.PATTERN: "PATT>",
    Provenance.METADATA: "EXIF>",
    Provenance.FILESYSTEM: "!!!!>",
}


@dataclass(frozen=True)
class Timestamp:
    """Six timestamp components; values are not range-checked"""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def from_match(cls, match: re.Match) -> "Timestamp":
        """Build from a match whose first six groups are year..second"""
        return cls(*(int(match.group(i)) for i in range(1, 7)))

    @classmethod
    def from_datetime(cls, value: datetime.datetime) -> "Timestamp":
        return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)


@dataclass(frozen=True)
class Extraction:
    """Result of timestamp extraction; timestamp is None for canonical names"""

    timestamp: Optional[Timestamp]
    provenance: Provenance

    @property
    def needs_rename(self) -> bool:
        return self.provenance is not Provenance.CANONICAL


class MetadataReader(Protocol):
    def read_capture_timestamp(self, path: pathlib.Path) -> Optional[str]: ...


class ExifCaptureReader:
    """Reads the raw DateTimeOriginal string from image EXIF data"""

    def read_capture_timestamp(self, path: pathlib.Path) -> Optional[str]:
        """Return the DateTimeOriginal value, or None if the tag is absent

        Raises:
            MetadataReadError: If the file or its metadata cannot be read
        """
        try:
            with open(path, "rb") as f:
                tags = exifread.process_file(f, details=False, stop_tag="DateTimeOriginal")
        except Exception as e:
            raise MetadataReadError(path, f"EXIF extraction failed: {e}") from e

        if EXIF_CAPTURE_TAG not in tags:
            return None
        return str(tags[EXIF_CAPTURE_TAG])


def read_creation_time(path: pathlib.Path, timezone: datetime.tzinfo) -> datetime.datetime:
    """Read the file's creation time in the given timezone

    Uses birth time where the platform records it, otherwise st_ctime.

    Raises:
        FilesystemAttributeError: If the file cannot be stat'ed
    """
    try:
        stat = path.stat()
    except OSError as e:
        raise FilesystemAttributeError(path, f"Could not read file attributes: {e}") from e

    created = getattr(stat, "st_birthtime", None)
    if created is None:
        created = stat.st_ctime
    return datetime.datetime.fromtimestamp(created, tz=timezone)


class TimestampExtractor:
    """Resolves the capture timestamp of files belonging to one media category"""

    def __init__(
        self,
        category: MediaCategory,
        metadata_reader: Optional[MetadataReader] = None,
        timezone: Optional[datetime.tzinfo] = None,
        log: Optional[Callable[[str], None]] = None,
    ):
        """Initialize extractor

        Args:
            category: Media category whose patterns and settings apply
            metadata_reader: Source of raw EXIF capture strings (defaults to exifread)
            timezone: Zone used to decompose filesystem times (defaults to the local zone)
            log: Callback for diagnostic messages such as malformed EXIF values
        """
        self.category = category
        self.metadata_reader = metadata_reader or ExifCaptureReader()
        self.timezone = timezone or get_localzone()
        self.log = log

        # Ordered fallback chain; each returns None when not applicable
        self._strategies: list[tuple[Provenance, Callable[[pathlib.Path, str], Optional[Timestamp]]]] = [
            (Provenance.PATTERN, self._from_filename),
            (Provenance.METADATA, self._from_metadata),
            (Provenance.FILESYSTEM, self._from_filesystem),
        ]

    def extract(self, path: pathlib.Path) -> Extraction:
        """Extract the timestamp for a file

        Raises:
            MetadataReadError: If EXIF data is unreadable
            FilesystemAttributeError: If the creation time is unreadable
        """
        stem, _ = split_extension(path.name)

        if self.category.is_canonical(stem):
            return Extraction(None, Provenance.CANONICAL)

        for provenance, strategy in self._strategies:
            timestamp = strategy(path, stem)
            if timestamp is not None:
                return Extraction(timestamp, provenance)

        # Unreachable: the filesystem strategy either answers or raises
        raise FilesystemAttributeError(path, "No timestamp source available")

    def _from_filename(self, path: pathlib.Path, stem: str) -> Optional[Timestamp]:
        for pattern in self.category.name_patterns:
            match = pattern.fullmatch(stem)
            if match:
                return Timestamp.from_match(match)
        return None

    def _from_metadata(self, path: pathlib.Path, stem: str) -> Optional[Timestamp]:
        if not self.category.use_metadata:
            return None

        raw = self.metadata_reader.read_capture_timestamp(path)
        if raw is None:
            return None

        match = EXIF_DATE_PATTERN.fullmatch(raw)
        if not match:
            self._log(f"Bad DateTimeOriginal: [{raw}] in {path}")
            return None
        return Timestamp.from_match(match)

    def _from_filesystem(self, path: pathlib.Path, stem: str) -> Optional[Timestamp]:
        return Timestamp.from_datetime(read_creation_time(path, self.timezone))

    def _log(self, message: str):
        if self.log:
            self.log(message)

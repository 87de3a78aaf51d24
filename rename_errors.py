#!/usr/bin/env python3
"""
Error kinds raised while resolving and renaming media files.

Everything except UsageError is recovered per file by the runner loop.
"""

import pathlib


class OnomasiaError(Exception):
    """Base class for all onomasia errors"""


class UsageError(OnomasiaError):
    """Malformed command line invocation"""


class FileProcessingError(OnomasiaError):
    """Failure tied to a single file; the batch continues past it"""

    def __init__(self, path: pathlib.Path, detail: str):
        super().__init__(f"{path}: {detail}")
        self.path = path
        self.detail = detail


class MetadataReadError(FileProcessingError):
    """Image metadata could not be read"""


class FilesystemAttributeError(FileProcessingError):
    """File creation time could not be read"""


class RenameFailure(FileProcessingError):
    """The OS refused the rename"""


class CollisionLimitExceeded(FileProcessingError):
    """No free de-duplication suffix was found within the attempt limit"""

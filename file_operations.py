#!/usr/bin/env python3
"""
File Operations Module

Performs in-place renames with error capture. Each rename is a single
os.rename within one directory, so it is atomic; a failed rename leaves
the source untouched and is reported rather than raised.
"""

import os
import pathlib
from dataclasses import dataclass
from typing import Optional

from rename_errors import RenameFailure


@dataclass
class RenameOperation:
    """Represents a planned rename"""

    source_path: pathlib.Path
    target_path: pathlib.Path


@dataclass
class OperationResult:
    """Result of a rename"""

    operation: RenameOperation
    success: bool
    error_message: Optional[str] = None


class FileOperations:
    """Rename handler that never overwrites an existing file"""

    def plan_operation(self, source_path: pathlib.Path, target_path: pathlib.Path) -> RenameOperation:
        """Create a planned rename"""
        return RenameOperation(source_path=source_path, target_path=target_path)

    def rename_file(self, source_path: pathlib.Path, target_path: pathlib.Path):
        """Rename source to target

        Raises:
            RenameFailure: If the target exists or the OS refuses the rename
        """
        if target_path.exists():
            raise RenameFailure(source_path, f"Target already exists: {target_path}")
        try:
            os.rename(source_path, target_path)
        except OSError as e:
            raise RenameFailure(source_path, f"Failed to rename to {target_path}: {e}") from e

    def execute_operation(self, operation: RenameOperation) -> OperationResult:
        """Execute a single rename"""
        try:
            self.rename_file(operation.source_path, operation.target_path)
        except RenameFailure as e:
            return OperationResult(operation=operation, success=False, error_message=e.detail)

        return OperationResult(operation=operation, success=True)

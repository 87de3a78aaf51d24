#!/usr/bin/env python3
"""
Onomasia — Ancient Greek ὀνομασία (naming)

Normalizes photo and video filenames in a directory to a canonical,
sortable, timestamp-based form:

    pictures:  img-YYYY-MM-DD-HH-MM-SS.<ext>
    videos:    video-YYYY-MM-DD-HH-MM-SS.<ext>

The timestamp is taken from the existing filename when it follows a known
camera naming convention, else from EXIF DateTimeOriginal (pictures only),
else from the file's creation time. Name collisions get a -1, -2, ...
suffix.

Usage:
    onomasia -t p <path>        # Rename pictures in <path>
    onomasia -t v -v <path>     # Preview video renames without touching files
"""

import argparse
import pathlib
import sys
from dataclasses import dataclass
from typing import Optional

from auxiliary import format_path_for_display, split_extension
from collision_resolver import ChosenTargetsPredicate, CollisionPredicate, FilesystemPredicate, resolve_collision
from console_ui import ConsoleUI
from file_operations import FileOperations
from file_selector import FileSelection, select_files
from media_categories import CATEGORIES, MediaCategory, category_for_code
from name_formatter import format_name
from rename_errors import FileProcessingError, UsageError
from timestamp_extractor import Extraction, TimestampExtractor

USAGE = "Usage: onomasia -t p|v [-v] <path-to-dir>"

TYPE_FLAGS = ("-t", "--type")
HELP_FLAGS = ("-h", "--help")
OPTION_FLAGS = (*TYPE_FLAGS, "-v", "--verify")


@dataclass
class RunSummary:
    """Counters for one verify or rename pass"""

    selected: int = 0
    renamed: int = 0
    skipped: int = 0
    failed: int = 0


class Onomasia:
    """Drives extraction, formatting and collision resolution over a directory"""

    def __init__(
        self,
        category: MediaCategory,
        directory: pathlib.Path,
        verify: bool = False,
        ui: Optional[ConsoleUI] = None,
        extractor: Optional[TimestampExtractor] = None,
        file_operations: Optional[FileOperations] = None,
    ):
        self.category = category
        self.directory = directory
        self.verify_only = verify
        self.ui = ui or ConsoleUI()
        self.extractor = extractor or TimestampExtractor(category, log=self.ui.print_warning)
        self.file_operations = file_operations or FileOperations()

    # -- shared steps --------------------------------------------------------

    def show_configuration(self):
        action = "Checking" if self.verify_only else "Renaming"
        self.ui.print_header("Onomasia", f"{action}: {self.category.name}, dir: {self.directory}")
        self.ui.show_configuration(
            {
                "Mode": "Verify (dry run)" if self.verify_only else "Rename",
                "Category": self.category.name,
                "Extensions": self.category.extensions,
                "Directory": format_path_for_display(str(self.directory)),
            }
        )

    def collect_files(self) -> FileSelection:
        selection = select_files(self.directory, self.category)
        self.ui.print_info(f"Included files: {len(selection.included)}")
        self.ui.print_progress(f"Excluded files: {[p.name for p in selection.excluded]}")
        return selection

    def choose_target(self, path: pathlib.Path, predicate: CollisionPredicate) -> tuple[pathlib.Path, Extraction]:
        """Resolve the target path for one file

        Returns the original path when the file is already canonical or the
        desired name resolves back to it.

        Raises:
            FileProcessingError: If the timestamp or a free name cannot be determined
        """
        extraction = self.extractor.extract(path)
        if not extraction.needs_rename:
            return path, extraction

        _, extension = split_extension(path.name)
        desired_name = format_name(extraction.timestamp, extension, self.category)
        target = resolve_collision(desired_name, path, predicate, log=self.ui.print_progress)
        return target, extraction

    # -- modes ---------------------------------------------------------------

    def run(self) -> RunSummary:
        self.show_configuration()
        if self.verify_only:
            return self.verify()
        return self.rename()

    def verify(self) -> RunSummary:
        """Report what rename would do; never touches the filesystem"""
        summary = RunSummary()
        files = self.collect_files().included
        summary.selected = len(files)
        chosen = ChosenTargetsPredicate()

        for path in files:
            try:
                target, extraction = self.choose_target(path, chosen)
            except FileProcessingError as e:
                self.ui.print_error(f"Error reading: {path}, {e.detail}")
                summary.failed += 1
                continue

            if target in chosen:
                self.ui.print_warning(f"Chosen file already in set: {target}")
                summary.skipped += 1
                continue
            if target == path:
                self.ui.print_provenance(extraction.provenance.marker, f"Skipping already in format: {target}")
                summary.skipped += 1
                continue

            chosen.add(target)
            self.ui.print_provenance(extraction.provenance.marker, f"{path} -> {target}")
            summary.renamed += 1

        self.ui.print_success(f"Checked total: {summary.renamed}")
        return summary

    def rename(self) -> RunSummary:
        """Rename every selected file to its canonical name"""
        summary = RunSummary()
        files = self.collect_files().included
        summary.selected = len(files)
        predicate = FilesystemPredicate()
        renamed: list[str] = []
        failed: list[tuple[str, str]] = []

        for path in files:
            try:
                target, extraction = self.choose_target(path, predicate)
            except FileProcessingError as e:
                self.ui.print_error(f"Error processing: {path}, {e.detail}")
                failed.append((path.name, e.detail))
                continue

            if target == path:
                self.ui.print_provenance(extraction.provenance.marker, f"Skipping already in format: {target}")
                summary.skipped += 1
                continue
            if target.exists():
                self.ui.print_warning(f"Chosen file already exists: {target}")
                summary.skipped += 1
                continue

            self.ui.print_provenance(extraction.provenance.marker, f"{path} -> {target}")
            result = self.file_operations.execute_operation(self.file_operations.plan_operation(path, target))
            if not result.success:
                self.ui.print_error(f"Failed to rename: {path}, to: {target}")
                failed.append((path.name, result.error_message))
                continue
            renamed.append(target.name)

        summary.renamed = len(renamed)
        summary.failed = len(failed)
        self.ui.show_operation_summary(renamed, failed, "renamed")
        self.ui.print_success(f"Renamed total: {summary.renamed}")
        return summary


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


class OnomasiaArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2"""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = OnomasiaArgumentParser(
        prog="onomasia",
        description="Onomasia — rename photos and videos to timestamp-based names",
        epilog="Pictures become img-YYYY-MM-DD-HH-MM-SS.<ext>, videos video-YYYY-MM-DD-HH-MM-SS.<ext>",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="category",
        required=True,
        choices=[category.code for category in CATEGORIES],
        help="Media type: p (pictures) or v (videos)",
    )
    parser.add_argument("-v", "--verify", action="store_true", help="Show what would be renamed without changing anything")
    parser.add_argument("path", help="Directory to process (must be the last argument)")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command line arguments

    The last token is always the directory, even when it starts with a dash.

    Raises:
        UsageError: On any malformed invocation, including a directory that is not the last argument
    """
    parser = build_parser()
    if argv and argv[-1] in HELP_FLAGS:
        return parser.parse_args(argv)
    if not argv or argv[-1] in OPTION_FLAGS or (len(argv) > 1 and argv[-2] in TYPE_FLAGS):
        raise UsageError("directory must be the last argument")
    return parser.parse_args([*argv[:-1], "--", argv[-1]])


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point"""
    ui = ConsoleUI()
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
    except UsageError:
        ui.print_plain(USAGE)
        return 1

    app = Onomasia(category_for_code(args.category), pathlib.Path(args.path), verify=args.verify, ui=ui)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())

import logging
import os
from typing import Callable

from grepcore.models import FileErrorKind, ScanFailure, ScanOutcome, TraversalReport

logger = logging.getLogger(__name__)

ScanFunction = Callable[[str], ScanOutcome]

# Directory entries of root, sorted by name so the walk order is reproducible
def list_entries(root: str) -> list[os.DirEntry]:
    with os.scandir(root) as it:
        return sorted(it, key=lambda entry: entry.name)

def _directory_failure(root: str, error: OSError) -> ScanFailure:
    if isinstance(error, PermissionError):
        return ScanFailure(path=root, kind=FileErrorKind.PERMISSION_DENIED,
                           detail="permission denied", is_directory=True)
    if isinstance(error, FileNotFoundError):
        return ScanFailure(path=root, kind=FileErrorKind.NOT_FOUND,
                           detail="No such file or directory", is_directory=True)

    return ScanFailure(path=root, kind=FileErrorKind.OTHER,
                       detail="Could not read directory", is_directory=True)

def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False

def _is_regular_file(entry: os.DirEntry) -> bool:
    try:
        return entry.is_file()
    except OSError:
        return False

# Walk root depth-first: files are scanned and directories recursed into in name order
def walk_directory(root: str, scan_fn: ScanFunction) -> TraversalReport:
    report = TraversalReport()

    try:
        entries = list_entries(root)
    except OSError as e:
        logger.debug("cannot enumerate %s: %s", root, e)
        report.add(_directory_failure(root, e))
        return report

    logger.debug("entering %s (%d entries)", root, len(entries))

    for entry in entries:
        entry_path = os.path.join(root, entry.name)

        if _is_directory(entry):
            report.extend(walk_directory(entry_path, scan_fn))
        elif _is_regular_file(entry):
            report.add(scan_fn(entry_path))
        else:
            logger.debug("skipping %s: not a regular file or directory", entry_path)

    return report

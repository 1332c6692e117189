"""
Content file scanner.

Enumerates every file below a content or layouts directory, skipping
dotfiles and backup/editor artifacts.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# Editor backups and patch leftovers
BACKUP_PATTERN = re.compile(r"(~|\.orig|\.rej|\.bak)$")


def is_backup_file(path: str) -> bool:
    """Check if a path looks like a backup or editor artifact."""
    return BACKUP_PATTERN.search(path) is not None


def all_files_in(root: str | Path) -> list[str]:
    """Return all files below root, recursively.

    Paths are returned as slash-delimited strings prefixed with root.
    Hidden entries (leading period) are skipped; symlinked directories
    are not followed. A missing root yields an empty list.

    Raises:
        OSError: If root or a directory below it cannot be read
    """
    root_str = Path(root).as_posix()
    if not os.path.isdir(root_str):
        logger.debug("Skipping non-existent directory: %s", root_str)
        return []

    files: list[str] = []
    pending = [root_str]
    while pending:
        directory = pending.pop()
        with os.scandir(directory) as entries:
            for entry in sorted(entries, key=lambda e: e.name):
                if entry.name.startswith("."):
                    continue
                path = f"{directory}/{entry.name}"
                if entry.is_dir(follow_symlinks=False):
                    pending.append(path)
                elif entry.is_file():
                    files.append(path)
    return sorted(files)


def scan_files(root: str | Path) -> list[str]:
    """Return all content candidates below root, without backup files."""
    files = []
    for path in all_files_in(root):
        if is_backup_file(path):
            logger.debug("Ignoring backup file: %s", path)
            continue
        files.append(path)
    logger.debug("Scanned %d file(s) in %s", len(files), root)
    return files

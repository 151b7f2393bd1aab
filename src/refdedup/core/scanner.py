"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Implements directory tree enumeration.
Features:
- Walks the tree with an explicit work-list instead of recursion
- Skips symbolic links entirely (never included, never followed)
- Returns a List of regular file paths
- Any read error aborts the whole scan
"""

import os
import time
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# Local imports
from refdedup.core.interfaces import TreeScanner, ProgressCallback


class TreeScannerImpl(TreeScanner):
    """
    Scans a directory tree and collects regular files.
    Uses `os.scandir` so entry types come from the directory listing itself.

    Attributes:
        root_dir: Root directory to scan
        progress_interval: Report progress every N files found
    """

    def __init__(self, root_dir: str, progress_interval: int = 5000):
        self.root_dir = root_dir
        self.progress_interval = progress_interval

    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[str]:
        """
        Single-pass scanner. Errors from the filesystem propagate unchanged.
        """
        logger.debug(f"Starting scan of {self.root_dir}")
        start_time = time.time()

        found_files: List[str] = []
        pending = [self.root_dir]
        progress_counter = 0

        while pending:
            directory = pending.pop()
            with os.scandir(directory) as entries:
                for entry in entries:
                    if entry.is_symlink():
                        logger.debug(f"Skipping symbolic link: {entry.path}")
                        continue
                    if entry.is_dir(follow_symlinks=False):
                        pending.append(entry.path)
                    elif entry.is_file(follow_symlinks=False):
                        found_files.append(entry.path)
                        progress_counter += 1
                        if progress_callback and progress_counter >= self.progress_interval:
                            progress_callback('scanning', len(found_files), None)
                            progress_counter = 0
                    else:
                        logger.debug(f"Skipping special file: {entry.path}")

        if progress_callback and progress_counter > 0:
            progress_callback('scanning', len(found_files), None)

        elapsed_time = time.time() - start_time
        logger.debug(f"Scan of {self.root_dir} completed in {elapsed_time:.2f}s, found {len(found_files)} files")
        return found_files


def scan_tree(root_dir: str) -> List[str]:
    """Return every non-symlink regular file below root_dir."""
    return TreeScannerImpl(root_dir).scan()

"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the deduplication system.
These protocols enforce structural typing using Python's `typing.Protocol` so
that the command layer and tests can swap implementations freely.

Key Components:
---------------
- TreeScanner: Interface for enumerating regular files under a directory.
- ContentComparator: Interface for exact byte-level comparison of two files.
- DuplicateMatcher: Interface for matching target files against reference files.
"""

from typing import Protocol, List, Optional, Callable
from refdedup.core.models import DuplicatePair


ProgressCallback = Callable[[str, int, Optional[int]], None]


class TreeScanner(Protocol):
    """
    Interface for walking a directory tree.

    Methods:
        scan: Returns paths of every non-symlink regular file below the root.
    """
    def scan(self, progress_callback: Optional[ProgressCallback] = None) -> List[str]:
        """
        Scan files from the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            List of file paths in discovery order.

        Raises:
            OSError: If any directory or entry cannot be read.
        """
        ...


class ContentComparator(Protocol):
    """Interface for deciding whether two files hold identical bytes."""
    def compare(self, path_a: str, path_b: str) -> bool: ...


class DuplicateMatcher(Protocol):
    """
    Interface for the matching engine.

    Indexes reference files by name and confirms candidates by content.
    """
    def find_duplicates(
        self,
        reference_files: List[str],
        target_files: List[str],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[DuplicatePair]:
        """
        Match every target file against same-named reference files.

        Args:
            reference_files: Paths produced by scanning the reference tree.
            target_files: Paths produced by scanning the target tree.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            One DuplicatePair per target file with an identical reference file,
            in target order.
        """
        ...

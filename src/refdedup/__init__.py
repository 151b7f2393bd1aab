"""
refdedup — removes files from a target tree that already exist in a reference tree.

Core features:
- Name-scoped matching: only same-named reference files are candidates
- Exact byte-for-byte comparison with a size fast-path, no hashing
- Dry-run mode, permanent deletion, or safe deletion to system trash (via send2trash)
- CLI interface for headless/server usage
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("refdedup")
except Exception:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from refdedup.commands import DedupCommand
from refdedup.core import (
    DedupParams, DuplicatePair, DeletionMethod, ReferenceIndex,
    scan_tree, compare_content, find_duplicates)
from refdedup.services import DuplicateService, FileService

__all__ = [
    "DedupCommand",
    "DedupParams",
    "DuplicatePair",
    "DeletionMethod",
    "ReferenceIndex",
    "scan_tree",
    "compare_content",
    "find_duplicates",
    "DuplicateService",
    "FileService",
    "__version__",
]

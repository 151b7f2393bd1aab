"""
Core deduplication engine — scanner, index, comparator and matcher.

This package contains the foundation of refdedup:
- TreeScannerImpl: explicit work-list directory traversal that skips symlinks
- ReferenceIndex: reference files grouped by base name
- ContentComparatorImpl: size check followed by block-wise byte comparison
- DuplicateMatcherImpl: first-match lookup of target files in the index
- Models: DuplicatePair, DedupParams, DedupStats, DeletionMethod

All components are pure Python with no console dependencies.
"""

from .scanner import TreeScannerImpl, scan_tree
from .index import ReferenceIndex
from .comparator import ContentComparatorImpl, compare_content
from .matcher import DuplicateMatcherImpl, find_duplicates
from .models import (
    DuplicatePair, DedupParams, DedupStats, DeletionMethod, Stage, DEFAULT_BLOCK_SIZE)

__all__ = [
    "TreeScannerImpl",
    "scan_tree",
    "ReferenceIndex",
    "ContentComparatorImpl",
    "compare_content",
    "DuplicateMatcherImpl",
    "find_duplicates",
    "DuplicatePair",
    "DedupParams",
    "DedupStats",
    "DeletionMethod",
    "Stage",
    "DEFAULT_BLOCK_SIZE",
]

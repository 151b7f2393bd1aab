"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

matcher.py
Implements name-scoped duplicate matching:
    - reference files are indexed by base name
    - each target file is compared only against same-named reference files
    - the first candidate with identical content wins
"""
import logging
from typing import List, Optional
from refdedup.core.models import DuplicatePair
from refdedup.core.index import ReferenceIndex
from refdedup.core.comparator import ContentComparatorImpl
from refdedup.core.interfaces import ContentComparator, DuplicateMatcher, ProgressCallback

logger = logging.getLogger(__name__)


# =============================
# Main Matcher Class
# =============================
class DuplicateMatcherImpl(DuplicateMatcher):
    """
    Matches target files against a reference set.
    Any I/O error raised by the comparator aborts the whole run.
    """
    def __init__(self, comparator: Optional[ContentComparator] = None, progress_interval: int = 1000):
        self.comparator = comparator or ContentComparatorImpl()
        self.progress_interval = progress_interval

    def find_duplicates(
        self,
        reference_files: List[str],
        target_files: List[str],
        progress_callback: Optional[ProgressCallback] = None
    ) -> List[DuplicatePair]:
        """
        Main matching loop.
        Args:
            reference_files: Paths from the reference scan
            target_files: Paths from the target scan
            progress_callback (Optional[Callable[[str, int, int], None]]): Reports progress.
        Returns:
            List[DuplicatePair] in target order
        """
        index = ReferenceIndex.build(reference_files)
        duplicates = []
        total = len(target_files)

        for processed, target_file in enumerate(target_files, 1):
            match = self.find_match(index, target_file)
            if match is not None:
                logger.debug(f"Duplicate: {target_file} -> {match}")
                duplicates.append(DuplicatePair(target=target_file, reference=match))

            if progress_callback and (processed % self.progress_interval == 0 or processed == total):
                progress_callback('comparing', processed, total)

        logger.debug(f"Matched {len(duplicates)} of {total} target files")
        return duplicates

    def find_match(self, index: ReferenceIndex, target_file: str) -> Optional[str]:
        """Return the first same-named reference file with identical content, if any."""
        name = ReferenceIndex.base_name(target_file)
        for candidate in index.candidates(name):
            if self.comparator.compare(target_file, candidate):
                return candidate
        return None


def find_duplicates(reference_files: List[str], target_files: List[str]) -> List[DuplicatePair]:
    """Match target files against reference files with the default comparator."""
    return DuplicateMatcherImpl().find_duplicates(reference_files, target_files)

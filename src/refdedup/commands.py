"""
Unified command orchestrator for reference-based deduplication.
This is the SINGLE source of truth for the detection workflow — the CLI only
reports and deletes what it returns.
"""
import time
import logging
from typing import List, Optional, Tuple
from refdedup.core.models import DedupParams, DedupStats, DuplicatePair, Stage
from refdedup.core.scanner import TreeScannerImpl
from refdedup.core.comparator import ContentComparatorImpl
from refdedup.core.matcher import DuplicateMatcherImpl
from refdedup.core.interfaces import ProgressCallback

logger = logging.getLogger(__name__)


class DedupCommand:
    """
    Orchestrates the entire detection workflow:
    1. Scan the reference directory
    2. Scan the target directory
    3. Match target files against the reference files

    Usage:
        params = DedupParams(reference_dir="ref", target_dir="target")
        command = DedupCommand()
        duplicates, stats = command.execute(
            params,
            progress_callback=cli_progress_printer,
            stage_callback=cli_stage_printer
        )
    """

    def __init__(self):
        self._reference_files: List[str] = []
        self._target_files: List[str] = []

    def execute(
            self,
            params: DedupParams,
            progress_callback: Optional[ProgressCallback] = None,
            stage_callback=None
    ) -> Tuple[List[DuplicatePair], DedupStats]:
        """
        Execute detection with given parameters.

        Args:
            params: Validated deduplication parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            stage_callback: (stage: Stage) -> None, called before each stage starts

        Returns:
            Tuple of (duplicate_pairs, statistics)

        Raises:
            OSError: If scanning or comparison fails
        """
        stats = DedupStats()
        total_start_time = time.time()

        # Step 1 and 2: scan both trees
        self._reference_files = self._scan(
            params.reference_dir, Stage.SCAN_REFERENCE, stats, progress_callback, stage_callback)
        self._target_files = self._scan(
            params.target_dir, Stage.SCAN_TARGET, stats, progress_callback, stage_callback)

        # Step 3: match
        if stage_callback:
            stage_callback(Stage.MATCH)
        matcher = DuplicateMatcherImpl(ContentComparatorImpl(params.block_size))
        start_time = time.time()
        duplicates = matcher.find_duplicates(
            self._reference_files,
            self._target_files,
            progress_callback=progress_callback
        )
        stats.update_stage(
            Stage.MATCH.value,
            files_processed=len(self._target_files),
            pairs_found=len(duplicates),
            duration=time.time() - start_time
        )

        stats.total_time = time.time() - total_start_time
        logger.debug(f"Found {len(duplicates)} duplicates in {stats.total_time:.3f}s")
        return duplicates, stats

    @staticmethod
    def _scan(root_dir, stage, stats, progress_callback, stage_callback) -> List[str]:
        if stage_callback:
            stage_callback(stage)
        start_time = time.time()
        files = TreeScannerImpl(root_dir).scan(progress_callback=progress_callback)
        stats.update_stage(
            stage.value,
            files_processed=len(files),
            pairs_found=0,
            duration=time.time() - start_time
        )
        return files

    def get_reference_files(self) -> List[str]:
        """Get scanned reference files after execution."""
        return self._reference_files.copy()  # Return copy to prevent external mutation

    def get_target_files(self) -> List[str]:
        """Get scanned target files after execution."""
        return self._target_files.copy()

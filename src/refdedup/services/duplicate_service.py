import os
from typing import Callable, List, Optional, Tuple
from refdedup.core.models import DeletionMethod, DuplicatePair
from refdedup.services.file_service import FileService


class DuplicateService:
    @staticmethod
    def remove_duplicates(
            pairs: List[DuplicatePair],
            dry_run: bool = False,
            method: DeletionMethod = DeletionMethod.DELETE,
            on_pair: Optional[Callable[[DuplicatePair], None]] = None
    ) -> Tuple[List[str], int]:
        """
        Reports each pair through `on_pair`, then removes its target unless dry_run.

        Each target is stat'ed right after it is reported, so pairs before a
        vanished target are still reported. The first stat or removal failure
        propagates and stops the remaining pairs.

        Returns:
            Tuple of (target paths actually removed, total size in bytes of the
            targets that were reported).
        """
        removed = []
        total_size = 0
        for pair in pairs:
            if on_pair:
                on_pair(pair)
            total_size += os.stat(pair.target).st_size
            if not dry_run:
                FileService.remove(pair.target, method)
                removed.append(pair.target)
        return removed, total_size

"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/index.py
Groups reference files by base name so target files can find their candidates.
No file content is read here.
"""

import os
import logging
from collections import defaultdict
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)


class ReferenceIndex:
    """
    Read-only mapping from base name to the reference paths carrying that name.
    Paths under each name keep the order they were supplied in.
    """

    def __init__(self, files_by_name: Dict[str, List[str]]):
        self._files_by_name = files_by_name

    @classmethod
    def build(cls, paths: Iterable[str]) -> 'ReferenceIndex':
        """
        Build an index from scanned paths.

        Raises:
            ValueError: If a path has no final component (e.g. '' or 'dir/').
        """
        groups = defaultdict(list)
        for path in paths:
            name = ReferenceIndex.base_name(path)
            groups[name].append(path)
        logger.debug(f"Indexed {sum(len(g) for g in groups.values())} files under {len(groups)} names")
        return cls(dict(groups))

    @staticmethod
    def base_name(path: str) -> str:
        """Final path component of path; fails loudly when there is none."""
        name = os.path.basename(path)
        if not name:
            raise ValueError(f"Path has no file name component: {path!r}")
        return name

    def candidates(self, name: str) -> List[str]:
        """Reference paths named `name`, in insertion order. Empty if unknown."""
        return list(self._files_by_name.get(name, ()))

    def names(self) -> List[str]:
        return list(self._files_by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._files_by_name

    def __len__(self) -> int:
        return len(self._files_by_name)

    def __repr__(self):
        return f"<ReferenceIndex names={len(self._files_by_name)}>"

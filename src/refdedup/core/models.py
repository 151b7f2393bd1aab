"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for reference-based duplicate detection.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, Union
from enum import Enum


DEFAULT_BLOCK_SIZE = 4096


# =============================
# Enums
# =============================

class DeletionMethod(Enum):
    """
    How duplicate target files are removed once reported.
    """
    DELETE = "delete"
    TRASH = "trash"

    def __repr__(self) -> str:
        return self.value


class Stage(str, Enum):
    SCAN_REFERENCE = "scan_reference"
    SCAN_TARGET = "scan_target"
    MATCH = "match"


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True, order=True)
class DuplicatePair:
    """
    A target file whose content exactly matches a reference file.
    Ordering is by target path, then reference path.
    """
    target: str
    reference: str

    def __iter__(self) -> Iterator[str]:
        yield self.target
        yield self.reference

    def __repr__(self):
        return f"<DuplicatePair target={self.target}, reference={self.reference}>"


class DedupStats:
    """
    Statistics collected while scanning and matching.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(
            self,
            stage_name: str,
            files_processed: int,
            pairs_found: int,
            duration: float
    ) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {
                "files": 0,
                "pairs": 0,
                "time": 0.0
            }
        self.stage_stats[stage_name]["files"] += files_processed
        self.stage_stats[stage_name]["pairs"] += pairs_found
        self.stage_stats[stage_name]["time"] += duration

    def print_summary(self) -> str:
        labels = {
            Stage.SCAN_REFERENCE.value: "Reference scan",
            Stage.SCAN_TARGET.value: "Target scan",
            Stage.MATCH.value: "Content matching",
        }

        lines = [
            "Deduplication Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: FILES / PAIRS / TIME"
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage, stage.title())
            lines.append(f"{label}: {data['files']} / {data['pairs']} / {data['time']:.3f}s")

        return "\n".join(lines)


# ======================
#  Parameters
# ======================

@dataclass
class DedupParams:
    """Parameters for a reference-based deduplication run."""
    reference_dir: str
    target_dir: str
    dry_run: bool = False
    deletion: DeletionMethod = DeletionMethod.DELETE
    block_size: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.reference_dir:
            raise ValueError("Reference directory cannot be empty")

        if not self.target_dir:
            raise ValueError("Target directory cannot be empty")

        if self.block_size <= 0:
            raise ValueError("Block size must be positive")

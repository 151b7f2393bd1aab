"""
Shared fixtures for refdedup tests.
Creates isolated temporary directories with controlled reference/target trees.
"""
import os
import random
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'refdedup' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


def create_random_file(path: Path, min_size: int = 16, max_size: int = 1024) -> Path:
    """Writes random bytes of random length to path."""
    path.write_bytes(os.urandom(random.randint(min_size, max_size)))
    return path


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def dedup_trees(temp_dir) -> Dict[str, Path]:
    """
    Reference and target trees:
    - ref:    file1, dir2/file2, file3, file4, file5
    - target: file1, file3, file5 (random, same names but different content)
              file2 (copy of ref/dir2/file2), file4 (copy of ref/file4)
              file6 (random, no counterpart)
    """
    ref_dir = temp_dir / "ref"
    target_dir = temp_dir / "target"
    ref_dir.mkdir()
    target_dir.mkdir()
    (ref_dir / "dir2").mkdir()

    create_random_file(ref_dir / "file1")
    create_random_file(ref_dir / "dir2" / "file2")
    create_random_file(ref_dir / "file3")
    create_random_file(ref_dir / "file4")
    create_random_file(ref_dir / "file5")

    # Different sizes than their reference namesakes guarantee distinct content
    for name in ("file1", "file3", "file5"):
        size = (ref_dir / name).stat().st_size + 1
        (target_dir / name).write_bytes(os.urandom(size))
    create_random_file(target_dir / "file6")
    (target_dir / "file2").write_bytes((ref_dir / "dir2" / "file2").read_bytes())
    (target_dir / "file4").write_bytes((ref_dir / "file4").read_bytes())

    return {"ref": ref_dir, "target": target_dir}

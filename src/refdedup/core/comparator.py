"""
comparator.py
Exact byte-for-byte file comparison.

This implementation keeps I/O to a minimum:
- Files of different size are rejected from metadata alone, nothing is opened
- Content is streamed in fixed-size blocks into two reusable buffers
- The first mismatching block ends the comparison
"""

import os
import logging
from refdedup.core.interfaces import ContentComparator
from refdedup.core.models import DEFAULT_BLOCK_SIZE

logger = logging.getLogger(__name__)


class ContentComparatorImpl(ContentComparator):
    """
    Streaming comparator. A single instance always uses the same block size.
    """

    def __init__(self, block_size: int = DEFAULT_BLOCK_SIZE):
        if block_size <= 0:
            raise ValueError("Block size must be positive")
        self.block_size = block_size

    def compare(self, path_a: str, path_b: str) -> bool:
        """
        Returns True only if both files contain exactly the same bytes.

        Raises:
            OSError: If either file cannot be stat'ed, opened or read.
        """
        size_a = os.stat(path_a).st_size
        size_b = os.stat(path_b).st_size
        if size_a != size_b:
            logger.debug(f"Size mismatch: {path_a} ({size_a}) vs {path_b} ({size_b})")
            return False

        buffer_a = bytearray(self.block_size)
        buffer_b = bytearray(self.block_size)
        view_a = memoryview(buffer_a)
        view_b = memoryview(buffer_b)

        with open(path_a, 'rb') as file_a, open(path_b, 'rb') as file_b:
            while True:
                read_a = self._fill(file_a, view_a)
                read_b = self._fill(file_b, view_b)
                if read_a != read_b or view_a[:read_a] != view_b[:read_b]:
                    logger.debug(f"Content mismatch: {path_a} vs {path_b}")
                    return False
                if read_a < self.block_size:
                    # Trailing partial block (or EOF) matched
                    return True

    @staticmethod
    def _fill(stream, view: memoryview) -> int:
        """Read until the buffer is full or EOF is reached. Returns bytes read."""
        total = 0
        while total < len(view):
            count = stream.readinto(view[total:])
            if not count:
                break
            total += count
        return total


def compare_content(path_a: str, path_b: str, block_size: int = DEFAULT_BLOCK_SIZE) -> bool:
    """Compare two files byte-for-byte using a streaming comparator."""
    return ContentComparatorImpl(block_size).compare(path_a, path_b)

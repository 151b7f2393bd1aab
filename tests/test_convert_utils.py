"""
Tests for size formatting used in the CLI summary.
"""
from refdedup.utils.convert_utils import ConvertUtils


class TestBytesToHuman:

    def test_small_sizes_in_bytes(self):
        assert ConvertUtils.bytes_to_human(0) == "0B"
        assert ConvertUtils.bytes_to_human(1) == "1B"
        assert ConvertUtils.bytes_to_human(1023) == "1023B"

    def test_binary_units(self):
        assert ConvertUtils.bytes_to_human(1024) == "1.00KB"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"
        assert ConvertUtils.bytes_to_human(1024 ** 2) == "1.00MB"
        assert ConvertUtils.bytes_to_human(5 * 1024 ** 3) == "5.00GB"

    def test_negative_size(self):
        assert ConvertUtils.bytes_to_human(-5) == "0B"


class TestPluralize:

    def test_singular_and_plural(self):
        assert ConvertUtils.pluralize(1, "duplicate") == "1 duplicate"
        assert ConvertUtils.pluralize(0, "duplicate") == "0 duplicates"
        assert ConvertUtils.pluralize(3, "file") == "3 files"

"""Scanner module for filesystem traversal, filtering and deduplication."""

from .dedupe import latest_per_sheet
from .filesystem import FileRecord, SkippedEntry, WalkResult, parse_extension, walk_directory
from .filters import (
    apply_filters,
    filter_extensions,
    filter_keywords,
    filter_name_contains,
    filter_name_starts_with,
)
from .formatting import format_timestamp, size_label
from .ignore import is_ignored
from .scanner import KeywordScanOptions, ScannedFile, ScanOptions, ScanResult, Scanner
from .sheet import sheet_id

__all__ = [
    "Scanner",
    "ScanOptions",
    "KeywordScanOptions",
    "ScanResult",
    "ScannedFile",
    "FileRecord",
    "SkippedEntry",
    "WalkResult",
    "walk_directory",
    "parse_extension",
    "is_ignored",
    "sheet_id",
    "size_label",
    "format_timestamp",
    "latest_per_sheet",
    "apply_filters",
    "filter_extensions",
    "filter_name_starts_with",
    "filter_name_contains",
    "filter_keywords",
]

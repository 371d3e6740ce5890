"""Case-insensitive record filters.

Each filter looks at ``name`` or ``extension`` only and is independent of
the others, so they can be applied in any order.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from sheetscan.scanner.filesystem import FileRecord

if TYPE_CHECKING:
    from sheetscan.scanner.scanner import ScanOptions


def filter_extensions(records: Iterable[FileRecord], extensions: Iterable[str]) -> list[FileRecord]:
    """Keep records whose extension is in ``extensions``. Empty means keep all."""
    allowed = {ext.lower() for ext in extensions}
    if not allowed:
        return list(records)
    return [r for r in records if r.extension.lower() in allowed]


def filter_name_starts_with(records: Iterable[FileRecord], prefix: str | None) -> list[FileRecord]:
    if not prefix:
        return list(records)
    prefix = prefix.lower()
    return [r for r in records if r.name.lower().startswith(prefix)]


def filter_name_contains(records: Iterable[FileRecord], needle: str | None) -> list[FileRecord]:
    if not needle:
        return list(records)
    needle = needle.lower()
    return [r for r in records if needle in r.name.lower()]


def filter_keywords(records: Iterable[FileRecord], keywords: Iterable[str]) -> list[FileRecord]:
    """Keep records whose name contains at least one keyword.

    An empty keyword list keeps nothing.
    """
    lowered = [kw.lower() for kw in keywords]
    return [r for r in records if any(kw in r.name.lower() for kw in lowered)]


def apply_filters(records: Iterable[FileRecord], options: "ScanOptions") -> list[FileRecord]:
    """Apply the extension, starts-with and contains filters of a scoped scan."""
    filtered = filter_extensions(records, options.extensions)
    filtered = filter_name_starts_with(filtered, options.name_starts_with)
    return filter_name_contains(filtered, options.name_contains)

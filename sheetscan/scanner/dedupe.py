"""Collapse drawing revisions down to the newest file per sheet."""

import logging
from collections.abc import Iterable

from sheetscan.scanner.filesystem import FileRecord
from sheetscan.scanner.sheet import sheet_id

logger = logging.getLogger(__name__)


def latest_per_sheet(records: Iterable[FileRecord]) -> list[FileRecord]:
    """Return one record per sheet id, the most recently modified one.

    A record only replaces the kept one when its ``modified`` is strictly
    greater, so on equal timestamps the first record seen wins. Since walk
    order is filesystem-dependent, ties are not deterministic across
    platforms.

    Args:
        records: Records to deduplicate, in any order.

    Returns:
        The surviving records. Order is unspecified.
    """
    latest: dict[str, FileRecord] = {}
    total = 0
    for record in records:
        total += 1
        key = sheet_id(record.name)
        existing = latest.get(key)
        if existing is None or record.modified > existing.modified:
            latest[key] = record

    logger.debug("Deduplicated %d records to %d sheets", total, len(latest))
    return list(latest.values())

"""Test helpers for building records without touching the filesystem."""

import os
from datetime import datetime, timezone

from sheetscan.scanner.filesystem import FileRecord


def make_record(name: str, modified: float = 0.0, size: int = 0) -> FileRecord:
    return FileRecord(
        name=name,
        full_path=f"/root/{name}",
        relative_path=name,
        size_bytes=size,
        modified=datetime.fromtimestamp(modified, tz=timezone.utc),
        extension=os.path.splitext(name)[1].lower(),
    )

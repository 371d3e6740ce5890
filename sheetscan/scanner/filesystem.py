"""Filesystem traversal utilities for scanning directories."""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from sheetscan.scanner.ignore import is_ignored

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileRecord:
    """A single file discovered during a walk.

    Attributes:
        name: Base filename including extension.
        full_path: Absolute path as seen by the traversal.
        relative_path: Path relative to the root the request used.
        size_bytes: File size in bytes.
        modified: Last modification time as an aware UTC datetime.
        extension: Lowercase extension with leading dot, or ``""``.
    """

    name: str
    full_path: str
    relative_path: str
    size_bytes: int
    modified: datetime
    extension: str


@dataclass(frozen=True)
class SkippedEntry:
    """A file or directory the walk could not read."""

    path: str
    reason: str
    is_dir: bool = False


@dataclass
class WalkResult:
    """Records produced by a walk plus diagnostics for what was skipped."""

    records: list[FileRecord] = field(default_factory=list)
    skipped: list[SkippedEntry] = field(default_factory=list)
    directories_scanned: int = 0

    @property
    def files_scanned(self) -> int:
        return len(self.records)

    @property
    def total_bytes(self) -> int:
        return sum(r.size_bytes for r in self.records)


def parse_extension(filename: str) -> str:
    """Return the lowercase extension including the dot, or ``""``."""
    return os.path.splitext(filename)[1].lower()


def walk_directory(
    root: Path,
    recursive: bool = True,
    relative_to: Path | None = None,
) -> WalkResult:
    """Walk ``root`` and collect a record for every non-ignored file.

    Unreadable files and directories are skipped, logged and listed in
    ``WalkResult.skipped``; they never abort the walk. Symlinks are not
    followed. Record order follows filesystem enumeration and must not be
    relied upon.

    Args:
        root: Directory to start from.
        recursive: Descend into subdirectories when ``True``. When ``False``
            subdirectories are skipped entirely.
        relative_to: Base for ``relative_path``. Defaults to ``root``.

    Returns:
        WalkResult with records and skip diagnostics.
    """
    result = WalkResult()
    _walk_recursive(root, relative_to or root, recursive, result)
    return result


def _walk_recursive(
    current_dir: Path,
    base: Path,
    recursive: bool,
    result: WalkResult,
) -> None:
    entries = _list_entries(current_dir, result)
    if entries is None:
        return

    result.directories_scanned += 1

    for entry in entries:
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            _skip(result, entry.path, str(e))
            continue

        if is_dir:
            if recursive:
                _walk_recursive(Path(entry.path), base, recursive, result)
            continue

        if is_ignored(entry.name):
            continue

        record = _process_entry(entry, base, result)
        if record:
            result.records.append(record)


def _list_entries(directory: Path, result: WalkResult) -> list[os.DirEntry] | None:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except PermissionError:
        logger.warning("Permission denied listing directory: %s", directory)
        _skip(result, str(directory), "permission denied", is_dir=True)
    except OSError as e:
        logger.error("Error listing directory %s: %s", directory, e)
        _skip(result, str(directory), str(e), is_dir=True)
    return None


def _process_entry(
    entry: os.DirEntry,
    base: Path,
    result: WalkResult,
) -> FileRecord | None:
    try:
        if not entry.is_file(follow_symlinks=False):
            return None

        stat_result = entry.stat(follow_symlinks=False)
        return FileRecord(
            name=entry.name,
            full_path=entry.path,
            relative_path=_get_relative_path(Path(entry.path), base),
            size_bytes=stat_result.st_size,
            modified=datetime.fromtimestamp(stat_result.st_mtime, tz=timezone.utc),
            extension=parse_extension(entry.name),
        )

    except PermissionError:
        logger.warning("Permission denied: %s", entry.path)
        _skip(result, entry.path, "permission denied")
    except FileNotFoundError:
        logger.warning("File disappeared during scan: %s", entry.path)
        _skip(result, entry.path, "file disappeared")
    except OSError as e:
        logger.error("Error processing %s: %s", entry.path, e)
        _skip(result, entry.path, str(e))
    return None


def _get_relative_path(path: Path, base: Path) -> str:
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


def _skip(result: WalkResult, path: str, reason: str, is_dir: bool = False) -> None:
    result.skipped.append(SkippedEntry(path=path, reason=reason, is_dir=is_dir))

"""Main scanner implementation."""

import logging
import os
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sheetscan.scanner.dedupe import latest_per_sheet
from sheetscan.scanner.filesystem import FileRecord, SkippedEntry, walk_directory
from sheetscan.scanner.filters import apply_filters, filter_keywords
from sheetscan.scanner.formatting import format_timestamp, size_label
from sheetscan.scanner.sheet import sheet_id

logger = logging.getLogger(__name__)


def _split_list(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(item.strip() for item in value.split(",") if item.strip())


def _normalize_extension(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class ScanOptions:
    """Options for a scoped scan, built once per request."""

    root: Path
    path: str = ""
    recursive: bool = True
    extensions: tuple[str, ...] = ()
    name_starts_with: str | None = None
    name_contains: str | None = None
    latest_per_sheet: bool = False

    @property
    def directory(self) -> Path:
        """The directory to scan, always under ``root``."""
        subpath = self.path.lstrip("/\\")
        return self.root / subpath if subpath else self.root

    @classmethod
    def from_query(
        cls,
        root: Path,
        path: str | None = None,
        extensions: str | None = None,
        name_starts_with: str | None = None,
        name_contains: str | None = None,
        latest_per_sheet: bool = False,
        recursive: bool = True,
    ) -> "ScanOptions":
        """Build options from the comma-separated wire form of a request."""
        return cls(
            root=Path(root),
            path=path or "",
            recursive=recursive,
            extensions=tuple(_normalize_extension(e) for e in _split_list(extensions)),
            name_starts_with=name_starts_with or None,
            name_contains=name_contains or None,
            latest_per_sheet=latest_per_sheet,
        )


@dataclass(frozen=True)
class KeywordScanOptions:
    root: Path
    keywords: tuple[str, ...] = ()

    @classmethod
    def from_query(cls, root: Path, keywords: str | None = None) -> "KeywordScanOptions":
        return cls(root=Path(root), keywords=_split_list(keywords))


@dataclass(frozen=True)
class ScannedFile:
    """A file record annotated for output."""

    record: FileRecord
    size_label: str
    sheet: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.record.name,
            "fullPath": self.record.full_path,
            "relativePath": self.record.relative_path,
            "sizeBytes": self.record.size_bytes,
            "modified": format_timestamp(self.record.modified),
            "extension": self.record.extension,
        }
        if self.sheet is not None:
            data["sheet"] = self.sheet
        data["sizeLabel"] = self.size_label
        return data


@dataclass
class ScanResult:
    """Outcome of a scan: files sorted newest first, or a soft error."""

    files: list[ScannedFile] = field(default_factory=list)
    error: str | None = None
    skipped: list[SkippedEntry] = field(default_factory=list)
    elapsed_seconds: float = 0.0

    @property
    def count(self) -> int:
        return len(self.files)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, message: str) -> "ScanResult":
        return cls(error=message)

    def to_dict(self) -> dict[str, Any]:
        if self.error is not None:
            return {"files": [], "error": self.error}
        return {"files": [f.to_dict() for f in self.files], "count": self.count}


def is_accessible(directory: Path) -> bool:
    """Return whether ``directory`` exists, is a directory and can be listed."""
    try:
        return directory.is_dir() and os.access(directory, os.R_OK | os.X_OK)
    except OSError:
        return False


class Scanner:
    """Scans a project root and returns filtered, sorted file listings.

    The scanner holds no state between calls; every operation receives the
    root it should use as part of its options.
    """

    def scan_path(self, options: ScanOptions) -> ScanResult:
        start = time.time()
        directory = options.directory
        if not is_accessible(directory):
            logger.warning("Scan directory not accessible: %s", directory)
            return ScanResult.failure(f"Path not accessible: {directory}")

        walk = walk_directory(directory, recursive=options.recursive, relative_to=options.root)
        records = apply_filters(walk.records, options)
        if options.latest_per_sheet:
            records = latest_per_sheet(records)

        files = [
            ScannedFile(record=r, size_label=size_label(r.size_bytes), sheet=sheet_id(r.name))
            for r in records
        ]
        result = self._finish(files, walk.skipped, start)
        logger.info(
            "Scanned %s: %d files matched (%d directories, %d skipped) in %.2fs",
            directory,
            result.count,
            walk.directories_scanned,
            len(walk.skipped),
            result.elapsed_seconds,
        )
        return result

    def scan_keywords(self, options: KeywordScanOptions) -> ScanResult:
        start = time.time()
        if not options.keywords:
            return ScanResult()

        if not is_accessible(options.root):
            logger.warning("Project root not accessible: %s", options.root)
            return ScanResult.failure("Project root not accessible")

        walk = walk_directory(options.root, recursive=True)
        records = filter_keywords(walk.records, options.keywords)
        files = [ScannedFile(record=r, size_label=size_label(r.size_bytes)) for r in records]
        result = self._finish(files, walk.skipped, start)
        logger.info(
            "Keyword scan of %s for %s: %d files matched",
            options.root,
            ", ".join(options.keywords),
            result.count,
        )
        return result

    def count_files(self, root: Path) -> int:
        """Count every non-ignored file under ``root``. Inaccessible roots count zero."""
        if not is_accessible(root):
            return 0
        return walk_directory(root, recursive=True).files_scanned

    def _finish(
        self,
        files: list[ScannedFile],
        skipped: list[SkippedEntry],
        start: float,
    ) -> ScanResult:
        files.sort(key=lambda f: f.record.modified, reverse=True)
        return ScanResult(files=files, skipped=skipped, elapsed_seconds=time.time() - start)

"""Filename ignore policy applied during traversal."""

import os

IGNORED_FILES = frozenset(
    {
        "desktop.ini",
        "thumbs.db",
        ".ds_store",
        ".thumbs",
        ".spotlight-v100",
        ".trashes",
        ".fseventsd",
        ".temporaryitems",
    }
)

# Archives, CAD binaries and database files never surface as documents.
IGNORED_EXTENSIONS = frozenset(
    {
        ".zip",
        ".rar",
        ".7z",
        ".tar",
        ".gz",
        ".dwg",
        ".dxf",
        ".sqlite",
        ".mdb",
    }
)


def is_ignored(filename: str) -> bool:
    """Return whether a filename should be excluded from all scan results.

    Matching is case-insensitive. A name is ignored when it is a known
    OS/editor artifact, a hidden file (leading ``.``), an Office lock file
    (leading ``~$``), or carries a non-document extension.
    """
    lower = filename.lower()
    if lower in IGNORED_FILES:
        return True
    if lower.startswith(".") or lower.startswith("~$"):
        return True
    return os.path.splitext(lower)[1] in IGNORED_EXTENSIONS

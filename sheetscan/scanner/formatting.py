"""Human-readable formatting of sizes and timestamps."""

from datetime import datetime, timezone

KIB = 1024
MIB = 1024 * 1024


def size_label(size: int) -> str:
    """Format a byte count using binary units: B, KB or MB."""
    if size < KIB:
        return f"{size} B"
    if size < MIB:
        return f"{size / KIB:.1f} KB"
    return f"{size / MIB:.1f} MB"


def format_timestamp(value: datetime) -> str:
    """Render an instant as UTC ISO-8601 with milliseconds and a ``Z`` suffix."""
    utc = value.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

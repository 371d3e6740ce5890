"""Exception types for sheetscan."""


class SheetScanError(Exception):
    """Base exception for all sheetscan errors."""


class ConfigError(SheetScanError):
    """Raised when configuration values are missing or invalid."""

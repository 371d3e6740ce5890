"""Sheet Scan - Browse, filter and deduplicate drawing sheets on a file server."""

__version__ = "0.1.0"

from sheetscan.config import Config, ProjectRoot
from sheetscan.scanner import Scanner

__all__ = ["Config", "ProjectRoot", "Scanner"]

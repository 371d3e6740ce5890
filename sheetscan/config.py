"""Configuration module for sheetscan."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from sheetscan.exceptions import ConfigError

DEFAULT_PORT = 3456


def _get_default_root() -> Path:
    return Path.cwd()


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT


@dataclass
class Config:
    project_root: Path = field(default_factory=_get_default_root)
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Config":
        """Build a config from ``SHEETSCAN_*`` environment variables.

        ``PORT`` is honoured as a fallback for ``SHEETSCAN_PORT``.
        """
        env = os.environ if environ is None else environ
        config = cls()

        root = env.get("SHEETSCAN_PROJECT_ROOT")
        if root:
            config.project_root = Path(root)

        host = env.get("SHEETSCAN_HOST")
        if host:
            config.server.host = host

        port = env.get("SHEETSCAN_PORT") or env.get("PORT")
        if port:
            config.server.port = parse_port(port)

        return config


def parse_port(value: str | int) -> int:
    try:
        port = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid port: {value!r}") from e
    if not 0 < port < 65536:
        raise ConfigError(f"Port out of range: {port}")
    return port


class ProjectRoot:
    """Holds the current project root for the server process.

    Requests read the root once with ``get()`` and pass that value into
    their scan options. A ``set()`` during an in-flight scan only affects
    later requests.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path)

    def get(self) -> Path:
        return self._path

    def set(self, path: Path | str) -> Path:
        """Replace the root. Empty values leave it unchanged."""
        if path:
            self._path = Path(path)
        return self._path

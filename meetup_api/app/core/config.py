"""
Simple configuration management.

The ``Settings`` dataclass reads configuration from environment
variables.  A ``.env`` file in the working directory is loaded first,
so local development only needs that file.  Two values have no
default: the bind address (``SOCKET_ADDR``) and the database location
(``DATABASE_URL``).  If either is missing the application refuses to
start.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigurationError


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    host: str
    port: int
    database_url: str

    project_name: str = "Meetup API"
    api_version: str = "1.0.0"
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Upper bound on simultaneously open database connections.
    max_connections: int = 50

    @property
    def socket_addr(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_environment(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the process environment.

        When ``environ`` is omitted, ``.env`` is loaded into
        ``os.environ`` (without overriding variables that are already
        set) and ``os.environ`` is used.  Passing a mapping skips the
        ``.env`` file entirely, which keeps tests hermetic.

        Raises
        ------
        ConfigurationError
            If ``SOCKET_ADDR`` or ``DATABASE_URL`` is missing, or if a
            value cannot be parsed.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        socket_addr = environ.get("SOCKET_ADDR")
        if not socket_addr:
            raise ConfigurationError("SOCKET_ADDR environment variable is required")
        database_url = environ.get("DATABASE_URL")
        if not database_url:
            raise ConfigurationError("DATABASE_URL environment variable is required")

        host, port = parse_socket_addr(socket_addr)
        return cls(
            host=host,
            port=port,
            database_url=database_url,
            project_name=environ.get("PROJECT_NAME", "Meetup API"),
            api_version=environ.get("API_VERSION", "1.0.0"),
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
            log_file=environ.get("LOG_FILE") or None,
            max_connections=_parse_positive_int(environ, "DB_MAX_CONNECTIONS", 50),
        )


def parse_socket_addr(value: str) -> Tuple[str, int]:
    """Split ``host:port`` into its parts.

    The port must be an integer between 0 and 65535 and the host must
    not be empty.
    """
    host, sep, port_text = value.strip().rpartition(":")
    if not sep or not host:
        raise ConfigurationError(f"Failed to parse socket address {value!r}: expected host:port")
    try:
        port = int(port_text)
    except ValueError:
        raise ConfigurationError(f"Failed to parse socket address {value!r}: invalid port") from None
    if not 0 <= port <= 65535:
        raise ConfigurationError(f"Failed to parse socket address {value!r}: port out of range")
    return host, port


def _parse_positive_int(environ: Mapping[str, str], key: str, default: int) -> int:
    raw_value = environ.get(key)
    if raw_value is None or raw_value == "":
        return default
    try:
        value = int(raw_value)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got {raw_value!r}") from None
    if value < 1:
        raise ConfigurationError(f"{key} must be >= 1, got {value}")
    return value

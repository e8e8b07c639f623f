"""WikiSearch Configuration - Store Connection Settings.

The Redis connection is described by a single URL of the form
``redis://[user[:password]@]host:port[/db]``, read from a text file or
from the environment.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import unquote, urlparse

from wikisearch_core.errors import ConfigurationMissing
from wikisearch_core.index.redis_index import RedisIndex

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("resources") / "redis_url.txt"
DEFAULT_PORT = 6379

URL_ENV_VAR = "WIKISEARCH_REDIS_URL"
CONFIG_FILE_ENV_VAR = "WIKISEARCH_REDIS_URL_FILE"

SETUP_HINT = (
    "Create a file called redis_url.txt in resources/ containing the Redis URL.\n"
    "For local Redis (no password), use:\n"
    "redis://localhost:6379"
)


@dataclass
class StoreConfig:
    """Redis connection configuration.

    Attributes:
        host: Server host name
        port: Server port
        db: Database number
        username: ACL user name, if any
        password: Password, sent only when non-empty
        ssl: Use TLS (``rediss://`` scheme)
        socket_timeout: Socket timeout in seconds
        key_prefix: Namespace prepended to index keys
    """

    host: str = "localhost"
    port: int = DEFAULT_PORT
    db: int = 0
    username: Optional[str] = None
    password: Optional[str] = None
    ssl: bool = False
    socket_timeout: float = 5.0
    key_prefix: str = ""

    @classmethod
    def from_url(cls, url: str, **overrides: Any) -> "StoreConfig":
        """Parse a connection URL.

        Args:
            url: ``scheme://[user[:password]@]host:port[/db]``
            **overrides: Extra field values (e.g. ``socket_timeout``)

        Returns:
            Store configuration
        """
        url = url.strip()
        try:
            parsed = urlparse(url)
            port = parsed.port or DEFAULT_PORT
        except ValueError as e:
            raise ConfigurationMissing(f"Invalid Redis URL {url!r}: {e}") from e

        if not parsed.hostname:
            raise ConfigurationMissing(f"Redis URL has no host: {url!r}")

        db = 0
        path = parsed.path.lstrip("/")
        if path:
            if not path.isdigit():
                raise ConfigurationMissing(f"Redis URL has invalid database {path!r}: {url!r}")
            db = int(path)

        username = unquote(parsed.username) if parsed.username else None
        password = unquote(parsed.password) if parsed.password else None

        return cls(
            host=parsed.hostname,
            port=port,
            db=db,
            username=username,
            password=password,
            ssl=parsed.scheme == "rediss",
            **overrides,
        )

    def to_redis_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``redis.Redis``."""
        kwargs: Dict[str, Any] = {
            "host": self.host,
            "port": self.port,
            "db": self.db,
            "socket_timeout": self.socket_timeout,
            "decode_responses": True,
        }
        if self.password:
            kwargs["password"] = self.password
            if self.username:
                kwargs["username"] = self.username
        if self.ssl:
            kwargs["ssl"] = True
        return kwargs

    def __repr__(self) -> str:
        secret = "***" if self.password else None
        return (
            f"StoreConfig(host={self.host!r}, port={self.port}, db={self.db}, "
            f"username={self.username!r}, password={secret!r}, ssl={self.ssl})"
        )


def read_url_file(path: Union[str, Path]) -> str:
    """Read a URL file, joining its lines."""
    with open(path, "r", encoding="utf-8") as f:
        return "".join(line.strip() for line in f)


def load_store_config(
    path: Optional[Union[str, Path]] = None,
    url: Optional[str] = None,
) -> Optional[StoreConfig]:
    """Load store configuration.

    Resolution order: explicit ``url``, the ``WIKISEARCH_REDIS_URL``
    environment variable, then the URL file (``path``,
    ``WIKISEARCH_REDIS_URL_FILE``, or ``resources/redis_url.txt``).

    Args:
        path: URL file location
        url: Connection URL

    Returns:
        Configuration, or None if none could be found
    """
    url = url or os.environ.get(URL_ENV_VAR)
    if url:
        return StoreConfig.from_url(url)

    config_path = Path(path or os.environ.get(CONFIG_FILE_ENV_VAR) or DEFAULT_CONFIG_PATH)
    if not config_path.is_file():
        logger.warning(f"File not found: {config_path}\n{SETUP_HINT}")
        return None

    contents = read_url_file(config_path)
    if not contents:
        logger.warning(f"File is empty: {config_path}\n{SETUP_HINT}")
        return None
    return StoreConfig.from_url(contents)


def make_index(
    path: Optional[Union[str, Path]] = None,
    url: Optional[str] = None,
    required: bool = False,
    verify: bool = True,
) -> Optional[RedisIndex]:
    """Create a Redis index client from configuration.

    Args:
        path: URL file location
        url: Connection URL
        required: Raise ConfigurationMissing instead of returning None
        verify: Ping the server before returning

    Returns:
        Index client, or None when no configuration exists
    """
    config = load_store_config(path, url)
    if config is None:
        if required:
            raise ConfigurationMissing(f"No Redis configuration found.\n{SETUP_HINT}")
        return None
    return RedisIndex.from_config(config, verify=verify)


__all__ = [
    "StoreConfig",
    "load_store_config",
    "make_index",
    "read_url_file",
    "DEFAULT_CONFIG_PATH",
    "SETUP_HINT",
    "URL_ENV_VAR",
    "CONFIG_FILE_ENV_VAR",
]

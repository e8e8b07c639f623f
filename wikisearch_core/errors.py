"""WikiSearch Errors - Exception Hierarchy.

Result set algebra never raises; every exception here originates at the
index boundary and is propagated unchanged to the caller.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Optional


class WikiSearchError(Exception):
    """Base class for all WikiSearch errors."""


class IndexUnavailable(WikiSearchError):
    """The backing store could not serve a lookup.

    Raised for connection failures, transport errors and stored data that
    cannot be read as term counts.

    Attributes:
        term: Term being looked up, if any
    """

    def __init__(self, message: str, term: Optional[str] = None):
        super().__init__(message)
        self.term = term


class ConfigurationMissing(WikiSearchError):
    """Store connection configuration is absent or unusable."""


__all__ = ["WikiSearchError", "IndexUnavailable", "ConfigurationMissing"]

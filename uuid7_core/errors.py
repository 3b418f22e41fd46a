"""
uuid7_core/errors.py — Parse failures for UUIDv7 text

Every rejection raised by the parser derives from Uuid7Error, which is
itself a ValueError. Callers that only care about "valid or not" can
catch ValueError; pydantic turns these into ValidationError for free.
"""

from __future__ import annotations

from typing import Any, Optional


class Uuid7Error(ValueError):
    """Base class for all UUIDv7 parse failures."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class FormatError(Uuid7Error):
    """Text is not 36 characters of 8-4-4-4-12 hex with hyphens."""


class VersionError(Uuid7Error):
    """Version nibble is not 7."""

    def __init__(
        self, message: str, value: Any = None, found: Optional[int] = None
    ):
        super().__init__(message, value)
        self.found = found


class VariantError(Uuid7Error):
    """Two high bits of the variant byte are not binary 10."""

    def __init__(
        self, message: str, value: Any = None, found: Optional[int] = None
    ):
        super().__init__(message, value)
        self.found = found

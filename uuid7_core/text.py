"""
uuid7_core/text.py — Canonical text form of UUID v7

    xxxxxxxx-xxxx-7xxx-yxxx-xxxxxxxxxxxx      y ∈ {8, 9, a, b}

Formatting always emits lowercase. Parsing accepts either case and
validates, in order:
  1. length is 36 and hyphens sit at positions 8, 13, 18, 23  → FormatError
  2. the remaining 32 characters are hex digits               → FormatError
  3. version nibble (position 14) is 7                        → VersionError
  4. variant bits (high two bits at position 19) are 10       → VariantError
"""

from __future__ import annotations

import logging
import string

from .errors import FormatError, VariantError, VersionError
from .uuid7 import VARIANT, VERSION, Uuid7

logger = logging.getLogger(__name__)


CANONICAL_LENGTH = 36
HYPHEN_POSITIONS = (8, 13, 18, 23)
VERSION_POSITION = 14
VARIANT_POSITION = 19

_GROUPS = ((0, 8), (8, 12), (12, 16), (16, 20), (20, 32))
_HEX_DIGITS = frozenset(string.hexdigits)


def format_uuid7(identifier: Uuid7) -> str:
    """Render 32 lowercase hex digits grouped 8-4-4-4-12."""
    digits = identifier.hex
    return "-".join(digits[start:end] for start, end in _GROUPS)


def parse_uuid7(text: str) -> Uuid7:
    """Parse canonical text into a Uuid7.

    Raises:
        FormatError:  Wrong type, length, hyphen layout, or non-hex digits.
        VersionError: Version nibble is not 7.
        VariantError: Variant bits are not binary 10.
    """
    if not isinstance(text, str):
        raise FormatError(
            f"UUIDv7 text must be str, got {type(text).__name__}", text
        )

    if len(text) != CANONICAL_LENGTH:
        _reject("length", text)
        raise FormatError(
            f"Invalid UUID length: expected {CANONICAL_LENGTH} characters, "
            f"got {len(text)}",
            text,
        )

    for pos in HYPHEN_POSITIONS:
        if text[pos] != "-":
            _reject("hyphen layout", text)
            raise FormatError(
                "Invalid UUID format: expected hyphens at positions "
                "8, 13, 18 and 23",
                text,
            )

    digits = text.replace("-", "")
    if len(digits) != 32 or not _HEX_DIGITS.issuperset(digits):
        _reject("non-hex digits", text)
        raise FormatError("Invalid UUID format: non-hex digit found", text)

    version = int(text[VERSION_POSITION], 16)
    if version != VERSION:
        _reject("version", text)
        raise VersionError(
            f"Invalid version: expected {VERSION}, got {version}",
            text,
            found=version,
        )

    variant = int(text[VARIANT_POSITION], 16) >> 2
    if variant != VARIANT:
        _reject("variant", text)
        raise VariantError(
            f"Invalid variant: expected binary 10, got {variant:02b}",
            text,
            found=variant,
        )

    return Uuid7.from_raw(bytes.fromhex(digits))


def _reject(reason: str, text: str) -> None:
    logger.debug(f"Rejected UUIDv7 text ({reason}): {text!r}")

"""
uuid7_core/uuid7.py — UUID v7 identifier and generator (time-ordered)

Layout (128 bits, big-endian):

    48-bit unix_ts_ms | 4-bit version(7) | 12-bit sub-ms fraction
    | 2-bit variant(10) | 62-bit random

unix_ts_ms and the sub-millisecond fraction together form a 60-bit
timestamp, so identifiers compare in creation order whenever they were
made in different milliseconds (and usually within one). The fraction is
RFC 9562 §6.2 method 3: floor(ns_within_ms * 4096 / 1_000_000).

Only the final 62 bits come from the random source. Version and variant
are forced after the random bits are masked, so a misbehaving source can
never produce an identifier with the wrong tags.

Reference: https://www.rfc-editor.org/rfc/rfc9562
"""

from __future__ import annotations

import logging
import time
import uuid
from datetime import datetime, timedelta, timezone
from functools import total_ordering
from typing import Callable, Optional

from .rng import RandomSource, SystemRandomSource

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = 0x7
VARIANT = 0b10

TIMESTAMP_BITS = 48
FRACTION_BITS = 12
RANDOM_BITS = 62

_TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1
_FRACTION_MASK = (1 << FRACTION_BITS) - 1
_RANDOM_MASK = (1 << RANDOM_BITS) - 1

_NS_PER_MS = 1_000_000
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Stateless, so one instance serves every thread.
_SYSTEM_RANDOM = SystemRandomSource()

Clock = Callable[[], int]


# ---------------------------------------------------------------------------
# Identifier
# ---------------------------------------------------------------------------

@total_ordering
class Uuid7:
    """An immutable 128-bit UUIDv7 value.

    Equality, ordering and hashing all use the underlying 128-bit value,
    which means identifiers sort by timestamp first.

    The constructor wraps raw bytes as-is. Use parse() for untrusted text.
    """

    __slots__ = ("_bytes",)

    def __init__(self, raw: bytes):
        if not isinstance(raw, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Uuid7 needs bytes-like input, got {type(raw).__name__}"
            )
        raw = bytes(raw)
        if len(raw) != 16:
            raise ValueError(f"Uuid7 needs exactly 16 bytes, got {len(raw)}")
        object.__setattr__(self, "_bytes", raw)

    # -- construction -------------------------------------------------------

    @classmethod
    def from_raw(cls, raw: bytes) -> "Uuid7":
        """Wrap an externally supplied 128-bit value without validation."""
        return cls(raw)

    from_bytes = from_raw

    @classmethod
    def from_int(cls, value: int) -> "Uuid7":
        if not 0 <= value < 1 << 128:
            raise ValueError("Uuid7 integer value must fit in 128 bits")
        return cls(value.to_bytes(16, byteorder="big"))

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "Uuid7":
        return cls(value.bytes)

    @classmethod
    def parse(cls, text: str) -> "Uuid7":
        """Parse canonical 8-4-4-4-12 text. See text.parse_uuid7."""
        from .text import parse_uuid7

        return parse_uuid7(text)

    # -- immutability -------------------------------------------------------

    def __setattr__(self, name, value):
        raise AttributeError("Uuid7 is immutable")

    def __delattr__(self, name):
        raise AttributeError("Uuid7 is immutable")

    def __reduce__(self):
        return (self.__class__, (self._bytes,))

    # -- views --------------------------------------------------------------

    @property
    def bytes(self) -> bytes:
        return self._bytes

    @property
    def int(self) -> int:
        return int.from_bytes(self._bytes, byteorder="big")

    @property
    def hex(self) -> str:
        return self._bytes.hex()

    @property
    def version(self) -> int:
        return self._bytes[6] >> 4

    @property
    def variant_bits(self) -> int:
        return self._bytes[8] >> 6

    @property
    def timestamp_ms(self) -> int:
        """Unix time in milliseconds from the first 48 bits."""
        return int.from_bytes(self._bytes[0:6], byteorder="big")

    @property
    def sub_ms_fraction(self) -> int:
        return int.from_bytes(self._bytes[6:8], byteorder="big") & _FRACTION_MASK

    @property
    def random_bits(self) -> int:
        return int.from_bytes(self._bytes[8:16], byteorder="big") & _RANDOM_MASK

    @property
    def datetime(self) -> datetime:
        """Creation time as an aware UTC datetime (millisecond precision).

        Raises:
            ValueError: If the timestamp lies past datetime.max (year 9999).
                        The 48-bit field reaches roughly year 10889.
        """
        try:
            return _EPOCH + timedelta(milliseconds=self.timestamp_ms)
        except OverflowError:
            raise ValueError(
                f"Timestamp {self.timestamp_ms} ms is beyond datetime range"
            ) from None

    def to_uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self._bytes)

    # -- comparison ---------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Uuid7):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, Uuid7):
            return NotImplemented
        # Big-endian bytes compare exactly like the 128-bit integers.
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)

    # -- text ---------------------------------------------------------------

    def __str__(self) -> str:
        from .text import format_uuid7

        return format_uuid7(self)

    def __repr__(self) -> str:
        return f"Uuid7('{self}')"


# ---------------------------------------------------------------------------
# Bit assembly
# ---------------------------------------------------------------------------

def _assemble(timestamp_ns: int, random_value: int) -> Uuid7:
    """Pack a nanosecond timestamp and 62 random bits into a Uuid7."""
    unix_ts_ms, ns_within_ms = divmod(timestamp_ns, _NS_PER_MS)
    fraction = (ns_within_ms << FRACTION_BITS) // _NS_PER_MS

    value = (unix_ts_ms & _TIMESTAMP_MASK) << 80  # 48-bit timestamp
    value |= VERSION << 76                        # 4-bit version
    value |= (fraction & _FRACTION_MASK) << 64    # 12-bit sub-ms fraction
    value |= VARIANT << 62                        # 2-bit variant
    value |= random_value & _RANDOM_MASK          # 62-bit random

    return Uuid7(value.to_bytes(16, byteorder="big"))


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

class Uuid7Generator:
    """Generator that owns its random source and clock.

    Args:
        rng:   Source of random bits. Defaults to OS entropy.
        clock: Zero-argument callable returning Unix time in nanoseconds.
               Defaults to time.time_ns. A clock that goes backwards is
               accepted; no monotonicity is enforced.
    """

    def __init__(
        self,
        rng: Optional[RandomSource] = None,
        clock: Optional[Clock] = None,
    ):
        self.rng = rng if rng is not None else _SYSTEM_RANDOM
        self.clock = clock if clock is not None else time.time_ns
        logger.debug(f"Uuid7Generator created with {self.rng!r}")

    def generate(self) -> Uuid7:
        return _assemble(self.clock(), self.rng.random_bits(RANDOM_BITS))

    def __call__(self) -> Uuid7:
        return self.generate()


def generate(
    rng: Optional[RandomSource] = None,
    clock: Optional[Clock] = None,
) -> Uuid7:
    """Generate a fresh Uuid7 from the current time and `rng`."""
    rng = rng if rng is not None else _SYSTEM_RANDOM
    now_ns = clock() if clock is not None else time.time_ns()
    return _assemble(now_ns, rng.random_bits(RANDOM_BITS))


def uuid7() -> str:
    """Generate a UUID v7 and return its canonical text form."""
    return str(generate())

"""
UUID7 Core — time-ordered UUID v7 generation and canonical text codec.

__version__ is the package version. The identifier layout itself is
fixed by RFC 9562 and does not change with it.
"""

__version__ = "0.1.0"

from .errors import Uuid7Error, FormatError, VersionError, VariantError
from .rng import RandomSource, SystemRandomSource, SeededRandomSource
from .uuid7 import (
    Uuid7,
    Uuid7Generator,
    generate,
    uuid7,
    VERSION,
    VARIANT,
)
from .text import format_uuid7, parse_uuid7
from .schema import Uuid7Field

"""
uuid7_core/schema.py — Pydantic field type for UUID v7

    class Event(BaseModel):
        event_id: Uuid7Field = Field(default_factory=generate)
        trace_id: str = Field(default_factory=uuid7)

Uuid7Field holds a Uuid7 object, so its default_factory is generate().
Plain str fields use uuid7(), which returns canonical text.

Accepts a Uuid7, canonical text, or a version-7 uuid.UUID. Text goes
through parse_uuid7, so malformed input becomes a pydantic
ValidationError. JSON output is the canonical string; JSON Schema is a
plain "uuid"-formatted string for non-Python consumers.
"""

import uuid
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from .text import format_uuid7, parse_uuid7
from .uuid7 import Uuid7


def _coerce(value: Any) -> Uuid7:
    if isinstance(value, Uuid7):
        return value
    if isinstance(value, uuid.UUID):
        return parse_uuid7(str(value))
    if isinstance(value, str):
        return parse_uuid7(value)
    raise ValueError(
        f"Expected Uuid7, UUID or str, got {type(value).__name__}"
    )


Uuid7Field = Annotated[
    Uuid7,
    PlainValidator(_coerce),
    PlainSerializer(format_uuid7, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "uuid"}),
]

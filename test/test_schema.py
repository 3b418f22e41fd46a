"""
test/test_schema.py — Pydantic integration for UUID v7 fields

Requires: pydantic

Run: pytest test/test_schema.py -v
  or: python test/test_schema.py
"""

import json
import os
import sys
import uuid

# Add parent to path for direct execution
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import BaseModel, Field, ValidationError

from uuid7_core import Uuid7, Uuid7Field, generate, parse_uuid7, uuid7


VALID = "0184e1a0-7e2a-7d40-8f3b-5c1a2b3c4d5e"


class Event(BaseModel):
    event_id: Uuid7Field = Field(default_factory=generate)
    trace_id: str = Field(default_factory=uuid7)
    name: str = "test"


def test_default_factory():
    a, b = Event(), Event()
    assert isinstance(a.event_id, Uuid7)
    assert a.event_id.version == 7
    assert a.event_id != b.event_id
    assert isinstance(a.trace_id, str)
    assert parse_uuid7(a.trace_id).version == 7
    assert a.trace_id != b.trace_id
    print("  PASS: test_default_factory")


def test_accepts_text_instance_and_uuid():
    expected = parse_uuid7(VALID)
    assert Event(event_id=VALID).event_id == expected
    assert Event(event_id=VALID.upper()).event_id == expected
    assert Event(event_id=expected).event_id is expected
    assert Event(event_id=uuid.UUID(VALID)).event_id == expected
    print("  PASS: test_accepts_text_instance_and_uuid")


def test_rejects_invalid_values():
    for bad in (
        "not-a-uuid",
        "0184e1a0-7e2a-6d40-8f3b-5c1a2b3c4d5e",
        "0184e1a0-7e2a-7d40-cf3b-5c1a2b3c4d5e",
        uuid.UUID("12345678-1234-4678-9234-567812345678"),
        12345,
    ):
        try:
            Event(event_id=bad)
            raise AssertionError(f"Expected ValidationError for {bad!r}")
        except ValidationError as e:
            assert e.errors()[0]["loc"] == ("event_id",)
    print("  PASS: test_rejects_invalid_values")


def test_json_serialization():
    event = Event(event_id=VALID)
    data = json.loads(event.model_dump_json())
    assert data["event_id"] == VALID
    assert event.model_dump(mode="json")["event_id"] == VALID
    assert event.model_dump()["event_id"] == parse_uuid7(VALID)
    assert Event.model_validate_json(event.model_dump_json()) == event
    print("  PASS: test_json_serialization")


def test_json_schema():
    schema = Event.model_json_schema()
    prop = schema["properties"]["event_id"]
    assert prop["type"] == "string"
    assert prop["format"] == "uuid"
    print("  PASS: test_json_schema")


def run_all():
    print("=" * 60)
    print("UUID7 Pydantic Field Test Suite")
    print("=" * 60)
    test_default_factory()
    test_accepts_text_instance_and_uuid()
    test_rejects_invalid_values()
    test_json_serialization()
    test_json_schema()
    print("\n" + "=" * 60)
    print("ALL TESTS PASSED")
    print("=" * 60)


if __name__ == "__main__":
    run_all()

"""
Custom GraphQL scalars
"""

from datetime import timedelta
from typing import NewType

import strawberry
from pydantic import TypeAdapter

_duration_adapter = TypeAdapter(timedelta)


def serialize_duration(value: timedelta) -> str:
    return _duration_adapter.dump_python(value, mode="json")


def parse_duration(value: str) -> timedelta:
    return _duration_adapter.validate_python(value)


Duration = strawberry.scalar(
    NewType("Duration", timedelta),
    description="A length of time as an ISO 8601 duration, e.g. P1DT2H.",
    serialize=serialize_duration,
    parse_value=parse_duration,
)

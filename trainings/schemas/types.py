"""Annotated field types carrying the wire formats for timestamps and durations."""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Annotated

from pydantic import BeforeValidator, PlainSerializer

from trainings.core.clock import format_timestamp
from trainings.core.durations import coerce_duration, format_duration

CENTS = Decimal("0.01")

# "1h30m" <-> timedelta
Duration = Annotated[
    timedelta,
    BeforeValidator(coerce_duration),
    PlainSerializer(format_duration, return_type=str, when_used="json"),
]

# RFC-3339 in, "2023-10-05T15:00:00Z" out
Timestamp = Annotated[
    datetime,
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]

# kg, stored as NUMERIC(8, 2); a JSON number rounded to the cent
Weight = Annotated[
    Decimal,
    PlainSerializer(lambda v: float(v.quantize(CENTS)), return_type=float, when_used="json"),
]

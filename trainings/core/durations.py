"""Compact duration strings: ``1h30m``, ``45m``, ``30s``, ``1.5h``, ``250ms``.

Parsing accepts a sequence of decimal numbers, each with an optional fraction
and a unit suffix (h, m, s, ms, us/µs, ns), optionally signed. A bare ``0`` is
allowed. Formatting always prints whole units:

- hours > 0   -> ``%dh%dm%ds``
- minutes > 0 -> ``%dm%ds``
- otherwise   -> ``%ds``
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation

from trainings.core.errors import InvalidArgumentError

# Microseconds per unit; timedelta cannot represent anything finer.
_UNIT_MICROSECONDS: dict[str, Decimal] = {
    "h": Decimal(3_600_000_000),
    "m": Decimal(60_000_000),
    "s": Decimal(1_000_000),
    "ms": Decimal(1_000),
    "us": Decimal(1),
    "µs": Decimal(1),
    "μs": Decimal(1),
    "ns": Decimal("0.001"),
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|h|m|s)")


def parse_duration(value: str) -> timedelta:
    """Parse a duration string into a timedelta.

    Raises InvalidArgumentError on anything that is not a well-formed duration.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(f"invalid duration {value!r}")
    text = value.strip()
    if not text:
        raise InvalidArgumentError("invalid duration ''")

    sign = 1
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if text == "0":
        return timedelta(0)
    if not text:
        raise InvalidArgumentError(f"invalid duration {value!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise InvalidArgumentError(f"invalid duration {value!r}")
        number, unit = match.groups()
        try:
            total += Decimal(number) * _UNIT_MICROSECONDS[unit]
        except InvalidOperation as exc:
            raise InvalidArgumentError(f"invalid duration {value!r}") from exc
        pos = match.end()

    return timedelta(microseconds=sign * int(total))


def format_duration(value: timedelta) -> str:
    """Format a timedelta using the three-unit compact form."""
    seconds_total = int(value.total_seconds())
    prefix = ""
    if seconds_total < 0:
        prefix = "-"
        seconds_total = -seconds_total

    hours, rest = divmod(seconds_total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{prefix}{hours}h{minutes}m{seconds}s"
    if minutes > 0:
        return f"{prefix}{minutes}m{seconds}s"
    return f"{prefix}{seconds}s"


def coerce_duration(value: object) -> timedelta | None:
    """Accept a duration string, a timedelta or None (used by request schemas)."""
    if value is None or isinstance(value, timedelta):
        return value
    if isinstance(value, str):
        return parse_duration(value)
    raise InvalidArgumentError(f"invalid duration {value!r}")


def to_seconds(value: timedelta | None) -> int:
    """Whole seconds of an optional duration; absent counts as zero."""
    if value is None:
        return 0
    return int(value.total_seconds())

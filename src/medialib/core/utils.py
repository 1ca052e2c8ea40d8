"""Small value helpers shared by the backends."""

from __future__ import annotations

from datetime import datetime, timezone


def date_to_utc_string(value: datetime) -> str:
    """Render ``value`` as ``YYYY-MM-DD HH:MM:SS.ffffff`` in UTC.

    Naive datetimes are taken to already be UTC.

    >>> date_to_utc_string(datetime(2021, 3, 4, 5, 6, 7, 890000))
    '2021-03-04 05:06:07.890000'
    """
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value:%Y-%m-%d %H:%M:%S}.{value.microsecond:06d}"


def parse_timestamp_text(text: str) -> str:
    """Normalise a server-side ``timestamp`` text value to ``date_to_utc_string`` form."""
    return date_to_utc_string(datetime.fromisoformat(text))


__all__ = [
    "date_to_utc_string",
    "parse_timestamp_text",
]

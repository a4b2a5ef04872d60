"""
Helpers shared by the news & events views, API and import command.
"""
from collections.abc import Mapping
from datetime import date, datetime, timezone as dt_timezone

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

# Epoch numbers above this are taken as milliseconds (year ~5138 in seconds)
_MILLIS_THRESHOLD = 1e11


def normalize_timestamp(value, *, default=None) -> datetime:
    """
    Coerce a stored ``createdAt``-style value into an aware datetime.

    Accepts datetimes, dates, ISO-8601 strings, epoch numbers (seconds or
    milliseconds), exported timestamp mappings (``seconds``/``_seconds`` with
    optional ``nanoseconds``/``_nanoseconds``) and any object exposing
    ``to_datetime()`` or ``ToDatetime()``.  Missing values fall back to
    ``default`` (``timezone.now()`` when not given).  Naive results are
    interpreted in the project's default time zone.

    Raises ``ValueError`` for unparseable strings and ``TypeError`` for
    values of an unsupported type.
    """
    if value is None or value == "":
        return default if default is not None else timezone.now()

    if isinstance(value, datetime):
        result = value
    elif isinstance(value, date):
        result = datetime(value.year, value.month, value.day)
    elif isinstance(value, bool):
        raise TypeError(f"Unsupported timestamp value: {value!r}")
    elif isinstance(value, (int, float)):
        seconds = value / 1000 if abs(value) > _MILLIS_THRESHOLD else value
        result = datetime.fromtimestamp(seconds, tz=dt_timezone.utc)
    elif isinstance(value, str):
        result = _parse_string(value.strip())
    elif isinstance(value, Mapping):
        seconds = value.get("seconds", value.get("_seconds"))
        if seconds is None:
            raise ValueError(f"Timestamp mapping without seconds: {value!r}")
        nanos = value.get("nanoseconds", value.get("_nanoseconds")) or 0
        result = datetime.fromtimestamp(seconds + nanos / 1e9, tz=dt_timezone.utc)
    else:
        converter = getattr(value, "to_datetime", None) or getattr(value, "ToDatetime", None)
        if converter is None:
            raise TypeError(f"Unsupported timestamp value: {value!r}")
        result = converter()

    if timezone.is_naive(result):
        result = timezone.make_aware(result, timezone.get_default_timezone())
    return result


def _parse_string(raw: str) -> datetime:
    parsed = parse_datetime(raw)
    if parsed is not None:
        return parsed
    day = parse_date(raw)
    if day is not None:
        return datetime(day.year, day.month, day.day)
    raise ValueError(f"Unrecognised timestamp: {raw!r}")

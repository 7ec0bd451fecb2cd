"""Datetime normalization helpers."""

from __future__ import annotations

from datetime import date, datetime

import pandas as pd

from .errors import ConfigurationError, InvalidDateError

DEFAULT_TIMEZONE = "UTC"


def _from_epoch(raw: int) -> pd.Timestamp:
    # 13-digit values are milliseconds, shorter ones seconds
    unit = "ms" if abs(raw) >= 100_000_000_000 else "s"
    return pd.Timestamp(raw, unit=unit, tz="UTC")


def _parse(value: object) -> pd.Timestamp:
    if isinstance(value, bool):
        raise InvalidDateError(value)
    if isinstance(value, (pd.Timestamp, datetime, date)):
        return pd.Timestamp(value)
    if isinstance(value, int):
        return _from_epoch(value)
    if not isinstance(value, str):
        raise InvalidDateError(value)

    text = value.strip()
    if not text:
        raise InvalidDateError(value)
    if text.lstrip("-").isdigit() and len(text.lstrip("-")) in (10, 13):
        return _from_epoch(int(text))
    try:
        return pd.Timestamp(text)
    except TypeError as exc:
        raise InvalidDateError(value) from exc



def validate_timezone(tz: str) -> str:
    """Return `tz` unchanged if pandas can resolve it, else raise ConfigurationError."""
    try:
        pd.Timestamp.now(tz=tz)
    except (KeyError, ValueError, TypeError) as exc:
        # ZoneInfoNotFoundError and pytz.UnknownTimeZoneError are KeyErrors
        raise ConfigurationError(f"unknown timezone: {tz!r}", details={"timezone": tz}) from exc
    return tz


def normalize_date(value: object, tz: str = DEFAULT_TIMEZONE) -> pd.Timestamp:
    """
    Coerce a date-like value into a timezone-aware pandas Timestamp.

    Accepts ISO-8601 strings (with or without offset), bare dates,
    epoch seconds/milliseconds and native date/datetime objects. Naive
    values are interpreted in `tz`; wall times that are ambiguous or
    skipped there by a DST change raise InvalidDateError.
    """
    try:
        ts = _parse(value)
    except InvalidDateError:
        raise
    except (ValueError, OverflowError) as exc:
        raise InvalidDateError(value) from exc
    if ts is pd.NaT:
        raise InvalidDateError(value)
    if ts.tzinfo is not None:
        return ts
    try:
        local = ts.tz_localize(tz, ambiguous="NaT", nonexistent="NaT")
    except KeyError:
        validate_timezone(tz)
        raise
    # wall time repeated or skipped by a DST change
    if local is pd.NaT:
        raise InvalidDateError(value)
    return local


def format_iso(value: object, tz: str = DEFAULT_TIMEZONE) -> str:
    """Normalize and render as ISO-8601 with offset, second precision."""
    ts = normalize_date(value, tz)
    # floor in UTC so a DST fold cannot make the result ambiguous
    return ts.tz_convert("UTC").floor("s").tz_convert(ts.tz).isoformat()

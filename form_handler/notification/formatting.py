"""Plain-text formatters for composite submission values."""

from collections.abc import Mapping
from typing import Any


def _get(value: Mapping, key: str) -> str:
    part = value.get(key)
    return "" if part is None else str(part).strip()


def format_name(value: Any) -> str:
    """Render a {first, last} name as "first last"."""
    if not isinstance(value, Mapping):
        return "" if value is None else str(value)
    return " ".join(part for part in (_get(value, "first"), _get(value, "last")) if part)


def format_date(value: Any) -> str:
    """Render a {date, hour, minute, am-pm} value, e.g. "10/19/2026 9:05 am"."""
    if not isinstance(value, Mapping):
        return "" if value is None else str(value)

    date = _get(value, "date")
    hour = _get(value, "hour")
    minute = _get(value, "minute")
    am_pm = _get(value, "am-pm")

    time = ""
    if hour or minute:
        time = f"{hour or '0'}:{minute or '00'}"
        if am_pm:
            time = f"{time} {am_pm}"

    return " ".join(part for part in (date, time) if part)


def format_address(value: Any) -> str:
    """Render an address on one line: street, line two, city, state zip, country."""
    if not isinstance(value, Mapping):
        return "" if value is None else str(value)

    region = " ".join(part for part in (_get(value, "state"), _get(value, "zipcode")) if part)
    parts = (
        _get(value, "street"),
        _get(value, "line_two"),
        _get(value, "city"),
        region,
        _get(value, "country"),
    )
    return ", ".join(part for part in parts if part)

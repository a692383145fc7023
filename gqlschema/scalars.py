"""Custom scalar input types: Time and nullable wrappers for built-in scalars."""

from __future__ import annotations

import calendar
import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

RFC3339_LAYOUT = "2006-01-02T15:04:05Z07:00"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)
_FRACTION = re.compile(r"[.,]([0-9]+)")
_OFFSET = re.compile(r"([+-])([0-9]{2}):([0-9]{2})")

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def _type_name(value: Any) -> str:
    return type(value).__name__


def _is_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def _parse_rfc3339(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, reporting failures the way the layout reads."""
    rest = text

    def cannot_parse(element: str) -> ValueError:
        return ValueError(
            f"parsing time {_quote(text)} as {_quote(RFC3339_LAYOUT)}: "
            f"cannot parse {_quote(rest)} as {_quote(element)}"
        )

    def out_of_range(what: str) -> ValueError:
        return ValueError(f"parsing time {_quote(text)}: {what} out of range")

    def number(width: int, element: str) -> int:
        nonlocal rest
        chunk = rest[:width]
        if len(chunk) != width or not _is_digits(chunk):
            raise cannot_parse(element)
        rest = rest[width:]
        return int(chunk)

    def literal(expected: str) -> None:
        nonlocal rest
        if not rest.startswith(expected):
            raise cannot_parse(expected)
        rest = rest[len(expected) :]

    year = number(4, "2006")
    literal("-")
    month = number(2, "01")
    if not 1 <= month <= 12:
        raise out_of_range("month")
    literal("-")
    day = number(2, "02")
    literal("T")
    hour = number(2 if _is_digits(rest[1:2]) else 1, "15")
    if hour > 23:
        raise out_of_range("hour")
    literal(":")
    minute = number(2, "04")
    if minute > 59:
        raise out_of_range("minute")
    literal(":")
    second = number(2, "05")
    if second > 59:
        raise out_of_range("second")

    microsecond = 0
    fraction = _FRACTION.match(rest)
    if fraction:
        microsecond = int((fraction.group(1) + "000000")[:6])
        rest = rest[fraction.end() :]

    if rest.startswith("Z"):
        tz = timezone.utc
        rest = rest[1:]
    else:
        offset = _OFFSET.match(rest)
        if offset is None:
            raise cannot_parse("Z07:00")
        sign, hours, minutes = offset.groups()
        if int(hours) > 23:
            raise out_of_range("time zone offset hour")
        if int(minutes) > 59:
            raise out_of_range("time zone offset minute")
        delta = timedelta(hours=int(hours), minutes=int(minutes))
        tz = timezone(-delta if sign == "-" else delta)
        rest = rest[offset.end() :]

    if rest:
        raise ValueError(f"parsing time {_quote(text)}: extra text: {_quote(rest)}")
    if year < 1:
        raise out_of_range("year")
    if not 1 <= day <= calendar.monthrange(year, month)[1]:
        raise out_of_range("day")
    return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tz)


def _format_rfc3339(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += f".{value.microsecond:06d}".rstrip("0")
    offset = value.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return text + f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


@dataclass
class Time:
    """An instant in time, for schemas that declare ``scalar Time``."""

    value: datetime = _ZERO_TIME

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Time"

    def unmarshal_graphql(self, value: Any) -> None:
        """Set the instant from a datetime, RFC 3339 text or Unix seconds."""
        if isinstance(value, datetime):
            self.value = value
        elif isinstance(value, str):
            self.value = _parse_rfc3339(value)
        elif isinstance(value, (bytes, bytearray)):
            self.value = _parse_rfc3339(bytes(value).decode("utf-8", "replace"))
        elif isinstance(value, bool):
            raise TypeError(f"wrong type for Time: {_type_name(value)}")
        elif isinstance(value, (int, float)):
            self.value = datetime.fromtimestamp(int(value), tz=timezone.utc)
        else:
            raise TypeError(f"wrong type for Time: {_type_name(value)}")

    def marshal_json(self) -> str:
        """The instant as a JSON string in RFC 3339 form."""
        return '"' + _format_rfc3339(self.value) + '"'


@dataclass
class NullString:
    """A String input that tells an explicit null apart from an omitted value."""

    value: str | None = None
    is_set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "String"

    def unmarshal_graphql(self, value: Any) -> None:
        self.is_set = True
        if value is None:
            return
        if not isinstance(value, str):
            raise TypeError(f"wrong type for String: {_type_name(value)}")
        self.value = value


@dataclass
class NullBool:
    """A Boolean input that tells an explicit null apart from an omitted value."""

    value: bool | None = None
    is_set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Boolean"

    def unmarshal_graphql(self, value: Any) -> None:
        self.is_set = True
        if value is None:
            return
        if not isinstance(value, bool):
            raise TypeError(f"wrong type for Boolean: {_type_name(value)}")
        self.value = value


@dataclass
class NullInt:
    """An Int input that tells an explicit null apart from an omitted value."""

    value: int | None = None
    is_set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Int"

    def unmarshal_graphql(self, value: Any) -> None:
        self.is_set = True
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"wrong type for Int: {_type_name(value)}")
        if isinstance(value, float):
            if not math.isfinite(value) or value != int(value):
                raise ValueError("not a 32-bit integer")
            value = int(value)
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise ValueError("not a 32-bit integer")
        self.value = value


@dataclass
class NullFloat:
    """A Float input that tells an explicit null apart from an omitted value."""

    value: float | None = None
    is_set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Float"

    def unmarshal_graphql(self, value: Any) -> None:
        self.is_set = True
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"wrong type for Float: {_type_name(value)}")
        self.value = float(value)


@dataclass
class NullTime:
    """A Time input that tells an explicit null apart from an omitted value."""

    value: Time | None = None
    is_set: bool = False

    def implements_graphql_type(self, name: str) -> bool:
        return name == "Time"

    def unmarshal_graphql(self, value: Any) -> None:
        self.is_set = True
        if value is None:
            return
        self.value = Time()
        self.value.unmarshal_graphql(value)


__all__ = ["Time", "NullString", "NullBool", "NullInt", "NullFloat", "NullTime"]
_ = field
"""The EXT-X-PROGRAM-DATE-TIME tag and its date-time format."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

from hlstags.base import ParsedTag, ValueParseError, line_value

_DATE_TIME = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:(?P<utc>[Zz])|(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2}))?"
)


def format_date_time(value: datetime) -> str:
    """Format as ISO 8601 with milliseconds; a zero offset is written as 'Z'."""
    offset = value.utcoffset() or timedelta(0)
    base = value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}"
    total_minutes = int(offset.total_seconds()) // 60
    if total_minutes == 0:
        return base + "Z"
    sign = "-" if total_minutes < 0 else "+"
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{base}{sign}{hours:02d}:{minutes:02d}"


def parse_date_time(text: str) -> datetime:
    """Parse an ISO 8601 date-time; a missing zone is taken as UTC."""
    match = _DATE_TIME.fullmatch(text)
    if match is None:
        raise ValueParseError(f"not a date-time: {text!r}")
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    fraction = match.group(7) or ""
    microsecond = int((fraction + "000000")[:6])
    try:
        if match.group("sign"):
            delta = timedelta(
                hours=int(match.group("hours")), minutes=int(match.group("minutes"))
            )
            zone = timezone(-delta if match.group("sign") == "-" else delta)
        else:
            zone = timezone.utc
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=zone)
    except ValueError as error:
        raise ValueParseError(f"invalid date-time: {text!r}") from error


class ProgramDateTime:
    """Absolute date and time of the first sample of a segment."""

    def __init__(self, program_date_time: datetime) -> None:
        self._program_date_time = program_date_time
        self._line: bytes | None = None

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "ProgramDateTime":
        raw = tag.require_unparsed().value
        try:
            text = raw.decode("ascii")
        except UnicodeDecodeError:
            raise ValueParseError(f"not a date-time: {raw!r}") from None
        instance = cls(parse_date_time(text))
        instance._line = tag.original_input
        return instance

    @property
    def program_date_time(self) -> datetime:
        return self._program_date_time

    @program_date_time.setter
    def program_date_time(self, value: datetime) -> None:
        self._program_date_time = value
        self._line = None

    def to_line(self) -> bytes:
        if self._line is None:
            self._line = (
                f"#EXT-X-PROGRAM-DATE-TIME:{format_date_time(self._program_date_time)}".encode()
            )
        return line_value(self._line)

    def __eq__(self, other):
        if not isinstance(other, ProgramDateTime):
            return NotImplemented
        return self.program_date_time == other.program_date_time

    def __repr__(self) -> str:
        return f"ProgramDateTime({self._program_date_time!r})"
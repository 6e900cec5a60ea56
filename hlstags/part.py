"""The EXT-X-PART tag."""

from __future__ import annotations

from dataclasses import dataclass

from hlstags.base import (
    MissingRequiredAttributeError,
    ParsedTag,
    QuotedString,
    UnquotedString,
    ValueParseError,
    attribute_as_float,
    format_float,
    line_value,
)

_URI = "URI"
_DURATION = "DURATION"
_INDEPENDENT = "INDEPENDENT"
_BYTERANGE = "BYTERANGE"
_GAP = "GAP"
_YES = "YES"
_U64_MAX = 2**64 - 1


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise ValueParseError(f"not an unsigned integer: {text!r}")
    number = int(digits)
    if number > _U64_MAX:
        raise ValueParseError(f"unsigned integer out of range: {text!r}")
    return number


@dataclass(frozen=True)
class PartByterange:
    """A byte range of a partial segment: length and optional offset."""

    length: int
    offset: int | None = None

    @classmethod
    def parse(cls, text: str) -> "PartByterange":
        """Parse 'length' or 'length@offset'; raise ValueParseError if malformed."""
        length, separator, offset = text.partition("@")
        return cls(_parse_u64(length), _parse_u64(offset) if separator else None)

    def __str__(self) -> str:
        if self.offset is None:
            return f"{self.length}"
        return f"{self.length}@{self.offset}"


def _build_line(
    uri: str,
    duration: float,
    independent: bool,
    byterange: PartByterange | None,
    gap: bool,
) -> bytes:
    line = f'#EXT-X-PART:{_URI}="{uri}",{_DURATION}={format_float(duration)}'
    if independent:
        line += f",{_INDEPENDENT}={_YES}"
    if byterange is not None:
        line += f',{_BYTERANGE}="{byterange}"'
    if gap:
        line += f",{_GAP}={_YES}"
    return line.encode()


def _is_yes(value) -> bool:
    return isinstance(value, UnquotedString) and value.value == _YES


class Part:
    """A partial segment of a media segment in a low-latency playlist."""

    def __init__(
        self,
        uri: str,
        duration: float,
        *,
        independent: bool = False,
        byterange: PartByterange | None = None,
        gap: bool = False,
    ) -> None:
        self._uri = uri
        self._duration = float(duration)
        self._independent = bool(independent)
        self._byterange = byterange
        self._gap = bool(gap)
        self._line: bytes | None = _build_line(
            uri, self._duration, self._independent, byterange, self._gap
        )

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "Part":
        attributes = tag.require_attribute_list()
        uri = attributes.get(_URI)
        if not isinstance(uri, QuotedString):
            raise MissingRequiredAttributeError(_URI)
        duration = attribute_as_float(attributes.get(_DURATION))
        if duration is None:
            raise MissingRequiredAttributeError(_DURATION)
        byterange = None
        raw = attributes.get(_BYTERANGE)
        if isinstance(raw, QuotedString):
            try:
                byterange = PartByterange.parse(raw.value)
            except ValueParseError:
                byterange = None
        instance = cls(
            uri.value,
            duration,
            independent=_is_yes(attributes.get(_INDEPENDENT)),
            byterange=byterange,
            gap=_is_yes(attributes.get(_GAP)),
        )
        instance._line = tag.original_input
        return instance

    @property
    def uri(self) -> str:
        return self._uri

    @uri.setter
    def uri(self, value: str) -> None:
        self._uri = value
        self._line = None

    @property
    def duration(self) -> float:
        return self._duration

    @duration.setter
    def duration(self, value: float) -> None:
        self._duration = float(value)
        self._line = None

    @property
    def independent(self) -> bool:
        return self._independent

    @independent.setter
    def independent(self, value: bool) -> None:
        self._independent = bool(value)
        self._line = None

    @property
    def byterange(self) -> PartByterange | None:
        return self._byterange

    @byterange.setter
    def byterange(self, value: PartByterange | None) -> None:
        self._byterange = value
        self._line = None

    @property
    def gap(self) -> bool:
        return self._gap

    @gap.setter
    def gap(self, value: bool) -> None:
        self._gap = bool(value)
        self._line = None

    def to_line(self) -> bytes:
        if self._line is None:
            self._line = _build_line(
                self._uri, self._duration, self._independent, self._byterange, self._gap
            )
        return line_value(self._line)

    def __eq__(self, other):
        if not isinstance(other, Part):
            return NotImplemented
        return (
            self.uri,
            self.duration,
            self.independent,
            self.byterange,
            self.gap,
        ) == (
            other.uri,
            other.duration,
            other.independent,
            other.byterange,
            other.gap,
        )

    def __repr__(self) -> str:
        return (
            f"Part({self._uri!r}, {self._duration!r}, independent={self._independent!r}, "
            f"byterange={self._byterange!r}, gap={self._gap!r})"
        )
"""The EXT-X-RENDITION-REPORT tag."""

from __future__ import annotations

from hlstags.base import (
    DecimalInteger,
    MissingRequiredAttributeError,
    ParsedTag,
    QuotedString,
    line_value,
)

_URI = "URI"
_LAST_MSN = "LAST-MSN"
_LAST_PART = "LAST-PART"


class RenditionReport:
    """Information about the most recent segment of another rendition."""

    def __init__(self, uri: str, last_msn: int, *, last_part: int | None = None) -> None:
        self._uri = uri
        self._last_msn = last_msn
        self._last_part = last_part
        self._line: bytes | None = None

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "RenditionReport":
        attributes = tag.require_attribute_list()
        uri = attributes.get(_URI)
        if not isinstance(uri, QuotedString):
            raise MissingRequiredAttributeError(_URI)
        last_msn = attributes.get(_LAST_MSN)
        if not isinstance(last_msn, DecimalInteger):
            raise MissingRequiredAttributeError(_LAST_MSN)
        last_part = attributes.get(_LAST_PART)
        instance = cls(
            uri.value,
            last_msn.value,
            last_part=last_part.value if isinstance(last_part, DecimalInteger) else None,
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
    def last_msn(self) -> int:
        return self._last_msn

    @last_msn.setter
    def last_msn(self, value: int) -> None:
        self._last_msn = value
        self._line = None

    @property
    def last_part(self) -> int | None:
        return self._last_part

    @last_part.setter
    def last_part(self, value: int | None) -> None:
        self._last_part = value
        self._line = None

    def to_line(self) -> bytes:
        if self._line is None:
            line = f'#EXT-X-RENDITION-REPORT:{_URI}="{self._uri}",{_LAST_MSN}={self._last_msn}'
            if self._last_part is not None:
                line += f",{_LAST_PART}={self._last_part}"
            self._line = line.encode()
        return line_value(self._line)

    def __eq__(self, other):
        if not isinstance(other, RenditionReport):
            return NotImplemented
        return (self.uri, self.last_msn, self.last_part) == (
            other.uri,
            other.last_msn,
            other.last_part,
        )

    def __repr__(self) -> str:
        return (
            f"RenditionReport({self._uri!r}, {self._last_msn!r}, "
            f"last_part={self._last_part!r})"
        )
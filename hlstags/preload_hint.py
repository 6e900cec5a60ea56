"""The EXT-X-PRELOAD-HINT tag."""

from __future__ import annotations

from hlstags.base import (
    DecimalInteger,
    MissingRequiredAttributeError,
    ParsedTag,
    QuotedString,
    UnquotedString,
    line_value,
)

_TYPE = "TYPE"
_URI = "URI"
_BYTERANGE_START = "BYTERANGE-START"
_BYTERANGE_LENGTH = "BYTERANGE-LENGTH"


def _build_line(
    hint_type: str,
    uri: str,
    byterange_start: int | None,
    byterange_length: int | None,
) -> bytes:
    line = f'#EXT-X-PRELOAD-HINT:{_TYPE}={hint_type},{_URI}="{uri}"'
    if byterange_start is not None:
        line += f",{_BYTERANGE_START}={byterange_start}"
    if byterange_length is not None:
        line += f",{_BYTERANGE_LENGTH}={byterange_length}"
    return line.encode()


def _integer_or_none(value) -> int | None:
    return value.value if isinstance(value, DecimalInteger) else None


class PreloadHint:
    """A resource the client should request ahead of time."""

    def __init__(
        self,
        hint_type: str,
        uri: str,
        *,
        byterange_start: int | None = None,
        byterange_length: int | None = None,
    ) -> None:
        self._hint_type = hint_type
        self._uri = uri
        self._byterange_start = byterange_start
        self._byterange_length = byterange_length
        self._line: bytes | None = _build_line(
            hint_type, uri, byterange_start, byterange_length
        )

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "PreloadHint":
        attributes = tag.require_attribute_list()
        hint_type = attributes.get(_TYPE)
        if not isinstance(hint_type, UnquotedString):
            raise MissingRequiredAttributeError(_TYPE)
        uri = attributes.get(_URI)
        if not isinstance(uri, QuotedString):
            raise MissingRequiredAttributeError(_URI)
        instance = cls(
            hint_type.value,
            uri.value,
            byterange_start=_integer_or_none(attributes.get(_BYTERANGE_START)),
            byterange_length=_integer_or_none(attributes.get(_BYTERANGE_LENGTH)),
        )
        instance._line = tag.original_input
        return instance

    @property
    def hint_type(self) -> str:
        return self._hint_type

    @hint_type.setter
    def hint_type(self, value: str) -> None:
        self._hint_type = value
        self._line = None

    @property
    def uri(self) -> str:
        return self._uri

    @uri.setter
    def uri(self, value: str) -> None:
        self._uri = value
        self._line = None

    @property
    def byterange_start(self) -> int:
        """Byte offset of the hinted range; 0 when none is given."""
        return self._byterange_start if self._byterange_start is not None else 0

    @byterange_start.setter
    def byterange_start(self, value: int | None) -> None:
        self._byterange_start = value
        self._line = None

    @property
    def byterange_length(self) -> int | None:
        return self._byterange_length

    @byterange_length.setter
    def byterange_length(self, value: int | None) -> None:
        self._byterange_length = value
        self._line = None

    def to_line(self) -> bytes:
        if self._line is None:
            start = self.byterange_start
            self._line = _build_line(
                self._hint_type,
                self._uri,
                None if start == 0 else start,
                self._byterange_length,
            )
        return line_value(self._line)

    def __eq__(self, other):
        if not isinstance(other, PreloadHint):
            return NotImplemented
        return (
            self.hint_type,
            self.uri,
            self.byterange_start,
            self.byterange_length,
        ) == (
            other.hint_type,
            other.uri,
            other.byterange_start,
            other.byterange_length,
        )

    def __repr__(self) -> str:
        return (
            f"PreloadHint({self._hint_type!r}, {self._uri!r}, "
            f"byterange_start={self._byterange_start!r}, "
            f"byterange_length={self._byterange_length!r})"
        )
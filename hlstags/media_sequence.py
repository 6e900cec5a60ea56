"""The EXT-X-MEDIA-SEQUENCE tag."""

from __future__ import annotations

from hlstags.base import ParsedTag, line_value


class MediaSequence:
    """Media sequence number of the first segment in a playlist."""

    def __init__(self, media_sequence: int) -> None:
        self._media_sequence = media_sequence
        self._line: bytes | None = None

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "MediaSequence":
        instance = cls(tag.require_unparsed().as_decimal_integer())
        instance._line = tag.original_input
        return instance

    @property
    def media_sequence(self) -> int:
        return self._media_sequence

    @media_sequence.setter
    def media_sequence(self, value: int) -> None:
        self._media_sequence = value
        self._line = None

    def to_line(self) -> bytes:
        if self._line is None:
            self._line = f"#EXT-X-MEDIA-SEQUENCE:{self._media_sequence}".encode()
        return line_value(self._line)

    def __eq__(self, other):
        if not isinstance(other, MediaSequence):
            return NotImplemented
        return self.media_sequence == other.media_sequence

    def __repr__(self) -> str:
        return f"MediaSequence({self._media_sequence!r})"
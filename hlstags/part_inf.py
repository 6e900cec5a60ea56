"""The EXT-X-PART-INF tag."""

from __future__ import annotations

from hlstags.base import (
    MissingRequiredAttributeError,
    ParsedTag,
    attribute_as_float,
    format_float,
    line_value,
)

_PART_TARGET = "PART-TARGET"


class PartInf:
    """Information about partial segments in a low-latency playlist."""

    def __init__(self, part_target: float) -> None:
        self._part_target = float(part_target)
        self._line: bytes | None = None

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "PartInf":
        attributes = tag.require_attribute_list()
        part_target = attribute_as_float(attributes.get(_PART_TARGET))
        if part_target is None:
            raise MissingRequiredAttributeError(_PART_TARGET)
        instance = cls(part_target)
        instance._line = tag.original_input
        return instance

    @property
    def part_target(self) -> float:
        return self._part_target

    @part_target.setter
    def part_target(self, value: float) -> None:
        self._part_target = float(value)
        self._line = None

    def to_line(self) -> bytes:
        if self._line is None:
            self._line = (
                f"#EXT-X-PART-INF:{_PART_TARGET}={format_float(self._part_target)}".encode()
            )
        return line_value(self._line)

    def __eq__(self, other):
        if not isinstance(other, PartInf):
            return NotImplemented
        return self.part_target == other.part_target

    def __repr__(self) -> str:
        return f"PartInf({self._part_target!r})"
"""The EXT-X-SERVER-CONTROL tag."""

from __future__ import annotations

from hlstags.base import (
    ParsedTag,
    SignedDecimalFloatingPoint,
    UnquotedString,
    format_float_debug,
    line_value,
)

_CAN_SKIP_UNTIL = "CAN-SKIP-UNTIL"
_CAN_SKIP_DATERANGES = "CAN-SKIP-DATERANGES"
_HOLD_BACK = "HOLD-BACK"
_PART_HOLD_BACK = "PART-HOLD-BACK"
_CAN_BLOCK_RELOAD = "CAN-BLOCK-RELOAD"
_YES = "YES"


def _float_or_none(value) -> float | None:
    return value.value if isinstance(value, SignedDecimalFloatingPoint) else None


def _is_yes(value) -> bool:
    return isinstance(value, UnquotedString) and value.value == _YES


def _optional_float(value) -> float | None:
    return None if value is None else float(value)


def _build_line(
    can_skip_until: float | None,
    can_skip_dateranges: bool,
    hold_back: float | None,
    part_hold_back: float | None,
    can_block_reload: bool,
) -> bytes:
    parts = []
    if can_skip_until is not None:
        parts.append(f"{_CAN_SKIP_UNTIL}={format_float_debug(can_skip_until)}")
    if can_skip_dateranges:
        parts.append(f"{_CAN_SKIP_DATERANGES}={_YES}")
    if hold_back is not None:
        parts.append(f"{_HOLD_BACK}={format_float_debug(hold_back)}")
    if part_hold_back is not None:
        parts.append(f"{_PART_HOLD_BACK}={format_float_debug(part_hold_back)}")
    if can_block_reload:
        parts.append(f"{_CAN_BLOCK_RELOAD}={_YES}")
    return ("#EXT-X-SERVER-CONTROL:" + ",".join(parts)).encode()


class ServerControl:
    """Delivery directives the server supports (skipping, blocking reload, hold back)."""

    def __init__(
        self,
        *,
        can_skip_until: float | None = None,
        can_skip_dateranges: bool = False,
        hold_back: float | None = None,
        part_hold_back: float | None = None,
        can_block_reload: bool = False,
    ) -> None:
        self._can_skip_until = _optional_float(can_skip_until)
        self._can_skip_dateranges = bool(can_skip_dateranges)
        self._hold_back = _optional_float(hold_back)
        self._part_hold_back = _optional_float(part_hold_back)
        self._can_block_reload = bool(can_block_reload)
        self._line: bytes | None = self._render()

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "ServerControl":
        attributes = tag.require_attribute_list()
        instance = cls(
            can_skip_until=_float_or_none(attributes.get(_CAN_SKIP_UNTIL)),
            can_skip_dateranges=_is_yes(attributes.get(_CAN_SKIP_DATERANGES)),
            hold_back=_float_or_none(attributes.get(_HOLD_BACK)),
            part_hold_back=_float_or_none(attributes.get(_PART_HOLD_BACK)),
            can_block_reload=_is_yes(attributes.get(_CAN_BLOCK_RELOAD)),
        )
        instance._line = tag.original_input
        return instance

    @property
    def can_skip_until(self) -> float | None:
        return self._can_skip_until

    @can_skip_until.setter
    def can_skip_until(self, value: float | None) -> None:
        self._can_skip_until = _optional_float(value)
        self._line = None

    @property
    def can_skip_dateranges(self) -> bool:
        return self._can_skip_dateranges

    @can_skip_dateranges.setter
    def can_skip_dateranges(self, value: bool) -> None:
        self._can_skip_dateranges = bool(value)
        self._line = None

    @property
    def hold_back(self) -> float | None:
        return self._hold_back

    @hold_back.setter
    def hold_back(self, value: float | None) -> None:
        self._hold_back = _optional_float(value)
        self._line = None

    @property
    def part_hold_back(self) -> float | None:
        return self._part_hold_back

    @part_hold_back.setter
    def part_hold_back(self, value: float | None) -> None:
        self._part_hold_back = _optional_float(value)
        self._line = None

    @property
    def can_block_reload(self) -> bool:
        return self._can_block_reload

    @can_block_reload.setter
    def can_block_reload(self, value: bool) -> None:
        self._can_block_reload = bool(value)
        self._line = None

    def _render(self) -> bytes:
        return _build_line(
            self._can_skip_until,
            self._can_skip_dateranges,
            self._hold_back,
            self._part_hold_back,
            self._can_block_reload,
        )

    def to_line(self) -> bytes:
        if self._line is None:
            self._line = self._render()
        return line_value(self._line)

    def _values(self) -> tuple:
        return (
            self.can_skip_until,
            self.can_skip_dateranges,
            self.hold_back,
            self.part_hold_back,
            self.can_block_reload,
        )

    def __eq__(self, other):
        if not isinstance(other, ServerControl):
            return NotImplemented
        return self._values() == other._values()

    def __repr__(self) -> str:
        return (
            f"ServerControl(can_skip_until={self._can_skip_until!r}, "
            f"can_skip_dateranges={self._can_skip_dateranges!r}, "
            f"hold_back={self._hold_back!r}, "
            f"part_hold_back={self._part_hold_back!r}, "
            f"can_block_reload={self._can_block_reload!r})"
        )
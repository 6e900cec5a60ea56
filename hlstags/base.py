"""Shared building blocks for HLS tags: parsed values, errors and line formatting."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from decimal import Decimal

_U64_MAX = 2**64 - 1


class ValidationError(Exception):
    """Raised when a parsed tag does not hold what the tag requires."""


class UnexpectedValueTypeError(ValidationError):
    """The tag value is not of the kind the tag expects."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"unexpected tag value type: {kind}")


class MissingRequiredAttributeError(ValidationError):
    """A required attribute is absent or has the wrong value type."""

    def __init__(self, attribute: str) -> None:
        self.attribute = attribute
        super().__init__(f"missing required attribute: {attribute}")


class ValueParseError(ValidationError):
    """A tag value could not be parsed into the expected type."""


@dataclass(frozen=True)
class QuotedString:
    """An attribute value written between double quotes."""

    value: str


@dataclass(frozen=True)
class UnquotedString:
    """An attribute value written without quotes (enumerated strings, hex, resolutions)."""

    value: str


@dataclass(frozen=True)
class DecimalInteger:
    """An unsigned decimal integer attribute value."""

    value: int


@dataclass(frozen=True)
class SignedDecimalFloatingPoint:
    """A floating point attribute value."""

    value: float


@dataclass(frozen=True)
class EmptyValue:
    """The value of a tag that carries nothing after its name."""


class HlsPlaylistType(enum.Enum):
    """Values allowed for EXT-X-PLAYLIST-TYPE."""

    EVENT = "EVENT"
    VOD = "VOD"


@dataclass(frozen=True)
class UnparsedValue:
    """Raw bytes of a tag value, parsed on demand."""

    value: bytes

    def as_decimal_integer(self) -> int:
        """Parse the bytes as an unsigned 64-bit decimal integer."""
        if not self.value or not self.value.isdigit():
            raise ValueParseError(f"not a decimal integer: {self.value!r}")
        number = int(self.value)
        if number > _U64_MAX:
            raise ValueParseError(f"decimal integer out of range: {self.value!r}")
        return number

    def as_playlist_type(self) -> HlsPlaylistType:
        """Parse the bytes as a playlist type (EVENT or VOD)."""
        try:
            return HlsPlaylistType(self.value.decode("ascii"))
        except (UnicodeDecodeError, ValueError):
            raise ValueParseError(f"not a playlist type: {self.value!r}") from None


class AttributeList(dict):
    """Mapping of attribute names to parsed attribute values."""


@dataclass
class ParsedTag:
    """A tag split into name and value, with the line it was read from."""

    name: str
    value: object
    original_input: bytes

    def require_attribute_list(self) -> AttributeList:
        """Return the value as an attribute list or raise UnexpectedValueTypeError."""
        if not isinstance(self.value, AttributeList):
            raise UnexpectedValueTypeError(type(self.value).__name__)
        return self.value

    def require_unparsed(self) -> UnparsedValue:
        """Return the value as raw bytes or raise UnexpectedValueTypeError."""
        if not isinstance(self.value, UnparsedValue):
            raise UnexpectedValueTypeError(type(self.value).__name__)
        return self.value


def attribute_as_float(value) -> float | None:
    """Read a numeric attribute value as a float; None for anything else."""
    if isinstance(value, DecimalInteger):
        return float(value.value)
    if isinstance(value, SignedDecimalFloatingPoint):
        return value.value
    return None


def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return None


def format_float(value) -> str:
    """Shortest plain decimal form of a float, without a trailing '.0'."""
    value = float(value)
    special = _non_finite(value)
    if special is not None:
        return special
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_float_debug(value) -> str:
    """Float form that always shows a fraction, switching to exponent form at extremes."""
    value = float(value)
    special = _non_finite(value)
    if special is not None:
        return special
    magnitude = abs(value)
    if value == 0 or 1e-4 <= magnitude < 1e16:
        text = format_float(value)
        return text if "." in text else text + ".0"
    mantissa, _, exponent = repr(value).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return f"{mantissa}e{int(exponent)}"


def line_value(line: bytes) -> bytes:
    """The content of a line, without any line ending or what follows it."""
    end = line.find(b"\n")
    if end == -1:
        return bytes(line)
    head = line[:end]
    return head[:-1] if head.endswith(b"\r") else head


@dataclass(frozen=True)
class M3u:
    """The EXTM3U tag that opens every playlist."""

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "M3u":
        return cls()

    def to_line(self) -> bytes:
        return b"#EXTM3U"
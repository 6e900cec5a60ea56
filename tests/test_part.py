import pytest

from hlstags.base import (
    AttributeList,
    EmptyValue,
    MissingRequiredAttributeError,
    ParsedTag,
    QuotedString,
    SignedDecimalFloatingPoint,
    UnexpectedValueTypeError,
    UnquotedString,
    ValueParseError,
)
from hlstags.part import Part, PartByterange


def _base():
    return Part("part.1.0.mp4", 0.5, byterange=PartByterange(1024, 512))


def test_as_str_with_no_options_should_be_valid():
    assert Part("part.1.0.mp4", 0.5).to_line() == b'#EXT-X-PART:URI="part.1.0.mp4",DURATION=0.5'


def test_as_str_with_options_no_byterange_offset_should_be_valid():
    part = Part(
        "part.1.0.mp4", 0.5, independent=True, byterange=PartByterange(1024), gap=True
    )
    assert part.to_line() == (
        b'#EXT-X-PART:URI="part.1.0.mp4",DURATION=0.5,INDEPENDENT=YES,BYTERANGE="1024",GAP=YES'
    )


def test_as_str_with_options_with_byterange_offset_should_be_valid():
    part = Part(
        "part.1.0.mp4",
        0.5,
        independent=True,
        byterange=PartByterange(1024, 512),
        gap=True,
    )
    assert part.to_line() == (
        b'#EXT-X-PART:URI="part.1.0.mp4",DURATION=0.5,INDEPENDENT=YES,'
        b'BYTERANGE="1024@512",GAP=YES'
    )


@pytest.mark.parametrize(
    "field, value, attr",
    [
        ("uri", "example", b'URI="example"'),
        ("duration", 1.0, b"DURATION=1"),
        ("independent", True, b"INDEPENDENT=YES"),
        ("byterange", PartByterange(100, 200), b'BYTERANGE="100@200"'),
        ("gap", True, b"GAP=YES"),
    ],
)
def test_mutation(field, value, attr):
    part = _base()
    setattr(part, field, value)
    assert getattr(part, field) == value
    assert attr in part.to_line()


def test_unset_byterange_removes_attribute():
    part = _base()
    part.byterange = None
    assert part.byterange is None
    assert b"BYTERANGE" not in part.to_line()


def test_from_parsed_with_all_attributes():
    line = (
        b'#EXT-X-PART:URI="part.1.mp4",DURATION=0.5,INDEPENDENT=YES,'
        b'BYTERANGE="1024@512",GAP=YES'
    )
    tag = ParsedTag(
        "-X-PART",
        AttributeList(
            {
                "URI": QuotedString("part.1.mp4"),
                "DURATION": SignedDecimalFloatingPoint(0.5),
                "INDEPENDENT": UnquotedString("YES"),
                "BYTERANGE": QuotedString("1024@512"),
                "GAP": UnquotedString("YES"),
            }
        ),
        line,
    )
    part = Part.from_parsed(tag)
    assert part == Part(
        "part.1.mp4",
        0.5,
        independent=True,
        byterange=PartByterange(1024, 512),
        gap=True,
    )
    assert part.to_line() == line


def test_from_parsed_byterange_without_offset():
    tag = ParsedTag(
        "-X-PART",
        AttributeList(
            {
                "URI": QuotedString("part.1.mp4"),
                "DURATION": SignedDecimalFloatingPoint(0.5),
                "BYTERANGE": QuotedString("1024"),
            }
        ),
        b'#EXT-X-PART:URI="part.1.mp4",DURATION=0.5,BYTERANGE="1024"',
    )
    assert Part.from_parsed(tag) == Part(
        "part.1.mp4", 0.5, byterange=PartByterange(1024, None)
    )


def test_from_parsed_minimal():
    tag = ParsedTag(
        "-X-PART",
        AttributeList(
            {
                "URI": QuotedString("part.1.mp4"),
                "DURATION": SignedDecimalFloatingPoint(0.5),
            }
        ),
        b'#EXT-X-PART:URI="part.1.mp4",DURATION=0.5',
    )
    part = Part.from_parsed(tag)
    assert part == Part("part.1.mp4", 0.5)
    assert part.independent is False
    assert part.gap is False


def test_from_parsed_invalid_byterange_is_ignored():
    tag = ParsedTag(
        "-X-PART",
        AttributeList(
            {
                "URI": QuotedString("p.mp4"),
                "DURATION": SignedDecimalFloatingPoint(0.5),
                "BYTERANGE": QuotedString("1024@abc"),
            }
        ),
        b'#EXT-X-PART:URI="p.mp4",DURATION=0.5,BYTERANGE="1024@abc"',
    )
    assert Part.from_parsed(tag).byterange is None


def test_from_parsed_missing_uri():
    tag = ParsedTag(
        "-X-PART",
        AttributeList({"DURATION": SignedDecimalFloatingPoint(0.5)}),
        b"#EXT-X-PART:DURATION=0.5",
    )
    with pytest.raises(MissingRequiredAttributeError) as info:
        Part.from_parsed(tag)
    assert info.value.attribute == "URI"


def test_from_parsed_missing_duration():
    tag = ParsedTag(
        "-X-PART",
        AttributeList({"URI": QuotedString("p.mp4")}),
        b'#EXT-X-PART:URI="p.mp4"',
    )
    with pytest.raises(MissingRequiredAttributeError) as info:
        Part.from_parsed(tag)
    assert info.value.attribute == "DURATION"


def test_from_parsed_wrong_value_type():
    with pytest.raises(UnexpectedValueTypeError):
        Part.from_parsed(ParsedTag("-X-PART", EmptyValue(), b"#EXT-X-PART"))


def test_byterange_parse_and_str():
    assert PartByterange.parse("1024@512") == PartByterange(1024, 512)
    assert PartByterange.parse("1024") == PartByterange(1024)
    assert str(PartByterange(1024, 512)) == "1024@512"
    assert str(PartByterange(1024)) == "1024"


def test_byterange_parse_rejects_garbage():
    with pytest.raises(ValueParseError):
        PartByterange.parse("x@1")
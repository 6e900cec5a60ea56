import pytest

from hlstags.base import AttributeList, ParsedTag, UnexpectedValueTypeError, UnparsedValue, ValueParseError
from hlstags.media_sequence import MediaSequence


def test_as_str_should_be_valid():
    assert MediaSequence(100).to_line() == b"#EXT-X-MEDIA-SEQUENCE:100"


def test_from_parsed():
    tag = ParsedTag(
        name="-X-MEDIA-SEQUENCE",
        value=UnparsedValue(b"100"),
        original_input=b"#EXT-X-MEDIA-SEQUENCE:100",
    )
    assert MediaSequence.from_parsed(tag) == MediaSequence(100)


def test_from_parsed_keeps_original_line_until_changed():
    tag = ParsedTag(
        name="-X-MEDIA-SEQUENCE",
        value=UnparsedValue(b"100"),
        original_input=b"#EXT-X-MEDIA-SEQUENCE:100\r\n#EXTINF:6",
    )
    parsed = MediaSequence.from_parsed(tag)
    assert parsed.to_line() == b"#EXT-X-MEDIA-SEQUENCE:100"
    parsed.media_sequence = 200
    assert parsed.to_line() == b"#EXT-X-MEDIA-SEQUENCE:200"


def test_mutation():
    tag = MediaSequence(100)
    tag.media_sequence = 200
    assert tag.media_sequence == 200
    assert tag.to_line().endswith(b":200")


def test_invalid_value():
    tag = ParsedTag(name="-X-MEDIA-SEQUENCE", value=UnparsedValue(b"x"), original_input=b"")
    with pytest.raises(ValueParseError):
        MediaSequence.from_parsed(tag)


def test_wrong_value_type():
    tag = ParsedTag(name="-X-MEDIA-SEQUENCE", value=AttributeList(), original_input=b"")
    with pytest.raises(UnexpectedValueTypeError):
        MediaSequence.from_parsed(tag)
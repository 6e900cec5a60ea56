# hlstags

Typed models for a set of HTTP Live Streaming (HLS) playlist tags. You can
build each tag from values you supply, or from a tag that a playlist parser
has already split into a name and a value. Every model can write itself back
as one playlist line, as `bytes`.

When a model is made from a parsed tag and nothing about it changes,
`to_line()` returns the line it was read from, cut at the first line ending.
After any attribute changes, the line is built again from the current values.

## Installation

```
pip install hlstags
```

To run the tests, use `pip install "hlstags[test]"` and then `pytest`.

## Supported tags

| Tag                        | Class             | Module                      |
|----------------------------|-------------------|-----------------------------|
| `#EXTM3U`                  | `M3u`             | `hlstags.base`              |
| `#EXT-X-MEDIA-SEQUENCE`    | `MediaSequence`   | `hlstags.media_sequence`    |
| `#EXT-X-PART-INF`          | `PartInf`         | `hlstags.part_inf`          |
| `#EXT-X-PLAYLIST-TYPE`     | `PlaylistType`    | `hlstags.playlist_type`     |
| `#EXT-X-PROGRAM-DATE-TIME` | `ProgramDateTime` | `hlstags.program_date_time` |
| `#EXT-X-RENDITION-REPORT`  | `RenditionReport` | `hlstags.rendition_report`  |
| `#EXT-X-PART`              | `Part`            | `hlstags.part`              |
| `#EXT-X-PRELOAD-HINT`      | `PreloadHint`     | `hlstags.preload_hint`      |
| `#EXT-X-SERVER-CONTROL`    | `ServerControl`   | `hlstags.server_control`    |

## Building tags

```python
from datetime import datetime, timedelta, timezone

from hlstags.base import HlsPlaylistType
from hlstags.media_sequence import MediaSequence
from hlstags.part import Part, PartByterange
from hlstags.playlist_type import PlaylistType
from hlstags.preload_hint import PreloadHint
from hlstags.program_date_time import ProgramDateTime
from hlstags.rendition_report import RenditionReport
from hlstags.server_control import ServerControl

MediaSequence(100).to_line()
# b'#EXT-X-MEDIA-SEQUENCE:100'

PlaylistType(HlsPlaylistType.VOD).to_line()
# b'#EXT-X-PLAYLIST-TYPE:VOD'

Part("part.1.0.mp4", 0.5, independent=True,
     byterange=PartByterange(1024, 512)).to_line()
# b'#EXT-X-PART:URI="part.1.0.mp4",DURATION=0.5,INDEPENDENT=YES,BYTERANGE="1024@512"'

PreloadHint("PART", "part.2.mp4", byterange_length=1024).to_line()
# b'#EXT-X-PRELOAD-HINT:TYPE=PART,URI="part.2.mp4",BYTERANGE-LENGTH=1024'

RenditionReport("low.m3u8", 100, last_part=2).to_line()
# b'#EXT-X-RENDITION-REPORT:URI="low.m3u8",LAST-MSN=100,LAST-PART=2'

ServerControl(can_skip_until=36.0, can_block_reload=True).to_line()
# b'#EXT-X-SERVER-CONTROL:CAN-SKIP-UNTIL=36.0,CAN-BLOCK-RELOAD=YES'

zone = timezone(-timedelta(hours=5))
ProgramDateTime(datetime(2025, 6, 16, 21, 52, 8, 10000, tzinfo=zone)).to_line()
# b'#EXT-X-PROGRAM-DATE-TIME:2025-06-16T21:52:08.010-05:00'
```

Durations and targets are written in their shortest decimal form (`1.0`
becomes `1`), except in `EXT-X-SERVER-CONTROL`, where values always show a
fraction (`36.0`). Date-times are written with milliseconds. A zero UTC
offset is written as `Z`.

`hlstags.program_date_time` also provides `format_date_time()` and
`parse_date_time()`. The parser accepts ISO 8601 date-times and takes a
missing zone as UTC.

## Reading parsed tags

A parser supplies a `ParsedTag` from `hlstags.base`. It holds the tag name,
a typed value and the original line. The value is one of the following:

- `EmptyValue` for a tag with nothing after its name;
- `UnparsedValue` for raw bytes, read on demand with `as_decimal_integer()`
  or `as_playlist_type()`;
- `AttributeList`, a `dict` from attribute names to `QuotedString`,
  `UnquotedString`, `DecimalInteger` or `SignedDecimalFloatingPoint`.

Each model has a `from_parsed` class method. It checks the value and raises a
subclass of `ValidationError` when the value does not fit the tag:

- `UnexpectedValueTypeError`: the value has the wrong shape, for example an
  attribute list where a single number is expected;
- `MissingRequiredAttributeError`: a required attribute is missing or has the
  wrong type;
- `ValueParseError`: a value could not be read, such as a bad integer, date
  or playlist type.

```python
from hlstags.base import (
    AttributeList, DecimalInteger, ParsedTag, QuotedString, UnquotedString,
)
from hlstags.preload_hint import PreloadHint

tag = ParsedTag(
    name="-X-PRELOAD-HINT",
    value=AttributeList({
        "TYPE": UnquotedString("PART"),
        "URI": QuotedString("part.2.mp4"),
        "BYTERANGE-LENGTH": DecimalInteger(1024),
    }),
    original_input=b'#EXT-X-PRELOAD-HINT:TYPE=PART,URI="part.2.mp4",BYTERANGE-LENGTH=1024',
)
hint = PreloadHint.from_parsed(tag)
assert hint.uri == "part.2.mp4"
assert hint.byterange_start == 0   # the default when none is given
```

Attributes are plain properties that you can read and set. To clear an
optional attribute, set it to `None`:

```python
hint.byterange_length = None
hint.to_line()
# b'#EXT-X-PRELOAD-HINT:TYPE=PART,URI="part.2.mp4"'
```

In `Part`, a `BYTERANGE` that cannot be read becomes `None` and does not
raise. `PartByterange.parse()` raises `ValueParseError` for the same text.

## Equality

Two tags are equal when their values are equal, whether each one was built
by hand or read from a playlist. The original line text plays no part in the
comparison.

## Helpers

`hlstags.base` also provides the following:

- `attribute_as_float()`: reads a `DecimalInteger` or a
  `SignedDecimalFloatingPoint` as a `float`;
- `format_float()` and `format_float_debug()`: the two number formats
  described above;
- `line_value()`: cuts bytes at the first line ending.

## What this package does not do

- It does not read playlist text. Splitting lines into `ParsedTag` values is
  left to the caller.
- It does not dispatch by tag name. You choose the model class for each tag.
- It models only the tags listed above. Encryption keys, media
  initialization sections, alternative renditions and the other HLS tags
  have no models here.
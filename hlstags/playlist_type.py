"""The EXT-X-PLAYLIST-TYPE tag."""

from __future__ import annotations

from hlstags.base import HlsPlaylistType, ParsedTag


class PlaylistType:
    """Mutability information of a media playlist (EVENT or VOD)."""

    def __init__(self, playlist_type: HlsPlaylistType) -> None:
        self._playlist_type = HlsPlaylistType(playlist_type)

    @classmethod
    def from_parsed(cls, tag: ParsedTag) -> "PlaylistType":
        return cls(tag.require_unparsed().as_playlist_type())

    @property
    def playlist_type(self) -> HlsPlaylistType:
        return self._playlist_type

    @playlist_type.setter
    def playlist_type(self, value: HlsPlaylistType) -> None:
        self._playlist_type = HlsPlaylistType(value)

    def to_line(self) -> bytes:
        return f"#EXT-X-PLAYLIST-TYPE:{self._playlist_type.value}".encode()

    def __eq__(self, other):
        if not isinstance(other, PlaylistType):
            return NotImplemented
        return self.playlist_type is other.playlist_type

    def __repr__(self) -> str:
        return f"PlaylistType({self._playlist_type})"
"""Typed models for a set of HTTP Live Streaming playlist tags."""

__version__ = "0.1.0"

__all__ = [
    "base",
    "media_sequence",
    "part",
    "part_inf",
    "playlist_type",
    "preload_hint",
    "program_date_time",
    "rendition_report",
    "server_control",
]
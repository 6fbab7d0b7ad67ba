"""Presentation CLI exports."""
from .fetch_command import FetchCommand, build_parser, format_record

__all__ = [
    "FetchCommand",
    "build_parser",
    "format_record",
]

"""Presentation layer - User interfaces."""
from .cli import FetchCommand

__all__ = [
    "FetchCommand",
]

"""Markup parsing."""
from .html_extractor import PlayerHTMLExtractor, FieldRule, FIELD_RULES, has_strong_signal

__all__ = [
    'PlayerHTMLExtractor',
    'FieldRule',
    'FIELD_RULES',
    'has_strong_signal',
]

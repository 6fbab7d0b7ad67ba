"""Configuration exports."""
from .settings import settings, Settings, parse_relay_endpoints

__all__ = [
    'settings',
    'Settings',
    'parse_relay_endpoints',
]

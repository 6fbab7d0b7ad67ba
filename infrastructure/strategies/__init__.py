"""Fetch strategies, in the order the chain tries them."""
from .relay import RelayFetchStrategy, EnvelopeParseError, unwrap_envelope
from .direct import DirectFetchStrategy
from .first_party_proxy import FirstPartyProxyStrategy
from .url_structural import UrlStructuralStrategy, parse_profile_url, name_from_slug

__all__ = [
    'RelayFetchStrategy',
    'DirectFetchStrategy',
    'FirstPartyProxyStrategy',
    'UrlStructuralStrategy',
    'EnvelopeParseError',
    'unwrap_envelope',
    'parse_profile_url',
    'name_from_slug',
]

"""Tests for relay configuration parsing."""
from config import parse_relay_endpoints, settings
from domain.entities import RelayEndpoint
from infrastructure.strategies import unwrap_envelope


class TestRelayEndpoints:

    def test_parse_with_envelope_suffix(self):
        relays = parse_relay_endpoints(
            "https://a.test/{url}, https://b.test/get?url={url_encoded}|contents ,,"
        )
        assert relays == [
            RelayEndpoint("https://a.test/{url}"),
            RelayEndpoint("https://b.test/get?url={url_encoded}", envelope="contents"),
        ]

    def test_envelope_field_keeps_its_case(self):
        relays = parse_relay_endpoints("https://c.test/raw?u={url_encoded}|Contents")
        assert relays[0].envelope == "Contents"
        assert unwrap_envelope('{"Contents": "<h1>ok</h1>"}', relays[0].envelope) == "<h1>ok</h1>"

    def test_empty_configuration(self):
        assert parse_relay_endpoints("") == []

    def test_build_url(self):
        url = "https://sofifa.com/player/239085/erling-haaland/250001/"
        raw = RelayEndpoint("https://a.test/fetch/{url}")
        encoded = RelayEndpoint("https://b.test/get?url={url_encoded}", envelope="contents")
        assert raw.build_url(url) == f"https://a.test/fetch/{url}"
        assert encoded.build_url(url) == (
            "https://b.test/get?url=https%3A%2F%2Fsofifa.com%2Fplayer%2F239085%2Ferling-haaland%2F250001%2F"
        )
        assert encoded.host == "b.test"

    def test_defaults(self):
        assert settings.RATE_LIMIT_MAX_REQUESTS > 0
        assert settings.CACHE_TTL_SECONDS > 0
        assert all(isinstance(r, RelayEndpoint) for r in settings.relay_endpoints())

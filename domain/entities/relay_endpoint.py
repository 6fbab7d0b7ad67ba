"""Relay (proxy) endpoint configuration value."""
from dataclasses import dataclass
from typing import Optional
from urllib.parse import quote, urlsplit


@dataclass(frozen=True)
class RelayEndpoint:
    """A public relay that fetches a page on our behalf.

    ``template`` may contain ``{url}`` (raw) or ``{url_encoded}``
    (percent-encoded). ``envelope`` names the JSON field that wraps the
    markup, or is None when the relay returns the page body as-is.
    """

    template: str
    envelope: Optional[str] = None

    def build_url(self, source_url: str) -> str:
        return self.template.format(url=source_url, url_encoded=quote(source_url, safe=""))

    @property
    def host(self) -> str:
        return urlsplit(self.template.split("{", 1)[0]).hostname or "unknown"

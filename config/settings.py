"""Application settings and configuration."""
import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

from domain.entities import RelayEndpoint

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)

_DEFAULT_RELAYS = ",".join([
    "https://cors-anywhere.herokuapp.com/{url}",
    "https://api.allorigins.win/get?url={url_encoded}|contents",
    "https://thingproxy.freeboard.io/fetch/{url}",
])


class Settings:
    """
    Every value can be overridden from config/.env or the process environment.

    Relays are public, unauthenticated services. None of them is checked at
    startup; a dead relay only costs one failed request per fetch.
    """

    # ── Cache ──────────────────────────────────────────────────────────────
    CACHE_TTL_SECONDS: float = float(os.getenv('PLAYER_CACHE_TTL_S', '3600'))

    # ── Rate limit (fixed window) ──────────────────────────────────────────
    RATE_LIMIT_MAX_REQUESTS:   int   = int(os.getenv('RATE_LIMIT_MAX_REQUESTS', '10'))
    RATE_LIMIT_WINDOW_SECONDS: float = float(os.getenv('RATE_LIMIT_WINDOW_S', '60'))

    # ── HTTP ───────────────────────────────────────────────────────────────
    STRATEGY_TIMEOUT_SECONDS: float = float(os.getenv('STRATEGY_TIMEOUT_S', '10'))
    USER_AGENT: str = os.getenv(
        'SCRAPER_USER_AGENT',
        'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0 Safari/537.36',
    )
    ACCEPT: str = 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8'

    # ── Fetch strategies ───────────────────────────────────────────────────
    # {url} = raw source URL, {url_encoded} = percent-encoded;
    # a "|contents" suffix marks the JSON envelope variant.
    RELAY_ENDPOINTS:       str = os.getenv('RELAY_ENDPOINTS', _DEFAULT_RELAYS)
    # empty string disables the first-party proxy strategy
    FIRST_PARTY_PROXY_URL: str = os.getenv('FIRST_PARTY_PROXY_URL', 'http://localhost:3000/api/proxy-sofifa')
    DIRECT_FETCH_ORIGIN:   str = os.getenv('DIRECT_FETCH_ORIGIN', 'http://localhost:3000')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    LOG_DIR:  Path = DATA_DIR / 'logs'

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def relay_endpoints(cls) -> List[RelayEndpoint]:
        return parse_relay_endpoints(cls.RELAY_ENDPOINTS)

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


def parse_relay_endpoints(raw: str) -> List[RelayEndpoint]:
    endpoints: List[RelayEndpoint] = []
    for chunk in raw.split(','):
        chunk = chunk.strip()
        if not chunk:
            continue
        template, _, envelope = chunk.partition('|')
        endpoints.append(RelayEndpoint(template=template.strip(), envelope=envelope.strip() or None))
    return endpoints


settings = Settings()

"""Pytest configuration and shared fixtures."""
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.logging.logger import get_logger  # noqa: E402

HAALAND_URL = "https://site.example/player/239085/erling-haaland/250001/"

PROFILE_HTML = """
<html>
  <head><title>Erling Haaland FC 25 Profile</title></head>
  <body>
    <div class="player-card">
      <h1 data-title="Erling Haaland">Erling Haaland</h1>
      <div class="bp-overall"> 91 </div>
      <div class="bp-potential">94</div>
      <div class="bp-positions">
        <span class="badge">ST</span>
        <span class="badge">CF</span>
      </div>
      <div class="bp-age">23y.o.</div>
      <div class="bp-club"><a href="/team/10">Manchester City</a></div>
      <div class="bp-nationality"><a href="/nation/36">Norway</a></div>
    </div>
  </body>
</html>
"""


class FakeClock:
    """Manually advanced wall clock."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def logger():
    return get_logger("tests", service="tests")


@pytest.fixture
def profile_html():
    return PROFILE_HTML


@pytest.fixture
def haaland_url():
    return HAALAND_URL

"""Tests for the fetch CLI command."""
import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.entities import PlayerRecord
from domain.enums import RecordOrigin
from presentation.cli import FetchCommand, build_parser, format_record


def _service(record):
    service = MagicMock()
    service.__aenter__ = AsyncMock(return_value=service)
    service.__aexit__ = AsyncMock(return_value=None)
    service.fetch_player_data = AsyncMock(return_value=record)
    return service


RECORD = PlayerRecord(
    source_id=239085,
    origin=RecordOrigin.LIVE_PARSE,
    name="Erling Haaland",
    overall_rating=91,
    positions=("ST", "CF"),
    club="Manchester City",
)


class TestFetchCommand:

    def test_parser(self):
        args = build_parser().parse_args(["https://x.test/player/1/a/2/", "1", "--json"])
        assert args.id == 1
        assert args.json is True

    def test_format_record(self):
        lines = format_record(RECORD)
        assert "Name:        Erling Haaland" in lines
        assert "Overall:     91 🌟" in lines
        assert "Positions:   ST, CF" in lines

    @pytest.mark.asyncio
    async def test_run_prints_json(self, capsys):
        service = _service(RECORD)
        code = await FetchCommand(service).run(["https://x.test/player/239085/a/2/", "239085", "--json"])

        assert code == 0
        service.fetch_player_data.assert_awaited_once_with("https://x.test/player/239085/a/2/", 239085)
        printed = json.loads(capsys.readouterr().out)
        assert printed["name"] == "Erling Haaland"
        assert printed["card_tier"] == "icon"

    @pytest.mark.asyncio
    async def test_run_without_record(self, capsys):
        code = await FetchCommand(_service(None)).run(["https://x.test/", "1"])
        assert code == 1
        assert "No data available" in capsys.readouterr().out

from __future__ import annotations

import argparse
import json
from typing import Iterable, List, Optional

from core.logging.logger import get_logger, StructuredLogger
from domain.entities import PlayerRecord
from domain.enums import CardTier
from application.services import PlayerDataService


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fetch", description="Fetch a player profile by URL and id.")
    parser.add_argument("url", help="profile URL, e.g. https://sofifa.com/player/239085/erling-haaland/250001/")
    parser.add_argument("id", type=int, help="external (numeric) player id")
    parser.add_argument("--json", action="store_true", help="print the record as JSON")
    return parser


def format_record(record: PlayerRecord) -> List[str]:
    lines = [
        f"Name:        {record.name or 'Unknown'}",
        f"Overall:     {CardTier.format_rating(record.overall_rating)}",
    ]
    if record.potential_rating is not None:
        lines.append(f"Potential:   {record.potential_rating}")
    if record.positions:
        lines.append(f"Positions:   {', '.join(record.positions)}")
    if record.age is not None:
        lines.append(f"Age:         {record.age}")
    if record.club:
        lines.append(f"Club:        {record.club}")
    if record.nationality:
        lines.append(f"Nationality: {record.nationality}")
    if record.version_id is not None:
        lines.append(f"Version:     {record.version_id}")
    lines.append(f"Source:      {record.origin.value} (id {record.source_id})")
    return lines


class FetchCommand:
    """One-shot and interactive player fetches over a single service instance."""

    def __init__(self, service: Optional[PlayerDataService] = None) -> None:
        self.logger: StructuredLogger = get_logger(__name__, service="cli")
        self.service = service
        self.json_out: bool = False

    def _service(self) -> PlayerDataService:
        if self.service is None:
            self.service = PlayerDataService()
        return self.service

    def _print(self, record: Optional[PlayerRecord], as_json: bool) -> None:
        if as_json:
            print(json.dumps(record.to_dict() if record else None, ensure_ascii=False, separators=(",", ":")))
            return
        if record is None:
            print("No data available for this player.")
            return
        for line in format_record(record):
            print(f"  {line}")

    async def run(self, argv: Iterable[str]) -> int:
        args = build_parser().parse_args(list(argv))
        self.logger.info(lambda: f"cli-fetch {args.id}")
        async with self._service() as service:
            record = await service.fetch_player_data(args.url, args.id)
        self._print(record, args.json or self.json_out)
        return 0 if record else 1

    async def run_interactive(self) -> int:
        async with self._service() as service:
            while True:
                print("\n=== Player Fetch ===")
                print("1) Fetch player")
                print("2) Cache stats")
                print("3) Clear cache")
                print(f"4) Toggle JSON output (currently: {'ON' if self.json_out else 'OFF'})")
                print("5) Back")
                choice = input("Choose an option: ").strip()
                if choice == "1":
                    url = input("Profile URL: ").strip()
                    raw_id = input("Player id: ").strip()
                    try:
                        external_id = int(raw_id)
                    except ValueError:
                        print("Player id must be a number.")
                        continue
                    record = await service.fetch_player_data(url, external_id)
                    self._print(record, self.json_out)
                elif choice == "2":
                    stats = service.cache_stats()
                    limiter = service.rate_limiter_status()
                    print(f"Cached players: {stats.size} {stats.keys}")
                    print(f"Requests this window: {limiter.request_count}/{limiter.max_requests}")
                elif choice == "3":
                    service.clear_cache()
                    print("Cache cleared.")
                elif choice == "4":
                    self.json_out = not self.json_out
                    print(f"JSON output {'ENABLED' if self.json_out else 'DISABLED'}")
                elif choice == "5":
                    return 0
                else:
                    print("Invalid option.")


async def run(argv: Optional[Iterable[str]] = None) -> int:
    return await FetchCommand().run(list(argv or []))

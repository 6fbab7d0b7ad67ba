"""Main CLI entry-point."""
from __future__ import annotations

import asyncio
import shutil
import sys

from core.logging.config import bootstrap_logging, shutdown_logging
from config import settings

_BRIGHT_GREEN = "\033[1;92m"
_CYAN = "\033[96m"
_RESET = "\033[0m"


def _g(s: str) -> str:
    return f"{_BRIGHT_GREEN}{s}{_RESET}"


def _c(s: str) -> str:
    return f"{_CYAN}{s}{_RESET}"


def _print_banner() -> None:
    cols = shutil.get_terminal_size(fallback=(100, 20)).columns
    div = "═" * min(cols, 64)
    print(_g(div))
    print(_c("  Fan Club Player Fetcher"))
    print(_c("  Best-effort player profiles: relays → direct → proxy → URL"))
    print(_g(div))


def main(argv: list[str]) -> int:
    settings.create_directories()
    bootstrap_logging(
        service="player-fetcher",
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="player_fetcher.jsonl",
    )
    # Lazy import so logging is configured before any module logger is used
    from presentation.cli import FetchCommand

    try:
        if argv:
            return asyncio.run(FetchCommand().run(argv))
        _print_banner()
        return asyncio.run(FetchCommand().run_interactive())
    finally:
        shutdown_logging()


def cli() -> int:
    return main(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(cli())

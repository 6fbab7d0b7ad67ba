"""Tolerant extraction of player fields from profile page markup."""
from __future__ import annotations

import re
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from bs4 import BeautifulSoup  # type: ignore

from core.logging.logger import StructuredLogger, get_logger
from domain.entities import PlayerRecord
from domain.enums import RecordOrigin

_LEADING_INT = re.compile(r"^[+-]?\d+")


def to_int(text: str) -> Optional[int]:
    """Leading integer of ``text`` ("25y.o." -> 25), or None."""
    match = _LEADING_INT.match(text.strip())
    return int(match.group(0)) if match else None


def to_text(text: str) -> Optional[str]:
    cleaned = " ".join(text.split())
    return cleaned or None


@dataclass(frozen=True)
class FieldRule:
    """How to find one field: selectors tried in order, then a coercion."""
    field: str
    selectors: Tuple[str, ...]
    coerce: Callable[[str], Any]
    many: bool = False


FIELD_RULES: Sequence[FieldRule] = (
    FieldRule("overall_rating", (".bp-overall",), to_int),
    FieldRule("potential_rating", (".bp-potential",), to_int),
    FieldRule("name", ("h1[data-title]", ".player-name"), to_text),
    FieldRule("positions", (".bp-positions .badge",), to_text, many=True),
    FieldRule("age", (".bp-age",), to_int),
    FieldRule("club", (".bp-club a",), to_text),
    FieldRule("nationality", (".bp-nationality a",), to_text),
)

STRONG_SIGNAL_FIELDS: Tuple[str, ...] = ("overall_rating", "name")


def has_strong_signal(fields: Dict[str, Any]) -> bool:
    """A partial record is worth keeping only with a rating or a name."""
    return any(fields.get(name) is not None for name in STRONG_SIGNAL_FIELDS)


class PlayerHTMLExtractor:
    """Runs FIELD_RULES against markup; never raises."""

    def __init__(
        self,
        rules: Sequence[FieldRule] = FIELD_RULES,
        logger: Optional[StructuredLogger] = None,
        *,
        parser: str = "html.parser",
    ) -> None:
        self.rules = rules
        self.logger = logger or get_logger(__name__, service="extractor")
        self.parser = parser

    def extract_fields(self, markup: str) -> Dict[str, Any]:
        """Best-effort field dictionary; fields not found are simply missing."""
        if not isinstance(markup, str) or not markup.strip():
            return {}
        try:
            soup = BeautifulSoup(markup, self.parser)
        except Exception as e:
            self.logger.warning(lambda: "html-parse-failed", extra={"error": str(e)})
            return {}

        fields: Dict[str, Any] = {}
        for rule in self.rules:
            try:
                value = self._apply(soup, rule)
            except Exception as e:
                self.logger.debug(lambda: f"field-rule-failed {rule.field}", extra={"error": str(e)})
                continue
            if value is not None:
                fields[rule.field] = value
        return fields

    def extract(self, markup: str, source_id: int) -> Optional[PlayerRecord]:
        fields = self.extract_fields(markup)
        if not has_strong_signal(fields):
            self.logger.warning(lambda: "weak-signal", extra={"source_id": source_id, "fields": sorted(fields)})
            return None
        self.logger.success(
            lambda: f"parsed {fields.get('name') or 'Unknown'} (overall {fields.get('overall_rating') or 'N/A'})",
            extra={"source_id": source_id},
        )
        return PlayerRecord(
            source_id=source_id,
            origin=RecordOrigin.LIVE_PARSE,
            observed_at=time.time(),
            **fields,
        )

    @staticmethod
    def _apply(soup: BeautifulSoup, rule: FieldRule) -> Any:
        if rule.many:
            for selector in rule.selectors:
                values = [rule.coerce(el.get_text()) for el in soup.select(selector)]
                values = [v for v in values if v is not None]
                if values:
                    return tuple(values)
            return None
        for selector in rule.selectors:
            element = soup.select_one(selector)
            if element is None:
                continue
            value = rule.coerce(element.get_text())
            if value is not None:
                return value
        return None

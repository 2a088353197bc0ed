from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from core.config import get_settings
from core.logging import get_logger
from core.models import Fixture
from core.normalization import extract_matches, parse_fixture
from .base import FixturesProviderBase
from .http_client import Live24HttpClient, get_http_client

log = get_logger(__name__)


def _day_window(date: Optional[str]) -> tuple[str, str]:
    day = date or datetime.now(timezone.utc).strftime("%Y-%m-%d")
    return f"{day} 00:00:00", f"{day} 23:59:59"


class Live24FixturesProvider(FixturesProviderBase):
    """
    Fixtures non ancora iniziate da match-list-data/{id} per i sotto-tornei configurati,
    limitate alla giornata UTC richiesta.
    """

    def __init__(self, client: Optional[Live24HttpClient] = None) -> None:
        self._client = client or get_http_client()
        self._last_raw: Any = None

    def fetch_fixtures(
        self,
        date: Optional[str] = None,
        subtournament_ids: Optional[List[str]] = None,
    ) -> List[Fixture]:
        settings = get_settings()
        ids = subtournament_ids or settings.live24_subtournament_ids
        start, end = _day_window(date)

        params: Dict[str, Any] = {
            "lang": settings.live24_lang,
            "type": "not_started",
            "subtournamentIds": ",".join(str(i) for i in ids),
            "sort": "alpha",
            "short": 0,
            "from": start,
            "to": end,
        }
        raw = self._client.api_get(f"match-list-data/{settings.live24_match_list_id}", params=params)
        self._last_raw = raw

        fixtures: List[Fixture] = []
        skipped = 0
        for item in extract_matches(raw):
            fixture = parse_fixture(item)
            if fixture is None:
                skipped += 1
                continue
            fixtures.append(fixture)
        if skipped:
            log.warning("Scartati %s match senza id valido", skipped)

        log.info(
            "fixtures_fetched count=%s from=%s to=%s",
            len(fixtures),
            start,
            end,
            extra={"fetch_stats": self._client.get_stats()},
        )
        return fixtures

    def get_last_stats(self) -> Dict[str, Any]:
        return self._client.get_stats()

    def get_last_raw(self) -> Any:
        return self._last_raw


__all__ = ["Live24FixturesProvider"]

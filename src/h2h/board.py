from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from core.models import Fixture, H2HRecord, Tally
from h2h.aggregation import CycleResult
from h2h.form import FormMode, extract_form, render_form
from h2h.good_bet import is_good_bet


def build_row(
    fixture: Fixture,
    tally: Optional[Tally],
    record: Optional[H2HRecord],
    now: datetime,
) -> Dict[str, Any]:
    """Riga della tabella per una fixture (forma gia' renderizzata)."""
    home_history = record.home_history if record else []
    away_history = record.away_history if record else []

    today_home = extract_form(home_history, FormMode.TODAY, now=now)
    today_away = extract_form(away_history, FormMode.TODAY, now=now)

    return {
        "fixture_id": fixture.fixture_id,
        "start_date": fixture.start_date.isoformat() if fixture.start_date else None,
        "tournament": fixture.tournament,
        "home": fixture.home.name,
        "away": fixture.away.name,
        "h2h": tally.to_dict() if tally else None,
        "last5_home": render_form(extract_form(home_history, FormMode.RECENT)),
        "last5_away": render_form(extract_form(away_history, FormMode.RECENT)),
        "today_home": render_form(today_home),
        "today_away": render_form(today_away),
        "good_bet": is_good_bet(tally, today_home, today_away),
    }


def build_board(cycle: CycleResult, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    ref = now or datetime.now(timezone.utc)
    agg = cycle.aggregation
    return [
        build_row(f, agg.tallies.get(f.fixture_id), agg.raw_h2h.get(f.fixture_id), ref)
        for f in cycle.fixtures
    ]


__all__ = ["build_row", "build_board"]

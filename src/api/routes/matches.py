from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from core.logging import get_logger
from h2h.aggregation import AggregationError, run_cycle
from h2h.board import build_board
from providers.live24.fixtures_provider import Live24FixturesProvider
from providers.live24.h2h_provider import Live24H2HProvider

router = APIRouter(tags=["matches"])
logger = get_logger("api.routes.matches")


@router.get("/matches", summary="Fixtures con statistiche H2H e forma")
def get_matches(date: Optional[str] = Query(None, pattern=r"^\d{4}-\d{2}-\d{2}$")):
    """
    Esegue un ciclo completo (fixtures + H2H in parallelo) e ritorna le righe della tabella.
    Se una qualsiasi fonte fallisce non viene restituito nulla di parziale.
    """
    fixtures_provider = Live24FixturesProvider()
    h2h_provider = Live24H2HProvider()
    try:
        cycle = run_cycle(
            lambda: fixtures_provider.fetch_fixtures(date=date),
            h2h_provider.fetch_h2h,
        )
    except AggregationError as exc:
        logger.error("matches_unavailable: %s", exc)
        raise HTTPException(status_code=502, detail="data unavailable") from exc

    items = build_board(cycle, now=cycle.generated_at)
    return {
        "count": len(items),
        "generated_at": cycle.generated_at.isoformat(),
        "items": items,
    }

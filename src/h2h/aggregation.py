from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from core.logging import get_logger
from core.models import Fixture, H2HRecord, Tally
from core.normalization import parse_h2h_record
from h2h.tally import compute_tally

logger = get_logger("h2h.aggregation")

FetchH2H = Callable[[int], Any]
FetchFixtures = Callable[[], Iterable[Fixture]]


class AggregationError(Exception):
    """Sollevata quando una fonte a monte fallisce: nessun risultato parziale viene esposto."""


@dataclass(frozen=True)
class AggregationResult:
    tallies: Dict[int, Tally] = field(default_factory=dict)
    raw_h2h: Dict[int, H2HRecord] = field(default_factory=dict)


@dataclass(frozen=True)
class CycleResult:
    fixtures: List[Fixture]
    aggregation: AggregationResult
    generated_at: datetime


def aggregate_h2h(fixtures: Iterable[Fixture], fetch_h2h: FetchH2H) -> AggregationResult:
    """
    Scarica l'H2H di ogni fixture in parallelo (un worker per fixture, nessun limite)
    e attende che tutte le richieste terminino prima di costruire le mappe.

    Se anche una sola richiesta fallisce solleva AggregationError.
    """
    items = list(fixtures)
    if not items:
        return AggregationResult()

    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=len(items), thread_name_prefix="h2h") as pool:
        futures = [(f, pool.submit(fetch_h2h, f.fixture_id)) for f in items]
        wait([fut for _, fut in futures])

    failed = [(f, fut.exception()) for f, fut in futures if fut.exception() is not None]
    if failed:
        first_fixture, first_exc = failed[0]
        logger.error(
            "h2h_fetch_failed failed=%s total=%s first_fixture=%s error=%s",
            len(failed),
            len(items),
            first_fixture.fixture_id,
            first_exc,
        )
        raise AggregationError(
            f"H2H non disponibile per {len(failed)}/{len(items)} fixture "
            f"(prima: {first_fixture.fixture_id})"
        ) from first_exc

    # Mappe scritte solo dopo il join
    tallies: Dict[int, Tally] = {}
    raw_h2h: Dict[int, H2HRecord] = {}
    for fixture, fut in futures:
        record = parse_h2h_record(fut.result())
        raw_h2h[fixture.fixture_id] = record
        tallies[fixture.fixture_id] = compute_tally(
            fixture.home.name_short,
            fixture.away.name_short,
            record.meetings,
        )
        logger.debug(
            "h2h fixture=%s home=%s away=%s meetings=%s",
            fixture.fixture_id,
            fixture.home.name_short,
            fixture.away.name_short,
            len(record.meetings),
            extra={"h2h_summary": tallies[fixture.fixture_id].to_dict()},
        )

    logger.info(
        "h2h_aggregated",
        extra={
            "cycle_stats": {
                "fixtures": len(items),
                "latency_ms": round((time.perf_counter() - start) * 1000, 2),
            }
        },
    )
    return AggregationResult(tallies=tallies, raw_h2h=raw_h2h)


def run_cycle(
    fetch_fixtures: FetchFixtures,
    fetch_h2h: FetchH2H,
    now: Optional[datetime] = None,
) -> CycleResult:
    """
    Un ciclo completo: fixtures -> H2H in parallelo -> tally.
    Qualsiasi errore a monte diventa AggregationError.
    """
    try:
        fixtures = list(fetch_fixtures())
    except Exception as exc:
        logger.error("fixtures_fetch_failed error=%s", exc)
        raise AggregationError("Fixtures non disponibili") from exc

    aggregation = aggregate_h2h(fixtures, fetch_h2h)
    return CycleResult(
        fixtures=fixtures,
        aggregation=aggregation,
        generated_at=now or datetime.now(timezone.utc),
    )


__all__ = [
    "AggregationError",
    "AggregationResult",
    "CycleResult",
    "aggregate_h2h",
    "run_cycle",
]

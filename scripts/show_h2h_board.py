#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from dotenv import find_dotenv, load_dotenv

# .env prima di leggere i Settings
_dotenv_path = find_dotenv(usecwd=True)
if _dotenv_path:
    load_dotenv(_dotenv_path, override=True)

from core.logging import get_logger  # noqa: E402
from h2h.aggregation import AggregationError, run_cycle  # noqa: E402
from h2h.board import build_board  # noqa: E402
from providers.live24.fixtures_provider import Live24FixturesProvider  # noqa: E402
from providers.live24.h2h_provider import Live24H2HProvider  # noqa: E402

log = get_logger("scripts.show_h2h_board")


def _format_h2h(h2h: Optional[Dict[str, int]]) -> str:
    if not h2h:
        return "-"
    return f"{h2h['wins_a']}W-{h2h['losses_a']}L / {h2h['wins_b']}W-{h2h['losses_b']}L"


def format_row(row: Dict[str, Any]) -> str:
    flag = "[GOOD BET] " if row["good_bet"] else ""
    return (
        f"{flag}{row['start_date'] or '?'} | {row['tournament'] or '-'} | "
        f"{row['home']} vs {row['away']} | H2H {_format_h2h(row['h2h'])} | "
        f"last5 {row['last5_home']} / {row['last5_away']} | "
        f"oggi {row['today_home']} / {row['today_away']}"
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Tabella fixtures 24live con H2H e forma")
    parser.add_argument("--date", help="Giorno UTC YYYY-MM-DD (default oggi)")
    parser.add_argument("--json", action="store_true", help="Stampa le righe in JSON")
    args = parser.parse_args(argv)

    fixtures_provider = Live24FixturesProvider()
    h2h_provider = Live24H2HProvider()
    try:
        cycle = run_cycle(
            lambda: fixtures_provider.fetch_fixtures(date=args.date),
            h2h_provider.fetch_h2h,
        )
    except AggregationError as exc:
        log.error("board_unavailable: %s", exc)
        sys.stderr.write("Failed to load match data\n")
        return 1

    rows = build_board(cycle, now=cycle.generated_at)
    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    elif not rows:
        print("Nessuna fixture trovata.")
    else:
        for row in rows:
            print(format_row(row))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

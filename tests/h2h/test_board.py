from datetime import datetime, timedelta, timezone

from core.models import Fixture, Participant
from h2h.aggregation import aggregate_h2h, AggregationResult, CycleResult
from h2h.board import build_board

NOW = datetime(2025, 6, 1, 15, 0, tzinfo=timezone.utc)


def _fixture(fid):
    return Fixture(
        fixture_id=fid,
        start_date=datetime(2025, 6, 1, 18, 0, tzinfo=timezone.utc),
        home=Participant("home", "Alpha Player", "Alpha"),
        away=Participant("away", "Beta Player", "Beta"),
        tournament="Setka Cup",
    )


def _history(badges, day_offset=0):
    return [
        {"date": (NOW - timedelta(days=day_offset, minutes=10 * i)).strftime("%Y-%m-%d %H:%M:%S"), "badge": b}
        for i, b in enumerate(badges)
    ]


def test_board_row_good_bet() -> None:
    payload = {
        "total": {
            "h2h": [
                {"home_team": "Alpha", "away_team": "Beta", "score": {"home_team": 3, "away_team": 0}},
                {"home_team": "Beta", "away_team": "Alpha", "score": {"home_team": 1, "away_team": 3}},
                {"home_team": "Alpha", "away_team": "Beta", "score": {"home_team": 3, "away_team": 2}},
                {"home_team": "Alpha", "away_team": "Beta", "score": {"home_team": 3, "away_team": 1}},
                {"home_team": "Beta", "away_team": "Alpha", "score": {"home_team": 3, "away_team": 1}},
            ],
            "home_team": _history(["W", "W", "L", "W", "W", "W"]),
            "away_team": _history(["L", "W"], day_offset=1),
        }
    }
    fixtures = [_fixture(1)]
    cycle = CycleResult(fixtures=fixtures, aggregation=aggregate_h2h(fixtures, lambda fid: payload), generated_at=NOW)

    [row] = build_board(cycle, now=NOW)
    assert row["fixture_id"] == 1
    assert row["home"] == "Alpha Player"
    assert row["start_date"] == "2025-06-01T18:00:00+00:00"
    assert row["h2h"] == {"wins_a": 4, "losses_a": 1, "wins_b": 1, "losses_b": 4}
    assert row["last5_home"] == "✓ ✓ ❌ ✓ ✓"
    assert row["today_home"] == "✓ ✓ ❌ ✓ ✓"
    assert row["last5_away"] == "❌ ✓"
    assert row["today_away"] == "-"
    assert row["good_bet"] is True


def test_board_row_without_h2h() -> None:
    fixtures = [_fixture(2)]
    cycle = CycleResult(fixtures=fixtures, aggregation=AggregationResult(), generated_at=NOW)
    [row] = build_board(cycle, now=NOW)
    assert row["h2h"] is None
    assert row["last5_home"] == "-"
    assert row["today_away"] == "-"
    assert row["good_bet"] is False

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from api.app import app


class R:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code
        self.headers = {}
        self.text = str(payload)

    def json(self):
        return self._payload


def _today(hour):
    return datetime.now(timezone.utc).replace(hour=hour, minute=0, second=0).strftime("%Y-%m-%d %H:%M:%S")


MATCHES = [
    {
        "id": 1,
        "start_date": "2025-06-01 18:00:00",
        "sub_tournament_name": "Setka Cup",
        "participants": [
            {"type": "home_team", "name": "Alpha Player", "name_short": "Alpha"},
            {"type": "away_team", "name": "Beta Player", "name_short": "Beta"},
        ],
    },
    {
        "id": 2,
        "start_date": "2025-06-01 19:00:00",
        "participants": [
            {"type": "home_team", "name": "Gamma Player", "name_short": "Gamma"},
            {"type": "away_team", "name": "Delta Player", "name_short": "Delta"},
        ],
    },
]


def _h2h_for(fid):
    if fid == "1":
        return {
            "h2h": {
                "total": {
                    "h2h": [
                        {"home_team": "Alpha", "away_team": "Beta", "score": {"home_team": 2, "away_team": 1}},
                        {"home_team": "Beta", "away_team": "Alpha", "score": {"home_team": 0, "away_team": 3}},
                        {"home_team": "beta.", "away_team": "alpha", "score": {"home_team": 1, "away_team": 1}},
                    ],
                    "home_team": [{"date": _today(h), "badge": "W"} for h in (0, 1, 2)],
                    "away_team": [],
                }
            }
        }
    return {"id": int(fid)}


@pytest.fixture
def state():
    return {"fail_h2h": None}


@pytest.fixture
def client(monkeypatch, state):

    def fake_get(self, url, params=None, timeout=None):
        if "match-list-data" in url:
            return R(MATCHES)
        fid = url.rsplit("/", 1)[-1]
        if fid == state["fail_h2h"]:
            return R({"error": "down"}, status_code=503)
        return R(_h2h_for(fid))

    monkeypatch.setenv("LIVE24_BASE_URL", "https://example.test/api")
    monkeypatch.setattr("providers.live24.http_client.requests.Session.get", fake_get)
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["match_list_id"] == 22


def test_matches_board(client):
    r = client.get("/matches")
    assert r.status_code == 200
    body = r.json()
    assert body["count"] == 2
    rows = {row["fixture_id"]: row for row in body["items"]}

    first = rows[1]
    assert first["h2h"] == {"wins_a": 2, "losses_a": 0, "wins_b": 0, "losses_b": 2}
    assert first["today_home"] == "✓ ✓ ✓"
    assert first["good_bet"] is True
    assert first["tournament"] == "Setka Cup"

    second = rows[2]
    assert second["h2h"] == {"wins_a": 0, "losses_a": 0, "wins_b": 0, "losses_b": 0}
    assert second["last5_home"] == "-"
    assert second["good_bet"] is False


def test_matches_single_h2h_failure_is_502(client, state):
    state["fail_h2h"] = "2"
    r = client.get("/matches")
    assert r.status_code == 502
    assert r.json() == {"detail": "data unavailable"}


def test_matches_invalid_date(client):
    r = client.get("/matches", params={"date": "01-06-2025"})
    assert r.status_code == 422

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from core.logging import get_logger
from core.models import (
    ROLE_AWAY,
    ROLE_HOME,
    Badge,
    Fixture,
    FormEntry,
    H2HRecord,
    HistoricalMeeting,
    Participant,
)

logger = get_logger("core.normalization")

_PARTICIPANT_TYPES = {"home_team": ROLE_HOME, "away_team": ROLE_AWAY}


def normalize_name(name: Optional[str]) -> str:
    """Chiave di confronto per i nomi: senza punti, senza spazi esterni, minuscola."""
    return (name or "").replace(".", "").strip().lower()


def _as_int(v: Any) -> Optional[int]:
    try:
        return int(v) if v is not None else None
    except (ValueError, TypeError):
        return None


def parse_datetime(value: Any) -> Optional[datetime]:
    """
    Parsing tollerante delle date 24live ("YYYY-MM-DD HH:MM:SS" o ISO 8601).
    Le date senza offset sono considerate UTC. Ritorna None se non interpretabile.
    """
    if not value or not isinstance(value, str):
        return None
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        # Senza offset: UTC, indipendente dal fuso dell'host (un browser userebbe l'ora locale)
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _parse_participant(raw: Dict[str, Any], role: str) -> Participant:
    return Participant(
        role=role,
        name=raw.get("name"),
        name_short=raw.get("name_short"),
        participant_id=_as_int(raw.get("id")),
    )


def parse_fixture(item: Dict[str, Any]) -> Optional[Fixture]:
    """
    Converte un match grezzo di match-list-data in Fixture.
    Ritorna None se manca un id intero (record non identificabile).
    """
    fixture_id = _as_int(item.get("id"))
    if fixture_id is None:
        return None

    participants: Dict[str, Participant] = {}
    for p in _as_list(item.get("participants")):
        if not isinstance(p, dict):
            continue
        role = _PARTICIPANT_TYPES.get(p.get("type"))
        # Primo partecipante per ruolo, come nella lista del provider
        if role and role not in participants:
            participants[role] = _parse_participant(p, role)

    return Fixture(
        fixture_id=fixture_id,
        start_date=parse_datetime(item.get("start_date")),
        home=participants.get(ROLE_HOME) or Participant(ROLE_HOME, None, None),
        away=participants.get(ROLE_AWAY) or Participant(ROLE_AWAY, None, None),
        tournament=item.get("sub_tournament_name"),
        category=item.get("category_name"),
    )


def extract_matches(data: Any) -> List[Dict[str, Any]]:
    """match-list-data puo' rispondere con una lista nuda o con {"matches": [...]}."""
    if isinstance(data, list):
        matches = data
    elif isinstance(data, dict):
        matches = _as_list(data.get("matches"))
    else:
        logger.warning("Formato inatteso per match-list-data: %s", type(data).__name__)
        return []
    return [m for m in matches if isinstance(m, dict)]


def _parse_meeting(raw: Dict[str, Any]) -> HistoricalMeeting:
    score = _as_dict(raw.get("score"))
    return HistoricalMeeting(
        home_team=raw.get("home_team"),
        away_team=raw.get("away_team"),
        home_score=_as_int(score.get("home_team")),
        away_score=_as_int(score.get("away_team")),
        date=parse_datetime(raw.get("date")),
    )


def _parse_history(raw: Any) -> List[FormEntry]:
    return [
        FormEntry(date=parse_datetime(e.get("date")), badge=Badge.from_raw(e.get("badge")))
        for e in _as_list(raw)
        if isinstance(e, dict)
    ]


def parse_h2h_record(payload: Any) -> H2HRecord:
    """
    Converte il blocco 'h2h' di match/{id} in H2HRecord.
    Qualsiasi parte mancante o malformata degrada a lista vuota.
    """
    if not isinstance(payload, dict):
        if payload is not None:
            logger.debug("Payload h2h non dict (%s): trattato come vuoto", type(payload).__name__)
        return H2HRecord(payload=None)

    total = _as_dict(payload.get("total"))
    meetings = [_parse_meeting(m) for m in _as_list(total.get("h2h")) if isinstance(m, dict)]
    return H2HRecord(
        meetings=meetings,
        home_history=_parse_history(total.get("home_team")),
        away_history=_parse_history(total.get("away_team")),
        payload=payload,
    )


__all__ = [
    "normalize_name",
    "parse_datetime",
    "parse_fixture",
    "extract_matches",
    "parse_h2h_record",
]

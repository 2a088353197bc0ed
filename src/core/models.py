from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

ROLE_HOME = "home"
ROLE_AWAY = "away"


class Badge(str, Enum):
    WIN = "W"
    NOT_WIN = "N"

    @classmethod
    def from_raw(cls, value: Any) -> "Badge":
        # 24live usa "W" per la vittoria; pareggi, sconfitte e valori mancanti contano come non-vittoria
        return cls.WIN if value == "W" else cls.NOT_WIN


@dataclass(frozen=True)
class Participant:
    role: str
    name: Optional[str]
    name_short: Optional[str]
    participant_id: Optional[int] = None


@dataclass(frozen=True)
class Fixture:
    fixture_id: int
    start_date: Optional[datetime]
    home: Participant
    away: Participant
    tournament: Optional[str] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class HistoricalMeeting:
    home_team: Optional[str]
    away_team: Optional[str]
    home_score: Optional[int]
    away_score: Optional[int]
    date: Optional[datetime] = None


@dataclass(frozen=True)
class FormEntry:
    date: Optional[datetime]
    badge: Badge


@dataclass(frozen=True)
class H2HRecord:
    """
    Payload H2H di una fixture, gia' tipizzato ma non elaborato.

    meetings: scontri diretti tra i due partecipanti (in entrambe le orientazioni)
    home_history / away_history: storico completo di ciascun lato, piu' recente per primo
    payload: dict originale del provider (None se assente)
    """

    meetings: List[HistoricalMeeting] = field(default_factory=list)
    home_history: List[FormEntry] = field(default_factory=list)
    away_history: List[FormEntry] = field(default_factory=list)
    payload: Optional[Dict[str, Any]] = field(default=None, repr=False, compare=False)


@dataclass(frozen=True)
class Tally:
    wins_a: int
    losses_a: int
    wins_b: int
    losses_b: int

    def to_dict(self) -> Dict[str, int]:
        return {
            "wins_a": self.wins_a,
            "losses_a": self.losses_a,
            "wins_b": self.wins_b,
            "losses_b": self.losses_b,
        }


FixtureDataset = List[Fixture]

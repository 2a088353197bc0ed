from __future__ import annotations

from typing import Iterable, Optional

from core.logging import get_logger
from core.models import HistoricalMeeting, Tally
from core.normalization import normalize_name

logger = get_logger("h2h.tally")


def compute_tally(
    name_a: Optional[str],
    name_b: Optional[str],
    meetings: Iterable[HistoricalMeeting],
) -> Tally:
    """
    Conta le vittorie negli scontri diretti per i lati A e B della fixture.

    Il confronto avviene per nome normalizzato, ignorando il ruolo casa/trasferta
    dello scontro storico. Le sconfitte di un lato sono le vittorie dell'altro.
    Pareggi e nomi non riconosciuti non contano. Un punteggio mancante vale 0;
    lo scontro e' ignorato solo se mancano entrambi.
    """
    key_a = normalize_name(name_a)
    key_b = normalize_name(name_b)
    wins_a = 0
    wins_b = 0

    for m in meetings:
        if m.home_score is None and m.away_score is None:
            logger.debug("scontro senza punteggio ignorato: %s vs %s", m.home_team, m.away_team)
            continue
        home = normalize_name(m.home_team)
        away = normalize_name(m.away_team)
        home_score = m.home_score or 0
        away_score = m.away_score or 0
        home_won = home_score > away_score
        away_won = away_score > home_score

        # Quattro controlli indipendenti, ognuno incrementa al massimo una volta
        if home == key_a and home_won:
            wins_a += 1
        if away == key_a and away_won:
            wins_a += 1
        if home == key_b and home_won:
            wins_b += 1
        if away == key_b and away_won:
            wins_b += 1

    return Tally(wins_a=wins_a, losses_a=wins_b, wins_b=wins_b, losses_b=wins_a)


__all__ = ["compute_tally"]

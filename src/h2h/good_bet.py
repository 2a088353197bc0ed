from __future__ import annotations

from typing import Optional, Sequence

from core.models import Badge, Tally
from h2h.form import count_wins

WIN_RATE_THRESHOLD = 0.6
MIN_TODAY_WINS = 3


def win_rate(wins: int, losses: int) -> float:
    # Nessuno scontro diretto: tasso 0, il lato non puo' essere segnalato
    played = wins + losses
    if played == 0:
        return 0.0
    return wins / played


def _side_qualifies(wins: int, losses: int, today_form: Sequence[Badge]) -> bool:
    return win_rate(wins, losses) > WIN_RATE_THRESHOLD and count_wins(today_form) >= MIN_TODAY_WINS


def is_good_bet(
    tally: Optional[Tally],
    today_form_a: Sequence[Badge],
    today_form_b: Sequence[Badge],
) -> bool:
    """
    Segnala la fixture se un lato ha H2H > 60% e almeno 3 vittorie oggi.
    Senza tally (H2H non disponibile) ritorna sempre False.
    """
    if tally is None:
        return False
    return _side_qualifies(tally.wins_a, tally.losses_a, today_form_a) or _side_qualifies(
        tally.wins_b, tally.losses_b, today_form_b
    )


__all__ = ["WIN_RATE_THRESHOLD", "MIN_TODAY_WINS", "win_rate", "is_good_bet"]

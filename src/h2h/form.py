from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Sequence

from core.models import Badge, FormEntry

FORM_LENGTH = 5

_WIN_SYMBOL = "✓"
_NOT_WIN_SYMBOL = "❌"
_EMPTY_FORM = "-"


class FormMode(str, Enum):
    TODAY = "today"
    RECENT = "recent"


def _is_same_utc_day(value: Optional[datetime], now: datetime) -> bool:
    if value is None:
        return False
    d = value.astimezone(timezone.utc)
    return (d.year, d.month, d.day) == (now.year, now.month, now.day)


def extract_form(
    history: Sequence[FormEntry],
    mode: FormMode,
    now: Optional[datetime] = None,
) -> List[Badge]:
    """
    Sequenza di badge (max 5) dallo storico di un lato, nell'ordine ricevuto.

    TODAY: solo le partite del giorno solare UTC corrente.
    RECENT: le prime 5 senza filtro.
    """
    if mode is FormMode.RECENT:
        return [e.badge for e in history[:FORM_LENGTH]]

    ref = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    today = [e.badge for e in history if _is_same_utc_day(e.date, ref)]
    return today[:FORM_LENGTH]


def count_wins(badges: Sequence[Badge]) -> int:
    return sum(1 for b in badges if b is Badge.WIN)


def render_form(badges: Sequence[Badge]) -> str:
    if not badges:
        return _EMPTY_FORM
    return " ".join(_WIN_SYMBOL if b is Badge.WIN else _NOT_WIN_SYMBOL for b in badges)


__all__ = ["FORM_LENGTH", "FormMode", "extract_form", "count_wins", "render_form"]

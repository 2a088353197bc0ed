from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from core.models import Fixture


class FixturesProviderBase(ABC):
    """
    Interfaccia astratta per un provider di fixtures.

    Le implementazioni restituiscono Fixture gia' tipizzate; la finestra
    temporale non viene validata a valle.
    """

    @abstractmethod
    def fetch_fixtures(
        self,
        date: Optional[str] = None,
        subtournament_ids: Optional[List[str]] = None,
    ) -> List[Fixture]:
        """
        Parametri:
            date: (opzionale) giorno UTC in formato YYYY-MM-DD, default oggi.
            subtournament_ids: (opzionale) sotto-tornei da includere.
        """
        raise NotImplementedError


class H2HProviderBase(ABC):
    """Interfaccia astratta per il recupero del blocco H2H di una fixture."""

    @abstractmethod
    def fetch_h2h(self, fixture_id: int) -> Optional[Any]:
        """Ritorna il payload H2H grezzo (o None se il provider non lo include)."""
        raise NotImplementedError

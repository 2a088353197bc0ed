from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Optional

from core.config import get_settings
from core.logging import get_logger
from .base import H2HProviderBase
from .http_client import Live24HttpClient, get_http_client

log = get_logger(__name__)


class Live24H2HProvider(H2HProviderBase):
    """
    Blocco 'h2h' di match/{id}.

    fetch_h2h viene chiamata in parallelo dai worker dell'aggregazione:
    ogni chiamata usa un client (e una requests.Session) dedicato.
    """

    def __init__(self, client_factory: Callable[[], Live24HttpClient] = get_http_client) -> None:
        self._client_factory = client_factory
        self._lock = threading.Lock()
        self._last_stats: Dict[str, Any] = {}

    def fetch_h2h(self, fixture_id: int) -> Optional[Any]:
        settings = get_settings()
        params: Dict[str, Any] = {
            "lang": settings.live24_lang,
            "short": 0,
            "h2hlimit": settings.live24_h2h_limit,
        }
        client = self._client_factory()
        try:
            data = client.api_get(f"match/{fixture_id}", params=params)
        finally:
            with self._lock:
                self._last_stats = client.get_stats()
            client.close()
        if not isinstance(data, dict):
            log.warning("Risposta match/%s non e' un oggetto: h2h assente", fixture_id)
            return None
        return data.get("h2h")

    def get_last_stats(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._last_stats)


__all__ = ["Live24H2HProvider"]

from __future__ import annotations

import random
import time
from typing import Any, Dict, Optional

import requests

from core.config import get_settings
from core.logging import get_logger
from .exceptions import InvalidPayloadError, Live24RequestError, RateLimitError, TransientAPIError

log = get_logger(__name__)

# Alcune origini bloccano traffico non-browser: stessi header del proxy web
_DEFAULT_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Content-Type": "application/json",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
    ),
    "Referer": "https://24live.com/",
    "Origin": "https://24live.com",
}

_TRANSIENT_STATUSES = (500, 502, 503, 504)


class Live24HttpClient:
    """
    Client HTTP per l'API 24live (requests + retry opzionale con backoff).
    Gestisce rate limit (429), errori transitori (5xx, network) e ritorna JSON.

    Telemetria dell'ultima chiamata (vedi get_stats):
      - attempts / retries
      - latency_ms: durata totale, successo o errore finale
      - last_status: ultimo HTTP status ricevuto (None se nessuna risposta)
    """

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._settings = get_settings()
        self._session = session or requests.Session()
        self._session.headers.update(_DEFAULT_HEADERS)
        self._base_url = self._settings.live24_base_url
        self._max_attempts = self._settings.live24_max_attempts
        self._base = self._settings.live24_backoff_base
        self._factor = self._settings.live24_backoff_factor
        self._jitter = self._settings.live24_backoff_jitter
        self._timeout = self._settings.live24_timeout

        self._last_attempts: int = 0
        self._last_latency_ms: float = 0.0
        self._last_status: Optional[int] = None

    def _compute_delay(self, attempt: int) -> float:
        # attempt parte da 1
        delay = self._base * (self._factor ** (attempt - 1))
        if self._jitter > 0:
            delay *= random.uniform(1 - self._jitter, 1 + self._jitter)
        return delay

    def _finish(self, attempt: int, start: float) -> None:
        self._last_attempts = attempt
        self._last_latency_ms = (time.perf_counter() - start) * 1000

    def _retry_wait(self, attempt: int, reason: str, retry_after: Optional[str] = None) -> None:
        wait = self._compute_delay(attempt)
        if retry_after:
            try:
                wait = max(wait, float(retry_after))
            except ValueError:
                pass
        log.warning("retry attempt=%s wait=%.2fs reason=%s", attempt, wait, reason)
        time.sleep(wait)

    def api_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self._base_url}/{path.lstrip('/')}"
        log.debug("live24 GET %s params=%s", url, params)

        start = time.perf_counter()
        self._last_attempts = 0
        self._last_latency_ms = 0.0
        self._last_status = None

        for attempt in range(1, self._max_attempts + 1):
            last = attempt == self._max_attempts
            try:
                resp = self._session.get(url, params=params, timeout=self._timeout)
            except (requests.Timeout, requests.ConnectionError) as e:
                if last:
                    self._finish(attempt, start)
                    raise TransientAPIError(
                        f"Errore di rete persistente dopo {attempt} tentativi: {e}"
                    ) from e
                self._retry_wait(attempt, f"network:{e.__class__.__name__}")
                continue

            status = resp.status_code
            self._last_status = status

            if 200 <= status < 300:
                self._finish(attempt, start)
                try:
                    return resp.json()
                except ValueError as e:
                    raise InvalidPayloadError(f"Risposta non valida (non JSON) status={status}") from e

            if status == 429:
                if last:
                    self._finish(attempt, start)
                    raise RateLimitError(f"Rate limit dopo {attempt} tentativi (429).")
                self._retry_wait(attempt, "rate_limit", resp.headers.get("Retry-After"))
                continue

            if status in _TRANSIENT_STATUSES:
                if last:
                    self._finish(attempt, start)
                    raise TransientAPIError(f"Status {status} persistente dopo {attempt} tentativi.")
                self._retry_wait(attempt, f"http_{status}")
                continue

            self._finish(attempt, start)
            log.error("live24 status=%s url=%s body=%s", status, url, (resp.text or "")[:300])
            raise Live24RequestError(f"Richiesta 24live fallita (status={status}) non retriable", status)

        # range() non vuoto: max_attempts >= 1 garantito da Settings
        raise RuntimeError(f"Fallimento imprevisto path={path}")

    def close(self) -> None:
        self._session.close()

    def get_stats(self) -> Dict[str, Any]:
        return {
            "attempts": self._last_attempts,
            "retries": max(self._last_attempts - 1, 0),
            "latency_ms": round(self._last_latency_ms, 2),
            "last_status": self._last_status,
        }


def get_http_client() -> Live24HttpClient:
    """
    Restituisce sempre una nuova istanza per far si' che i test che
    modificano le variabili d'ambiente abbiano effetto immediato.
    """
    return Live24HttpClient()

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, List


def _parse_list(value: Optional[str]) -> Optional[List[str]]:
    if not value:
        return None
    parts = [p.strip() for p in value.split(",")]
    clean = [p for p in parts if p]
    return clean or None


@dataclass
class Settings:
    live24_base_url: str
    live24_match_list_id: int
    live24_subtournament_ids: List[str]
    live24_lang: str
    live24_h2h_limit: int

    live24_max_attempts: int
    live24_backoff_base: float
    live24_backoff_factor: float
    live24_backoff_jitter: float
    live24_timeout: float

    @classmethod
    def from_env(cls) -> "Settings":
        def _int(name: str, default: int) -> int:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return int(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un intero (valore: {raw!r})") from e

        def _float(name: str, default: float) -> float:
            raw = os.getenv(name)
            if not raw:
                return default
            try:
                return float(raw)
            except ValueError as e:
                raise ValueError(f"Variabile {name} deve essere un numero (valore: {raw!r})") from e

        base_url = (os.getenv("LIVE24_BASE_URL") or "https://24live.com/api").rstrip("/")
        match_list_id = _int("LIVE24_MATCH_LIST_ID", 22)
        subtournament_ids = _parse_list(os.getenv("LIVE24_SUBTOURNAMENT_IDS")) or ["70521", "70503"]
        lang = os.getenv("LIVE24_LANG", "en")
        h2h_limit = _int("LIVE24_H2H_LIMIT", 5)
        if h2h_limit < 1:
            h2h_limit = 5

        # 1 = nessun retry: il ciclo fallisce alla prima risposta negativa
        max_attempts = _int("LIVE24_MAX_ATTEMPTS", 1)
        if max_attempts < 1:
            raise ValueError(f"Variabile LIVE24_MAX_ATTEMPTS deve essere >= 1 (valore: {max_attempts})")
        backoff_base = _float("LIVE24_BACKOFF_BASE", 0.5)
        backoff_factor = _float("LIVE24_BACKOFF_FACTOR", 2.0)
        backoff_jitter = _float("LIVE24_BACKOFF_JITTER", 0.2)
        backoff_jitter = max(0.0, min(backoff_jitter, 1.0))
        timeout = _float("LIVE24_TIMEOUT", 10.0)

        return cls(
            live24_base_url=base_url,
            live24_match_list_id=match_list_id,
            live24_subtournament_ids=subtournament_ids,
            live24_lang=lang,
            live24_h2h_limit=h2h_limit,
            live24_max_attempts=max_attempts,
            live24_backoff_base=backoff_base,
            live24_backoff_factor=backoff_factor,
            live24_backoff_jitter=backoff_jitter,
            live24_timeout=timeout,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def _reset_settings_cache_for_tests() -> None:
    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "_reset_settings_cache_for_tests"]

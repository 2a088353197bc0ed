class Live24Error(Exception):
    """Base per gli errori del provider 24live."""


class RateLimitError(Live24Error):
    """Sollevata quando viene superato il rate limit (HTTP 429) dopo tutti i tentativi di retry."""


class TransientAPIError(Live24Error):
    """Sollevata quando errori transitori (5xx / timeout / connessione) persistono oltre i tentativi massimi."""


class Live24RequestError(Live24Error):
    """Richiesta rifiutata dal provider (4xx non recuperabile o status inatteso)."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class InvalidPayloadError(Live24Error):
    """Risposta 2xx con corpo non JSON."""

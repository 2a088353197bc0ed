from __future__ import annotations

from fastapi import APIRouter
from core.config import get_settings

router = APIRouter(tags=["health"])

@router.get("/health", summary="Health check")
def health():
    """
    Health endpoint minimale.
    """
    settings = get_settings()
    return {
        "status": "ok",
        "match_list_id": settings.live24_match_list_id,
        "subtournament_ids": settings.live24_subtournament_ids,
    }

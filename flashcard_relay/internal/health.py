from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from flashcard_relay.dependencies import AppSettings

router = APIRouter(prefix="/api", tags=["internal"])


@router.get("/health")
async def health(settings: AppSettings) -> dict[str, Any]:
    return {"status": "ok", "hasApiKey": settings.has_api_key}

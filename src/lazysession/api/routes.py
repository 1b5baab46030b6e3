"""Rotas HTTP principais."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from lazysession.api.dependencies import get_settings
from lazysession.config.settings import Settings

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)) -> dict[str, str]:
    """Healthcheck simples; nunca toca na sessão."""
    return {"status": "ok", "service": settings.service_name, "version": settings.version}

"""Endpoints de health check (liveness e readiness)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.services.translation_router import select_provider_name
from config.settings import get_base_settings, get_line_settings, get_translation_settings

logger = logging.getLogger(__name__)

router = APIRouter()

SERVICE_VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = SERVICE_VERSION


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    detail: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "detail": self.detail}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check() -> JSONResponse:
    """Readiness probe — credenciais do LINE e provedor de tradução presentes."""
    line_check = _check_line()
    translation_check = _check_translation()
    ready = line_check.status == "ok" and translation_check.status == "ok"

    if not ready:
        logger.warning(
            "readiness_not_ready",
            extra={"line": line_check.status, "translation": translation_check.status},
        )

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "line": line_check.as_dict(),
            "translation": translation_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_line() -> DependencyCheck:
    settings = get_line_settings()
    if not settings.channel_secret:
        return DependencyCheck(status="failed", detail="missing_channel_secret")
    if not settings.channel_access_token:
        return DependencyCheck(status="failed", detail="missing_channel_access_token")
    return DependencyCheck(status="ok")


def _check_translation() -> DependencyCheck:
    provider = select_provider_name(get_translation_settings())
    if provider is None:
        return DependencyCheck(status="failed", detail="no_provider_configured")
    return DependencyCheck(status="ok", detail=provider)

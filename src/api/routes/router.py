"""Agregador de rotas — registra os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.line import router as line_router

LINE_WEBHOOK_PREFIX = "/webhook/line"
# Caminho usado pelas instalações antigas do webhook
LINE_WEBHOOK_LEGACY_PREFIX = "/line-webhook"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados."""
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(line_router, prefix=LINE_WEBHOOK_PREFIX, tags=["line"])
    api_router.include_router(
        line_router,
        prefix=LINE_WEBHOOK_LEGACY_PREFIX,
        tags=["line"],
        include_in_schema=False,
    )

    return api_router

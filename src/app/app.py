"""Entrypoint da aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from api.routes.line.webhook_runtime import drain_background_tasks
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_http_client
from app.bootstrap.dependencies import create_inbound_use_case
from config.logging import get_logger
from config.settings import get_base_settings, get_translation_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Logging antes de qualquer outro log do processo
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup: valida settings, cria o AsyncClient e monta o dispatcher.
    Shutdown: drena tasks do modo async e fecha o AsyncClient.
    """
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    http_client = create_http_client(get_translation_settings().timeout_seconds)
    app.state.http_client = http_client
    app.state.inbound_use_case = create_inbound_use_case(http_client)

    yield

    logger.info("app_shutting_down", extra={"service": service})
    await drain_background_tasks(timeout_seconds=30.0)
    await http_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI."""
    fastapi_app = FastAPI(
        title="Ponte de Tradução LINE",
        description="Webhook LINE que traduz mensagens de texto e responde no chat",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting ponte_traducao in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()

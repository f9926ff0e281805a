"""Factories das dependências — wiring das implementações concretas.

Toda configuração é lida aqui, uma vez, e injetada explicitamente nos
componentes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.line import LineMessagingClient
from app.infra.translation import GeminiAdapter, GoogleTranslateAdapter
from app.services.translation_router import TranslationRouter
from app.use_cases.line import TranslateInboundEventsUseCase
from config.settings import get_line_settings, get_translation_settings

if TYPE_CHECKING:
    import httpx

    from app.protocols.translation_provider import TranslationProviderProtocol
    from config.settings import LineSettings, TranslationSettings

logger = logging.getLogger(__name__)


def create_translation_router(
    http_client: httpx.AsyncClient,
    settings: TranslationSettings | None = None,
) -> TranslationRouter:
    """Cria o TranslationRouter com os dois adapters registrados."""
    translation = settings or get_translation_settings()
    adapters: list[TranslationProviderProtocol] = [
        GoogleTranslateAdapter(http_client),
        GeminiAdapter(http_client),
    ]
    router = TranslationRouter(
        config=translation,
        providers={adapter.name: adapter for adapter in adapters},
    )
    logger.info(
        "translation_router_created",
        extra={
            "active_provider": router.active_provider,
            "target_language_code": translation.target_language_code,
        },
    )
    return router


def create_line_messaging_client(
    http_client: httpx.AsyncClient,
    settings: LineSettings | None = None,
) -> LineMessagingClient:
    return LineMessagingClient(settings or get_line_settings(), http_client)


def create_inbound_use_case(
    http_client: httpx.AsyncClient,
    line_settings: LineSettings | None = None,
    translation_settings: TranslationSettings | None = None,
) -> TranslateInboundEventsUseCase:
    """Monta o dispatcher do webhook LINE.

    Args:
        http_client: AsyncClient compartilhado
        line_settings: Settings do LINE (default: ambiente)
        translation_settings: Settings de tradução (default: ambiente)

    Returns:
        TranslateInboundEventsUseCase pronto para uso
    """
    translation = translation_settings or get_translation_settings()
    return TranslateInboundEventsUseCase(
        translator=create_translation_router(http_client, translation),
        reply_sender=create_line_messaging_client(http_client, line_settings),
        translation_settings=translation,
    )

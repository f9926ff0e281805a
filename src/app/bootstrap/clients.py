"""Factory do cliente HTTP compartilhado (httpx).

Um único AsyncClient atende provedores de tradução e LINE; criado no
startup e fechado no shutdown pelo lifespan da aplicação.
"""

from __future__ import annotations

import logging

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 15.0
MAX_CONNECTIONS = 100


def create_http_client(timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> httpx.AsyncClient:
    """Cria o AsyncClient compartilhado.

    O timeout aqui é o default; cada chamada informa o seu próprio timeout.
    """
    client = httpx.AsyncClient(
        timeout=timeout_seconds,
        limits=httpx.Limits(max_connections=MAX_CONNECTIONS),
    )
    logger.info("http_client_created", extra={"timeout_seconds": timeout_seconds})
    return client

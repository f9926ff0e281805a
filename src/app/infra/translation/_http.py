"""Helper de IO HTTP compartilhado pelos adapters de tradução.

Faz exatamente um POST, sem retries, e devolve a resposta já desmontada.
Falhas de transporte viram valor (transport_error) em vez de exceção.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from app.observability import record_latency

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProviderHttpReply:
    """Resposta HTTP desmontada (status, corpo JSON) ou falha de transporte."""

    status_code: int | None = None
    reason_phrase: str = ""
    body: Any = None
    body_parsed: bool = False
    transport_error: str | None = None

    @property
    def is_success(self) -> bool:
        return self.status_code is not None and 200 <= self.status_code < 300


async def post_json(
    http_client: httpx.AsyncClient,
    *,
    provider: str,
    url: str,
    params: Mapping[str, str],
    payload: dict[str, Any],
    timeout_seconds: float,
) -> ProviderHttpReply:
    """Executa POST JSON no provedor.

    Args:
        http_client: Cliente httpx compartilhado
        provider: Nome do provedor (para logs/métricas)
        url: Endpoint do provedor
        params: Query string (a chave de API vai aqui; nunca é logada)
        payload: Corpo JSON
        timeout_seconds: Timeout da requisição

    Returns:
        ProviderHttpReply
    """
    start = time.perf_counter()
    try:
        response = await http_client.post(
            url,
            params=dict(params),
            json=payload,
            headers={"Content-Type": "application/json"},
            timeout=timeout_seconds,
        )
    except httpx.TimeoutException as exc:
        logger.warning(
            "provider_timeout",
            extra={"provider": provider, "error_type": type(exc).__name__},
        )
        return ProviderHttpReply(transport_error="timeout")
    except httpx.HTTPError as exc:
        logger.warning(
            "provider_transport_error",
            extra={"provider": provider, "error_type": type(exc).__name__},
        )
        return ProviderHttpReply(transport_error=type(exc).__name__)
    finally:
        record_latency(provider, "call", (time.perf_counter() - start) * 1000)

    try:
        body = response.json()
        parsed = True
    except ValueError:
        body = None
        parsed = False

    return ProviderHttpReply(
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
        body=body,
        body_parsed=parsed,
    )


def extract_path(payload: Any, *path: str | int) -> Any:
    """Navega um JSON por chaves/índices, retornando None no primeiro buraco.

    Exemplo:
        extract_path(body, "data", "translations", 0, "translatedText")
    """
    current = payload
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or len(current) <= key:
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def extract_text(payload: Any, *path: str | int) -> str | None:
    """Como extract_path, mas só aceita strings (provedores às vezes mandam outros tipos)."""
    value = extract_path(payload, *path)
    return value if isinstance(value, str) else None

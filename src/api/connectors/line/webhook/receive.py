"""Ingress do webhook LINE: assinatura e parse estrutural do lote."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.line_events import LineWebhookBatch

from ..signature import SIGNATURE_HEADER, verify_line_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

    from app.domain.line_events import LineEvent


class WebhookRequestError(ValueError):
    """Erro base para falhas da entrega do webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura ausente ou inválida (entrega rejeitada com 401)."""


class InvalidPayloadError(WebhookRequestError):
    """Corpo não corresponde ao formato de lote de eventos (500)."""


def parse_webhook_request(
    raw_body: bytes,
    headers: Mapping[str, str],
    channel_secret: str | None,
) -> list[LineEvent]:
    """Valida assinatura e converte o corpo em lista de eventos.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos (chaves em minúsculas)
        channel_secret: Secret do canal LINE

    Raises:
        InvalidSignatureError: Se a assinatura for inválida
        InvalidPayloadError: Se o JSON for inválido ou fora do formato

    Returns:
        Eventos do lote, na ordem recebida
    """
    result = verify_line_signature(raw_body, headers.get(SIGNATURE_HEADER), channel_secret)
    if not result.valid:
        raise InvalidSignatureError(result.error or "invalid_signature")

    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidPayloadError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidPayloadError("payload_not_object")

    try:
        batch = LineWebhookBatch.model_validate(payload)
    except ValidationError as exc:
        raise InvalidPayloadError("invalid_event_batch") from exc

    return batch.events

"""Endpoint de webhook do LINE Messaging API.

Fluxo por entrega:
Recebido -> Assinatura validada -> Lote parseado -> Despachado -> 200

Respostas:
- 401 "Invalid signature": x-line-signature ausente ou inválido
- 500 {"message": ...}: corpo fora do formato `{events: [...]}`
- 200 {"success": true}: lote aceito, independente do resultado de cada evento
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from api.connectors.line.webhook import (
    InvalidPayloadError,
    InvalidSignatureError,
    parse_webhook_request,
)
from api.routes.line.webhook_runtime import dispatch_events
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from config.settings import get_line_settings

logger = logging.getLogger(__name__)

router = APIRouter()


def get_inbound_use_case(request: Request) -> Any:
    """Obtém o dispatcher montado no bootstrap (app.state)."""
    return getattr(request.app.state, "inbound_use_case", None)


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response | dict[str, Any]:
    """Recebe uma entrega do webhook LINE.

    Validações:
    1. Assinatura HMAC (x-line-signature)
    2. JSON válido no formato de lote de eventos

    Returns:
        {"success": True} ou Response de erro.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        settings = get_line_settings()
        raw_body = await request.body()

        try:
            events = parse_webhook_request(
                raw_body=raw_body,
                headers=dict(request.headers),
                channel_secret=settings.channel_secret or None,
            )
        except InvalidSignatureError as exc:
            logger.warning(
                "webhook_signature_invalid",
                extra={"channel": "line", "error": str(exc)},
            )
            return Response(
                content="Invalid signature",
                media_type="text/plain",
                status_code=status.HTTP_401_UNAUTHORIZED,
            )
        except InvalidPayloadError as exc:
            logger.warning(
                "webhook_payload_invalid",
                extra={"channel": "line", "error": str(exc)},
            )
            return JSONResponse(
                {"message": str(exc)},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        logger.info(
            "webhook_received",
            extra={
                "channel": "line",
                "events": len(events),
                "payload_size": len(raw_body),
            },
        )

        if events:
            use_case = get_inbound_use_case(request)
            if use_case is None:
                logger.error("webhook_use_case_unavailable", extra={"channel": "line"})
                return JSONResponse(
                    {"message": "inbound_use_case_unavailable"},
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )
            try:
                await dispatch_events(
                    events=events,
                    correlation_id=get_correlation_id(),
                    use_case=use_case,
                    settings=settings,
                )
            except Exception as exc:
                logger.exception("webhook_processing_failed", extra={"channel": "line"})
                return JSONResponse(
                    {"message": str(exc) or type(exc).__name__},
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                )

        return {"success": True}

    finally:
        reset_correlation_id(token)

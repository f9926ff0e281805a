"""Cliente HTTP do LINE Messaging API (reply).

- Uma chamada por resposta, sem retry: o reply token é de uso único
- Logs estruturados sem token de acesso, reply token ou texto
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.line.line_errors import LineApiError, parse_line_error
from api.payload_builders.line import build_text_reply_payload
from app.observability import record_latency

if TYPE_CHECKING:
    from config.settings import LineSettings

logger = logging.getLogger(__name__)


class LineMessagingClient:
    """Envia respostas via `POST /v2/bot/message/reply`."""

    __slots__ = ("_http_client", "_settings")

    def __init__(self, settings: LineSettings, http_client: httpx.AsyncClient) -> None:
        self._settings = settings
        self._http_client = http_client

    async def reply_message(
        self,
        reply_token: str,
        messages: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Responde um evento com uma lista de mensagens.

        Args:
            reply_token: Token de uso único do evento
            messages: Mensagens no formato do LINE ({"type": "text", ...})

        Returns:
            Corpo JSON da resposta (geralmente `{}`)

        Raises:
            LineApiError: Se access token ausente, falha de rede ou status não-2xx
        """
        access_token = self._settings.channel_access_token
        if not access_token or not access_token.strip():
            logger.error("line_access_token_missing")
            raise LineApiError("missing_channel_access_token")

        payload = {"replyToken": reply_token, "messages": messages}
        response = await self._post(payload, access_token)
        return self._process_response(response)

    async def reply_text(self, reply_token: str, text: str) -> dict[str, Any]:
        payload = build_text_reply_payload(reply_token, text)
        return await self.reply_message(reply_token, payload["messages"])

    async def _post(self, payload: dict[str, Any], access_token: str) -> httpx.Response:
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        start = time.perf_counter()
        try:
            return await self._http_client.post(
                self._settings.reply_endpoint,
                json=payload,
                headers=headers,
                timeout=self._settings.request_timeout_seconds,
            )
        except httpx.HTTPError as exc:
            raise LineApiError(f"line_transport_error:{type(exc).__name__}") from exc
        finally:
            record_latency("line_reply", "reply_message", (time.perf_counter() - start) * 1000)

    @staticmethod
    def _process_response(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            data = None

        if response.is_success:
            return data if isinstance(data, dict) else {}

        error = parse_line_error(response.status_code, data)
        logger.warning(
            "line_api_error",
            extra={
                "status_code": error.status_code,
                "line_message": error.message,
                "line_details": list(error.details),
                "expired_token": error.is_expired_token,
            },
        )
        raise LineApiError(
            f"LINE API error: {error.message} ({error.status_code})",
            status_code=error.status_code,
        )

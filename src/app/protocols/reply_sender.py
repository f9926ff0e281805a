"""Protocolo de envio de respostas ao usuário."""

from __future__ import annotations

from typing import Any, Protocol


class ReplySenderProtocol(Protocol):
    """Contrato mínimo para responder um evento via reply token.

    Levanta ReplyDeliveryError em caso de falha.
    """

    async def reply_text(self, reply_token: str, text: str) -> dict[str, Any]: ...

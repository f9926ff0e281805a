"""Erros e parsing de respostas de erro do LINE Messaging API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from utils.errors import ReplyDeliveryError


@dataclass(frozen=True)
class LineApiErrorInfo:
    """Erro retornado pelo LINE: `{"message": ..., "details": [...]}`."""

    status_code: int
    message: str
    details: tuple[str, ...] = ()

    @property
    def is_expired_token(self) -> bool:
        """Reply token expirado ou já usado (LINE responde 400)."""
        return self.status_code == 400 and "reply token" in self.message.lower()


class LineApiError(ReplyDeliveryError):
    """Falha ao chamar o LINE Messaging API."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message, status_code=status_code)


def parse_line_error(status_code: int, response_data: Any) -> LineApiErrorInfo:
    """Extrai mensagem e detalhes do corpo de erro do LINE.

    Args:
        status_code: Status HTTP da resposta
        response_data: Corpo JSON (ou None se ilegível)

    Returns:
        LineApiErrorInfo com o que foi possível extrair
    """
    if not isinstance(response_data, dict):
        return LineApiErrorInfo(status_code=status_code, message="unknown_error")

    details = response_data.get("details") or []
    detail_messages = tuple(
        str(item.get("message", ""))
        for item in details
        if isinstance(item, dict)
    )
    return LineApiErrorInfo(
        status_code=status_code,
        message=str(response_data.get("message") or "unknown_error"),
        details=detail_messages,
    )

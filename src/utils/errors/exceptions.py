"""Exceções compartilhadas para falhas de integrações externas."""

from __future__ import annotations


class IntegrationError(RuntimeError):
    """Base para falhas ao falar com serviços externos (LINE, provedores)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ReplyDeliveryError(IntegrationError):
    """Falha ao entregar a resposta pela API de mensagens."""

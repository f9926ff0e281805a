"""Settings específicas do canal LINE.

Credenciais do Messaging API e comportamento do webhook.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

LINE_API_BASE_URL: str = "https://api.line.me"
LINE_REPLY_PATH: str = "/v2/bot/message/reply"


@dataclass(frozen=True)
class LineSettings:
    """Configurações do canal LINE.

    Attributes:
        channel_secret: Secret do canal, usado na validação do x-line-signature
        channel_access_token: Token de acesso ao Messaging API
        api_base_url: URL base do Messaging API
        request_timeout_seconds: Timeout para o envio de respostas
        webhook_processing_mode: Modo de processamento do webhook (inline|async)
    """

    channel_secret: str = ""
    channel_access_token: str = ""
    api_base_url: str = LINE_API_BASE_URL
    request_timeout_seconds: float = 10.0
    webhook_processing_mode: str = "inline"

    @property
    def reply_endpoint(self) -> str:
        """URL completa do endpoint de reply."""
        return f"{self.api_base_url.rstrip('/')}{LINE_REPLY_PATH}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do LINE.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.channel_secret:
            errors.append("LINE_CHANNEL_SECRET não configurado")

        if not self.channel_access_token:
            errors.append("LINE_CHANNEL_ACCESS_TOKEN não configurado")

        if self.request_timeout_seconds <= 0:
            errors.append("LINE_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.webhook_processing_mode not in ("async", "inline"):
            errors.append("LINE_WEBHOOK_PROCESSING_MODE deve ser 'async' ou 'inline'")

        return errors


def _load_from_env() -> LineSettings:
    """Carrega LineSettings a partir de variáveis de ambiente."""
    return LineSettings(
        channel_secret=os.getenv("LINE_CHANNEL_SECRET", ""),
        channel_access_token=os.getenv("LINE_CHANNEL_ACCESS_TOKEN", ""),
        api_base_url=os.getenv("LINE_API_BASE_URL", LINE_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("LINE_REQUEST_TIMEOUT_SECONDS", "10")),
        webhook_processing_mode=os.getenv("LINE_WEBHOOK_PROCESSING_MODE", "inline").lower(),
    )


@lru_cache(maxsize=1)
def get_line_settings() -> LineSettings:
    """Retorna instância cacheada de LineSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()

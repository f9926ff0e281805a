"""Valores de domínio da tradução: requisição e resultado.

TranslationOutcome é uma união fechada; exatamente uma variante é produzida
por requisição.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

DAILY_LIMIT_MESSAGE = "⚠️ Daily translation limit reached. Please try again tomorrow!"
GENERIC_ERROR_MESSAGE = "Sorry, an error occurred."
UNAVAILABLE_MESSAGE = "Translation service is currently unavailable."

NO_TRANSLATION_DETAIL = "no translation returned"


@dataclass(frozen=True, slots=True)
class TranslationRequest:
    """Texto a traduzir e idioma destino (nome para prompt, código para API)."""

    text: str
    target_language_name: str
    target_language_code: str


@dataclass(frozen=True, slots=True)
class Success:
    translated_text: str
    kind: Literal["success"] = "success"


@dataclass(frozen=True, slots=True)
class RateLimited:
    """Cota do provedor esgotada (limite diário)."""

    detail: str = ""
    kind: Literal["rate_limited"] = "rate_limited"


@dataclass(frozen=True, slots=True)
class Unavailable:
    """Nenhum provedor configurado."""

    kind: Literal["unavailable"] = "unavailable"


@dataclass(frozen=True, slots=True)
class ProviderError:
    """Qualquer outra falha: rede, status não-2xx, corpo inválido ou vazio."""

    detail: str
    status_code: int | None = None
    kind: Literal["provider_error"] = "provider_error"


TranslationOutcome = Success | RateLimited | Unavailable | ProviderError


def reply_text_for(outcome: TranslationOutcome) -> str:
    """Converte o resultado no texto enviado de volta ao usuário."""
    if isinstance(outcome, Success):
        return outcome.translated_text
    if isinstance(outcome, RateLimited):
        return DAILY_LIMIT_MESSAGE
    if isinstance(outcome, Unavailable):
        return UNAVAILABLE_MESSAGE
    return GENERIC_ERROR_MESSAGE


@dataclass(frozen=True, slots=True)
class RawProviderResult:
    """Sinais brutos extraídos da resposta de um provedor.

    Os adapters preenchem apenas o que observaram; a classificação em
    TranslationOutcome é feita pelo router.

    Attributes:
        status_code: Status HTTP (None em falha de transporte)
        translated_text: Campo de texto traduzido extraído do payload
        reason: Código de motivo do erro reportado pelo provedor
        message: Mensagem de erro reportada pelo provedor
        transport_error: Tipo da exceção de transporte (timeout, conexão)
        body_parsed: False quando o corpo não era JSON válido
        body: Payload JSON bruto, para logs de diagnóstico
    """

    status_code: int | None = None
    translated_text: str | None = None
    reason: str | None = None
    message: str | None = None
    transport_error: str | None = None
    body_parsed: bool = True
    body: Any = None

    @property
    def ok(self) -> bool:
        return (
            self.transport_error is None
            and self.status_code is not None
            and 200 <= self.status_code < 300
        )

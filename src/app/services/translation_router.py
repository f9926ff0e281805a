"""Roteamento de tradução e classificação de erros dos provedores.

Seleção de provedor (estática, pela configuração; sem failover entre
provedores dentro de uma chamada):
1. GOOGLE_TRANSLATE_API_KEY presente -> Google Translate, exclusivamente
2. Senão, GEMINI_API_KEY presente -> Gemini
3. Senão -> Unavailable, sem chamada de rede

Classificação do RawProviderResult (em ordem):
- falha de transporte (timeout, conexão) -> ProviderError
- status não-2xx de cota (status/motivo/mensagem de limite diário) -> RateLimited
- qualquer outro status não-2xx -> ProviderError
- corpo 2xx ilegível -> ProviderError
- texto traduzido não vazio -> Success
- texto ausente/vazio -> ProviderError("no translation returned")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.translation import (
    NO_TRANSLATION_DETAIL,
    ProviderError,
    RateLimited,
    Success,
    Unavailable,
)
from app.infra.translation.gemini import PROVIDER_NAME as GEMINI
from app.infra.translation.google_translate import PROVIDER_NAME as GOOGLE_TRANSLATE
from app.observability import record_translation_outcome

if TYPE_CHECKING:
    from app.domain.translation import (
        RawProviderResult,
        TranslationOutcome,
        TranslationRequest,
    )
    from app.protocols.translation_provider import TranslationProviderProtocol
    from config.settings import TranslationSettings

logger = logging.getLogger(__name__)

# Status HTTP que cada provedor usa para cota esgotada
_QUOTA_STATUS_CODES: dict[str, frozenset[int]] = {
    GOOGLE_TRANSLATE: frozenset({403}),
    GEMINI: frozenset({429}),
}
_QUOTA_REASONS: dict[str, frozenset[str]] = {
    GOOGLE_TRANSLATE: frozenset({"dailyLimitExceeded"}),
    GEMINI: frozenset({"RESOURCE_EXHAUSTED"}),
}
_DAILY_LIMIT_MARKER = "daily limit"


def select_provider_name(config: TranslationSettings) -> str | None:
    """Retorna o provedor ativo para a configuração, ou None."""
    if config.has_google_translate:
        return GOOGLE_TRANSLATE
    if config.has_gemini:
        return GEMINI
    return None


def _text_or_none(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def is_rate_limited(provider: str, raw: RawProviderResult) -> bool:
    if raw.status_code in _QUOTA_STATUS_CODES.get(provider, frozenset()):
        return True
    reason = _text_or_none(raw.reason)
    if reason and reason in _QUOTA_REASONS.get(provider, frozenset()):
        return True
    message = _text_or_none(raw.message)
    return bool(message and _DAILY_LIMIT_MARKER in message.lower())


def classify_result(provider: str, raw: RawProviderResult) -> TranslationOutcome:
    """Converte os sinais brutos do adapter em exatamente um TranslationOutcome."""
    if raw.transport_error is not None:
        return ProviderError(detail=f"transport_error:{raw.transport_error}")

    if not raw.ok:
        if is_rate_limited(provider, raw):
            return RateLimited(
                detail=_text_or_none(raw.reason) or _text_or_none(raw.message) or ""
            )
        return ProviderError(
            detail=_text_or_none(raw.message) or f"http_status_{raw.status_code}",
            status_code=raw.status_code,
        )

    if not raw.body_parsed:
        return ProviderError(detail="invalid_response_body", status_code=raw.status_code)

    if isinstance(raw.translated_text, str) and raw.translated_text:
        return Success(translated_text=raw.translated_text)

    return ProviderError(detail=NO_TRANSLATION_DETAIL, status_code=raw.status_code)


class TranslationRouter:
    """Seleciona o provedor e traduz uma requisição.

    A configuração é injetada uma vez (imutável) e compartilhada entre
    requisições concorrentes; o router não guarda estado mutável.
    """

    def __init__(
        self,
        config: TranslationSettings,
        providers: dict[str, TranslationProviderProtocol],
    ) -> None:
        self._config = config
        self._providers = providers

    @property
    def active_provider(self) -> str | None:
        return select_provider_name(self._config)

    async def translate(
        self,
        request: TranslationRequest,
        config: TranslationSettings | None = None,
    ) -> TranslationOutcome:
        """Traduz `request` usando o provedor selecionado por `config`.

        Args:
            request: Texto e idioma destino
            config: Configuração dos provedores; usa a injetada se None

        Returns:
            Success, RateLimited, Unavailable ou ProviderError
        """
        effective = config or self._config
        provider_name = select_provider_name(effective)
        adapter = self._providers.get(provider_name) if provider_name else None
        if adapter is None:
            logger.error(
                "translation_unavailable",
                extra={"provider": provider_name, "reason": "provider_not_configured"},
            )
            record_translation_outcome(provider_name, "unavailable")
            return Unavailable()

        raw = await adapter.call(request, effective)
        outcome = classify_result(provider_name, raw)
        self._log_outcome(provider_name, raw, outcome)
        record_translation_outcome(provider_name, outcome.kind)
        return outcome

    @staticmethod
    def _log_outcome(
        provider: str,
        raw: RawProviderResult,
        outcome: TranslationOutcome,
    ) -> None:
        if isinstance(outcome, Success):
            logger.info(
                "translation_succeeded",
                extra={"provider": provider, "translated_length": len(outcome.translated_text)},
            )
        elif isinstance(outcome, RateLimited):
            logger.warning(
                "translation_rate_limited",
                extra={
                    "provider": provider,
                    "status_code": raw.status_code,
                    "reason": raw.reason,
                },
            )
        elif outcome.detail == NO_TRANSLATION_DETAIL:
            logger.warning(
                "translation_empty_response",
                extra={"provider": provider, "status_code": raw.status_code},
            )
        else:
            logger.error(
                "translation_provider_error",
                extra={
                    "provider": provider,
                    "status_code": raw.status_code,
                    "reason": raw.reason,
                    "detail": outcome.detail,
                },
            )

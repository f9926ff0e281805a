"""Dispatcher do lote de eventos: filtra, traduz e responde cada evento.

Todos os eventos do lote rodam concorrentemente no mesmo event loop. A falha
de um evento (tradução ou envio) é contida e logada naquele evento; nunca
atrasa nem impede os demais, e nunca propaga para a resposta HTTP.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from api.normalizers.line import extract_actionable_message
from app.domain.translation import (
    ProviderError,
    TranslationRequest,
    reply_text_for,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.line_events import ActionableMessage, LineEvent
    from app.domain.translation import TranslationOutcome
    from app.protocols.reply_sender import ReplySenderProtocol
    from app.protocols.translator import TranslatorProtocol
    from config.settings import TranslationSettings

logger = logging.getLogger(__name__)

EventStatus = Literal["skipped", "replied", "reply_failed", "failed"]


@dataclass(frozen=True, slots=True)
class EventProcessingResult:
    """Resultado do processamento de um evento."""

    status: EventStatus
    outcome: str | None = None


@dataclass(frozen=True, slots=True)
class BatchProcessingSummary:
    """Contadores do lote, para log."""

    total: int = 0
    skipped: int = 0
    replied: int = 0
    reply_failed: int = 0
    failed: int = 0

    @classmethod
    def from_results(
        cls,
        results: Sequence[EventProcessingResult | BaseException],
    ) -> BatchProcessingSummary:
        counts = {"skipped": 0, "replied": 0, "reply_failed": 0, "failed": 0}
        for result in results:
            status = result.status if isinstance(result, EventProcessingResult) else "failed"
            counts[status] += 1
        return cls(total=len(results), **counts)


class TranslateInboundEventsUseCase:
    """Processa um lote de eventos LINE (uma entrega do webhook)."""

    def __init__(
        self,
        translator: TranslatorProtocol,
        reply_sender: ReplySenderProtocol,
        translation_settings: TranslationSettings,
    ) -> None:
        self._translator = translator
        self._reply_sender = reply_sender
        self._settings = translation_settings

    async def handle_batch(self, events: Sequence[LineEvent]) -> BatchProcessingSummary:
        """Processa todos os eventos concorrentemente e aguarda todos.

        Não interrompe no primeiro erro: cada evento termina (ou falha)
        independentemente.

        Args:
            events: Eventos do lote na ordem recebida

        Returns:
            BatchProcessingSummary com contadores por status
        """
        if not events:
            return BatchProcessingSummary()

        results = await asyncio.gather(
            *(self._handle_event_safe(event) for event in events),
            return_exceptions=True,
        )
        summary = BatchProcessingSummary.from_results(results)
        logger.info(
            "line_batch_processed",
            extra={
                "total": summary.total,
                "skipped": summary.skipped,
                "replied": summary.replied,
                "reply_failed": summary.reply_failed,
                "failed": summary.failed,
            },
        )
        return summary

    async def _handle_event_safe(self, event: LineEvent) -> EventProcessingResult:
        try:
            return await self.handle_event(event)
        except Exception:
            logger.exception("line_event_processing_failed", extra={"event_type": event.type})
            return EventProcessingResult(status="failed")

    async def handle_event(self, event: LineEvent) -> EventProcessingResult:
        """Filtra, traduz e responde um evento.

        Eventos não acionáveis não geram chamada de reply.
        """
        message = extract_actionable_message(event)
        if message is None:
            logger.debug(
                "line_event_skipped",
                extra={
                    "event_type": event.type,
                    "message_type": event.message.type if event.message else None,
                },
            )
            return EventProcessingResult(status="skipped")

        logger.info("line_text_received", extra=message.log_context())
        outcome = await self._translate(message)
        reply_text = reply_text_for(outcome)

        try:
            await self._reply_sender.reply_text(message.reply_token, reply_text)
        except Exception as exc:
            logger.error(
                "line_reply_failed",
                extra={
                    **message.log_context(),
                    "outcome": outcome.kind,
                    "error_type": type(exc).__name__,
                    "status_code": getattr(exc, "status_code", None),
                },
            )
            return EventProcessingResult(status="reply_failed", outcome=outcome.kind)

        logger.info(
            "line_reply_sent",
            extra={**message.log_context(), "outcome": outcome.kind},
        )
        return EventProcessingResult(status="replied", outcome=outcome.kind)

    async def _translate(self, message: ActionableMessage) -> TranslationOutcome:
        request = TranslationRequest(
            text=message.text,
            target_language_name=self._settings.target_language_name,
            target_language_code=self._settings.target_language_code,
        )
        try:
            return await self._translator.translate(request)
        except Exception as exc:
            logger.exception(
                "translation_unexpected_error",
                extra={**message.log_context(), "error_type": type(exc).__name__},
            )
            return ProviderError(detail=f"unexpected_error:{type(exc).__name__}")

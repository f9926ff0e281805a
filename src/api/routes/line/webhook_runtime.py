"""Runtime do webhook LINE: despacha o lote inline ou em background.

No modo async cada lote vira uma task limitada por semáforo; o resumo do
lote é logado quando a task termina e o shutdown aguarda as pendentes.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.line_events import LineEvent
    from app.use_cases.line import BatchProcessingSummary, TranslateInboundEventsUseCase
    from config.settings import LineSettings

logger = logging.getLogger(__name__)

MAX_CONCURRENT_BATCHES = 100


def _log_batch_completed(
    summary: BatchProcessingSummary,
    *,
    correlation_id: str,
    mode: str,
) -> None:
    logger.info(
        "webhook_processing_completed",
        extra={
            "channel": "line",
            "correlation_id": correlation_id,
            "mode": mode,
            "events": summary.total,
            "replied": summary.replied,
            "reply_failed": summary.reply_failed,
            "failed": summary.failed,
        },
    )


class BackgroundBatches:
    """Lotes em processamento no modo async.

    O semáforo é criado no primeiro agendamento, dentro do event loop que
    serve as requisições.
    """

    def __init__(self, max_concurrent: int = MAX_CONCURRENT_BATCHES) -> None:
        self._max_concurrent = max_concurrent
        self._semaphore: asyncio.Semaphore | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(
        self,
        *,
        events: Sequence[LineEvent],
        correlation_id: str,
        use_case: TranslateInboundEventsUseCase,
    ) -> None:
        if self._semaphore is None:
            self._semaphore = asyncio.Semaphore(self._max_concurrent)

        task = asyncio.create_task(self._process(self._semaphore, events, correlation_id, use_case))
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        logger.info(
            "webhook_processing_scheduled",
            extra={
                "channel": "line",
                "correlation_id": correlation_id,
                "events": len(events),
                "pending_batches": self.pending,
            },
        )

    async def _process(
        self,
        semaphore: asyncio.Semaphore,
        events: Sequence[LineEvent],
        correlation_id: str,
        use_case: TranslateInboundEventsUseCase,
    ) -> None:
        async with semaphore:
            summary = await use_case.handle_batch(events)
        _log_batch_completed(summary, correlation_id=correlation_id, mode="async")

    def _on_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(
                "webhook_processing_task_failed",
                extra={
                    "channel": "line",
                    "error_type": type(exc).__name__,
                    "pending_batches": self.pending,
                },
            )

    async def drain(self, timeout_seconds: float) -> None:
        """Aguarda lotes pendentes; cancela os que passarem do prazo."""
        if not self._tasks:
            return

        logger.info(
            "webhook_processing_shutdown_wait",
            extra={
                "channel": "line",
                "pending_batches": self.pending,
                "timeout_seconds": timeout_seconds,
            },
        )
        _, unfinished = await asyncio.wait(set(self._tasks), timeout=timeout_seconds)
        if not unfinished:
            return

        for task in unfinished:
            task.cancel()
        await asyncio.gather(*unfinished, return_exceptions=True)
        logger.warning(
            "webhook_processing_shutdown_cancelled",
            extra={"channel": "line", "cancelled_batches": len(unfinished)},
        )


background_batches = BackgroundBatches()


async def dispatch_events(
    *,
    events: Sequence[LineEvent],
    correlation_id: str,
    use_case: TranslateInboundEventsUseCase,
    settings: LineSettings,
) -> BatchProcessingSummary | None:
    """Despacha o lote conforme LINE_WEBHOOK_PROCESSING_MODE.

    - inline: aguarda todos os eventos antes de responder 200
    - async: agenda em background e retorna imediatamente (None)
    """
    processing_mode = (settings.webhook_processing_mode or "inline").lower()
    if processing_mode == "async":
        background_batches.schedule(
            events=events,
            correlation_id=correlation_id,
            use_case=use_case,
        )
        return None

    summary = await use_case.handle_batch(events)
    _log_batch_completed(summary, correlation_id=correlation_id, mode="inline")
    return summary


async def drain_background_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda lotes do modo async durante o shutdown do processo."""
    await background_batches.drain(timeout_seconds)

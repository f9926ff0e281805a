"""Casos de uso do canal LINE."""

from .translate_inbound_events import (
    BatchProcessingSummary,
    EventProcessingResult,
    TranslateInboundEventsUseCase,
)

__all__ = [
    "BatchProcessingSummary",
    "EventProcessingResult",
    "TranslateInboundEventsUseCase",
]

"""Protocolo do serviço de tradução consumido pelo dispatcher."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.translation import TranslationOutcome, TranslationRequest


class TranslatorProtocol(Protocol):
    """Traduz uma requisição produzindo exatamente um TranslationOutcome."""

    async def translate(self, request: TranslationRequest) -> TranslationOutcome: ...

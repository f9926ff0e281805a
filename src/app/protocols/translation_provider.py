"""Protocolo dos adapters de provedores de tradução."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.translation import RawProviderResult, TranslationRequest
    from config.settings import TranslationSettings


class TranslationProviderProtocol(Protocol):
    """Contrato de um adapter: exatamente uma chamada de rede por invocação.

    Nunca levanta exceção por falha do provedor; falhas de transporte e
    respostas de erro voltam como RawProviderResult.
    """

    name: str

    async def call(
        self,
        request: TranslationRequest,
        config: TranslationSettings,
    ) -> RawProviderResult: ...

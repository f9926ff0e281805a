"""Protocolos e contratos do core da aplicação."""

from .reply_sender import ReplySenderProtocol
from .translation_provider import TranslationProviderProtocol
from .translator import TranslatorProtocol

__all__ = [
    "ReplySenderProtocol",
    "TranslationProviderProtocol",
    "TranslatorProtocol",
]

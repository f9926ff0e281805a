"""Normalizers por canal — conversão de payloads externos para modelos internos.

Estrutura:
- line/: filtro de eventos do LINE Messaging API
"""

from .line import extract_actionable_message

__all__ = [
    "extract_actionable_message",
]

"""Payload builders — construção de payloads para APIs externas.

Estrutura:
- line/: mensagens de reply do LINE Messaging API
"""

__all__: list[str] = []

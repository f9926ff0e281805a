"""Connectors — adapters de borda para APIs externas.

Estrutura:
- line/: LINE Messaging API (webhook + reply)
"""

__all__: list[str] = []

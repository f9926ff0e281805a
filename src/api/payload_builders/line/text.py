"""Builder para mensagens de texto do LINE."""

from __future__ import annotations

from typing import Any

# Limite do LINE para mensagens de texto
MAX_TEXT_LENGTH = 5000


def build_text_message(text: str) -> dict[str, Any]:
    """Constrói um objeto de mensagem de texto, truncando no limite do LINE."""
    return {"type": "text", "text": text[:MAX_TEXT_LENGTH]}


def build_text_reply_payload(reply_token: str, text: str) -> dict[str, Any]:
    """Constrói o corpo completo de `/v2/bot/message/reply`.

    Args:
        reply_token: Token de uso único do evento
        text: Texto da resposta

    Returns:
        {"replyToken": ..., "messages": [{"type": "text", "text": ...}]}
    """
    return {
        "replyToken": reply_token,
        "messages": [build_text_message(text)],
    }

"""Filtro de eventos do webhook LINE.

Apenas eventos `message` com mensagem `text` são acionáveis. Os demais
(follow, unfollow, postback, sticker, image...) são válidos mas ignorados.
Função pura, sem efeitos colaterais.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.line_events import ActionableMessage

if TYPE_CHECKING:
    from app.domain.line_events import LineEvent

ACTIONABLE_EVENT_TYPE = "message"
ACTIONABLE_MESSAGE_TYPE = "text"


def extract_actionable_message(event: LineEvent) -> ActionableMessage | None:
    """Retorna texto + reply token quando o evento é uma mensagem de texto.

    Args:
        event: Evento inbound já validado estruturalmente

    Returns:
        ActionableMessage ou None para eventos não acionáveis
    """
    if event.type != ACTIONABLE_EVENT_TYPE:
        return None

    message = event.message
    if message is None or message.type != ACTIONABLE_MESSAGE_TYPE:
        return None

    if message.text is None or not event.reply_token:
        return None

    return ActionableMessage(
        text=message.text,
        reply_token=event.reply_token,
        event_id=event.webhook_event_id or message.id,
    )

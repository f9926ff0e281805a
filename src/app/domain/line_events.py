"""Modelos dos eventos de webhook do LINE Messaging API.

Apenas a estrutura mínima usada pelo serviço é validada; campos extras são
ignorados para tolerar novos tipos de evento da plataforma.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LineMessage(BaseModel):
    """Conteúdo de um evento `message`."""

    model_config = ConfigDict(extra="ignore")

    id: str | None = Field(default=None, description="ID da mensagem no LINE.")
    type: str = Field(..., description="Tipo da mensagem (text, image, sticker...).")
    text: str | None = Field(default=None, description="Texto, quando type == text.")


class LineEventSource(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    user_id: str | None = Field(default=None, alias="userId")


class LineEvent(BaseModel):
    """Evento inbound do LINE (message, follow, unfollow, postback...)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    type: str = Field(..., description="Tipo do evento.")
    reply_token: str | None = Field(default=None, alias="replyToken")
    webhook_event_id: str | None = Field(default=None, alias="webhookEventId")
    message: LineMessage | None = None
    source: LineEventSource | None = None


class LineWebhookBatch(BaseModel):
    """Corpo de uma entrega do webhook: `{destination, events: [...]}`."""

    model_config = ConfigDict(extra="ignore")

    destination: str | None = None
    events: list[LineEvent] = Field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ActionableMessage:
    """Mensagem de texto que deve ser traduzida e respondida."""

    text: str
    reply_token: str
    event_id: str | None = None

    def log_context(self) -> dict[str, Any]:
        """Campos seguros para log (sem texto nem reply token)."""
        return {"event_id": self.event_id, "text_length": len(self.text)}

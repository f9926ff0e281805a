"""Builders de payload do LINE Messaging API."""

from .text import MAX_TEXT_LENGTH, build_text_message, build_text_reply_payload

__all__ = [
    "MAX_TEXT_LENGTH",
    "build_text_message",
    "build_text_reply_payload",
]

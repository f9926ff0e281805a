"""Adapters dos provedores de tradução (Google Translate, Gemini)."""

from app.infra.translation.gemini import GeminiAdapter
from app.infra.translation.google_translate import GoogleTranslateAdapter

__all__ = [
    "GeminiAdapter",
    "GoogleTranslateAdapter",
]

"""Agregador de settings do serviço.

Re-exporta as settings de cada domínio.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.line import (
    LINE_API_BASE_URL,
    LineSettings,
    get_line_settings,
)

# Translation providers
from config.settings.translation import (
    DEFAULT_GEMINI_MODEL,
    TranslationSettings,
    get_translation_settings,
)

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "DEFAULT_SERVICE_NAME",
    "LINE_API_BASE_URL",
    "BaseSettings",
    "Environment",
    "LineSettings",
    "TranslationSettings",
    "get_base_settings",
    "get_line_settings",
    "get_translation_settings",
]

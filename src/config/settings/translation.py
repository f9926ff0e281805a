"""Settings dos provedores de tradução.

Resolvidas uma única vez no startup e compartilhadas (somente leitura)
entre todas as requisições. A presença de cada chave habilita o provedor
correspondente.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GOOGLE_TRANSLATE_API_URL: str = "https://translation.googleapis.com/language/translate/v2"
GEMINI_API_BASE_URL: str = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL: str = "gemini-1.5-flash-latest"


@dataclass(frozen=True)
class TranslationSettings:
    """Configuração imutável dos provedores de tradução.

    Attributes:
        gemini_api_key: Chave da API Gemini (provedor generativo)
        gemini_model: Modelo Gemini usado no generateContent
        gemini_api_base_url: URL base da API Gemini
        google_translate_api_key: Chave da API Google Translate v2
        google_translate_api_url: Endpoint da API Google Translate v2
        target_language_code: Código do idioma destino (ex: "en")
        target_language_name: Nome do idioma destino usado no prompt
        timeout_seconds: Timeout das chamadas aos provedores
    """

    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_api_base_url: str = GEMINI_API_BASE_URL
    google_translate_api_key: str = ""
    google_translate_api_url: str = GOOGLE_TRANSLATE_API_URL
    target_language_code: str = "en"
    target_language_name: str = "English"
    timeout_seconds: float = 15.0

    @property
    def has_google_translate(self) -> bool:
        return bool(self.google_translate_api_key)

    @property
    def has_gemini(self) -> bool:
        return bool(self.gemini_api_key)

    def gemini_endpoint(self) -> str:
        """URL do generateContent para o modelo configurado."""
        base = self.gemini_api_base_url.rstrip("/")
        return f"{base}/models/{self.gemini_model}:generateContent"

    def validate(self) -> list[str]:
        """Valida configurações de tradução.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.has_google_translate and not self.has_gemini:
            errors.append(
                "Nenhum provedor configurado (GOOGLE_TRANSLATE_API_KEY ou GEMINI_API_KEY)"
            )

        if self.has_gemini and not self.gemini_model:
            errors.append("GEMINI_MODEL não pode ser vazio")

        if not self.target_language_code:
            errors.append("TRANSLATE_TARGET_LANGUAGE_CODE não pode ser vazio")

        if self.timeout_seconds <= 0:
            errors.append("TRANSLATION_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_translation_from_env() -> TranslationSettings:
    """Carrega TranslationSettings de variáveis de ambiente."""
    return TranslationSettings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        gemini_api_base_url=os.getenv("GEMINI_API_BASE_URL", GEMINI_API_BASE_URL),
        google_translate_api_key=os.getenv("GOOGLE_TRANSLATE_API_KEY", ""),
        google_translate_api_url=os.getenv(
            "GOOGLE_TRANSLATE_API_URL", GOOGLE_TRANSLATE_API_URL
        ),
        target_language_code=os.getenv("TRANSLATE_TARGET_LANGUAGE_CODE", "en"),
        target_language_name=os.getenv("TRANSLATE_TARGET_LANGUAGE_NAME", "English"),
        timeout_seconds=float(os.getenv("TRANSLATION_TIMEOUT_SECONDS", "15")),
    )


@lru_cache(maxsize=1)
def get_translation_settings() -> TranslationSettings:
    """Retorna instância cacheada de TranslationSettings."""
    return _load_translation_from_env()

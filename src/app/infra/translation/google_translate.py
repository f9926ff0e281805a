"""Adapter do Google Cloud Translation API v2 (provedor sensível a cota).

Request:  POST {url}?key=...  {"q": texto, "target": código, "format": "text"}
Sucesso:  data.translations[0].translatedText
Erro:     {"error": {"code", "message", "errors": [{"reason": ...}]}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.translation import RawProviderResult
from app.infra.translation._http import extract_path, extract_text, post_json

if TYPE_CHECKING:
    import httpx

    from app.domain.translation import TranslationRequest
    from config.settings import TranslationSettings


PROVIDER_NAME = "google_translate"


def build_google_translate_body(request: TranslationRequest) -> dict[str, Any]:
    return {
        "q": request.text,
        "target": request.target_language_code,
        "format": "text",
    }


class GoogleTranslateAdapter:
    """Chama o Google Translate e extrai os sinais brutos da resposta."""

    __slots__ = ("_http_client",)

    name = PROVIDER_NAME

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        self._http_client = http_client

    async def call(
        self,
        request: TranslationRequest,
        config: TranslationSettings,
    ) -> RawProviderResult:
        reply = await post_json(
            self._http_client,
            provider=self.name,
            url=config.google_translate_api_url,
            params={"key": config.google_translate_api_key},
            payload=build_google_translate_body(request),
            timeout_seconds=config.timeout_seconds,
        )
        if reply.transport_error is not None:
            return RawProviderResult(transport_error=reply.transport_error)

        if not reply.is_success:
            error_info = extract_path(reply.body, "error")
            return RawProviderResult(
                status_code=reply.status_code,
                reason=extract_text(error_info, "errors", 0, "reason"),
                message=extract_text(error_info, "message") or reply.reason_phrase,
                body_parsed=reply.body_parsed,
                body=reply.body,
            )

        return RawProviderResult(
            status_code=reply.status_code,
            translated_text=extract_path(
                reply.body, "data", "translations", 0, "translatedText"
            ),
            body_parsed=reply.body_parsed,
            body=reply.body,
        )

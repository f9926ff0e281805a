"""Adapter do Gemini generateContent (provedor generativo via prompt).

Request:  POST {base}/models/{model}:generateContent?key=...
          {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
Sucesso:  candidates[0].content.parts[0].text
Erro:     {"error": {"code", "message", "status"}}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.translation import RawProviderResult
from app.infra.translation._http import extract_path, extract_text, post_json

if TYPE_CHECKING:
    import httpx

    from app.domain.translation import TranslationRequest
    from config.settings import TranslationSettings


PROVIDER_NAME = "gemini"

TRANSLATION_PROMPT_TEMPLATE = (
    "Translate the following text into {target_language_name}. "
    "Provide only the translated text, without any additional explanations "
    'or context:\n\n"{text}"'
)


def build_translation_prompt(request: TranslationRequest) -> str:
    return TRANSLATION_PROMPT_TEMPLATE.format(
        target_language_name=request.target_language_name,
        text=request.text,
    )


def build_gemini_body(request: TranslationRequest) -> dict[str, Any]:
    return {
        "contents": [
            {"role": "user", "parts": [{"text": build_translation_prompt(request)}]},
        ]
    }


class GeminiAdapter:
    """Chama o Gemini com o prompt de tradução e extrai o texto gerado."""

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
            url=config.gemini_endpoint(),
            params={"key": config.gemini_api_key},
            payload=build_gemini_body(request),
            timeout_seconds=config.timeout_seconds,
        )
        if reply.transport_error is not None:
            return RawProviderResult(transport_error=reply.transport_error)

        if not reply.is_success:
            error_info = extract_path(reply.body, "error")
            return RawProviderResult(
                status_code=reply.status_code,
                reason=extract_text(error_info, "status"),
                message=extract_text(error_info, "message") or reply.reason_phrase,
                body_parsed=reply.body_parsed,
                body=reply.body,
            )

        text = extract_path(reply.body, "candidates", 0, "content", "parts", 0, "text")
        return RawProviderResult(
            status_code=reply.status_code,
            translated_text=text.strip() if isinstance(text, str) else None,
            body_parsed=reply.body_parsed,
            body=reply.body,
        )

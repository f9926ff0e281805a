"""Testes ponta a ponta do webhook LINE via TestClient.

Provedores e API do LINE são simulados com httpx.MockTransport.
"""

from __future__ import annotations

import json

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import create_api_router
from app.bootstrap.dependencies import create_inbound_use_case
from app.domain.translation import DAILY_LIMIT_MESSAGE, GENERIC_ERROR_MESSAGE
from config.settings import LineSettings, TranslationSettings

SECRET = "channel-secret"


class FakeUpstream:
    """Simula Google Translate, Gemini e o reply do LINE num único transport."""

    def __init__(
        self,
        translate_response: httpx.Response | None = None,
        gemini_response: httpx.Response | None = None,
        failing_reply_tokens: frozenset[str] = frozenset(),
    ) -> None:
        self.translate_response = translate_response
        self.gemini_response = gemini_response
        self.failing_reply_tokens = failing_reply_tokens
        self.provider_calls: list[str] = []
        self.replies: list[dict[str, object]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.host == "translate.test":
            self.provider_calls.append("google_translate")
            text = json.loads(request.content)["q"]
            return self.translate_response or httpx.Response(
                200, json={"data": {"translations": [{"translatedText": f"[en] {text}"}]}}
            )
        if request.url.host == "gemini.test":
            self.provider_calls.append("gemini")
            return self.gemini_response or httpx.Response(
                200, json={"candidates": [{"content": {"parts": [{"text": "hi"}]}}]}
            )
        payload = json.loads(request.content)
        self.replies.append(payload)
        if payload["replyToken"] in self.failing_reply_tokens:
            return httpx.Response(400, json={"message": "Invalid reply token"})
        return httpx.Response(200, json={})


def _make_client(
    monkeypatch: pytest.MonkeyPatch,
    upstream: FakeUpstream,
    translation: TranslationSettings,
) -> TestClient:
    line = LineSettings(
        channel_secret=SECRET,
        channel_access_token="token",
        api_base_url="https://line.test",
    )
    monkeypatch.setattr("api.routes.line.webhook.get_line_settings", lambda: line)

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    app = FastAPI()
    app.include_router(create_api_router())
    app.state.inbound_use_case = create_inbound_use_case(http_client, line, translation)
    return TestClient(app)


def _google() -> TranslationSettings:
    return TranslationSettings(
        google_translate_api_key="g-key",
        google_translate_api_url="https://translate.test/v2",
    )


def _gemini() -> TranslationSettings:
    return TranslationSettings(
        gemini_api_key="m-key",
        gemini_api_base_url="https://gemini.test/v1beta",
    )


def _post(client: TestClient, payload: dict[str, object], signer, path: str = "/webhook/line"):
    body = json.dumps(payload).encode("utf-8")
    return client.post(
        path,
        content=body,
        headers={"x-line-signature": signer(body, SECRET), "content-type": "application/json"},
    )


def _text(text: str, token: str) -> dict[str, object]:
    return {
        "type": "message",
        "replyToken": token,
        "message": {"id": token, "type": "text", "text": text},
    }


def test_invalid_signature_makes_no_provider_calls(monkeypatch: pytest.MonkeyPatch) -> None:
    upstream = FakeUpstream()
    client = _make_client(monkeypatch, upstream, _google())

    response = client.post(
        "/webhook/line",
        content=b'{"events": []}',
        headers={"x-line-signature": "bad"},
    )

    assert response.status_code == 401
    assert response.text == "Invalid signature"
    assert upstream.provider_calls == []
    assert upstream.replies == []


def test_two_text_events_get_two_replies(monkeypatch: pytest.MonkeyPatch, line_signer) -> None:
    upstream = FakeUpstream()
    client = _make_client(monkeypatch, upstream, _google())

    response = _post(
        client,
        {"events": [_text("olá", "rt-1"), _text("tchau", "rt-2")]},
        line_signer,
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    replies = sorted(
        (reply["replyToken"], reply["messages"][0]["text"]) for reply in upstream.replies
    )
    assert replies == [("rt-1", "[en] olá"), ("rt-2", "[en] tchau")]


def test_daily_limit_reply(monkeypatch: pytest.MonkeyPatch, line_signer) -> None:
    upstream = FakeUpstream(
        translate_response=httpx.Response(
            403,
            json={"error": {"message": "Daily Limit Exceeded", "errors": [{"reason": "dailyLimitExceeded"}]}},
        )
    )
    client = _make_client(monkeypatch, upstream, _google())

    response = _post(client, {"events": [_text("olá", "rt-1")]}, line_signer)

    assert response.status_code == 200
    assert upstream.replies[0]["messages"][0]["text"] == DAILY_LIMIT_MESSAGE


def test_gemini_without_candidates_replies_generic_error(
    monkeypatch: pytest.MonkeyPatch,
    line_signer,
) -> None:
    upstream = FakeUpstream(gemini_response=httpx.Response(200, json={}))
    client = _make_client(monkeypatch, upstream, _gemini())

    response = _post(client, {"events": [_text("olá", "rt-1")]}, line_signer)

    assert response.status_code == 200
    assert upstream.provider_calls == ["gemini"]
    assert upstream.replies[0]["messages"][0]["text"] == GENERIC_ERROR_MESSAGE


def test_reply_failure_still_returns_200(monkeypatch: pytest.MonkeyPatch, line_signer) -> None:
    upstream = FakeUpstream(failing_reply_tokens=frozenset({"rt-2"}))
    client = _make_client(monkeypatch, upstream, _google())

    response = _post(
        client,
        {"events": [_text("a", "rt-1"), _text("b", "rt-2"), _text("c", "rt-3")]},
        line_signer,
    )

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert sorted(reply["replyToken"] for reply in upstream.replies) == ["rt-1", "rt-2", "rt-3"]


def test_non_text_events_make_no_calls(monkeypatch: pytest.MonkeyPatch, line_signer) -> None:
    upstream = FakeUpstream()
    client = _make_client(monkeypatch, upstream, _google())

    response = _post(
        client,
        {
            "events": [
                {"type": "follow", "replyToken": "rt-f"},
                {"type": "message", "replyToken": "rt-i", "message": {"type": "image"}},
            ]
        },
        line_signer,
    )

    assert response.status_code == 200
    assert upstream.provider_calls == []
    assert upstream.replies == []


def test_legacy_path_is_served(monkeypatch: pytest.MonkeyPatch, line_signer) -> None:
    upstream = FakeUpstream()
    client = _make_client(monkeypatch, upstream, _google())

    response = _post(client, {"events": []}, line_signer, path="/line-webhook")

    assert response.status_code == 200
    assert response.json() == {"success": True}


def test_malformed_batch_returns_500(monkeypatch: pytest.MonkeyPatch, line_signer) -> None:
    client = _make_client(monkeypatch, FakeUpstream(), _google())

    response = _post(client, {"events": [{"replyToken": "no-type"}]}, line_signer)

    assert response.status_code == 500
    assert response.json() == {"message": "invalid_event_batch"}


def test_no_provider_configured_replies_unavailable(
    monkeypatch: pytest.MonkeyPatch,
    line_signer,
) -> None:
    upstream = FakeUpstream()
    client = _make_client(monkeypatch, upstream, TranslationSettings())

    response = _post(client, {"events": [_text("olá", "rt-1")]}, line_signer)

    assert response.status_code == 200
    assert upstream.provider_calls == []
    assert upstream.replies[0]["messages"][0]["text"] == (
        "Translation service is currently unavailable."
    )


def test_non_ascii_signature_header_returns_401(monkeypatch: pytest.MonkeyPatch) -> None:
    upstream = FakeUpstream()
    client = _make_client(monkeypatch, upstream, _google())

    response = client.post(
        "/webhook/line",
        content=b'{"events": []}',
        headers=[(b"x-line-signature", "caf\xe9".encode("latin-1"))],
    )

    assert response.status_code == 401
    assert response.text == "Invalid signature"
    assert upstream.provider_calls == []

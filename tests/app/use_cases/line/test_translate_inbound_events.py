"""Testes do dispatcher de eventos LINE."""

from __future__ import annotations

import asyncio

import pytest

from app.domain.line_events import LineEvent
from app.domain.translation import (
    DAILY_LIMIT_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    ProviderError,
    RateLimited,
    Success,
    TranslationRequest,
)
from app.use_cases.line import BatchProcessingSummary, TranslateInboundEventsUseCase
from config.settings import TranslationSettings
from utils.errors import ReplyDeliveryError

SETTINGS = TranslationSettings(
    gemini_api_key="m",
    target_language_code="ja",
    target_language_name="Japanese",
)


def _text_event(text: str, reply_token: str) -> LineEvent:
    return LineEvent.model_validate(
        {
            "type": "message",
            "replyToken": reply_token,
            "message": {"id": f"m-{reply_token}", "type": "text", "text": text},
        }
    )


class FakeTranslator:
    """Translator fake: ecoa o texto em maiúsculas ou devolve resultado fixo."""

    def __init__(self, outcome=None, raise_on: str | None = None) -> None:
        self._outcome = outcome
        self._raise_on = raise_on
        self.requests: list[TranslationRequest] = []

    async def translate(self, request: TranslationRequest):
        self.requests.append(request)
        if self._raise_on is not None and request.text == self._raise_on:
            raise RuntimeError("unexpected")
        return self._outcome or Success(translated_text=request.text.upper())


class FakeReplySender:
    """Sender fake que registra respostas e pode falhar para um token."""

    def __init__(self, fail_token: str | None = None) -> None:
        self._fail_token = fail_token
        self.replies: list[tuple[str, str]] = []
        self.attempts: list[str] = []

    async def reply_text(self, reply_token: str, text: str) -> dict:
        self.attempts.append(reply_token)
        if reply_token == self._fail_token:
            raise ReplyDeliveryError("reply failed", status_code=400)
        self.replies.append((reply_token, text))
        return {}


def _use_case(translator: FakeTranslator, sender: FakeReplySender) -> TranslateInboundEventsUseCase:
    return TranslateInboundEventsUseCase(
        translator=translator,
        reply_sender=sender,
        translation_settings=SETTINGS,
    )


@pytest.mark.asyncio
async def test_two_text_events_receive_independent_replies() -> None:
    translator = FakeTranslator()
    sender = FakeReplySender()

    summary = await _use_case(translator, sender).handle_batch(
        [_text_event("one", "rt-1"), _text_event("two", "rt-2")]
    )

    assert summary == BatchProcessingSummary(total=2, replied=2)
    assert sorted(sender.replies) == [("rt-1", "ONE"), ("rt-2", "TWO")]


@pytest.mark.asyncio
async def test_request_uses_configured_target_language() -> None:
    translator = FakeTranslator()

    await _use_case(translator, FakeReplySender()).handle_batch([_text_event("oi", "rt-1")])

    assert translator.requests == [
        TranslationRequest(text="oi", target_language_name="Japanese", target_language_code="ja")
    ]


@pytest.mark.asyncio
async def test_non_text_events_make_no_reply_calls() -> None:
    translator = FakeTranslator()
    sender = FakeReplySender()
    events = [
        LineEvent.model_validate({"type": "follow", "replyToken": "rt-f"}),
        LineEvent.model_validate(
            {"type": "message", "replyToken": "rt-s", "message": {"type": "sticker"}}
        ),
    ]

    summary = await _use_case(translator, sender).handle_batch(events)

    assert summary == BatchProcessingSummary(total=2, skipped=2)
    assert sender.attempts == []
    assert translator.requests == []


@pytest.mark.asyncio
async def test_reply_failure_does_not_block_other_events() -> None:
    sender = FakeReplySender(fail_token="rt-2")

    summary = await _use_case(FakeTranslator(), sender).handle_batch(
        [_text_event("a", "rt-1"), _text_event("b", "rt-2"), _text_event("c", "rt-3")]
    )

    assert sorted(sender.attempts) == ["rt-1", "rt-2", "rt-3"]
    assert sorted(sender.replies) == [("rt-1", "A"), ("rt-3", "C")]
    assert summary.replied == 2
    assert summary.reply_failed == 1


@pytest.mark.asyncio
async def test_rate_limited_outcome_replies_daily_limit_message() -> None:
    sender = FakeReplySender()

    await _use_case(FakeTranslator(outcome=RateLimited()), sender).handle_batch(
        [_text_event("oi", "rt-1")]
    )

    assert sender.replies == [("rt-1", DAILY_LIMIT_MESSAGE)]


@pytest.mark.asyncio
async def test_provider_error_outcome_replies_generic_message() -> None:
    sender = FakeReplySender()

    await _use_case(FakeTranslator(outcome=ProviderError(detail="x")), sender).handle_batch(
        [_text_event("oi", "rt-1")]
    )

    assert sender.replies == [("rt-1", GENERIC_ERROR_MESSAGE)]


@pytest.mark.asyncio
async def test_unexpected_translator_exception_is_contained() -> None:
    sender = FakeReplySender()

    summary = await _use_case(FakeTranslator(raise_on="boom"), sender).handle_batch(
        [_text_event("boom", "rt-1"), _text_event("ok", "rt-2")]
    )

    assert sorted(sender.replies) == [("rt-1", GENERIC_ERROR_MESSAGE), ("rt-2", "OK")]
    assert summary.replied == 2


@pytest.mark.asyncio
async def test_events_are_processed_concurrently() -> None:
    started: list[str] = []
    release = asyncio.Event()

    class BlockingTranslator:
        async def translate(self, request: TranslationRequest):
            started.append(request.text)
            if len(started) == 2:
                release.set()
            await asyncio.wait_for(release.wait(), timeout=1.0)
            return Success(translated_text=request.text)

    sender = FakeReplySender()
    use_case = TranslateInboundEventsUseCase(
        translator=BlockingTranslator(),
        reply_sender=sender,
        translation_settings=SETTINGS,
    )

    summary = await use_case.handle_batch([_text_event("x", "rt-1"), _text_event("y", "rt-2")])

    assert summary.replied == 2
    assert sorted(started) == ["x", "y"]
    assert sorted(sender.replies) == [("rt-1", "x"), ("rt-2", "y")]


@pytest.mark.asyncio
async def test_empty_batch() -> None:
    summary = await _use_case(FakeTranslator(), FakeReplySender()).handle_batch([])
    assert summary == BatchProcessingSummary()


@pytest.mark.asyncio
async def test_reply_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("ERROR"):
        await _use_case(FakeTranslator(), FakeReplySender(fail_token="rt-1")).handle_batch(
            [_text_event("a", "rt-1")]
        )

    assert "line_reply_failed" in caplog.text


def test_summary_counts_unexpected_exceptions_as_failed() -> None:
    summary = BatchProcessingSummary.from_results([RuntimeError("x")])
    assert summary == BatchProcessingSummary(total=1, failed=1)

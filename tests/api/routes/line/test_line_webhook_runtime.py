"""Testes do despacho inline/async e dos lotes em background."""

from __future__ import annotations

import asyncio
from types import SimpleNamespace

import pytest

from api.routes.line import webhook_runtime
from api.routes.line.webhook_runtime import BackgroundBatches
from app.use_cases.line import BatchProcessingSummary

INLINE = SimpleNamespace(webhook_processing_mode="inline")
ASYNC = SimpleNamespace(webhook_processing_mode="ASYNC")


class RecordingUseCase:
    def __init__(self, gate: asyncio.Event | None = None) -> None:
        self.gate = gate
        self.handled: list[list[object]] = []

    async def handle_batch(self, events):
        if self.gate is not None:
            await self.gate.wait()
        self.handled.append(list(events))
        return BatchProcessingSummary(total=len(events), replied=len(events))


class ExplodingUseCase:
    async def handle_batch(self, events):
        raise RuntimeError("boom")


@pytest.fixture
async def batches(monkeypatch: pytest.MonkeyPatch):
    runner = BackgroundBatches(max_concurrent=2)
    monkeypatch.setattr(webhook_runtime, "background_batches", runner)
    yield runner
    await runner.drain(timeout_seconds=0.01)


@pytest.mark.asyncio
async def test_inline_mode_waits_for_batch(
    batches: BackgroundBatches,
    caplog: pytest.LogCaptureFixture,
) -> None:
    use_case = RecordingUseCase()

    with caplog.at_level("INFO"):
        summary = await webhook_runtime.dispatch_events(
            events=["e1", "e2"],
            correlation_id="corr-inline",
            use_case=use_case,
            settings=INLINE,
        )

    assert summary is not None
    assert summary.replied == 2
    assert use_case.handled == [["e1", "e2"]]
    assert batches.pending == 0
    completed = [r for r in caplog.records if r.getMessage() == "webhook_processing_completed"]
    assert completed[0].mode == "inline"


@pytest.mark.asyncio
async def test_async_mode_returns_before_processing_and_logs_summary(
    batches: BackgroundBatches,
    caplog: pytest.LogCaptureFixture,
) -> None:
    gate = asyncio.Event()
    use_case = RecordingUseCase(gate=gate)

    with caplog.at_level("INFO"):
        summary = await webhook_runtime.dispatch_events(
            events=["e1"],
            correlation_id="corr-async",
            use_case=use_case,
            settings=ASYNC,
        )

        assert summary is None
        assert use_case.handled == []
        assert batches.pending == 1

        gate.set()
        await webhook_runtime.drain_background_tasks(timeout_seconds=1.0)

    assert use_case.handled == [["e1"]]
    assert batches.pending == 0
    completed = [r for r in caplog.records if r.getMessage() == "webhook_processing_completed"]
    assert len(completed) == 1
    assert completed[0].mode == "async"
    assert completed[0].correlation_id == "corr-async"
    assert completed[0].replied == 1


@pytest.mark.asyncio
async def test_failed_background_batch_is_logged(
    batches: BackgroundBatches,
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level("ERROR"):
        batches.schedule(events=["e1"], correlation_id="corr-boom", use_case=ExplodingUseCase())
        await batches.drain(timeout_seconds=1.0)

    assert "webhook_processing_task_failed" in caplog.text
    assert batches.pending == 0


@pytest.mark.asyncio
async def test_drain_cancels_batches_past_deadline(
    batches: BackgroundBatches,
    caplog: pytest.LogCaptureFixture,
) -> None:
    never = asyncio.Event()
    use_case = RecordingUseCase(gate=never)
    batches.schedule(events=["e1"], correlation_id="corr-stuck", use_case=use_case)
    await asyncio.sleep(0)

    with caplog.at_level("WARNING"):
        await batches.drain(timeout_seconds=0.01)

    assert "webhook_processing_shutdown_cancelled" in caplog.text
    assert batches.pending == 0
    assert use_case.handled == []


@pytest.mark.asyncio
async def test_concurrency_limit_holds_extra_batches(batches: BackgroundBatches) -> None:
    gate = asyncio.Event()
    use_case = RecordingUseCase(gate=gate)
    entered: list[str] = []

    class CountingUseCase:
        async def handle_batch(self, events):
            entered.append(events[0])
            return await use_case.handle_batch(events)

    for name in ("a", "b", "c"):
        batches.schedule(events=[name], correlation_id=name, use_case=CountingUseCase())
    await asyncio.sleep(0.01)

    assert len(entered) == 2
    assert batches.pending == 3

    gate.set()
    await batches.drain(timeout_seconds=1.0)

    assert sorted(entered) == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_drain_without_batches_returns_immediately(batches: BackgroundBatches) -> None:
    await webhook_runtime.drain_background_tasks(timeout_seconds=0.01)

    assert batches.pending == 0

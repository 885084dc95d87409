"""Unit tests for the debounced analysis scheduler."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

import pytest

from assist_engine.diagnostics import create_default_engine
from assist_engine.models import Diagnostic
from assist_engine.scheduling import AnalysisScheduler

_DELAY = 0.01


class _Recorder:
    def __init__(self) -> None:
        self.published: list[tuple[str, list[Diagnostic]]] = []

    def __call__(self, document_id: str, diagnostics: Sequence[Diagnostic]) -> None:
        self.published.append((document_id, list(diagnostics)))


@pytest.fixture
def recorder() -> _Recorder:
    return _Recorder()


@pytest.fixture
def scheduler(recorder: _Recorder) -> AnalysisScheduler:
    return AnalysisScheduler(create_default_engine().analyze, recorder, delay_seconds=_DELAY)


class TestAnalysisScheduler:
    @pytest.mark.asyncio
    async def test_pass_runs_after_quiescence(self, scheduler, recorder):
        scheduler.schedule("doc", "(a, b")
        assert scheduler.pending("doc")
        assert recorder.published == []

        await asyncio.sleep(_DELAY * 5)

        assert not scheduler.pending("doc")
        assert [(doc, [d.message for d in ds]) for doc, ds in recorder.published] == [
            ("doc", ["Unmatched parentheses"]),
        ]

    @pytest.mark.asyncio
    async def test_last_edit_wins(self, scheduler, recorder):
        scheduler.schedule("doc", "(")
        scheduler.schedule("doc", "SELECT")
        await asyncio.sleep(_DELAY * 5)

        assert len(recorder.published) == 1
        assert [d.rule_id for d in recorder.published[0][1]] == ["dangling-select"]
        assert scheduler.completed_passes == 1

    @pytest.mark.asyncio
    async def test_clean_text_publishes_empty_set(self, scheduler, recorder):
        scheduler.schedule("doc", "SELECT 1")
        await asyncio.sleep(_DELAY * 5)
        assert recorder.published == [("doc", [])]

    @pytest.mark.asyncio
    async def test_documents_are_independent(self, scheduler, recorder):
        scheduler.schedule("a", "(")
        scheduler.schedule("b", "SELECT")
        await asyncio.sleep(_DELAY * 5)
        assert sorted(doc for doc, _ in recorder.published) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_cancel_discards_pending_pass(self, scheduler, recorder):
        scheduler.schedule("doc", "(")
        assert scheduler.cancel("doc") is True
        assert scheduler.cancel("doc") is False
        await asyncio.sleep(_DELAY * 5)
        assert recorder.published == []

    @pytest.mark.asyncio
    async def test_cancel_all(self, scheduler, recorder):
        scheduler.schedule("a", "(")
        scheduler.schedule("b", "(")
        scheduler.cancel_all()
        await asyncio.sleep(_DELAY * 5)
        assert recorder.published == []

    @pytest.mark.asyncio
    async def test_flush_runs_immediately(self, scheduler, recorder):
        scheduler.schedule("doc", "(")
        assert scheduler.flush("doc") is True
        assert len(recorder.published) == 1
        assert scheduler.flush("doc") is False

        await asyncio.sleep(_DELAY * 5)
        assert len(recorder.published) == 1

    def test_schedule_requires_running_loop(self, scheduler):
        with pytest.raises(RuntimeError):
            scheduler.schedule("doc", "(")

    def test_negative_delay_rejected(self, recorder):
        with pytest.raises(ValueError):
            AnalysisScheduler(create_default_engine().analyze, recorder, delay_seconds=-1)

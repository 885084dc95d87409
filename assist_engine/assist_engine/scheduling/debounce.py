"""Debounced analysis passes on the asyncio event loop.

Each text change schedules a pass for its document.  Scheduling again
before the quiescence window elapses cancels the unfired pass, so at most
one pass is pending per document and the last edit wins.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from assist_engine.models import Diagnostic

logger = logging.getLogger(__name__)

Analyze = Callable[[str], Sequence[Diagnostic]]
Publish = Callable[[str, Sequence[Diagnostic]], None]


@dataclass(slots=True)
class _PendingPass:
    text: str
    handle: asyncio.TimerHandle


class AnalysisScheduler:
    """Cancellable deferred analysis, one pending pass per document.

    Parameters
    ----------
    analyze:
        Pure function from document text to diagnostics.
    publish:
        Receives ``(document_id, diagnostics)`` when a pass completes.  The
        full set is always passed; it replaces whatever was published before.
    delay_seconds:
        Quiescence window since the last scheduling request.
    """

    def __init__(self, analyze: Analyze, publish: Publish, delay_seconds: float = 0.5) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0")
        self._analyze = analyze
        self._publish = publish
        self._delay = delay_seconds
        self._pending: dict[str, _PendingPass] = {}
        self._completed = 0

    @property
    def delay_seconds(self) -> float:
        return self._delay

    @property
    def completed_passes(self) -> int:
        return self._completed

    def schedule(self, document_id: str, text: str) -> None:
        """Schedule a pass over *text*, superseding any unfired pass.

        Must be called from a running event loop.
        """
        loop = asyncio.get_running_loop()
        if self.cancel(document_id):
            logger.debug("Superseded pending analysis", extra={"document_id": document_id})
        handle = loop.call_later(self._delay, self._fire, document_id)
        self._pending[document_id] = _PendingPass(text=text, handle=handle)

    def pending(self, document_id: str) -> bool:
        return document_id in self._pending

    def cancel(self, document_id: str) -> bool:
        """Discard the unfired pass for *document_id*.  Returns True if one existed."""
        pending = self._pending.pop(document_id, None)
        if pending is None:
            return False
        pending.handle.cancel()
        return True

    def cancel_all(self) -> None:
        for document_id in list(self._pending):
            self.cancel(document_id)

    def flush(self, document_id: str) -> bool:
        """Run the pending pass for *document_id* now.  Returns True if one ran."""
        pending = self._pending.pop(document_id, None)
        if pending is None:
            return False
        pending.handle.cancel()
        self._run(document_id, pending.text)
        return True

    def _fire(self, document_id: str) -> None:
        pending = self._pending.pop(document_id, None)
        if pending is None:
            return
        self._run(document_id, pending.text)

    def _run(self, document_id: str, text: str) -> None:
        diagnostics = self._analyze(text)
        self._publish(document_id, diagnostics)
        self._completed += 1

"""Query orchestration -- the run latch and the hint fallback.

Two outbound calls leave the editor: running the learner's query and
fetching a hint.  Runs are serialized by a :class:`RunLatch` (extra
requests are dropped, not queued).  Hints ignore the latch and never fail
from the caller's point of view: any error becomes the fallback hint.

In-flight calls are never cancelled.  A late hint response for an older
request still overwrites :attr:`QueryOrchestrator.last_hint`; responses are
not ordered against newer requests.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any, Protocol

from assist_engine.config import DEFAULT_FALLBACK_HINT
from assist_engine.errors import AssistEngineError, QueryRunError
from assist_engine.orchestration.latch import RunLatch

logger = logging.getLogger(__name__)

RunAction = Callable[[str], Awaitable[Any]]


class HintSource(Protocol):
    async def get_hint(self, assignment_id: str, query: str) -> str: ...


class RunOutcome(str, Enum):
    """What happened to a run request."""

    COMPLETED = "COMPLETED"
    SKIPPED_EMPTY = "SKIPPED_EMPTY"
    SKIPPED_BUSY = "SKIPPED_BUSY"


class QueryOrchestrator:
    """Guards run submission and converts hint failures into a fallback.

    Parameters
    ----------
    run_action:
        Coroutine function that submits the query to the backend.  May be
        omitted for hint-only use, in which case :meth:`run` raises.
    hint_client:
        Source of hints, usually a
        :class:`~assist_engine.orchestration.hint_client.HintServiceClient`.
    assignment_id:
        Identifier of the current assignment; hints are only requested
        when it is set.
    fallback_hint:
        Text returned when a hint cannot be obtained.
    """

    def __init__(
        self,
        run_action: RunAction | None = None,
        hint_client: HintSource | None = None,
        assignment_id: str | None = None,
        *,
        fallback_hint: str = DEFAULT_FALLBACK_HINT,
        latch: RunLatch | None = None,
    ) -> None:
        self._run_action = run_action
        self._hint_client = hint_client
        self._latch = latch or RunLatch()
        self._hints_in_flight = 0
        self.assignment_id = assignment_id
        self.fallback_hint = fallback_hint
        self.last_result: Any = None
        self.last_hint: str | None = None

    @property
    def latch(self) -> RunLatch:
        return self._latch

    @property
    def running(self) -> bool:
        return self._latch.held

    @property
    def loading_hint(self) -> bool:
        return self._hints_in_flight > 0

    async def run(self, query: str) -> RunOutcome:
        """Submit *query* unless it is blank or a run is already outstanding.

        Raises
        ------
        QueryRunError
            If the run action fails.  The latch is released before the
            error propagates.
        AssistEngineError
            If the orchestrator was built without a run action.
        """
        if self._run_action is None:
            raise AssistEngineError("No run action configured")

        if not query.strip():
            return RunOutcome.SKIPPED_EMPTY

        if not self._latch.try_acquire():
            logger.info("Run request dropped: a run is already in progress")
            return RunOutcome.SKIPPED_BUSY

        try:
            self.last_result = await self._run_action(query)
        except Exception as exc:
            logger.error(
                "Query run failed: %s",
                exc,
                extra={"assignment_id": self.assignment_id},
            )
            raise QueryRunError(query, exc) from exc
        finally:
            self._latch.release()

        return RunOutcome.COMPLETED

    async def request_hint(self, query: str) -> str | None:
        """Fetch a hint for *query*.

        Returns ``None`` without making a request when no assignment (or no
        hint client) is configured.  Any failure yields :attr:`fallback_hint`.
        """
        if self.assignment_id is None or self._hint_client is None:
            return None

        assignment_id = self.assignment_id
        self._hints_in_flight += 1
        try:
            hint = await self._hint_client.get_hint(assignment_id, query)
        except Exception as exc:
            logger.warning(
                "Hint request failed, using fallback: %s",
                exc,
                extra={"assignment_id": assignment_id},
            )
            hint = self.fallback_hint
        finally:
            self._hints_in_flight -= 1

        self.last_hint = hint
        return hint

"""Run and hint orchestration around the external backend."""

from assist_engine.orchestration.hint_client import HintServiceClient
from assist_engine.orchestration.latch import RunLatch
from assist_engine.orchestration.orchestrator import QueryOrchestrator, RunOutcome

__all__ = [
    "HintServiceClient",
    "QueryOrchestrator",
    "RunLatch",
    "RunOutcome",
]

"""Exception hierarchy for the assist engine.

Malformed SQL is never an exception: it is reported as diagnostics.  These
errors cover the boundaries where the engine talks to its collaborators
(schema payloads, the hint service, the run action).
"""

from __future__ import annotations


class AssistEngineError(Exception):
    """Base class for all assist engine errors."""


class SchemaLoadError(AssistEngineError):
    """Raised when an assignment schema payload cannot be validated."""


class HintServiceError(AssistEngineError):
    """Raised by the hint client when a hint could not be obtained.

    The orchestrator converts this into the fallback hint; it never reaches
    the user as an error.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class QueryRunError(AssistEngineError):
    """Raised when the run action fails.  The run latch is already released."""

    def __init__(self, query: str, cause: BaseException) -> None:
        self.query = query
        self.cause = cause
        super().__init__(f"Query run failed: {cause}")

"""Holds the last published diagnostic set per document."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from assist_engine.models import Diagnostic

logger = logging.getLogger(__name__)


class DiagnosticPublisher:
    """Per-document store of the most recent analysis result.

    Every :meth:`publish` replaces the document's set wholesale; results
    from earlier passes never accumulate.
    """

    def __init__(self) -> None:
        self._published: dict[str, tuple[Diagnostic, ...]] = {}
        self._versions: dict[str, int] = {}

    def publish(self, document_id: str, diagnostics: Sequence[Diagnostic]) -> None:
        self._published[document_id] = tuple(diagnostics)
        self._versions[document_id] = self._versions.get(document_id, 0) + 1
        logger.debug(
            "Published %d diagnostic(s)",
            len(diagnostics),
            extra={"document_id": document_id},
        )

    def get(self, document_id: str) -> tuple[Diagnostic, ...]:
        """Return the current set for *document_id* (empty if never published)."""
        return self._published.get(document_id, ())

    def version(self, document_id: str) -> int:
        """Number of publishes seen for *document_id*."""
        return self._versions.get(document_id, 0)

    def clear(self, document_id: str) -> None:
        self._published.pop(document_id, None)
        self._versions.pop(document_id, None)

    def __contains__(self, document_id: str) -> bool:
        return document_id in self._published

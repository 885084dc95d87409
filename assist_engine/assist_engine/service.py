"""QueryAssistant -- the catalog-scoped facade the editor adapter talks to.

The host editor owns all UI state and calls three pure capability
methods: :meth:`QueryAssistant.analyze`,
:meth:`QueryAssistant.provide_completions` and
:meth:`QueryAssistant.provide_hover`.  The schema and suggestion catalogs
are rebuilt only by :meth:`QueryAssistant.load_schema`, i.e. when the
assignment changes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from assist_engine.catalog import SchemaCatalog, parse_tables
from assist_engine.completion import CompletionProvider, SuggestionCatalog
from assist_engine.config import Settings, load_settings
from assist_engine.diagnostics import DiagnosticEngine, DiagnosticPublisher, create_default_engine
from assist_engine.hover import HoverProvider
from assist_engine.models import Diagnostic, HoverResult, Position, Suggestion, Table
from assist_engine.scheduling import AnalysisScheduler

logger = logging.getLogger(__name__)


class QueryAssistant:
    """Diagnostics, completions and hovers for one assignment's editor.

    Parameters
    ----------
    settings:
        Optional settings; loaded from the environment when ``None``.
    engine:
        Optional diagnostic engine; the built-in rule set is used when
        ``None``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        engine: DiagnosticEngine | None = None,
    ) -> None:
        self._settings = settings or load_settings()
        self._engine = engine or create_default_engine()
        self._catalog = SchemaCatalog()
        self._suggestions = SuggestionCatalog(self._catalog)
        self._completions = CompletionProvider(self._suggestions)
        self._hovers = HoverProvider(self._catalog)
        self._publisher = DiagnosticPublisher()

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def catalog(self) -> SchemaCatalog:
        return self._catalog

    @property
    def suggestions(self) -> SuggestionCatalog:
        return self._suggestions

    @property
    def publisher(self) -> DiagnosticPublisher:
        return self._publisher

    def load_schema(self, tables: Iterable[Table | Mapping[str, Any]]) -> None:
        """Replace the schema and regenerate every schema-derived suggestion.

        Raises :class:`~assist_engine.errors.SchemaLoadError` for invalid
        payloads, in which case nothing changes.
        """
        parsed = parse_tables(tables)
        self._catalog.load(parsed)
        self._suggestions.rebuild(self._catalog)
        logger.info("Loaded assignment schema with %d table(s)", len(parsed))

    def analyze(self, text: str) -> list[Diagnostic]:
        return self._engine.analyze(text)

    def provide_completions(self, text: str, position: Position) -> list[Suggestion]:
        return self._completions.provide_completions(text, position)

    def provide_hover(self, word: str) -> str | None:
        return self._hovers.provide_hover(word)

    def provide_hover_at(self, text: str, position: Position) -> HoverResult | None:
        return self._hovers.provide_hover_at(text, position)

    def create_scheduler(self, delay_seconds: float | None = None) -> AnalysisScheduler:
        """Build a debounced scheduler that publishes into :attr:`publisher`."""
        if delay_seconds is None:
            delay_seconds = self._settings.debounce_seconds
        return AnalysisScheduler(self.analyze, self._publisher.publish, delay_seconds)

    def diagnostics_for(self, document_id: str) -> tuple[Diagnostic, ...]:
        return self._publisher.get(document_id)

"""Unit tests for the QueryAssistant facade."""

from __future__ import annotations

import asyncio

import pytest

from assist_engine.config import Settings
from assist_engine.errors import SchemaLoadError
from assist_engine.models import Position
from assist_engine.service import QueryAssistant


@pytest.fixture
def assistant(users_schema) -> QueryAssistant:
    qa = QueryAssistant(settings=Settings(debounce_ms=10))
    qa.load_schema(users_schema)
    return qa


class TestQueryAssistant:
    def test_analyze(self, assistant):
        assert [d.message for d in assistant.analyze("FROM SELECT * users")] == ["SELECT must come before FROM"]

    def test_completions_include_schema(self, assistant):
        labels = {s.label for s in assistant.provide_completions("SELECT ", Position(line=1, column=8))}
        assert {"users", "users.id", "id", "SELECT", "COUNT(*)"} <= labels

    def test_hover(self, assistant):
        assert assistant.provide_hover("users").startswith("**Table: users**")
        assert assistant.provide_hover("unknown_word") is None

    def test_hover_at(self, assistant):
        result = assistant.provide_hover_at("SELECT id FROM users", Position(line=1, column=8))
        assert result is not None
        assert result.contents.startswith("**Column: id**")

    def test_schema_change_replaces_suggestions_and_hovers(self, assistant, shop_schema):
        assistant.load_schema(shop_schema)

        labels = {s.label for s in assistant.provide_completions("", Position(line=1, column=1))}
        assert "users" not in labels
        assert "orders.total" in labels
        assert assistant.provide_hover("users") is None
        assert assistant.provide_hover("total").endswith("Table: orders")

    def test_invalid_schema_keeps_previous_assignment(self, assistant):
        with pytest.raises(SchemaLoadError):
            assistant.load_schema([{"columns": "nope"}])

        labels = {s.label for s in assistant.provide_completions("", Position(line=1, column=1))}
        assert "users.id" in labels
        assert assistant.catalog.find_table("users") is not None

    def test_scheduler_uses_configured_window(self, assistant):
        assert assistant.create_scheduler().delay_seconds == pytest.approx(0.01)
        assert assistant.create_scheduler(delay_seconds=2).delay_seconds == 2

    @pytest.mark.asyncio
    async def test_debounced_diagnostics_are_published(self, assistant):
        scheduler = assistant.create_scheduler()
        scheduler.schedule("editor", "(")
        scheduler.schedule("editor", "SELECT ")
        await asyncio.sleep(0.05)

        published = assistant.diagnostics_for("editor")
        assert [d.message for d in published] == ["Missing column specification after SELECT"]
        assert assistant.publisher.version("editor") == 1

    @pytest.mark.asyncio
    async def test_publish_replaces_previous_set(self, assistant):
        scheduler = assistant.create_scheduler()
        scheduler.schedule("editor", "(\n(")
        scheduler.flush("editor")
        assert len(assistant.diagnostics_for("editor")) == 2

        scheduler.schedule("editor", "SELECT 1")
        scheduler.flush("editor")
        assert assistant.diagnostics_for("editor") == ()

    def test_unknown_document_has_no_diagnostics(self, assistant):
        assert assistant.diagnostics_for("never") == ()

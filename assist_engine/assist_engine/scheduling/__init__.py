"""Deferred analysis scheduling."""

from assist_engine.scheduling.debounce import AnalysisScheduler

__all__ = ["AnalysisScheduler"]

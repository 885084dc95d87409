"""QueryLab assist engine -- SQL diagnostics, completion and hover for the query editor."""

__version__ = "0.3.0"

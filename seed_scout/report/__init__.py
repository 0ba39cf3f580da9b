# File: seed_scout/report/__init__.py
"""seed_scout.report: the persisted result store and the run summary used by the CLI and tests."""

from __future__ import annotations

from .store import ResultStore
from .summary import render_html, render_table

__all__ = ["ResultStore", "render_html", "render_table"]

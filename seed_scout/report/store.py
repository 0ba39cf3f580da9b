# seed_scout/report/store.py

"""
Persistent per-vendor result map (``data/vendor-urls.json``).

The file is the hand-off to the extraction pipeline::

    {"<vendor>": {"discovered": 3, "urls": [...], "strategy": "sitemap"}, ...}

Runs are incremental: only vendors processed in the current run are
replaced, every other entry is written back exactly as it was loaded.
"""
from __future__ import annotations

import contextlib
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, Union

from seed_scout.crawler.models import DiscoveryResult
from seed_scout.errors import StoreError
from seed_scout.logger import logger


class ResultStore:
    """Vendor → result mapping loaded from and saved to a JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)
        self.entries: Dict[str, Any] = {}

    def load(self) -> Dict[str, Any]:
        """Read the store; a missing or unreadable file counts as empty."""
        self.entries = {}
        if not self.path.is_file():
            return self.entries
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable result store %s: %s", self.path, exc)
            return self.entries
        if not isinstance(data, dict):
            logger.warning(
                "Ignoring result store %s: top level is %s, not an object",
                self.path,
                type(data).__name__,
            )
            return self.entries
        self.entries = data
        return self.entries

    def merge(self, vendor: str, result: DiscoveryResult) -> None:
        """Replace (or add) the entry of *vendor* only."""
        self.entries[vendor] = result.to_dict()

    def save(self) -> Path:
        """Write the store atomically (temp file + rename in the same directory)."""
        serialized = json.dumps(self.entries, ensure_ascii=False, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=self.path.name, suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(serialized)
                    handle.flush()
                    os.fsync(handle.fileno())
                os.replace(temp_path, self.path)
            finally:
                with contextlib.suppress(FileNotFoundError):
                    os.unlink(temp_path)
        except OSError as exc:
            raise StoreError(f"Cannot write result store {self.path}: {exc}") from exc
        return self.path


__all__ = ["ResultStore"]

# File: seed_scout/errors.py
"""seed_scout.errors: exceptions surfaced to the operator.

Network and parse failures never show up here: the fetcher and the payload
parsers turn them into "no data" values. Only conditions that end the
invocation (or that the CLI must report) are modelled as exceptions.
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Sequence


class SeedScoutError(Exception):
    """Base exception for all SeedScout errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.context = context or {}


class VendorFilterError(SeedScoutError):
    """The ``--vendor`` filter did not match any configured vendor."""

    def __init__(self, vendor_filter: str, available: Sequence[str]) -> None:
        super().__init__(
            f'No vendor matching "{vendor_filter}". Available: {", ".join(available)}',
            {"filter": vendor_filter, "available": list(available)},
        )
        self.vendor_filter = vendor_filter
        self.available = list(available)


class StoreError(SeedScoutError):
    """Writing the result store failed."""


__all__ = ["SeedScoutError", "VendorFilterError", "StoreError"]

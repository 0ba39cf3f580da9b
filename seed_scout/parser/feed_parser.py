# File: seed_scout/parser/feed_parser.py
"""seed_scout.parser.feed_parser: validation of paginated JSON product feeds (``/products.json``)."""

from __future__ import annotations

import json
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from seed_scout.logger import logger


class FeedProduct(BaseModel):
    """One feed entry; only the handle matters for discovery."""
    model_config = ConfigDict(extra="ignore")

    handle: Optional[str] = None


class FeedPage(BaseModel):
    """A feed page: the entries that validated plus the raw entry count.

    ``item_count`` counts every element of the ``products`` array, valid or
    not, so pagination decisions see the page size the vendor actually sent.
    """
    model_config = ConfigDict(extra="ignore")

    products: List[FeedProduct]
    item_count: int = 0

    @property
    def skipped(self) -> int:
        return self.item_count - len(self.products)

    def handles(self) -> List[str]:
        """Non-empty handles in feed order."""
        return [p.handle.strip() for p in self.products if p.handle and p.handle.strip()]


def _validate_items(items: list) -> List[FeedProduct]:
    products: List[FeedProduct] = []
    for item in items:
        try:
            products.append(FeedProduct.model_validate(item))
        except ValidationError as exc:
            logger.debug("Skipping invalid feed entry %r: %s", item, exc.errors()[0]["msg"])
    return products


def parse_feed_page(text: str) -> Optional[FeedPage]:
    """Return the validated page, or None when *text* is not a product feed.

    A body that is not JSON, not an object, or lacks a ``products`` array is
    treated as "no feed" rather than as an error. Entries are validated one
    by one: a malformed entry is skipped and the rest of the page is kept.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        return None
    if not isinstance(data, dict) or not isinstance(data.get("products"), list):
        return None
    items = data["products"]
    return FeedPage(products=_validate_items(items), item_count=len(items))

# === FILE: seed_scout/config.py ===
"""
Loading and validation of the SeedScout discovery configuration.
Pydantic describes the schema; YAML and JSON files are accepted.
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from seed_scout.errors import VendorFilterError

DEFAULT_VENDORS: tuple[str, ...] = (
    "johnnyseeds.com",
    "rareseeds.com",
    "marysheirloomseeds.com",
    "territorialseed.com",
    "burpee.com",
    "highmowingseeds.com",
    "botanicalinterests.com",
    "edenbrothers.com",
    "parkseed.com",
    "outsidepride.com",
    "swallowtailgardenseeds.com",
    "superseeds.com",
    "sowrightseeds.com",
    "sandiegoseedcompany.com",
    "victoryseeds.com",
    "hudsonvalleyseed.com",
    "southernexposure.com",
    "fedcoseeds.com",
    "floretflowers.com",
    "reneesgarden.com",
    "theodorepayne.org",
    "nativewest.com",
    "growitalian.com",
    "migardener.com",
    "row7seeds.com",
    "seedsavers.org",
    "selectseeds.com",
)

DEFAULT_USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/131.0.0.0 Safari/537.36 Edg/131.0.0.0",
)

DEFAULT_SITEMAP_PATHS: tuple[str, ...] = (
    "/sitemap.xml",
    "/sitemap_products_1.xml",
    "/sitemap_products.xml",
    "/sitemap-products.xml",
    "/sitemap_index.xml",
)

DEFAULT_CATALOG_PATHS: tuple[str, ...] = (
    "/collections",
    "/collections/all",
    "/products",
    "/shop",
    "/seeds",
    "/seed",
    "/vegetables",
    "/flowers",
    "/herbs",
    "/catalog",
    "/store",
)


def _clean_vendor(value: str) -> str:
    vendor = value.strip().lower()
    if vendor.startswith("www."):
        vendor = vendor[4:]
    return vendor


class DiscoveryConfig(BaseModel):
    """Configuration for one discovery run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    vendors: List[str] = Field(
        default_factory=lambda: list(DEFAULT_VENDORS),
        description="Vendor domains to crawl, without the www. prefix.",
    )
    base_url_template: str = Field(
        "https://www.{vendor}", description="Base URL for a vendor; must contain {vendor}."
    )
    output_path: Path = Field(
        Path("data/vendor-urls.json"), description="Persisted per-vendor result map."
    )

    delay_base: float = Field(1.5, ge=0, description="Fixed part of the pre-request delay (s).")
    delay_jitter: float = Field(1.5, ge=0, description="Random extra delay upper bound (s).")

    robots_timeout: float = Field(8.0, gt=0, description="Timeout for robots.txt (s).")
    probe_timeout: float = Field(10.0, gt=0, description="Timeout for the feed probe (s).")
    feed_timeout: float = Field(20.0, gt=0, description="Timeout for a feed page (s).")
    sitemap_timeout: float = Field(15.0, gt=0, description="Timeout for a sitemap (s).")
    catalog_timeout: float = Field(15.0, gt=0, description="Timeout for a catalog page (s).")
    retry_times: int = Field(0, ge=0, description="Extra attempts on 429/5xx responses.")

    feed_page_size: int = Field(250, ge=1, description="Items requested per feed page.")
    feed_max_pages: int = Field(100, ge=1, description="Safety cap on feed pages.")
    max_child_sitemaps: int = Field(20, ge=0, description="Child sitemaps followed per index.")
    catalog_max_pages: int = Field(20, ge=1, description="Last ?page=N tried per catalog path.")

    sitemap_paths: List[str] = Field(default_factory=lambda: list(DEFAULT_SITEMAP_PATHS))
    catalog_paths: List[str] = Field(default_factory=lambda: list(DEFAULT_CATALOG_PATHS))
    user_agents: List[str] = Field(
        default_factory=lambda: list(DEFAULT_USER_AGENTS), min_length=1
    )
    extra_junk_patterns: List[str] = Field(
        default_factory=list, description="Extra non-product path regexes."
    )

    @field_validator("vendors")
    @classmethod
    def _normalize_vendors(cls, v: List[str]) -> List[str]:
        cleaned = [_clean_vendor(item) for item in v]
        if any(not item for item in cleaned):
            raise ValueError("vendor domains must not be empty")
        if len(set(cleaned)) != len(cleaned):
            raise ValueError("vendor domains must be unique")
        return cleaned

    @field_validator("base_url_template")
    @classmethod
    def _check_template(cls, v: str) -> str:
        if "{vendor}" not in v:
            raise ValueError("base_url_template must contain '{vendor}'")
        return v.rstrip("/")

    @field_validator("sitemap_paths", "catalog_paths")
    @classmethod
    def _check_paths(cls, v: List[str]) -> List[str]:
        bad = [p for p in v if not p.startswith("/")]
        if bad:
            raise ValueError(f"paths must start with '/': {bad}")
        return v

    @field_validator("extra_junk_patterns")
    @classmethod
    def _check_patterns(cls, v: List[str]) -> List[str]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as exc:
                raise ValueError(f"invalid regex {pattern!r}: {exc}") from exc
        return v

    def base_url(self, vendor: str) -> str:
        """Root URL every request for *vendor* is built from."""
        return self.base_url_template.format(vendor=vendor)

    def select_vendors(self, vendor_filter: Optional[str]) -> List[str]:
        """Vendors whose domain contains *vendor_filter* (all when it is empty)."""
        if not vendor_filter:
            return list(self.vendors)
        selected = [v for v in self.vendors if vendor_filter.lower() in v]
        if not selected:
            raise VendorFilterError(vendor_filter, self.vendors)
        return selected


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> DiscoveryConfig:
    """
    Read YAML or JSON and return a validated DiscoveryConfig.

    Without *path* the project default ``configs/default.yaml`` is used when
    present, otherwise the built-in defaults. A named file that does not
    exist raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return DiscoveryConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return DiscoveryConfig(**data)


__all__ = [
    "DiscoveryConfig",
    "load_config",
    "DEFAULT_VENDORS",
    "DEFAULT_USER_AGENTS",
    "DEFAULT_SITEMAP_PATHS",
    "DEFAULT_CATALOG_PATHS",
]

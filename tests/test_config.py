# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from seed_scout.config import DEFAULT_VENDORS, DiscoveryConfig, load_config
from seed_scout.errors import VendorFilterError


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("vendors: [a.example, WWW.B.example]\ndelay_base: 0", ".yaml", None),
        (json.dumps({"vendors": ["a.example", "b.example"]}), ".json", None),
        ("vendors: [a.example]\nunknown_field: 1", ".yaml", ValidationError),
        ("- just\n- a list", ".yaml", TypeError),
        ("vendors: [a.example", ".yaml", ValueError),
        ("{not json", ".json", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, DiscoveryConfig)
        assert cfg.vendors == ["a.example", "b.example"]


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_config_unsupported_suffix(tmp_path):
    with pytest.raises(ValueError):
        load_config(write_file(tmp_path, "vendors = []", ".toml"))


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cfg = load_config(None)
    assert cfg.vendors == list(DEFAULT_VENDORS)
    assert len(cfg.vendors) == 27
    assert cfg.feed_page_size == 250
    assert cfg.feed_max_pages == 100
    assert cfg.output_path == Path("data/vendor-urls.json")


def test_load_config_project_default(tmp_path, monkeypatch):
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("vendors: [only.example]", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert load_config(None).vendors == ["only.example"]


def test_repository_default_config_loads():
    default = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
    cfg = load_config(default)
    assert cfg.vendors == list(DEFAULT_VENDORS)
    assert cfg.delay_base == 1.5 and cfg.delay_jitter == 1.5


@pytest.mark.parametrize(
    "kwargs",
    [
        {"vendors": ["a.example", "www.a.example"]},
        {"vendors": [" "]},
        {"base_url_template": "https://www.example.com"},
        {"sitemap_paths": ["sitemap.xml"]},
        {"extra_junk_patterns": ["("]},
        {"user_agents": []},
        {"feed_page_size": 0},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ValidationError):
        DiscoveryConfig(**kwargs)


def test_base_url_and_vendor_selection():
    cfg = DiscoveryConfig(vendors=["rareseeds.com", "seedsavers.org", "selectseeds.com"])
    assert cfg.base_url("rareseeds.com") == "https://www.rareseeds.com"
    assert cfg.select_vendors(None) == cfg.vendors
    assert cfg.select_vendors("seeds.") == ["rareseeds.com", "selectseeds.com"]
    assert cfg.select_vendors("seeds") == cfg.vendors
    assert cfg.select_vendors("SAVERS") == ["seedsavers.org"]

    with pytest.raises(VendorFilterError) as excinfo:
        cfg.select_vendors("burpee")
    assert excinfo.value.available == cfg.vendors

# File: seed_scout/report/summary.py
"""seed_scout.report.summary: operator-facing run summary (text table and HTML via Jinja2)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from seed_scout.crawler.models import DiscoveryResult

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "summary.html.j2"

_RULE_WIDTH = 62


def summary_rows(results: Mapping[str, DiscoveryResult]) -> List[Dict[str, Any]]:
    return [
        {"vendor": vendor, "discovered": r.discovered, "strategy": r.strategy.value}
        for vendor, r in results.items()
    ]


def total_urls(results: Mapping[str, DiscoveryResult]) -> int:
    return sum(r.discovered for r in results.values())


def render_table(results: Mapping[str, DiscoveryResult]) -> str:
    """Fixed-width table: vendor, URL count, strategy and a TOTAL line."""
    lines = [
        "=" * 70,
        "DISCOVERY SUMMARY",
        "=" * 70,
        f"{'Vendor':<35} {'URLs':>8}  {'Strategy':<15}",
        "-" * _RULE_WIDTH,
    ]
    for row in summary_rows(results):
        lines.append(f"{row['vendor']:<35} {row['discovered']:>8}  {row['strategy']:<15}")
    lines.append("-" * _RULE_WIDTH)
    lines.append(f"{'TOTAL':<35} {total_urls(results):>8}")
    return "\n".join(lines)


def render_html(
    results: Mapping[str, DiscoveryResult],
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Render the summary with Jinja2 and save it to *output_path*.

    Args:
        results: vendor → DiscoveryResult of the current run.
        output_path: target HTML file; parent directories are created.
        template_dir: directory holding ``summary.html.j2`` (defaults to the
            templates shipped with the package).

    Returns:
        Path of the written file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "rows": summary_rows(results),
        "total": total_urls(results),
        "vendor_count": len(results),
    }
    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path


__all__ = ["render_table", "render_html", "summary_rows", "total_urls"]

# File: tests/test_summary.py
from seed_scout.crawler.models import DiscoveryResult, Strategy
from seed_scout.report.summary import render_html, render_table


def sample_results():
    return {
        "rareseeds.com": DiscoveryResult.from_urls(
            ["https://www.rareseeds.com/a", "https://www.rareseeds.com/b"], Strategy.STRUCTURED_FEED
        ),
        "<odd>.example": DiscoveryResult.none(),
        "x.example": DiscoveryResult.error(),
    }


def test_render_table_rows_and_total():
    lines = render_table(sample_results()).splitlines()

    assert lines[1] == "DISCOVERY SUMMARY"
    row = next(line for line in lines if line.startswith("rareseeds.com"))
    assert row.split() == ["rareseeds.com", "2", "structured_feed"]
    assert lines[-1].split() == ["TOTAL", "2"]
    assert any(line.split() == ["x.example", "0", "error"] for line in lines)


def test_render_html_escapes_and_counts(tmp_path):
    out = render_html(sample_results(), tmp_path / "reports" / "summary.html")
    html = out.read_text(encoding="utf-8")

    assert out.exists()
    assert "3 vendor(s), 2 product URL(s)." in html
    assert "&lt;odd&gt;.example" in html
    assert "<odd>" not in html
    assert html.count('class="empty"') == 2

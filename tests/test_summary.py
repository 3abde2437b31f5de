import logging

import pytest

from harvest.core.models import RunStats, ScraperCount, ScraperError
from harvest.reporting.summary import LogReporter, render_summary, write_summary


def sample_stats() -> RunStats:
    return RunStats(
        start_time="2024-03-01 10:00:00",
        end_time="2024-03-01 10:12:30",
        duration="12.50",
        success_count=2,
        fail_count=1,
        total_jobs=42,
        submitted_jobs=40,
        delivered_jobs=38,
        failed_batches=1,
        errors=[ScraperError(scraper="globex", error="Navigation timeout")],
        scraper_breakdown=[ScraperCount(name="acme", count=30), ScraperCount(name="initech", count=12)],
    )


def test_render_summary():
    summary = render_summary(sample_stats())

    assert "Scraping completed at 2024-03-01 10:12:30" in summary
    assert "Duration: 12.50 minutes" in summary
    assert "Failed scrapers: 1" in summary
    assert "Total jobs found: 42" in summary
    assert "Jobs delivered: 38/40 (1 failed batches)" in summary
    assert "- acme: 30 jobs" in summary
    assert "- globex: Navigation timeout" in summary


def test_render_summary_without_errors():
    assert "Errors:" not in render_summary(RunStats())


def test_write_summary(tmp_path):
    path = write_summary("hello\n", tmp_path / "scrape_summary.txt")
    assert path.read_text(encoding="utf-8") == "hello\n"


def test_stats_wire_keys():
    data = sample_stats().to_dict()
    assert data["successCount"] == 2
    assert data["scraperBreakdown"] == [{"name": "acme", "count": 30}, {"name": "initech", "count": 12}]
    assert data["errors"] == [{"scraper": "globex", "error": "Navigation timeout"}]


@pytest.mark.asyncio
async def test_log_reporter(caplog):
    reporter = LogReporter()
    with caplog.at_level(logging.INFO):
        await reporter.success(sample_stats(), "summary text")
        await reporter.failure(RuntimeError("boom"), sample_stats())

    assert "summary text" in caplog.text
    assert "boom" in caplog.text

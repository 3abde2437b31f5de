"""
End-to-end runner tests with fake producers and a mocked backend.
"""

import json
import random
from datetime import datetime, timezone

import httpx
import pytest

from harvest.core.exceptions import CriticalPipelineFailure
from harvest.core.orchestrator import TaskOrchestrator
from harvest.core.rate_limit import RetryPolicy
from harvest.core.runner import Runner
from harvest.delivery.backend import BackendClient
from harvest.producers.base import ProducerBinding, ProducerOptions
from harvest.reporting.summary import Reporter

STARTED = datetime(2024, 3, 1, 4, 30, 0, tzinfo=timezone.utc)


class RecordingReporter(Reporter):
    def __init__(self):
        self.successes = []
        self.failures = []

    async def success(self, stats, summary):
        self.successes.append((stats, summary))

    async def failure(self, error, stats=None):
        self.failures.append((error, stats))


def binding(name, producer):
    return ProducerBinding(name, producer, ProducerOptions(headless=True))


def returning(records):
    async def producer(options):
        return records

    return producer


async def no_sleep(delay):
    pass


def make_runner(tmp_path, handler, reporter, orchestrator=None):
    def client_factory():
        return BackendClient(
            base_url="http://backend.test",
            batch_size=2,
            policy=RetryPolicy(max_retries=1, base_delay=0.0),
            transport=httpx.MockTransport(handler),
            sleep=no_sleep,
        )

    return Runner(
        orchestrator=orchestrator or TaskOrchestrator(concurrency=2),
        reporter=reporter,
        client_factory=client_factory,
        rng=random.Random(0),
        summary_path=str(tmp_path / "scrape_summary.txt"),
        clock=lambda: STARTED,
    )


@pytest.mark.asyncio
async def test_full_run(tmp_path):
    posted = []

    def handler(request):
        if request.url.path == "/api/health":
            return httpx.Response(200)
        posted.extend(json.loads(request.content))
        return httpx.Response(200, json={"success": True})

    async def broken(options):
        raise RuntimeError("timeout waiting for selector")

    acme = [
        {"title": "Senior Backend Engineer", "company": "Acme", "url": "a/1",
         "location": "Bengaluru, Karnataka", "description": "3-5 years experience in React, Node.js"},
        {"title": "Graduate Engineer", "company": "Acme", "url": "a/2"},
        {"title": "Graduate Engineer", "company": "Acme", "url": "a/2"},
    ]
    globex = [{"title": "QA Intern", "company": "Globex", "url": "g/1"}]

    reporter = RecordingReporter()
    runner = make_runner(tmp_path, handler, reporter)
    stats = await runner.run(
        [binding("acme", returning(acme)), binding("broken", broken), binding("globex", returning(globex))]
    )

    assert stats.success_count == 2
    assert stats.fail_count == 1
    assert stats.total_jobs == 4
    assert stats.submitted_jobs == 3
    assert stats.delivered_jobs == 3
    assert stats.failed_batches == 0
    assert stats.start_time == "2024-03-01 10:00:00"
    assert stats.end_time == "2024-03-01 10:00:00"
    assert stats.duration == "0.00"

    assert sorted(p["url"] for p in posted) == ["a/1", "a/2", "g/1"]
    first = next(p for p in posted if p["url"] == "a/1")
    assert first["location"] == "Bangalore"
    assert first["experience"] == "3 - 5 yrs"

    summary = (tmp_path / "scrape_summary.txt").read_text(encoding="utf-8")
    assert "Successful scrapers: 2" in summary
    assert "- broken: timeout waiting for selector" in summary
    assert len(reporter.successes) == 1
    assert reporter.failures == []


@pytest.mark.asyncio
async def test_failed_batches_are_counted_not_fatal(tmp_path):
    def handler(request):
        if request.url.path == "/api/health":
            return httpx.Response(503)
        return httpx.Response(500, text="db down")

    records = [{"title": f"Dev {i}", "company": f"C{i}", "url": f"u/{i}"} for i in range(3)]
    reporter = RecordingReporter()
    stats = await make_runner(tmp_path, handler, reporter).run([binding("p", returning(records))])

    assert stats.submitted_jobs == 3
    assert stats.delivered_jobs == 0
    assert stats.failed_batches == 2
    assert len(reporter.successes) == 1


@pytest.mark.asyncio
async def test_no_jobs_skips_delivery(tmp_path):
    def handler(request):
        raise AssertionError("backend must not be called")

    reporter = RecordingReporter()
    stats = await make_runner(tmp_path, handler, reporter).run([binding("empty", returning([]))])

    assert stats.total_jobs == 0
    assert stats.submitted_jobs == 0
    assert len(reporter.successes) == 1


@pytest.mark.asyncio
async def test_critical_failure_is_reported_and_raised(tmp_path):
    class ExplodingOrchestrator(TaskOrchestrator):
        async def run(self, bindings, stats):
            raise RuntimeError("event loop closed")

    reporter = RecordingReporter()
    runner = make_runner(tmp_path, lambda r: httpx.Response(200), reporter, ExplodingOrchestrator())

    with pytest.raises(CriticalPipelineFailure) as excinfo:
        await runner.run([binding("p", returning([]))])

    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert len(reporter.failures) == 1
    error, stats = reporter.failures[0]
    assert isinstance(error, RuntimeError)
    assert stats.end_time is not None
    assert reporter.successes == []


@pytest.mark.asyncio
async def test_bad_producer_path_is_critical(tmp_path, monkeypatch):
    from harvest.core import runner as runner_module

    def bad_load():
        raise ValueError("Cannot import producer module 'nowhere'")

    monkeypatch.setattr(runner_module, "load_producers", bad_load)
    reporter = RecordingReporter()

    with pytest.raises(CriticalPipelineFailure):
        await make_runner(tmp_path, lambda r: httpx.Response(200), reporter).run()
    assert len(reporter.failures) == 1

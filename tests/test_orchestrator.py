"""
Tests for the concurrency-bounded producer orchestrator.
"""

import asyncio

import pytest

from harvest.core.models import RawJob, RunStats
from harvest.core.orchestrator import TaskOrchestrator
from harvest.core.rate_limit import RateLimiter
from harvest.producers.base import ProducerBinding, ProducerOptions


def binding(name, producer):
    return ProducerBinding(name, producer, ProducerOptions(headless=True))


def returning(records, delay=0.0):
    async def producer(options):
        await asyncio.sleep(delay)
        return records

    return producer


def test_rate_limiter_rejects_zero():
    with pytest.raises(ValueError):
        RateLimiter(0)


@pytest.mark.asyncio
async def test_partial_failure_is_isolated():
    async def broken(options):
        raise RuntimeError("site layout changed")

    bindings = [
        binding("acme", returning([{"title": "Dev", "company": "Acme", "url": "a/1"}])),
        binding("broken", broken),
        binding("globex", returning([{"title": "QA", "company": "Globex", "url": "g/1"}] * 2)),
    ]
    stats = RunStats()
    jobs = await TaskOrchestrator(concurrency=2).run(bindings, stats)

    assert stats.success_count == 2
    assert stats.fail_count == 1
    assert len(jobs) == 3
    assert all(isinstance(j, RawJob) for j in jobs)
    assert [(e.scraper, e.error) for e in stats.errors] == [("broken", "site layout changed")]
    assert [(s.name, s.count) for s in stats.scraper_breakdown] == [("acme", 1), ("globex", 2)]


@pytest.mark.asyncio
async def test_concurrency_ceiling():
    in_flight = 0
    peak = 0

    async def tracked(options):
        nonlocal in_flight, peak
        in_flight += 1
        peak = max(peak, in_flight)
        await asyncio.sleep(0.01)
        in_flight -= 1
        return []

    bindings = [binding(f"p{i}", tracked) for i in range(6)]
    stats = RunStats()
    await TaskOrchestrator(concurrency=2).run(bindings, stats)

    assert peak == 2
    assert stats.success_count == 6


@pytest.mark.asyncio
async def test_every_binding_invoked_once():
    calls = []

    async def producer(options):
        calls.append(options.headless)
        return []

    bindings = [binding(f"p{i}", producer) for i in range(4)]
    outcomes = await TaskOrchestrator(concurrency=1).settle(bindings)

    assert len(calls) == 4
    assert [o.binding.name for o in outcomes] == ["p0", "p1", "p2", "p3"]
    assert all(o.ok for o in outcomes)


@pytest.mark.asyncio
async def test_malformed_result_counts_as_neither():
    bindings = [binding("weird", returning({"title": "not a list"}))]
    stats = RunStats()
    jobs = await TaskOrchestrator().run(bindings, stats)

    assert jobs == []
    assert stats.success_count == 0
    assert stats.fail_count == 0
    assert stats.scraper_breakdown == []


@pytest.mark.asyncio
async def test_unusable_items_are_skipped():
    records = [{"title": "Dev", "company": "Acme"}, "garbage", None, RawJob(title="Ops")]
    stats = RunStats()
    jobs = await TaskOrchestrator().run([binding("mixed", returning(records))], stats)

    assert [j.title for j in jobs] == ["Dev", "Ops"]
    assert stats.scraper_breakdown[0].count == 4


@pytest.mark.asyncio
async def test_empty_bindings():
    stats = RunStats()
    assert await TaskOrchestrator().run([], stats) == []
    assert stats.success_count == 0

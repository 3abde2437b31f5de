"""
Unit tests for url dedupe and company interleaving.
"""

import random

from harvest.core.models import EnrichedJob
from harvest.delivery.interleave import dedupe_by_url, interleave_by_company, shuffle_jobs


def make_job(company: str, url: str) -> EnrichedJob:
    return EnrichedJob(
        title=f"Engineer at {company}",
        company=company,
        location="India",
        description="",
        url=url,
        skills=[],
        experience="Not specified",
        mini_experience=None,
        max_experience=None,
        sector=[],
        is_entry_level=True,
        job_type="Full Time",
        posted_at="2024-01-01T00:00:00.000Z",
    )


def companies(jobs):
    return [j.company for j in jobs]


class TestDedupe:
    def test_first_occurrence_wins(self):
        first = make_job("A", "https://a/1")
        duplicate = make_job("B", "https://a/1")
        other = make_job("A", "https://a/2")
        assert dedupe_by_url([first, duplicate, other]) == [first, other]

    def test_records_without_url_are_kept(self):
        jobs = [make_job("A", ""), make_job("A", ""), make_job("B", "x")]
        assert len(dedupe_by_url(jobs)) == 3


class TestInterleave:
    def test_no_adjacent_company_when_avoidable(self):
        jobs = [make_job(c, f"{c}/{i}") for c in "ABC" for i in range(4)]
        for seed in range(20):
            result = interleave_by_company(jobs, rng=random.Random(seed))
            order = companies(result)
            assert all(a != b for a, b in zip(order, order[1:])), order

    def test_every_record_exactly_once(self):
        jobs = [make_job(c, f"{c}/{i}") for c, n in (("A", 5), ("B", 2), ("C", 1)) for i in range(n)]
        result = interleave_by_company(jobs, rng=random.Random(1))
        assert sorted(j.url for j in result) == sorted(j.url for j in jobs)

    def test_per_company_order_is_preserved(self):
        jobs = [make_job(c, f"{c}/{i}") for c in "AB" for i in range(3)]
        result = interleave_by_company(jobs, rng=random.Random(7))
        for company in "AB":
            urls = [j.url for j in result if j.company == company]
            assert urls == [f"{company}/{i}" for i in range(3)]

    def test_dominant_company_accepts_adjacency(self):
        jobs = [make_job("A", f"A/{i}") for i in range(4)] + [make_job("B", "B/0")]
        result = interleave_by_company(jobs, rng=random.Random(3))
        assert len(result) == 5
        assert companies(result).count("A") == 4

    def test_single_company(self):
        jobs = [make_job("A", f"A/{i}") for i in range(3)]
        assert interleave_by_company(jobs, rng=random.Random(0)) == jobs

    def test_empty(self):
        assert interleave_by_company([]) == []

    def test_same_seed_same_order(self):
        jobs = [make_job(c, f"{c}/{i}") for c in "ABCD" for i in range(2)]
        first = interleave_by_company(jobs, rng=random.Random(42))
        second = interleave_by_company(jobs, rng=random.Random(42))
        assert first == second


def test_shuffle_jobs_dedupes_then_interleaves():
    jobs = [
        make_job("A", "A/0"),
        make_job("A", "A/1"),
        make_job("A", "A/0"),
        make_job("B", "B/0"),
        make_job("B", "B/1"),
    ]
    result = shuffle_jobs(jobs, rng=random.Random(5))
    assert len(result) == 4
    order = companies(result)
    assert all(a != b for a, b in zip(order, order[1:]))

"""
Deduplication and company interleaving.

Producers return a company's postings back to back. Before delivery the list
is reordered so consecutive records rarely come from the same company, while
each company keeps its own posting order.
"""

import logging
import random
from collections import OrderedDict, deque
from typing import Deque, Dict, Iterable, List, Optional, TypeVar

from harvest.core.models import EnrichedJob

logger = logging.getLogger(__name__)

J = TypeVar("J", bound=EnrichedJob)


def dedupe_by_url(jobs: Iterable[J]) -> List[J]:
    """
    Keep the first record for every url. Records without a url cannot be
    compared and are all kept.
    """
    seen = set()
    unique: List[J] = []
    dropped = 0
    for job in jobs:
        url = (job.url or "").strip()
        if url:
            if url in seen:
                dropped += 1
                continue
            seen.add(url)
        unique.append(job)

    if dropped:
        logger.info(f"Dropped {dropped} duplicate jobs by url")
    return unique


def interleave_by_company(jobs: List[J], rng: Optional[random.Random] = None) -> List[J]:
    """
    Round-robin over companies in a shuffled order, never emitting the same
    company twice in a row unless only that company has records left.
    """
    rng = rng or random.Random()

    queues: Dict[str, Deque[J]] = OrderedDict()
    for job in jobs:
        queues.setdefault(job.company, deque()).append(job)

    rotation = list(queues.keys())
    rng.shuffle(rotation)

    result: List[J] = []
    last_company = None
    while len(result) < len(jobs):
        chosen = None
        for i, company in enumerate(rotation):
            if company != last_company and queues[company]:
                chosen = i
                break

        if chosen is None:
            # Only the last company has records left; stacking is unavoidable.
            for i, company in enumerate(rotation):
                if queues[company]:
                    chosen = i
                    break

        company = rotation.pop(chosen)
        result.append(queues[company].popleft())
        last_company = company
        rotation.append(company)

    return result


def shuffle_jobs(jobs: Iterable[J], rng: Optional[random.Random] = None) -> List[J]:
    """Dedupe by url, then interleave by company."""
    return interleave_by_company(dedupe_by_url(list(jobs)), rng=rng)

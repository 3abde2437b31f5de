import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence

from harvest.config.settings import settings
from harvest.core.exceptions import MalformedProducerResult, ProducerFailure
from harvest.core.models import RawJob, RunStats, ScraperCount, ScraperError
from harvest.core.rate_limit import RateLimiter
from harvest.producers.base import ProducerBinding

logger = logging.getLogger(__name__)


@dataclass
class ProducerOutcome:
    """
    Settled result of one producer invocation: either `value` or `failure`.
    """

    binding: ProducerBinding
    value: Any = None
    failure: Optional[ProducerFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def _is_job_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class TaskOrchestrator:
    """
    Runs producers under a concurrency ceiling and gathers every outcome,
    whether it succeeded or not.
    """

    def __init__(self, concurrency: int = settings.CONCURRENCY):
        self.limiter = RateLimiter(concurrency)

    async def _invoke(self, binding: ProducerBinding) -> ProducerOutcome:
        async with self.limiter:
            logger.info(f"Starting producer {binding.name}")
            try:
                value = await binding.invoke()
            except Exception as e:
                return ProducerOutcome(binding, failure=ProducerFailure(binding.name, e))
            return ProducerOutcome(binding, value=value)

    async def settle(self, bindings: Sequence[ProducerBinding]) -> List[ProducerOutcome]:
        """
        Invoke every binding exactly once; returns once all of them settled.
        Outcomes are in binding order.
        """
        tasks = [self._invoke(b) for b in bindings]
        return list(await asyncio.gather(*tasks))

    async def run(
        self, bindings: Sequence[ProducerBinding], stats: RunStats
    ) -> List[RawJob]:
        """
        Run all producers and merge their records, recording per-producer
        success, failure and counts into `stats`.
        """
        outcomes = await self.settle(bindings)

        jobs: List[RawJob] = []
        for outcome in outcomes:
            name = outcome.binding.name
            if not outcome.ok:
                stats.fail_count += 1
                stats.errors.append(ScraperError(scraper=name, error=outcome.failure.message))
                logger.error(f"Producer {name} failed: {outcome.failure.cause!r}")
                continue

            if not _is_job_sequence(outcome.value):
                logger.warning(str(MalformedProducerResult(name, outcome.value)))
                continue

            stats.success_count += 1
            stats.scraper_breakdown.append(ScraperCount(name=name, count=len(outcome.value)))
            for item in outcome.value:
                job = RawJob.coerce(item)
                if job is None:
                    logger.debug(f"Skipping unusable record from {name}: {item!r}")
                    continue
                jobs.append(job)
            logger.info(f"Producer {name} returned {len(outcome.value)} jobs")

        logger.info(
            f"Producers settled: {stats.success_count} succeeded, "
            f"{stats.fail_count} failed, {len(jobs)} jobs collected"
        )
        return jobs

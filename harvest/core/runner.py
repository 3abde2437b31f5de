import logging
import random
from datetime import datetime, timezone
from typing import Callable, List, Optional, Sequence
from zoneinfo import ZoneInfo

from harvest.config.settings import settings
from harvest.core.exceptions import CriticalPipelineFailure
from harvest.core.models import EnrichedJob, RunStats
from harvest.core.orchestrator import TaskOrchestrator
from harvest.delivery.backend import BackendClient
from harvest.delivery.interleave import shuffle_jobs
from harvest.enrichment.engine import enrich
from harvest.producers.base import ProducerBinding
from harvest.producers.registry import load_producers
from harvest.reporting.summary import LogReporter, Reporter, render_summary, write_summary

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Runner:
    """
    Orchestrates a full harvest run: producers, enrichment, interleaving,
    delivery and reporting.
    """

    def __init__(
        self,
        orchestrator: Optional[TaskOrchestrator] = None,
        reporter: Optional[Reporter] = None,
        client_factory: Callable[[], BackendClient] = BackendClient,
        rng: Optional[random.Random] = None,
        summary_path: Optional[str] = settings.SUMMARY_FILE,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.orchestrator = orchestrator
        self.reporter = reporter or LogReporter()
        self.client_factory = client_factory
        self.rng = rng
        self.summary_path = summary_path
        self.clock = clock
        self.tz = ZoneInfo(settings.TIMEZONE)

    def _format(self, moment: datetime) -> str:
        return moment.astimezone(self.tz).strftime(TIMESTAMP_FORMAT)

    def _finalize(self, stats: RunStats, started: datetime) -> None:
        finished = self.clock()
        stats.end_time = self._format(finished)
        stats.duration = f"{(finished - started).total_seconds() / 60:.2f}"

    async def _deliver(self, jobs: List[EnrichedJob], stats: RunStats) -> None:
        async with self.client_factory() as client:
            if not await client.health_check():
                logger.warning("Backend is not reachable, attempting delivery anyway")
            report = await client.deliver(jobs)

        stats.submitted_jobs = report.submitted
        stats.delivered_jobs = report.accepted
        stats.failed_batches = len(report.failed_batches)

    async def run(self, bindings: Optional[Sequence[ProducerBinding]] = None) -> RunStats:
        """
        Run every producer once and deliver what they found.

        Producer and batch failures are recorded on the returned stats. Anything
        else is reported and re-raised as CriticalPipelineFailure.
        """
        started = self.clock()
        stats = RunStats(start_time=self._format(started))

        try:
            if bindings is None:
                bindings = load_producers()
            orchestrator = self.orchestrator or TaskOrchestrator()

            logger.info(f"Starting harvest with {len(bindings)} producers")
            raw_jobs = await orchestrator.run(bindings, stats)
            stats.total_jobs = len(raw_jobs)

            if raw_jobs:
                now = self.clock()
                enriched = [enrich(raw, now=now) for raw in raw_jobs]
                jobs = shuffle_jobs(enriched, rng=self.rng)
                logger.info(f"Enriched {len(enriched)} jobs, {len(jobs)} left after dedupe")
                await self._deliver(jobs, stats)
            else:
                logger.warning("No jobs harvested, skipping delivery")

            self._finalize(stats, started)
            summary = render_summary(stats)
            if self.summary_path:
                try:
                    write_summary(summary, self.summary_path)
                except OSError as e:
                    logger.error(f"Could not write summary to {self.summary_path}: {e}")
            await self.reporter.success(stats, summary)

        except Exception as e:
            logger.exception(f"Runner failed: {e}")
            if stats.end_time is None:
                self._finalize(stats, started)
            await self.reporter.failure(e, stats)
            raise CriticalPipelineFailure(f"Harvest run failed: {e}") from e

        logger.info(
            f"Harvest finished in {stats.duration} minutes: "
            f"{stats.delivered_jobs}/{stats.total_jobs} jobs delivered"
        )
        return stats


runner = Runner()

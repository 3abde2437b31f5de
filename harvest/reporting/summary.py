"""
Run summary rendering and the reporter boundary.

Reporters receive the finalized RunStats; notification channels beyond the
log (email, chat) plug in by subclassing Reporter.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from harvest.core.models import RunStats

logger = logging.getLogger(__name__)


def render_summary(stats: RunStats) -> str:
    lines = [
        f"Scraping completed at {stats.end_time}",
        f"Duration: {stats.duration} minutes",
        f"Successful scrapers: {stats.success_count}",
        f"Failed scrapers: {stats.fail_count}",
        f"Total jobs found: {stats.total_jobs}",
        f"Jobs delivered: {stats.delivered_jobs}/{stats.submitted_jobs}"
        f" ({stats.failed_batches} failed batches)",
        "",
        "Jobs per company:",
    ]
    lines.extend(f"- {s.name}: {s.count} jobs" for s in stats.scraper_breakdown)

    if stats.errors:
        lines.append("")
        lines.append("Errors:")
        lines.extend(f"- {e.scraper}: {e.error}" for e in stats.errors)

    return "\n".join(lines) + "\n"


def write_summary(text: str, path: Union[str, Path]) -> Path:
    """Write the summary where CI jobs can pick it up."""
    path = Path(path)
    path.write_text(text, encoding="utf-8")
    logger.info(f"Summary written to {path}")
    return path


class Reporter(ABC):
    """
    Receives the outcome of a run.
    """

    @abstractmethod
    async def success(self, stats: RunStats, summary: str) -> None:
        pass

    @abstractmethod
    async def failure(self, error: BaseException, stats: Optional[RunStats] = None) -> None:
        pass


class LogReporter(Reporter):
    async def success(self, stats: RunStats, summary: str) -> None:
        logger.info(f"Run summary:\n{summary}")

    async def failure(self, error: BaseException, stats: Optional[RunStats] = None) -> None:
        context = stats.to_dict() if stats is not None else {}
        logger.error(f"Job scraping failed: {error!r}. Context: {context}")

"""
Enrichment engine: one raw producer record in, one delivery-ready record out.

Every step falls back to a safe default instead of raising, so a malformed
record can never take down a run.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

from harvest.core.models import EnrichedJob, RawJob
from harvest.enrichment.classify import infer_job_type, is_entry_level
from harvest.enrichment.experience import extract_experience
from harvest.enrichment.locations import normalize_location
from harvest.enrichment.sectors import classify_sector
from harvest.enrichment.skills import extract_skills

logger = logging.getLogger(__name__)


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """UTC ISO-8601 with millisecond precision and a trailing Z."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def enrich(
    raw: Union[RawJob, Mapping[str, Any]],
    now: Optional[datetime] = None,
) -> EnrichedJob:
    """
    Derive skills, experience, sector, seniority, job type and city for a
    single record. Deterministic for a fixed `now`.
    """
    job = RawJob.coerce(raw) or RawJob()

    description = job.description if isinstance(job.description, str) else ""
    experience = extract_experience(description, job.experience)

    enriched = EnrichedJob(
        title=job.title,
        company=job.company,
        location=normalize_location(job.location),
        description=description,
        url=job.url,
        skills=extract_skills(description),
        experience=experience.label,
        mini_experience=experience.minimum,
        max_experience=experience.maximum,
        sector=classify_sector(job.title),
        is_entry_level=is_entry_level(job.title, experience),
        job_type=infer_job_type(description, experience),
        posted_at=iso_timestamp(now),
        extra=dict(job.extra),
    )
    logger.debug(
        f"Enriched '{enriched.title}' @ {enriched.company}: "
        f"{len(enriched.skills)} skills, {enriched.experience}, {enriched.location}"
    )
    return enriched

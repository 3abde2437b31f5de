from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Mapping, Optional, Union

# Keys producers use interchangeably for the same field.
_FIELD_ALIASES = {
    "title": ("title", "jobTitle"),
    "company": ("company", "companyName"),
    "location": ("location", "city"),
    "description": ("description", "jobDescription"),
    "url": ("url", "link", "applyLink"),
    "experience": ("experience",),
}


def _first_present(payload: Mapping[str, Any], keys) -> Any:
    for key in keys:
        value = payload.get(key)
        if value is not None:
            return value
    return None


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class RawJob:
    """
    A job posting exactly as a producer handed it over.
    """

    title: str = ""
    company: str = ""
    location: Optional[str] = None
    description: str = ""
    url: str = ""
    experience: Optional[Union[str, int, float]] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "RawJob":
        """
        Build a RawJob from a loosely shaped producer dict.
        Missing keys become empty values; unknown keys are kept in `extra`.
        """
        known = set()
        for keys in _FIELD_ALIASES.values():
            known.update(keys)

        location = _first_present(payload, _FIELD_ALIASES["location"])
        experience = _first_present(payload, _FIELD_ALIASES["experience"])
        if experience is not None and not isinstance(experience, (str, int, float)):
            experience = None

        return cls(
            title=_as_text(_first_present(payload, _FIELD_ALIASES["title"])).strip(),
            company=_as_text(_first_present(payload, _FIELD_ALIASES["company"])).strip(),
            location=_as_text(location) if location is not None else None,
            description=_as_text(_first_present(payload, _FIELD_ALIASES["description"])),
            url=_as_text(_first_present(payload, _FIELD_ALIASES["url"])).strip(),
            experience=experience,
            extra={k: v for k, v in payload.items() if k not in known},
        )

    @classmethod
    def coerce(cls, item: Any) -> Optional["RawJob"]:
        """Accept a RawJob or a mapping; anything else yields None."""
        if isinstance(item, RawJob):
            return item
        if isinstance(item, Mapping):
            return cls.from_mapping(item)
        return None


@dataclass
class EnrichedJob:
    """
    Canonical job record delivered to the backend.
    """

    title: str
    company: str
    location: str
    description: str
    url: str
    skills: List[str]
    experience: str
    mini_experience: Optional[int]
    max_experience: Optional[int]
    sector: List[str]
    is_entry_level: bool
    job_type: str
    posted_at: str
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation expected by the bulk-replace endpoint."""
        payload = dict(self.extra)
        payload.update(
            {
                "title": self.title,
                "company": self.company,
                "location": self.location,
                "description": self.description,
                "url": self.url,
                "skills": list(self.skills),
                "experience": self.experience,
                "miniExperience": self.mini_experience,
                "maxExperience": self.max_experience,
                "sector": list(self.sector),
                "isEntryLevel": self.is_entry_level,
                "jobType": self.job_type,
                "postedAt": self.posted_at,
            }
        )
        return payload


@dataclass
class ScraperError:
    scraper: str
    error: str


@dataclass
class ScraperCount:
    name: str
    count: int


@dataclass
class RunStats:
    """
    Per-run counters handed to the reporter once the run is finalized.
    """

    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration: Optional[str] = None  # minutes, two decimals
    success_count: int = 0
    fail_count: int = 0
    total_jobs: int = 0
    submitted_jobs: int = 0
    delivered_jobs: int = 0
    failed_batches: int = 0
    errors: List[ScraperError] = field(default_factory=list)
    scraper_breakdown: List[ScraperCount] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startTime": self.start_time,
            "endTime": self.end_time,
            "duration": self.duration,
            "successCount": self.success_count,
            "failCount": self.fail_count,
            "totalJobs": self.total_jobs,
            "submittedJobs": self.submitted_jobs,
            "deliveredJobs": self.delivered_jobs,
            "failedBatches": self.failed_batches,
            "errors": [asdict(e) for e in self.errors],
            "scraperBreakdown": [asdict(s) for s in self.scraper_breakdown],
        }

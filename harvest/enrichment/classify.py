import re
from typing import Optional, Pattern, Tuple

from harvest.enrichment.experience import ExperienceRange

ENTRY_LEVEL_MAX_YEARS = 2
INTERNSHIP_MAX_YEARS = 1

SENIORITY_PATTERNS: Tuple[str, ...] = (
    r"\bsr\b\.?", r"\bsenior\b", r"\blead\b", r"\bdirector\b", r"\bhead\b",
    r"\bvp\b", r"\bvice president\b", r"\bchief\b", r"\bprincipal\b",
    r"\bstaff\b", r"\bmanager\b", r"\barchitect\b", r"\bpresident\b",
    r"\bexecutive\b", r"\bexpert\b", r"\bspecialist\b", r"\bconsultant\b",
    r"\bsupervisor\b", r"\bofficer\b", r"\bowner\b", r"\bco-?founder\b",
    r"\bfounder\b", r"\bsde\s*-?\s*(?:2|3|ii|iii)\b", r"\b(?:ii|iii|iv)\b",
    r"\bl[5-9]\b",
)
ENTRY_PATTERNS: Tuple[str, ...] = (
    r"\bfreshers?\b", r"\bgraduates?\b", r"\btrainees?\b",
    r"\binterns?(?:hip)?\b", r"\bapprentice(?:ship)?\b", r"\bentry[\s-]level\b",
)

_SENIORITY = re.compile("|".join(SENIORITY_PATTERNS), re.IGNORECASE)
_ENTRY = re.compile("|".join(ENTRY_PATTERNS), re.IGNORECASE)
_INTERNSHIP = re.compile(r"\binterns?(?:hips?)?\b", re.IGNORECASE)

DEFAULT_JOB_TYPE = "Full Time"

# Checked in order after the internship rule.
JOB_TYPE_PATTERNS: Tuple[Tuple[str, Pattern[str]], ...] = (
    ("Full Time", re.compile(r"\bfull[\s-]?time\b", re.IGNORECASE)),
    ("Part Time", re.compile(r"\bpart[\s-]?time\b", re.IGNORECASE)),
    ("Contract", re.compile(r"\bcontract(?:ual)?\b", re.IGNORECASE)),
    ("Permanent", re.compile(r"\bpermanent\b", re.IGNORECASE)),
    ("Temporary", re.compile(r"\btemporary\b", re.IGNORECASE)),
    ("Freelance", re.compile(r"\bfreelanc(?:e|er|ing)\b", re.IGNORECASE)),
    ("Consultant", re.compile(r"\bconsultant\b", re.IGNORECASE)),
)
JOB_TYPES = ("Internship",) + tuple(name for name, _ in JOB_TYPE_PATTERNS)


def is_entry_level(title: Optional[str], experience: ExperienceRange) -> bool:
    """
    Seniority words in the title rule entry level out; entry words rule it
    in. Otherwise unknown experience counts as entry level, and known
    experience does when its upper bound is at most two years.
    """
    title = title if isinstance(title, str) else ""
    if _SENIORITY.search(title):
        return False
    if _ENTRY.search(title):
        return True
    if not experience.known:
        return True
    return experience.upper <= ENTRY_LEVEL_MAX_YEARS


def infer_job_type(description: Optional[str], experience: ExperienceRange) -> str:
    if not description or not isinstance(description, str):
        return DEFAULT_JOB_TYPE

    junior = experience.known and experience.upper <= INTERNSHIP_MAX_YEARS
    if junior and _INTERNSHIP.search(description):
        return "Internship"

    for job_type, pattern in JOB_TYPE_PATTERNS:
        if pattern.search(description):
            return job_type
    return DEFAULT_JOB_TYPE

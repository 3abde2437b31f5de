"""
Experience range extraction.

Producers sometimes supply an experience value; otherwise the description is
scanned for "3-5 years", "5+ yrs", "at least 4 years", "three to five years"
and similar phrasings. A single bound with no maximum is read as a range of
min to min + 2.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Optional

NOT_SPECIFIED = "Not specified"

# Span added to an open-ended bound ("5+ years" -> 5 - 7).
IMPLIED_SPAN = 2
MAX_PLAUSIBLE_YEARS = 40

WORD_NUMBERS = {
    "zero": 0, "one": 1, "two": 2, "three": 3, "four": 4, "five": 5,
    "six": 6, "seven": 7, "eight": 8, "nine": 9, "ten": 10,
    "eleven": 11, "twelve": 12, "fifteen": 15, "twenty": 20,
}

_WORDS = "|".join(WORD_NUMBERS)
_LEAD = r"(?:(?:minimum|min\.?|at\s+least|over|more\s+than)\s+(?:of\s+)?)?"
_RANGE_SEP = r"(?:-|–|—|to)"
_UNIT = r"(?:years?|yrs?)\b"

NUMERIC_PATTERN = re.compile(
    rf"{_LEAD}(?<![\d.])(\d{{1,2}})\s*\+?\s*(?:{_RANGE_SEP}\s*(\d{{1,2}})\s*)?\+?\s*{_UNIT}",
    re.IGNORECASE,
)
WORD_PATTERN = re.compile(
    rf"{_LEAD}\b({_WORDS})\b\s*\+?\s*(?:{_RANGE_SEP}\s*({_WORDS})\s*)?\+?\s*{_UNIT}",
    re.IGNORECASE,
)
# Producer-supplied strings may omit the unit ("2-4", "3+").
_SUPPLIED_RANGE = re.compile(rf"(\d{{1,2}})\s*{_RANGE_SEP}\s*(\d{{1,2}})")
_SUPPLIED_OPEN = re.compile(r"(\d{1,2})\s*\+")
_SUPPLIED_NUMBER = re.compile(r"^\s*(\d{1,2})(?:\.\d+)?\s*(?:years?|yrs?)?\s*$", re.IGNORECASE)


@dataclass(frozen=True)
class ExperienceRange:
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    @property
    def known(self) -> bool:
        return self.minimum is not None

    @property
    def label(self) -> str:
        if self.minimum is None:
            return NOT_SPECIFIED
        if self.maximum is None or self.maximum == self.minimum:
            return f"{self.minimum} yrs"
        return f"{self.minimum} - {self.maximum} yrs"

    @property
    def upper(self) -> Optional[int]:
        """Upper bound, or the lower bound when the range is a single value."""
        return self.maximum if self.maximum is not None else self.minimum


UNKNOWN = ExperienceRange()


def _build(low: int, high: Optional[int]) -> Optional[ExperienceRange]:
    if high is None:
        high = low + IMPLIED_SPAN
    if high < low:
        low, high = high, low
    if high > MAX_PLAUSIBLE_YEARS:
        return None
    return ExperienceRange(low, high)


def parse_supplied(value: Any) -> Optional[ExperienceRange]:
    """
    Interpret a producer-supplied experience value. Plain numbers are used as
    both bounds. Returns None when the value says nothing usable.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return None
        if value < 0 or value > MAX_PLAUSIBLE_YEARS:
            return None
        years = int(value)
        return ExperienceRange(years, years)

    if not isinstance(value, str) or not value.strip():
        return None

    match = _SUPPLIED_NUMBER.match(value)
    if match:
        years = int(match.group(1))
        return ExperienceRange(years, years)

    match = _SUPPLIED_RANGE.search(value)
    if match:
        return _build(int(match.group(1)), int(match.group(2)))

    match = _SUPPLIED_OPEN.search(value)
    if match:
        return _build(int(match.group(1)), None)

    return None


def parse_description(description: Optional[str]) -> ExperienceRange:
    """First plausible experience phrase in the description, or UNKNOWN."""
    if not description or not isinstance(description, str):
        return UNKNOWN

    for match in NUMERIC_PATTERN.finditer(description):
        high = int(match.group(2)) if match.group(2) else None
        found = _build(int(match.group(1)), high)
        if found:
            return found

    for match in WORD_PATTERN.finditer(description):
        low = WORD_NUMBERS[match.group(1).lower()]
        high = WORD_NUMBERS[match.group(2).lower()] if match.group(2) else None
        found = _build(low, high)
        if found:
            return found

    return UNKNOWN


def extract_experience(description: Optional[str], supplied: Any = None) -> ExperienceRange:
    supplied_range = parse_supplied(supplied)
    if supplied_range is not None:
        return supplied_range
    return parse_description(description)

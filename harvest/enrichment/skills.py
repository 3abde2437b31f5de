"""
Skill extraction against the controlled vocabulary.

Matching happens in three passes over the lower-cased description:

1. alias phrases (SKILL_ALIASES) mapped to their canonical skills
2. exact word-bounded matches of every canonical skill and its derived forms
   ("Natural Language Processing (NLP)" also answers to "natural language
   processing" and "nlp", "OKRs / KPIs" to either half)
3. a looser pass for multi-word skills that were not found exactly, letting
   the last word carry a plural, -ing or -ed ending ("unit tests" for
   "Unit Testing")

"Go" is only kept when the text says "golang" or "go language".
"""

import re
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from harvest.enrichment.vocabulary import SKILL_ALIASES, SKILLS

# Word edges that also work for terms starting or ending in punctuation
# (".NET", "C++", "C#"). A dot glued to letters ("node.js") joins words.
_LEFT = r"(?<![a-z0-9.])"
_RIGHT = r"(?![a-z0-9]|\.[a-z0-9])"

_PARENTHETICAL = re.compile(r"^(.*?)\s*\((.+)\)$")
_FINAL_SUFFIX = re.compile(r"(?:ing|ed|es|s)$")
_MORPH_ENDING = r"(?:e?s|ing|ed|e)?"

MIN_STEM_LENGTH = 3

GUARDED_SKILLS: Dict[str, Pattern[str]] = {
    "go": re.compile(r"\bgolang\b|\bgo[\s-]+lang(?:uage)?\b"),
}


def _build_canonical(skills: Iterable[str]) -> Dict[str, str]:
    canonical: Dict[str, str] = {}
    for skill in skills:
        canonical.setdefault(skill.lower(), skill)
    return canonical


CANONICAL: Dict[str, str] = _build_canonical(SKILLS)
# Vocabulary position of every canonical skill; output follows this order.
_RANK: Dict[str, int] = {key: i for i, key in enumerate(CANONICAL)}


def derive_terms(skill: str) -> List[str]:
    """Lower-case surface forms under which a canonical skill is matched."""
    skill = skill.strip()
    terms = [skill]

    match = _PARENTHETICAL.match(skill)
    if match:
        base, inner = match.group(1).strip(), match.group(2).strip()
        if base:
            terms.append(base)
        if "," not in inner:
            terms.extend(p.strip() for p in inner.split(" / ") if len(p.strip()) >= MIN_STEM_LENGTH)
    elif " / " in skill:
        terms.extend(p.strip() for p in skill.split(" / ") if p.strip())

    seen = []
    for term in terms:
        term = term.lower()
        if term not in seen:
            seen.append(term)
    return seen


def _phrase_pattern(term: str) -> str:
    # Spaces and hyphens are interchangeable between words.
    words = re.split(r"[\s\-]+", term)
    return r"[\s\-]+".join(re.escape(w) for w in words if w)


def _exact_regex(terms: List[str]) -> Pattern[str]:
    alternatives = "|".join(_phrase_pattern(t) for t in sorted(terms, key=len, reverse=True))
    return re.compile(f"{_LEFT}(?:{alternatives}){_RIGHT}")


def _morph_regex(terms: List[str]) -> Optional[Pattern[str]]:
    alternatives = []
    for term in terms:
        words = [w for w in re.split(r"[\s\-]+", term) if w]
        if len(words) < 2 or not words[-1].isalpha():
            continue
        stem = _FINAL_SUFFIX.sub("", words[-1])
        if len(stem) < MIN_STEM_LENGTH:
            continue
        head = r"[\s\-]+".join(re.escape(w) for w in words[:-1])
        alternatives.append(f"{head}[\\s\\-]+{re.escape(stem)}{_MORPH_ENDING}")
    if not alternatives:
        return None
    return re.compile(f"{_LEFT}(?:{'|'.join(alternatives)}){_RIGHT}")


def _compile_vocabulary() -> List[Tuple[str, Pattern[str], Optional[Pattern[str]]]]:
    compiled = []
    for key, skill in CANONICAL.items():
        terms = derive_terms(skill)
        compiled.append((key, _exact_regex(terms), _morph_regex(terms)))
    return compiled


def _compile_aliases() -> List[Tuple[Pattern[str], Tuple[str, ...]]]:
    compiled = []
    for phrase, targets in SKILL_ALIASES.items():
        keys = tuple(t.lower() for t in targets if t.lower() in CANONICAL)
        if keys:
            compiled.append((re.compile(f"{_LEFT}{_phrase_pattern(phrase)}{_RIGHT}"), keys))
    return compiled


_VOCABULARY = _compile_vocabulary()
_ALIASES = _compile_aliases()


def extract_skills(description: Optional[str]) -> List[str]:
    """
    Canonical skills mentioned in `description`, without duplicates, in
    vocabulary order. Empty input gives an empty list.
    """
    if not description or not isinstance(description, str):
        return []

    text = description.lower()
    found = set()

    for regex, keys in _ALIASES:
        if regex.search(text):
            found.update(keys)

    for key, exact, _ in _VOCABULARY:
        if key in GUARDED_SKILLS or key in found:
            continue
        if exact.search(text):
            found.add(key)

    for key, _, morph in _VOCABULARY:
        if morph is None or key in found or key in GUARDED_SKILLS:
            continue
        if morph.search(text):
            found.add(key)

    for key, guard in GUARDED_SKILLS.items():
        if key in found and not guard.search(text):
            found.discard(key)

    return [CANONICAL[key] for key in sorted(found, key=_RANK.__getitem__)]

"""Feature detectors over normalized CV text.

Each detector is a pure function of ``NormalizedText``; ``detect`` runs them
all once and freezes the outcome in a ``DetectionFlags`` record. Detectors
never raise and degrade to "not found" on empty input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Pattern

from sa_ats.scoring import vocabulary as vocab
from sa_ats.utils.text_normalizer import NormalizedText

LONG_LINE_CHARS = 200


@dataclass(frozen=True)
class DetectionFlags:
    """Everything the rules need to know about one CV."""

    # structural
    has_sections: bool
    has_bullet_points: bool
    has_contact_info: bool
    has_date_ranges: bool
    has_dates: bool
    # content quality
    has_action_verbs: bool
    has_quantified_results: bool
    found_skills: tuple[str, ...]
    avg_line_length: float
    has_long_lines: bool
    char_count: int
    # regional context
    found_sa_keywords: tuple[str, ...]
    found_certifications: tuple[str, ...]
    bbbee_terms: tuple[str, ...]
    nqf_mentions: int
    sa_locations: tuple[str, ...]
    sa_languages: tuple[str, ...]

    @property
    def has_key_skills(self) -> bool:
        return bool(self.found_skills)


def _matching_terms(content: str, patterns: Iterable[tuple[str, Pattern[str]]]) -> tuple[str, ...]:
    """Return the terms whose pattern occurs in ``content``, in table order."""
    if not content:
        return ()
    return tuple(term for term, pattern in patterns if pattern.search(content))


def _distinct_matches(content: str, pattern: Pattern[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for match in pattern.finditer(content):
        seen.setdefault(" ".join(match.group(0).split()), None)
    return tuple(seen)


def average_line_length(lines: tuple[str, ...]) -> float:
    if not lines:
        return 0.0
    return sum(len(line) for line in lines) / len(lines)


def has_sections(content: str) -> bool:
    return vocab.SECTION_RE.search(content) is not None


def has_bullet_points(content: str) -> bool:
    return vocab.BULLET_RE.search(content) is not None


def has_contact_info(content: str) -> bool:
    return vocab.CONTACT_RE.search(content) is not None


def has_date_ranges(content: str) -> bool:
    return vocab.DATE_RANGE_RE.search(content) is not None


def has_dates(content: str) -> bool:
    return vocab.YEAR_RE.search(content) is not None


def has_action_verbs(content: str) -> bool:
    return vocab.ACTION_VERB_RE.search(content) is not None


def has_quantified_results(content: str) -> bool:
    return vocab.QUANTIFIED_RE.search(content) is not None


def find_skills(content: str) -> tuple[str, ...]:
    return _matching_terms(content, vocab.KEY_SKILL_PATTERNS)


def detect(text: NormalizedText) -> DetectionFlags:
    """Run every detector once over normalized text.

    Args:
        text: Output of ``normalize_cv_text``.

    Returns:
        Frozen DetectionFlags for the scoring rules.
    """
    content, lines = text.content, text.lines

    return DetectionFlags(
        has_sections=has_sections(content),
        has_bullet_points=has_bullet_points(content),
        has_contact_info=has_contact_info(content),
        has_date_ranges=has_date_ranges(content),
        has_dates=has_dates(content),
        has_action_verbs=has_action_verbs(content),
        has_quantified_results=has_quantified_results(content),
        found_skills=find_skills(content),
        avg_line_length=average_line_length(lines),
        has_long_lines=any(len(line) > LONG_LINE_CHARS for line in lines),
        char_count=len(content),
        found_sa_keywords=_matching_terms(content, vocab.SA_MARKET_KEYWORD_PATTERNS),
        found_certifications=_matching_terms(content, vocab.SA_CERTIFICATION_PATTERNS),
        bbbee_terms=_distinct_matches(content, vocab.BBBEE_RE),
        nqf_mentions=sum(1 for _ in vocab.NQF_RE.finditer(content)),
        sa_locations=_matching_terms(content, vocab.SA_LOCATION_PATTERNS),
        sa_languages=_matching_terms(content, vocab.SA_LANGUAGE_PATTERNS),
    )

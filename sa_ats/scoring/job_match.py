"""Keyword overlap between a CV and a job description.

Deliberately crude: whitespace tokens, no stemming or synonyms. The score is
reported next to the main analysis and never feeds into it.
"""

from __future__ import annotations

from dataclasses import dataclass

from sa_ats.scoring.aggregator import round_half_up
from sa_ats.scoring.ratings import JobRelevance, classify_job_relevance

MAX_MATCH_SCORE = 90
MIN_TOKEN_LENGTH = 5
STOP_WORDS = frozenset({"and", "the", "for", "with", "that", "this", "have", "from"})


@dataclass(frozen=True)
class JobMatch:
    match_score: int
    job_relevance: JobRelevance


def job_keywords(job_description: str) -> list[str]:
    """Tokens of the job description that take part in matching.

    Duplicates are kept, so terms repeated in the advert weigh more.
    """
    return [
        token
        for token in job_description.lower().split()
        if len(token) >= MIN_TOKEN_LENGTH and token not in STOP_WORDS
    ]


def match_job_description(cv_content: str, job_description: str | None) -> JobMatch | None:
    """Score how many job description keywords occur in the CV.

    Args:
        cv_content: Normalized (lower-cased) CV text.
        job_description: Raw job description; blank means "not supplied".

    Returns:
        JobMatch, or None when no job description was supplied.
    """
    if not job_description or not job_description.strip():
        return None

    tokens = job_keywords(job_description)
    if not tokens:
        return JobMatch(match_score=0, job_relevance=classify_job_relevance(0))

    matched = sum(1 for token in tokens if token in cv_content)
    score = min(MAX_MATCH_SCORE, round_half_up(100 * matched / len(tokens)))
    return JobMatch(match_score=score, job_relevance=classify_job_relevance(score))

"""Single entry point of the ATS scoring engine.

``analyze`` is total for string input: empty text simply fails every
detector. It does no I/O and keeps no state, so it is safe to call from
concurrent requests.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from sa_ats.scoring.aggregator import aggregate
from sa_ats.scoring.detectors import detect
from sa_ats.scoring.feedback import build_feedback, shuffled
from sa_ats.scoring.job_match import JobMatch, match_job_description
from sa_ats.scoring.profiles import WeightProfile, get_weight_profile
from sa_ats.scoring.ratings import Rating, SARelevance, classify_rating, classify_sa_relevance
from sa_ats.utils.text_normalizer import normalize_cv_text


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis.

    Feedback lists and skills are complete and shuffled; callers truncate
    them for display.
    """

    overall_score: int
    rating: Rating
    format_score: int
    content_score: int
    sa_context_score: int
    sa_relevance: SARelevance
    strengths: tuple[str, ...]
    improvements: tuple[str, ...]
    format_feedback: tuple[str, ...]
    skills_identified: tuple[str, ...]
    job_match: JobMatch | None
    weight_profile: str


def analyze(
    text: str,
    job_description: str | None = None,
    *,
    profile: WeightProfile | str | None = None,
    rng: random.Random | None = None,
) -> AnalysisResult:
    """Score a CV and produce feedback.

    Args:
        text: Raw CV text.
        job_description: Optional job advert for the keyword match score.
        profile: Weight profile or its name; defaults to ``standard``.
        rng: Random source for list shuffling; the process-level source
            is used when omitted.

    Returns:
        AnalysisResult with clamped scores, labels and feedback.
    """
    weights = profile if isinstance(profile, WeightProfile) else get_weight_profile(profile)

    normalized = normalize_cv_text(text)
    flags = detect(normalized)
    scores = aggregate(flags, weights)
    feedback = build_feedback(flags, scores.sa_context_score, rng)

    return AnalysisResult(
        overall_score=scores.overall_score,
        rating=classify_rating(scores.overall_score),
        format_score=scores.format_score,
        content_score=scores.content_score,
        sa_context_score=scores.sa_context_score,
        sa_relevance=classify_sa_relevance(scores.sa_context_score),
        strengths=feedback.strengths,
        improvements=feedback.improvements,
        format_feedback=feedback.format_feedback,
        skills_identified=shuffled(flags.found_skills, rng),
        job_match=match_job_description(normalized.content, job_description),
        weight_profile=weights.name,
    )

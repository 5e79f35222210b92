"""Score → label classification. All functions are pure."""

from __future__ import annotations

from typing import Literal

Rating = Literal["Excellent", "Good", "Average", "Needs Improvement"]
SARelevance = Literal["Excellent", "High", "Medium", "Low"]
JobRelevance = Literal["High", "Medium", "Low"]

RATING_THRESHOLDS: tuple[tuple[int, Rating], ...] = (
    (80, "Excellent"),
    (65, "Good"),
    (50, "Average"),
)

SA_RELEVANCE_THRESHOLDS: tuple[tuple[int, SARelevance], ...] = (
    (80, "Excellent"),
    (60, "High"),
    (40, "Medium"),
)

JOB_RELEVANCE_THRESHOLDS: tuple[tuple[int, JobRelevance], ...] = (
    (75, "High"),
    (50, "Medium"),
)


def _classify(score: int, thresholds, fallback: str) -> str:
    for minimum, label in thresholds:
        if score >= minimum:
            return label
    return fallback


def classify_rating(overall_score: int) -> Rating:
    return _classify(overall_score, RATING_THRESHOLDS, "Needs Improvement")  # type: ignore[return-value]


def classify_sa_relevance(sa_context_score: int) -> SARelevance:
    return _classify(sa_context_score, SA_RELEVANCE_THRESHOLDS, "Low")  # type: ignore[return-value]


def classify_job_relevance(match_score: int) -> JobRelevance:
    return _classify(match_score, JOB_RELEVANCE_THRESHOLDS, "Low")  # type: ignore[return-value]

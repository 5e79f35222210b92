"""CV analysis service sitting between the HTTP layer and the scoring engine.

Handles everything the engine deliberately leaves to its caller:
- rejecting blank CV text
- normalizing whitespace and capping input size
- truncating feedback lists for display
- logging without exposing CV content
"""

from __future__ import annotations

import hashlib
import logging
import random

from sa_ats.core.config import ScoringSettings, settings
from sa_ats.core.errors import ValidationAppError
from sa_ats.schemas.analysis import CVAnalysisResponse, JobMatchResponse
from sa_ats.scoring import AnalysisResult, WeightProfile, analyze, get_weight_profile
from sa_ats.utils.text_normalizer import normalize_text

logger = logging.getLogger(__name__)


def _truncate(text: str, max_chars: int) -> tuple[str, bool]:
    """Truncate text to max_chars if needed.

    Returns:
        Tuple of (truncated_text, was_truncated).
    """
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars], True


def _text_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", errors="ignore")).hexdigest()[:16]


class AnalysisService:
    """Validates input, runs the engine and shapes the API response.

    Attributes:
        profile: Weight profile applied to every analysis.
        limits: Display counts for feedback lists and skills.
        rng: Optional random source for list shuffling.
    """

    def __init__(
        self,
        profile: WeightProfile | None = None,
        limits: ScoringSettings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.limits = limits or settings.scoring
        self.profile = profile or get_weight_profile(self.limits.weight_profile)
        self.rng = rng

    def _validate_inputs(self, cv_text: object, job_text: object) -> None:
        """Reject CV text that is missing, not a string or blank.

        Raises:
            ValidationAppError: If the CV text is unusable.
        """
        if not isinstance(cv_text, str):
            raise ValidationAppError(
                code="cv_text_invalid",
                message="CV text must be a string.",
                details={"field": "text"},
            )
        if not cv_text.strip():
            raise ValidationAppError(
                code="cv_text_required",
                message="CV text is required.",
                details={"field": "text", "actual_chars": 0},
            )
        if job_text is not None and not isinstance(job_text, str):
            raise ValidationAppError(
                code="job_description_invalid",
                message="Job description must be a string.",
                details={"field": "job_description"},
            )

    def _prepare_inputs(
        self,
        cv_text: str,
        job_text: str | None,
        warnings: list[str],
    ) -> tuple[str, str | None]:
        cv_text, cv_truncated = _truncate(normalize_text(cv_text), settings.app.max_cv_chars)
        if cv_truncated:
            warnings.append(
                f"CV text was truncated to {settings.app.max_cv_chars} characters."
            )

        if job_text is not None:
            job_text, job_truncated = _truncate(job_text, settings.app.max_job_desc_chars)
            if job_truncated:
                warnings.append(
                    f"Job description was truncated to {settings.app.max_job_desc_chars} characters."
                )

        return cv_text, job_text

    def _to_response(self, result: AnalysisResult, warnings: list[str]) -> CVAnalysisResponse:
        job_match = None
        if result.job_match is not None:
            job_match = JobMatchResponse(
                match_score=result.job_match.match_score,
                job_relevance=result.job_match.job_relevance,
            )

        return CVAnalysisResponse(
            overall_score=result.overall_score,
            rating=result.rating,
            format_score=result.format_score,
            content_score=result.content_score,
            sa_context_score=result.sa_context_score,
            sa_relevance=result.sa_relevance,
            strengths=list(result.strengths[: self.limits.strengths_limit]),
            improvements=list(result.improvements[: self.limits.improvements_limit]),
            format_feedback=list(result.format_feedback[: self.limits.format_feedback_limit]),
            skills_identified=list(result.skills_identified[: self.limits.skills_limit]),
            job_match=job_match,
            weight_profile=result.weight_profile,
            warnings=warnings,
        )

    def analyze(self, cv_text: str, job_text: str | None = None) -> CVAnalysisResponse:
        """Analyze CV text and return the display-ready response.

        Args:
            cv_text: Plain CV text.
            job_text: Optional job description.

        Returns:
            CVAnalysisResponse with truncated feedback lists.

        Raises:
            ValidationAppError: If the CV text is missing or blank.
        """
        self._validate_inputs(cv_text, job_text)

        warnings: list[str] = []
        cv_text, job_text = self._prepare_inputs(cv_text, job_text, warnings)

        result = analyze(cv_text, job_text, profile=self.profile, rng=self.rng)

        logger.info(
            "analysis.completed",
            extra={
                "cv_text_hash": _text_hash(cv_text),
                "char_count": len(cv_text),
                "overall_score": result.overall_score,
                "rating": result.rating,
                "format_score": result.format_score,
                "content_score": result.content_score,
                "sa_context_score": result.sa_context_score,
                "weight_profile": result.weight_profile,
                "job_match_score": result.job_match.match_score if result.job_match else None,
                "warnings_count": len(warnings),
            },
        )

        return self._to_response(result, warnings)

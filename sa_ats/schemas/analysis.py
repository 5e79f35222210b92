"""Pydantic schemas for ATS analysis requests and responses."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class AnalyzeCVTextRequest(BaseModel):
    """Plain-text CV submitted for scoring."""

    text: StrictStr = Field(
        ...,
        description="Plain CV text. Extract text from PDF/DOCX before calling.",
    )
    job_description: StrictStr | None = Field(
        default=None,
        description="Optional job advert used for the keyword match score.",
    )


class AnalyzeResumeTextRequest(BaseModel):
    """Body shape of the older resume endpoint (camelCase fields)."""

    model_config = ConfigDict(populate_by_name=True)

    resume_content: StrictStr = Field(..., alias="resumeContent")
    job_description: StrictStr | None = Field(default=None, alias="jobDescription")


class JobMatchResponse(BaseModel):
    match_score: int = Field(
        ...,
        ge=0,
        le=90,
        description="Share of job advert keywords found in the CV, capped at 90.",
    )
    job_relevance: Literal["High", "Medium", "Low"]


class CVAnalysisResponse(BaseModel):
    """Scores, labels and feedback for one CV.

    Feedback lists are shuffled on every call and truncated to the configured
    display counts.
    """

    overall_score: int = Field(..., ge=0, le=100, description="Weighted overall ATS score.")
    rating: Literal["Excellent", "Good", "Average", "Needs Improvement"]
    format_score: int = Field(..., ge=0, le=100, description="Structure and layout score.")
    content_score: int = Field(..., ge=0, le=100, description="Content quality and skills score.")
    sa_context_score: int = Field(
        ...,
        ge=0,
        le=100,
        description="How well the CV reflects South African conventions (B-BBEE, NQF, locations, languages).",
    )
    sa_relevance: Literal["Excellent", "High", "Medium", "Low"]
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    format_feedback: list[str] = Field(default_factory=list)
    skills_identified: list[str] = Field(default_factory=list)
    job_match: JobMatchResponse | None = Field(
        default=None,
        description="Present only when a job description was supplied.",
    )
    weight_profile: str = Field(..., description="Weighting profile used for the overall score.")
    warnings: list[str] = Field(
        default_factory=list,
        description="Warnings about input processing (e.g. truncation).",
    )

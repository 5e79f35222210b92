from __future__ import annotations

from fastapi import APIRouter

from sa_ats.schemas.analysis import (
    AnalyzeCVTextRequest,
    AnalyzeResumeTextRequest,
    CVAnalysisResponse,
)
from sa_ats.services.analysis_service import AnalysisService

router = APIRouter(prefix="/ats", tags=["ATS"])

_analysis_service: AnalysisService | None = None


def get_analysis_service() -> AnalysisService:
    """Build the shared service on first use.

    Raises:
        ConfigurationAppError: If the configured weight profile is unknown.
    """
    global _analysis_service
    if _analysis_service is None:
        _analysis_service = AnalysisService()
    return _analysis_service


@router.post("/analyze-cv-text", response_model=CVAnalysisResponse)
def analyze_cv_text(body: AnalyzeCVTextRequest) -> CVAnalysisResponse:
    """Score plain CV text.

    Returns format, content and South African context scores, the overall
    rating, feedback lists and, when a job description is supplied, a keyword
    match score.

    Raises:
        ValidationAppError: 400 when the CV text is blank.
    """
    return get_analysis_service().analyze(cv_text=body.text, job_text=body.job_description)


@router.post("/analyze-resume-text", response_model=CVAnalysisResponse)
def analyze_resume_text(body: AnalyzeResumeTextRequest) -> CVAnalysisResponse:
    """Same analysis as ``/analyze-cv-text`` for clients sending ``resumeContent``."""
    return get_analysis_service().analyze(
        cv_text=body.resume_content,
        job_text=body.job_description,
    )

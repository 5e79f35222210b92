"""HTTP tests for the ATS analysis and health endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sa_ats import __version__
from sa_ats.api.routes import ats as ats_routes
from sa_ats.core.config import settings
from sa_ats.main import app

client = TestClient(app)

CV_URL = "/v1/ats/analyze-cv-text"
RESUME_URL = "/v1/ats/analyze-resume-text"


def test_analyze_cv_text_returns_scores(sample_cv: str) -> None:
    resp = client.post(CV_URL, json={"text": sample_cv})

    assert resp.status_code == 200
    data = resp.json()
    assert data["rating"] == "Excellent"
    assert data["format_score"] == 100
    assert data["content_score"] == 100
    assert data["sa_relevance"] == "Excellent"
    assert data["weight_profile"] == "standard"
    assert data["job_match"] is None
    assert len(data["strengths"]) == 3
    assert len(data["improvements"]) == 3
    assert len(data["skills_identified"]) <= 8
    assert data["warnings"] == []


def test_analyze_cv_text_with_job_description(sample_cv: str) -> None:
    resp = client.post(
        CV_URL,
        json={"text": sample_cv, "job_description": "Python developer with Docker experience"},
    )

    assert resp.status_code == 200
    job_match = resp.json()["job_match"]
    assert 0 <= job_match["match_score"] <= 90
    assert job_match["job_relevance"] in {"High", "Medium", "Low"}


@pytest.mark.parametrize("job_description", ["", "   "])
def test_blank_job_description_means_no_match(sample_cv: str, job_description: str) -> None:
    resp = client.post(CV_URL, json={"text": sample_cv, "job_description": job_description})

    assert resp.status_code == 200
    assert resp.json()["job_match"] is None


@pytest.mark.parametrize("text", ["", "   ", "\n\n"])
def test_blank_text_is_rejected(text: str) -> None:
    resp = client.post(CV_URL, json={"text": text})

    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "cv_text_required"
    assert error["details"]["field"] == "text"


@pytest.mark.parametrize("body", [{}, {"text": None}, {"text": 123}, {"text": ["a"]}])
def test_missing_or_non_string_text_is_rejected(body: dict) -> None:
    resp = client.post(CV_URL, json=body)

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "invalid_request"


def test_non_string_job_description_is_rejected(sample_cv: str) -> None:
    resp = client.post(CV_URL, json={"text": sample_cv, "job_description": 5})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "invalid_request"


def test_legacy_resume_endpoint(sample_cv: str) -> None:
    resp = client.post(
        RESUME_URL,
        json={"resumeContent": sample_cv, "jobDescription": "Senior Python developer"},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["rating"] == "Excellent"
    assert data["job_match"] is not None


def test_legacy_resume_endpoint_rejects_blank_content() -> None:
    resp = client.post(RESUME_URL, json={"resumeContent": "  "})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "cv_text_required"


def test_minimal_cv_gets_feedback() -> None:
    resp = client.post(CV_URL, json={"text": "hello"})

    assert resp.status_code == 200
    data = resp.json()
    assert data["rating"] == "Needs Improvement"
    assert data["improvements"]
    assert data["format_feedback"]


def test_health() -> None:
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {
        "status": "ok",
        "version": __version__,
        "weight_profile": "standard",
    }


def test_unknown_weight_profile_is_a_server_error(monkeypatch, sample_cv: str) -> None:
    monkeypatch.setattr(settings.scoring, "weight_profile", "nope")
    monkeypatch.setattr(ats_routes, "_analysis_service", None)

    resp = client.post(CV_URL, json={"text": sample_cv})

    assert resp.status_code == 500
    error = resp.json()["error"]
    assert error["code"] == "unknown_weight_profile"
    assert error["details"]["available_profiles"] == ["standard", "stored_cv"]

"""Tests for score → label classification."""

import pytest

from sa_ats.scoring.ratings import classify_job_relevance, classify_rating, classify_sa_relevance


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (100, "Excellent"),
        (80, "Excellent"),
        (79, "Good"),
        (65, "Good"),
        (64, "Average"),
        (50, "Average"),
        (49, "Needs Improvement"),
        (0, "Needs Improvement"),
    ],
)
def test_classify_rating(score: int, expected: str) -> None:
    assert classify_rating(score) == expected


@pytest.mark.parametrize(
    ("score", "expected"),
    [
        (80, "Excellent"),
        (79, "High"),
        (60, "High"),
        (59, "Medium"),
        (40, "Medium"),
        (39, "Low"),
        (0, "Low"),
    ],
)
def test_classify_sa_relevance(score: int, expected: str) -> None:
    assert classify_sa_relevance(score) == expected


@pytest.mark.parametrize(
    ("score", "expected"),
    [(90, "High"), (75, "High"), (74, "Medium"), (50, "Medium"), (49, "Low"), (0, "Low")],
)
def test_classify_job_relevance(score: int, expected: str) -> None:
    assert classify_job_relevance(score) == expected

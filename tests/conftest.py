"""Pytest configuration and fixtures shared across all test modules.

Environment defaults are set before anything imports ``sa_ats.core.config``
so every test sees the same settings regardless of local .env files.
"""

import os
import random

import pytest

# CRITICAL: Set these before any imports that might load settings
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("SCORING_WEIGHT_PROFILE", "standard")
os.environ.setdefault("LOG_LEVEL", "WARNING")


SAMPLE_CV = """Thandi Nkosi
Email: thandi.nkosi@example.co.za | Mobile: 082 555 0199 | Johannesburg, Gauteng

Professional Summary
Software developer with six years of experience building data products for retail and banking clients.

Work Experience
Senior Developer, Acme Retail - Jan 2020 - Present
- Managed a team of 5 engineers delivering a Python and SQL reporting platform
- Increased report generation speed by 40% through query optimisation and caching
- Designed and implemented REST API integrations with the national logistics provider

Developer, Ubuntu Bank - Mar 2017 - Dec 2019
- Developed customer onboarding services in Java and deployed them on AWS
- Reduced failed payments by 15% by adding validation and monitoring

Education
BSc Computer Science, University of the Witwatersrand, NQF Level 7, 2016

Skills
Python, SQL, Java, AWS, Docker, Agile, Communication, Leadership

Languages
English, isiZulu, Afrikaans

B-BBEE Level 2 contributor. SAICA associate member.
"""


@pytest.fixture
def sample_cv() -> str:
    return SAMPLE_CV


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so shuffled lists are reproducible."""
    return random.Random(1234)

"""Rule-based ATS scoring engine for South African CVs."""

from sa_ats.scoring.analyzer import AnalysisResult, analyze
from sa_ats.scoring.job_match import JobMatch
from sa_ats.scoring.profiles import WEIGHT_PROFILES, WeightProfile, get_weight_profile

__all__ = [
    "AnalysisResult",
    "JobMatch",
    "WEIGHT_PROFILES",
    "WeightProfile",
    "analyze",
    "get_weight_profile",
]

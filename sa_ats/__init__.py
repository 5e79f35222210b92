"""Rule-based ATS scoring for South African CVs."""

__version__ = "0.1.0"

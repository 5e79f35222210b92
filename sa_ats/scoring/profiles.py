"""Weighting profiles for the overall score.

``standard`` is the default used by every entry point. ``stored_cv`` keeps the
40/40/20 split that was applied to CVs saved against a user account, for
deployments that need to reproduce those numbers.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from sa_ats.core.errors import ConfigurationAppError

DEFAULT_PROFILE = "standard"


@dataclass(frozen=True)
class WeightProfile:
    name: str
    format_weight: float
    content_weight: float
    sa_context_weight: float

    def __post_init__(self) -> None:
        total = self.format_weight + self.content_weight + self.sa_context_weight
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise ValueError(f"Weights of profile '{self.name}' must sum to 1.0, got {total}")


WEIGHT_PROFILES: dict[str, WeightProfile] = {
    "standard": WeightProfile("standard", format_weight=0.3, content_weight=0.4, sa_context_weight=0.3),
    "stored_cv": WeightProfile("stored_cv", format_weight=0.4, content_weight=0.4, sa_context_weight=0.2),
}


def get_weight_profile(name: str | None = None) -> WeightProfile:
    """Look up a profile by name (case-insensitive).

    Raises:
        ConfigurationAppError: If no profile has that name.
    """
    key = (name or DEFAULT_PROFILE).strip().lower()
    try:
        return WEIGHT_PROFILES[key]
    except KeyError:
        raise ConfigurationAppError(
            code="unknown_weight_profile",
            message=f"Unknown scoring weight profile: '{name}'",
            details={"profile": str(name), "available_profiles": sorted(WEIGHT_PROFILES)},
        ) from None

from __future__ import annotations

from fastapi import APIRouter

from sa_ats import __version__
from sa_ats.core.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check() -> dict:
    """Liveness check for load balancers.

    Returns:
        dict: ``status`` plus the service version and active weight profile.
    """

    return {
        "status": "ok",
        "version": __version__,
        "weight_profile": settings.scoring.weight_profile,
    }

from __future__ import annotations

from sa_ats.api.routes.ats import router as ats_router
from sa_ats.api.routes.health import router as health_router

__all__ = ["ats_router", "health_router"]

"""Application factory for the FastAPI app.

Centralizes app construction (metadata, middleware, handlers, routers) so
tests and the ASGI entry point build the same application.
"""

from __future__ import annotations

from fastapi import FastAPI

from sa_ats import __version__
from sa_ats.api.routes import ats_router, health_router
from sa_ats.core.config import settings
from sa_ats.core.exception_handlers import setup_exception_handlers
from sa_ats.core.logging import configure_logging
from sa_ats.core.middleware import request_id_middleware
from sa_ats.core.openapi import apply_openapi_customizations


def create_app() -> FastAPI:
    """Create and configure the FastAPI application instance.

    Returns:
        Configured FastAPI app with middleware, handlers, routers and docs.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="SA ATS Scorer",
        description=(
            "Scores plain-text CVs the way an applicant tracking system might, "
            "tuned for the South African job market. Returns format, content and "
            "South African context scores, an overall rating, strengths, "
            "improvements, formatting suggestions, identified skills and an "
            "optional keyword match against a job description."
        ),
        version=__version__,
        debug=settings.app.debug,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )

    app.middleware("http")(request_id_middleware)

    setup_exception_handlers(app)

    app.include_router(ats_router, prefix="/v1")
    app.include_router(health_router)

    apply_openapi_customizations(app)

    return app

"""OpenAPI customization.

Adds tag descriptions to the generated schema so the docs group the ATS and
health endpoints. Kept apart from the app factory so documentation concerns
stay out of application wiring.
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import FastAPI

TAGS_METADATA = [
    {
        "name": "ATS",
        "description": (
            "Rule-based CV scoring for the South African job market: format, "
            "content and regional-context scores with feedback."
        ),
    },
    {
        "name": "Health",
        "description": "Liveness checks.",
    },
]


def apply_openapi_customizations(app: FastAPI) -> None:
    """Patch the app's OpenAPI generation to include tag metadata."""

    original_openapi = app.openapi

    def custom_openapi() -> Dict[str, Any]:
        schema = original_openapi()

        tags = schema.setdefault("tags", [])
        existing_tag_names = {t.get("name") for t in tags}
        for tag in TAGS_METADATA:
            if tag["name"] not in existing_tag_names:
                tags.append(tag)

        return schema

    app.openapi = custom_openapi  # type: ignore[assignment]

"""Service health endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from ...engine import NAKSHATRA_COUNT, RULE_NAMES

router = APIRouter(tags=["system"])


@router.get(
    "/healthz",
    summary="Service readiness probe",
    response_model=dict[str, str | int],
)
async def health_check() -> dict[str, str | int]:
    """Report readiness along with the size of the loaded rule set."""

    return {"status": "ok", "nakshatras": NAKSHATRA_COUNT, "poruthams": len(RULE_NAMES)}


__all__ = ["router"]

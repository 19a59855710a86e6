"""Nakshatra registry and porutham matching endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from ...config import MatchingCfg, default_settings
from ...engine import (
    NakshatraRecord,
    UnknownStarError,
    all_stars,
    calculate_compatibility,
    find_by_name,
)
from ..errors import ErrorEnvelope, unknown_star_envelope

LOG = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/porutham", tags=["porutham"])


class StarModel(BaseModel):
    id: int
    name: str
    rashi: str
    gana: str
    yoni: str
    rajju: str
    vedhai: list[str]
    lord: str


class PoruthamModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    score: float
    max_score: float = Field(alias="maxScore")
    status: str
    description: str


class MatchRequest(BaseModel):
    groom_star: str = Field(description="Groom's nakshatra name.")
    bride_star: str = Field(description="Bride's nakshatra name.")
    strict: bool | None = Field(
        default=None,
        description="Reject unknown names instead of substituting the default star.",
    )
    normalize: bool | None = Field(
        default=None, description="Match names ignoring case and surrounding whitespace."
    )


class MatchResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_score: float = Field(alias="totalScore")
    total_possible: float = Field(alias="totalPossible")
    results: list[PoruthamModel]
    verdict: str
    groom_star: StarModel = Field(alias="groomStar")
    bride_star: StarModel = Field(alias="brideStar")
    count: int
    band: str
    fallbacks: list[str]


def _matching_cfg(request: Request) -> MatchingCfg:
    settings = getattr(request.app.state, "settings", None) or default_settings()
    return settings.matching


def _star_model(star: NakshatraRecord) -> StarModel:
    return StarModel(**star.to_dict())


@router.get("/stars", response_model=list[StarModel], summary="List nakshatras")
def list_stars() -> list[StarModel]:
    """Return the 27 nakshatras in wheel order."""

    return [_star_model(star) for star in all_stars()]


@router.get(
    "/stars/{name}",
    response_model=StarModel,
    responses={404: {"model": ErrorEnvelope}},
    summary="Look up a nakshatra",
)
def get_star(name: str, request: Request) -> StarModel:
    cfg = _matching_cfg(request)
    try:
        star = find_by_name(name, strict=True, normalize=cfg.normalize_names)
    except UnknownStarError as exc:
        raise HTTPException(status_code=404, detail=unknown_star_envelope(exc)) from exc
    return _star_model(star)


@router.post(
    "/match",
    response_model=MatchResponse,
    responses={422: {"model": ErrorEnvelope}},
    summary="Ten-porutham compatibility report",
)
def match(payload: MatchRequest, request: Request) -> MatchResponse:
    cfg = _matching_cfg(request)
    strict = cfg.strict if payload.strict is None else payload.strict
    normalize = cfg.normalize_names if payload.normalize is None else payload.normalize

    report = calculate_compatibility(
        payload.groom_star,
        payload.bride_star,
        strict=strict,
        normalize=normalize,
    )
    if report.fallbacks:
        LOG.info("Match served with default star for %s", ", ".join(report.fallbacks))
    return MatchResponse.model_validate(report.to_dict())


__all__ = ["router"]

"""
Covid Portal Backend - District Route Handlers
================================================

What:  POST /districts/, and GET / PUT / DELETE /districts/{districtId}/.
How:   Auth gate first (AuthenticatedRoute, before the body is read), then
       DistrictService.
       Mutations answer with a short plain-text confirmation and HTTP 200.

Exactly one response per request:
    Success → the confirmation text or JSON below
    Failure → the service raises; the global handlers produce the response
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from covid_portal.auth.deps import AuthenticatedRoute
from covid_portal.database import get_db_session
from covid_portal.schemas.common import BadRequestResponse, ServerErrorResponse
from covid_portal.schemas.district import DistrictPayload, DistrictResponse
from covid_portal.services.district_service import district_service


# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(
    prefix="/districts",
    tags=["Districts"],
    route_class=AuthenticatedRoute,
    responses={
        400: {"description": "Malformed body or path", "model": BadRequestResponse},
        401: {"description": "Missing or invalid bearer token (text: Invalid JWT Token)"},
        500: {"description": "Server error", "model": ServerErrorResponse},
    },
)


@router.post(
    "/",
    response_class=PlainTextResponse,
    summary="Add a district",
    description="Inserts the district as given. The stateId is not checked against existing states.",
)
async def add_district(
    payload: DistrictPayload,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await district_service.add_district(db, payload)
    return "District Successfully Added"


@router.get(
    "/{district_id}/",
    response_model=DistrictResponse,
    responses={404: {"description": "District not found (plain text)"}},
    summary="Get a single district by ID",
)
async def get_district(
    district_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> DistrictResponse:
    return await district_service.get_district(db, district_id)


@router.put(
    "/{district_id}/",
    response_class=PlainTextResponse,
    summary="Replace a district's details",
    description="Replaces all six fields. Succeeds even when no district has this ID.",
)
async def update_district(
    district_id: int,
    payload: DistrictPayload,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await district_service.update_district(db, district_id, payload)
    return "District Details Updated"


@router.delete(
    "/{district_id}/",
    response_class=PlainTextResponse,
    summary="Remove a district",
    description="Deletes by ID. Succeeds even when no district has this ID.",
)
async def delete_district(
    district_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> str:
    await district_service.delete_district(db, district_id)
    return "District Removed"

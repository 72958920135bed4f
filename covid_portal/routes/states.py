"""
Covid Portal Backend - State Route Handlers
=============================================

What:  GET /states/, GET /states/{stateId}/, GET /states/{stateId}/stats/.
How:   Every route runs the auth gate first (AuthenticatedRoute), then
       delegates to StateService and returns camelCase JSON.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from covid_portal.auth.deps import AuthenticatedRoute
from covid_portal.database import get_db_session
from covid_portal.schemas.common import ServerErrorResponse
from covid_portal.schemas.state import StateResponse, StateStatsResponse
from covid_portal.services.state_service import state_service


# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(
    prefix="/states",
    tags=["States"],
    route_class=AuthenticatedRoute,
    responses={
        401: {"description": "Missing or invalid bearer token (text: Invalid JWT Token)"},
        500: {"description": "Server error", "model": ServerErrorResponse},
    },
)


@router.get(
    "/",
    response_model=List[StateResponse],
    summary="List all states",
)
async def list_states(db: AsyncSession = Depends(get_db_session)) -> List[StateResponse]:
    return await state_service.list_states(db)


@router.get(
    "/{state_id}/",
    response_model=StateResponse,
    responses={404: {"description": "State not found (plain text)"}},
    summary="Get a single state by ID",
)
async def get_state(state_id: int, db: AsyncSession = Depends(get_db_session)) -> StateResponse:
    return await state_service.get_state(db, state_id)


@router.get(
    "/{state_id}/stats/",
    response_model=StateStatsResponse,
    summary="Case totals across a state's districts",
    description=(
        "Sums cases, cured, active and deaths over every district of the state. "
        "A state without districts returns null totals with HTTP 200."
    ),
)
async def get_state_stats(
    state_id: int,
    db: AsyncSession = Depends(get_db_session),
) -> StateStatsResponse:
    return await state_service.get_state_stats(db, state_id)

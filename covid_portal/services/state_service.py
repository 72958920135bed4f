"""
Covid Portal Backend - State Service
======================================

What:  Read-side queries over `state`, plus the per-state aggregation over `district`.
Who:   Called by the /states/ route handlers.

Queries:
    list_states      SELECT state_id, state_name, population FROM state
    get_state        ... WHERE state_id = :state_id
    get_state_stats  SELECT SUM(cases), SUM(cured), SUM(active), SUM(deaths)
                     FROM district WHERE state_id = :state_id
"""

import logging
from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from covid_portal.exceptions import DatabaseError, NotFoundError
from covid_portal.models.district import District
from covid_portal.models.state import State
from covid_portal.schemas.state import StateResponse, StateStatsResponse

logger = logging.getLogger(__name__)


class StateService:
    """Business logic layer for state reads. States are never written here."""

    async def list_states(self, db: AsyncSession) -> List[StateResponse]:
        """
        Return every state in storage order.

        No ORDER BY: rows come back in whatever order SQLite stores them.
        An empty table yields an empty list.
        """
        try:
            result = await db.execute(select(State))
            return [StateResponse.model_validate(state) for state in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.error("Database error listing states: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve states",
                context={"error_type": type(e).__name__},
            )

    async def get_state(self, db: AsyncSession, state_id: int) -> StateResponse:
        """
        Return one state by id.

        Raises:
            NotFoundError: No state with this id (→ 404 "State not found")
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(select(State).where(State.state_id == state_id))
            state = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching state %s: %s", state_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the state",
                context={"state_id": state_id},
            )

        if state is None:
            raise NotFoundError(resource="State", resource_id=state_id)
        return StateResponse.model_validate(state)

    async def get_state_stats(self, db: AsyncSession, state_id: int) -> StateStatsResponse:
        """
        Sum district counters for one state.

        The state itself is not looked up: an unknown state, or a state with
        no districts, aggregates zero rows and every SUM comes back NULL.
        That is still a successful result, never a NotFoundError.
        """
        query = select(
            func.sum(District.cases).label("total_cases"),
            func.sum(District.cured).label("total_cured"),
            func.sum(District.active).label("total_active"),
            func.sum(District.deaths).label("total_deaths"),
        ).where(District.state_id == state_id)

        try:
            result = await db.execute(query)
            row = result.mappings().one()
        except SQLAlchemyError as e:
            logger.error("Database error aggregating state %s: %s", state_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not compute state statistics",
                context={"state_id": state_id},
            )

        return StateStatsResponse.model_validate(dict(row))


# ── Singleton Instance ────────────────────────────────────────────────────
state_service = StateService()

"""
Covid Portal Backend - District Service
=========================================

What:  Create / read / replace / delete for the `district` table.
How:   One parameterized statement per operation, committed before returning.
Who:   Called by the /districts/ route handlers.

Write Semantics:
    add_district     INSERT unconditionally (no state_id check, no duplicate check)
    update_district  UPDATE all six fields by key; zero rows affected is not an error
    delete_district  DELETE by key; deleting an absent id is not an error

Error Handling Strategy:
    Driver errors are rolled back, logged with a traceback, and re-raised as
    DatabaseError so the global handler answers with a single 500 response.
    No write path swallows an error.
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from covid_portal.exceptions import DatabaseError, NotFoundError
from covid_portal.models.district import District
from covid_portal.schemas.district import DistrictPayload, DistrictResponse

logger = logging.getLogger(__name__)


class DistrictService:
    """
    Business logic layer for district operations.

    Responsibilities:
        - add_district(): Insert a new district row
        - get_district(): Single district retrieval with not-found handling
        - update_district(): Full replacement of the six mutable fields
        - delete_district(): Removal by key
    """

    async def add_district(self, db: AsyncSession, payload: DistrictPayload) -> District:
        """
        Insert a district exactly as provided.

        Returns:
            The stored District, with district_id assigned by SQLite.

        Raises:
            DatabaseError: Insert or commit failed
        """
        district = District(**payload.model_dump())
        try:
            db.add(district)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error adding district: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not add the district",
                context={"error_type": type(e).__name__},
            )

        logger.info(
            "District %s added (state_id=%s)", district.district_id, district.state_id
        )
        return district

    async def get_district(self, db: AsyncSession, district_id: int) -> DistrictResponse:
        """
        Retrieve a single district by id.

        Raises:
            NotFoundError: No district with this id (→ 404 "District not found")
            DatabaseError: Query execution failed (→ 500)
        """
        try:
            result = await db.execute(
                select(District).where(District.district_id == district_id)
            )
            district = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching district %s: %s", district_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve the district",
                context={"district_id": district_id},
            )

        if district is None:
            raise NotFoundError(resource="District", resource_id=district_id)
        return DistrictResponse.model_validate(district)

    async def update_district(
        self,
        db: AsyncSession,
        district_id: int,
        payload: DistrictPayload,
    ) -> int:
        """
        Replace all six mutable fields of a district.

        Returns:
            Number of rows affected (0 when the id does not exist; the caller
            still reports success).

        Raises:
            DatabaseError: Update or commit failed
        """
        statement = (
            update(District)
            .where(District.district_id == district_id)
            .values(**payload.model_dump())
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(statement)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error updating district %s: %s", district_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not update the district",
                context={"district_id": district_id},
            )

        if result.rowcount == 0:
            logger.info("Update matched no district with id %s", district_id)
        else:
            logger.info("District %s updated", district_id)
        return result.rowcount

    async def delete_district(self, db: AsyncSession, district_id: int) -> int:
        """
        Delete a district by id.

        Returns:
            Number of rows removed (0 when the id does not exist).

        Raises:
            DatabaseError: Delete or commit failed
        """
        statement = (
            delete(District)
            .where(District.district_id == district_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await db.execute(statement)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error("Database error deleting district %s: %s", district_id, str(e), exc_info=True)
            raise DatabaseError(
                message="Could not remove the district",
                context={"district_id": district_id},
            )

        logger.info("District %s removed (%d row(s))", district_id, result.rowcount)
        return result.rowcount


# ── Singleton Instance ────────────────────────────────────────────────────
district_service = DistrictService()

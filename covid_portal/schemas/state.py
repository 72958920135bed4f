"""
Covid Portal Backend - State Schemas
======================================
"""

from typing import Optional

from pydantic import Field

from covid_portal.schemas.common import CamelModel


class StateResponse(CamelModel):
    """One row of the `state` table as {stateId, stateName, population}."""
    state_id: int = Field(description="State identifier")
    state_name: str = Field(description="State name")
    population: int = Field(description="Population count")


class StateStatsResponse(CamelModel):
    """
    What:  Sums of district counters for one state.
    Who:   Returned by GET /states/{stateId}/stats/.

    Every total is null when the state has no districts: SQL SUM over zero
    rows yields NULL, and that is reported as-is rather than as a 404 or 0.
    """
    total_cases: Optional[int] = Field(default=None, description="SUM(cases)")
    total_cured: Optional[int] = Field(default=None, description="SUM(cured)")
    total_active: Optional[int] = Field(default=None, description="SUM(active)")
    total_deaths: Optional[int] = Field(default=None, description="SUM(deaths)")

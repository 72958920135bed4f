"""
Covid Portal Backend - District Schemas
=========================================

What:  Request body for create/replace and the response shape for detail.

The same six fields are required for both POST /districts/ and
PUT /districts/{id}/: PUT is a full replacement, not a partial patch.
"""

from pydantic import Field

from covid_portal.schemas.common import CamelModel


class DistrictPayload(CamelModel):
    """Body of POST /districts/ and PUT /districts/{districtId}/."""
    district_name: str = Field(description="District name")
    state_id: int = Field(description="Owning state (not checked for existence)")
    cases: int = Field(description="Total confirmed cases")
    cured: int = Field(description="Recovered cases")
    active: int = Field(description="Currently active cases")
    deaths: int = Field(description="Deaths")


class DistrictResponse(CamelModel):
    """A stored district as {districtId, districtName, stateId, cases, cured, active, deaths}."""
    district_id: int = Field(description="District identifier assigned on insert")
    district_name: str
    state_id: int
    cases: int
    cured: int
    active: int
    deaths: int

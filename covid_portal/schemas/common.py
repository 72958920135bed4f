"""
Covid Portal Backend - Shared Schema Pieces
=============================================

What:  Base model configuration and the error body shapes used in OpenAPI docs.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every API schema.

    alias_generator:  district_name ↔ districtName on the wire
    populate_by_name: services may build models from snake_case attributes
    from_attributes:  models validate directly from ORM rows
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ServerErrorResponse(BaseModel):
    """Body of every 500 response: {"error": "Internal Server Error"}."""
    error: str = Field(default="Internal Server Error", description="Fixed error label")


class BadRequestResponse(BaseModel):
    """Body of a 400 produced by request validation (malformed body or path)."""
    error: str = Field(default="Bad Request", description="Fixed error label")
    details: List[Any] = Field(default_factory=list, description="Field-level validation errors")

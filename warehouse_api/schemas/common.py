"""Shared Pydantic schema base and envelope models."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, Field, PlainSerializer

# Stored as NUMERIC, sent as a JSON number.
Amount = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class ApiModel(BaseModel):
    """All API schemas inherit from this; fields use the column names as-is."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }


class CountResponse(ApiModel):
    """A count plus the filter values that produced it."""

    count: int = Field(ge=0)
    filter: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Error envelope; ``code`` mirrors the HTTP status."""

    code: int
    message: str


class HealthResponse(BaseModel):
    """Health-check response returned by /health."""
    status: str = "ok"
    app: str
    env: str

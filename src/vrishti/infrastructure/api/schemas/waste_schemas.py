"""Pydantic schemas for waste listing endpoints.

Field names on the wire use camelCase (``farmerId``, ``createdAt``).
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WasteCreateRequest(BaseModel):
    """Request body for posting a waste listing."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str = Field(..., min_length=1, max_length=255, description="What is offered")
    description: str | None = Field(None, description="Free-form description")
    quantity: float = Field(..., allow_inf_nan=False, description="Quantity in kilograms")
    location: str = Field(..., min_length=1, max_length=255, description="Pickup location")
    contact: str = Field(..., min_length=1, max_length=255, description="How to reach the farmer")
    farmer_id: str = Field(..., alias="farmerId", min_length=1, max_length=64)


class WasteUpdateRequest(BaseModel):
    """Request body for patching a waste listing.

    Only fields present in the body are changed.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    quantity: float | None = Field(None, allow_inf_nan=False)
    location: str | None = Field(None, min_length=1, max_length=255)
    contact: str | None = Field(None, min_length=1, max_length=255)
    farmer_id: str | None = Field(None, alias="farmerId", min_length=1, max_length=64)


class WasteResponse(BaseModel):
    """A waste listing as returned by the API."""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    title: str | None = None
    description: str | None = None
    quantity: float | None = None
    location: str | None = None
    contact: str | None = None
    farmer_id: str | None = Field(None, alias="farmerId")
    created_at: datetime | None = Field(None, alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")


class WasteCreatedResponse(BaseModel):
    """Response for a successfully posted listing."""

    message: str
    id: str


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str

"""Waste listing API routes."""

from typing import Annotated

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from vrishti.domain.exceptions import ListingNotFoundError, PersistenceError
from vrishti.infrastructure.api.dependencies import ListingServiceDep
from vrishti.infrastructure.api.schemas import (
    ErrorResponse,
    MessageResponse,
    WasteCreatedResponse,
    WasteCreateRequest,
    WasteResponse,
    WasteUpdateRequest,
)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=WasteCreatedResponse,
    responses={400: {"model": ErrorResponse}},
)
async def create_waste(
    request: WasteCreateRequest,
    listings: ListingServiceDep,
) -> WasteCreatedResponse | JSONResponse:
    """Post a waste listing.

    Companies are notified in the background; the response does not wait
    for, or report on, any email.
    """
    try:
        listing = await listings.create_listing(request.model_dump())
    except PersistenceError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Failed to post waste"},
        )

    return WasteCreatedResponse(message="Waste posted successfully", id=listing.id)


@router.get(
    "",
    response_model=list[WasteResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_wastes(
    listings: ListingServiceDep,
    farmer_id: Annotated[str | None, Query(alias="farmerId")] = None,
) -> list[WasteResponse] | JSONResponse:
    """List all listings newest-first, or only one farmer's."""
    try:
        result = await listings.list_listings(farmer_id=farmer_id or None)
    except PersistenceError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to fetch wastes"},
        )

    return [WasteResponse.model_validate(listing) for listing in result]


@router.put(
    "/{waste_id}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
)
async def update_waste(
    waste_id: str,
    request: WasteUpdateRequest,
    listings: ListingServiceDep,
) -> MessageResponse | JSONResponse:
    """Patch a listing. An unknown id is acknowledged like a match."""
    try:
        await listings.update_listing(waste_id, request.model_dump(exclude_unset=True))
    except PersistenceError:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Failed to update waste"},
        )

    return MessageResponse(message="Waste updated successfully")


@router.delete(
    "/{waste_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_waste(
    waste_id: str,
    listings: ListingServiceDep,
) -> MessageResponse | JSONResponse:
    """Delete a listing."""
    try:
        await listings.delete_listing(waste_id)
    except ListingNotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Waste not found"},
        )
    except PersistenceError:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to delete waste"},
        )

    return MessageResponse(message="Waste deleted successfully")

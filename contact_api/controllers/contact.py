"""Contact-form endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from contact_api.controllers.dependencies import ContactServiceDep
from contact_api.views import (
    ContactCreateRequest,
    ContactListResponse,
    ErrorResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post(
    "",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def submit_contact(
    payload: ContactCreateRequest,
    service: ContactServiceDep,
) -> SuccessResponse:
    await service.submit(payload)
    return SuccessResponse(message="Contact submitted successfully")


# Open to any caller; no authentication layer exists yet.
@router.get(
    "",
    response_model=ContactListResponse,
    responses={500: {"model": ErrorResponse}},
)
async def list_contacts(service: ContactServiceDep) -> ContactListResponse:
    contacts = await service.list_all()
    return ContactListResponse(
        message="Contacts fetched successfully",
        contacts=contacts,
    )

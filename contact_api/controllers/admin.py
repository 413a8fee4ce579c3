"""Administrator registration and login endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from contact_api.controllers.dependencies import AdminServiceDep
from contact_api.views import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminRegisterRequest,
    ErrorResponse,
    SuccessResponse,
)

router = APIRouter(prefix="/api/admin", tags=["admin"])


@router.post(
    "/register",
    response_model=SuccessResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def register_admin(
    payload: AdminRegisterRequest,
    service: AdminServiceDep,
) -> SuccessResponse:
    """Create an administrator account; no account data is echoed back."""

    await service.register(payload)
    return SuccessResponse(message="Admin registered successfully")


@router.post(
    "/login",
    response_model=AdminLoginResponse,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def login_admin(
    payload: AdminLoginRequest,
    service: AdminServiceDep,
) -> AdminLoginResponse:
    """Validate credentials and return the admin's public profile."""

    admin = await service.authenticate(payload)
    return AdminLoginResponse(message="Login successful", admin=admin)

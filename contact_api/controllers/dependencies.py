"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from contact_api.database import get_session
from contact_api.services import AdminService, ContactService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_admin_service(request: Request, session: SessionDep) -> AdminService:
    rounds = request.app.state.settings.security.bcrypt_rounds
    return AdminService(session, bcrypt_rounds=rounds)


def get_contact_service(session: SessionDep) -> ContactService:
    return ContactService(session)


AdminServiceDep = Annotated[AdminService, Depends(get_admin_service)]
ContactServiceDep = Annotated[ContactService, Depends(get_contact_service)]


__all__ = [
    "SessionDep",
    "AdminServiceDep",
    "ContactServiceDep",
    "get_admin_service",
    "get_contact_service",
]

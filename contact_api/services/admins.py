"""Administrator registration and authentication."""

from __future__ import annotations

import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from contact_api.models.admin import AdminAccount
from contact_api.services.errors import AuthenticationError, ConflictError, StoreError
from contact_api.telemetry import increment_login, increment_registration
from contact_api.utils import clean_payload, hash_password, verify_password
from contact_api.views import AdminLoginRequest, AdminPublic, AdminRegisterRequest

logger = logging.getLogger(__name__)

ADMIN_EXISTS_MESSAGE = "Admin already exists"


class AdminService:
    """Persist and authenticate administrator accounts."""

    def __init__(self, session: AsyncSession, bcrypt_rounds: int | None = None) -> None:
        self.session = session
        self.bcrypt_rounds = bcrypt_rounds

    async def email_exists(self, email: str) -> bool:
        result = await self.session.execute(
            select(AdminAccount.id).where(AdminAccount.email == email)
        )
        return result.first() is not None

    async def register(self, payload: AdminRegisterRequest) -> None:
        """Create a new admin account.

        The lookup beforehand only short-circuits the common case; the unique
        index on ``admin.email`` is what actually rejects a concurrent
        duplicate, and that integrity failure is reported as the same conflict.
        """

        try:
            exists = await self.email_exists(payload.email)
            # End the read transaction so no pooled connection is held while hashing.
            await self.session.rollback()
            if exists:
                raise ConflictError(ADMIN_EXISTS_MESSAGE)

            hashed_password = await run_in_threadpool(
                hash_password, payload.password, self.bcrypt_rounds
            )
            data = clean_payload(
                {
                    "name": payload.name,
                    "email": payload.email,
                    "password": hashed_password,
                }
            )
            await self.session.execute(insert(AdminAccount).values(**data))
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info("Rejected duplicate admin registration: %s", exc.orig)
            raise ConflictError(ADMIN_EXISTS_MESSAGE) from exc
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Failed to register admin")
            raise StoreError.from_exception(exc) from exc

        increment_registration()
        logger.info("Registered admin account")

    async def authenticate(self, payload: AdminLoginRequest) -> AdminPublic:
        """Return the public projection of the admin matching the credentials."""

        try:
            result = await self.session.execute(
                select(AdminAccount).where(AdminAccount.email == payload.email)
            )
            admin = result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.exception("Failed to look up admin account")
            raise StoreError.from_exception(exc) from exc

        if admin is None:
            logger.info("Login rejected")
            raise AuthenticationError()

        if not await run_in_threadpool(verify_password, payload.password, admin.password):
            logger.info("Login rejected")
            raise AuthenticationError()

        increment_login()
        return AdminPublic.model_validate(admin)


__all__ = ["AdminService", "ADMIN_EXISTS_MESSAGE"]

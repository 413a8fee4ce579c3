"""Contact-form submission storage and listing."""

from __future__ import annotations

import logging

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from contact_api.models.contact import ContactMessage
from contact_api.services.errors import StoreError
from contact_api.telemetry import increment_contact_submission
from contact_api.utils import clean_payload
from contact_api.views import ContactCreateRequest, ContactRead

logger = logging.getLogger(__name__)


class ContactService:
    """Persist contact messages and list them back for administrators."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def submit(self, payload: ContactCreateRequest) -> None:
        data = clean_payload(payload.model_dump())
        try:
            await self.session.execute(insert(ContactMessage).values(**data))
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            logger.exception("Failed to store contact message")
            raise StoreError.from_exception(exc) from exc

        increment_contact_submission()

    async def list_all(self) -> list[ContactRead]:
        """Return every stored message in insertion order."""

        try:
            result = await self.session.execute(
                select(ContactMessage).order_by(ContactMessage.id)
            )
        except SQLAlchemyError as exc:
            logger.exception("Failed to list contact messages")
            raise StoreError.from_exception(exc) from exc

        return [ContactRead.model_validate(row) for row in result.scalars().all()]


__all__ = ["ContactService"]

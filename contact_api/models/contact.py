"""SQLAlchemy model for contact-form submissions."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from contact_api.models.base import Base


class ContactMessage(Base):
    __tablename__ = "contact"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column("createdAt", DateTime, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, nullable=True)


__all__ = ["ContactMessage"]

"""SQLAlchemy model for administrator accounts."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, String, func

from contact_api.models.base import Base


class AdminAccount(Base):
    __tablename__ = "admin"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    # bcrypt digest, never the plaintext secret
    password = Column(String(255), nullable=False)
    created_at = Column("createdAt", DateTime, server_default=func.now())
    updated_at = Column("updatedAt", DateTime, nullable=True)


__all__ = ["AdminAccount"]

"""FastAPI routers acting as controllers in the MVC architecture."""

from . import admin, contact

__all__ = ["admin", "contact"]

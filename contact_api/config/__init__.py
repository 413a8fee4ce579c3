"""Environment-driven configuration."""

from .settings import DatabaseConfig, SecurityConfig, Settings, settings

__all__ = ["DatabaseConfig", "SecurityConfig", "Settings", "settings"]

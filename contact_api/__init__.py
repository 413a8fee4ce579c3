"""Contact & admin backend service."""

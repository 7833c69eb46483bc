"""Profile (role) endpoints."""

from .router import router, get_profile_service

__all__ = ["router", "get_profile_service"]

"""Screen endpoints."""

from .router import router, get_screen_service

__all__ = ["router", "get_screen_service"]

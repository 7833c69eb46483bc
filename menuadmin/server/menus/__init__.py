"""Menu catalogue endpoints."""

from .router import router, get_menu_service

__all__ = ["router", "get_menu_service"]

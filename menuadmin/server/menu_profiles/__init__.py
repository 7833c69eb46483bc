"""Menu-to-profile assignments and hierarchical menu endpoints."""

from .router import router, get_menu_profile_service

__all__ = ["router", "get_menu_profile_service"]

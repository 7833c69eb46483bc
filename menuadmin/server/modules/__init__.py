"""Module (application area) endpoints."""

from .router import router, get_module_service

__all__ = ["router", "get_module_service"]

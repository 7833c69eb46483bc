from __future__ import annotations


class MenuAdminError(Exception):
    """Base class for errors the HTTP layer maps to client responses."""

    status_code = 500
    title = "Internal Server Error"


class NotFoundError(MenuAdminError):
    status_code = 404
    title = "Not Found"

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with ID {identifier} not found")


class ValidationError(MenuAdminError):
    status_code = 400
    title = "Validation Failed"

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"Validation failed on '{field}': {message}")


class ConflictError(MenuAdminError):
    status_code = 409
    title = "Conflict"


__all__ = ["ConflictError", "MenuAdminError", "NotFoundError", "ValidationError"]

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from menuadmin.errors import ValidationError


class Status(int, Enum):
    ACTIVE = 1
    INACTIVE = 0

    @property
    def description(self) -> str:
        return "Activo" if self is Status.ACTIVE else "Inactivo"

    @classmethod
    def from_code(cls, code: int | None) -> "Status":
        if code is None:
            raise ValueError("Status code must not be empty")
        for status in cls:
            if status.value == code:
                return status
        raise ValueError(f"Invalid status '{code}'. Valid values: 1, 0")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


@dataclass(slots=True)
class Module:
    id: Optional[int]
    name: str

    def validate(self) -> None:
        if _blank(self.name):
            raise ValidationError("nombre", "module name must not be empty")


@dataclass(slots=True)
class Screen:
    """A frontend screen reachable through a URL, owned by a module."""

    id: Optional[int]
    module_id: Optional[int]
    name: str
    url: str

    def validate(self) -> None:
        if _blank(self.name):
            raise ValidationError("nombre", "screen name must not be empty")
        if _blank(self.url):
            raise ValidationError("url", "screen url must not be empty")
        if self.module_id is None:
            raise ValidationError("codModulo", "screen module is required")


@dataclass(slots=True)
class Profile:
    id: Optional[int]
    name: str

    def validate(self) -> None:
        if _blank(self.name):
            raise ValidationError("nombre", "profile name must not be empty")


@dataclass(slots=True)
class Menu:
    """A navigation entry. Menus with a screen are leaves; the rest group children."""

    id: Optional[int]
    name: str
    hierarchy: int
    order: int
    module_id: Optional[int]
    icon: str
    status: Status
    screen_id: Optional[int] = None
    parent_id: Optional[int] = None

    def validate(self) -> None:
        if _blank(self.name):
            raise ValidationError("nombre", "enter a valid name")
        if self.hierarchy is None or self.hierarchy < 0:
            raise ValidationError("jerarquia", "must not be empty or negative")
        if self.order is None or self.order < 0:
            raise ValidationError("orden", "must not be empty or negative")
        if self.screen_id is not None and self.parent_id is None:
            raise ValidationError("codMenuPadre", "a menu with a screen needs a parent menu")
        if self.status is None:
            raise ValidationError("estado", "status must not be empty")


@dataclass(slots=True, frozen=True)
class MenuProfile:
    menu_id: int
    profile_id: int


__all__ = ["Menu", "MenuProfile", "Module", "Profile", "Screen", "Status"]

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from menuadmin.errors import ValidationError
from menuadmin.models.entities import Menu, Status


class MenuRequest(BaseModel):
    """Create/update payload; field names follow the admin frontend."""

    model_config = ConfigDict(populate_by_name=True)

    hierarchy: int = Field(alias="jerarquia")
    name: str = Field(alias="nombre")
    order: int = Field(alias="orden")
    screen_id: int | None = Field(default=None, alias="codPantalla")
    module_id: int = Field(alias="codModulo", gt=0)
    parent_id: int | None = Field(default=None, alias="codMenuPadre")
    icon: str = Field(alias="icono", min_length=1)
    status: int = Field(alias="estado")

    def to_domain(self) -> Menu:
        try:
            status = Status.from_code(self.status)
        except ValueError as exc:
            raise ValidationError("estado", str(exc)) from exc
        return Menu(
            id=None,
            name=self.name,
            hierarchy=self.hierarchy,
            order=self.order,
            module_id=self.module_id,
            icon=self.icon,
            status=status,
            screen_id=self.screen_id,
            parent_id=self.parent_id,
        )


class MenuResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(serialization_alias="nombre")
    hierarchy: int = Field(serialization_alias="jerarquia")
    order: int = Field(serialization_alias="orden")
    screen_id: int | None = Field(default=None, serialization_alias="codPantalla")
    module_id: int | None = Field(default=None, serialization_alias="codModulo")
    parent_id: int | None = Field(default=None, serialization_alias="codMenuPadre")
    icon: str | None = Field(default=None, serialization_alias="icono")
    status: str = Field(serialization_alias="estado")

    @classmethod
    def from_domain(cls, menu: Menu) -> "MenuResponse":
        return cls(
            id=menu.id,
            name=menu.name,
            hierarchy=menu.hierarchy,
            order=menu.order,
            screen_id=menu.screen_id,
            module_id=menu.module_id,
            parent_id=menu.parent_id,
            icon=menu.icon,
            status=menu.status.description,
        )


__all__ = ["MenuRequest", "MenuResponse"]

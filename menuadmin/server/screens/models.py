from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from menuadmin.models.entities import Screen


class ScreenRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(alias="nombre")
    url: str = Field(min_length=1)
    module_id: int = Field(alias="codModulo", gt=0)

    def to_domain(self) -> Screen:
        return Screen(id=None, module_id=self.module_id, name=self.name, url=self.url.strip())


class ScreenResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(serialization_alias="nombre")
    url: str
    module_id: int | None = Field(default=None, serialization_alias="codModulo")

    @classmethod
    def from_domain(cls, screen: Screen) -> "ScreenResponse":
        return cls(id=screen.id, name=screen.name, url=screen.url, module_id=screen.module_id)


__all__ = ["ScreenRequest", "ScreenResponse"]
